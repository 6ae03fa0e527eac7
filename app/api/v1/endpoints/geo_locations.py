"""
Geo Location Endpoints - The single global attendance geofence
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.geo_location_service import GeoLocationService
from app.schemas import GeoLocation, GeoLocationUpsert, DataResponse
from app.schemas.auth import CurrentUser
from app.api.deps import require_auth, require_roles
from app.core.config import settings
from app.core.enums import Role
from atams.exceptions import NotFoundException
from app.utils.geo import Coordinate
from app.utils.datetime_helpers import local_now

router = APIRouter()
geo_location_service = GeoLocationService()


@router.get(
    "",
    response_model=DataResponse[GeoLocation],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_auth)]
)
async def get_geo_location(db: Session = Depends(get_db)):
    """
    Get the global attendance location

    **Errors:**
    - 404: No location set yet
    """
    geo_location = geo_location_service.get_geo_location(db)
    if geo_location is None:
        raise NotFoundException("No global attendance location set yet.")

    return DataResponse(
        success=True,
        message="Global attendance location retrieved successfully",
        data=geo_location
    )


@router.post(
    "",
    response_model=DataResponse[GeoLocation],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_roles(Role.HR))]
)
async def set_geo_location(
    payload: GeoLocationUpsert,
    response: Response,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth)
):
    """
    Set or update the global attendance location (upsert)

    **Authorization:**
    - HR only

    **Validation:**
    - name: required
    - latitude: -90..90, longitude: -180..180
    - radius_meters: whole meters, > 0

    **Response:**
    - 201 when the location is set for the first time, 200 when replaced
    """
    geo_location, created = geo_location_service.upsert_geo_location(
        db,
        name=payload.name,
        center=Coordinate(payload.latitude, payload.longitude),
        radius_meters=payload.radius_meters,
        actor=current_user.user_id,
        now=local_now(settings.APP_TIMEZONE)
    )

    if created:
        response.status_code = status.HTTP_201_CREATED
        message = "Global attendance location set successfully."
    else:
        message = "Global attendance location updated successfully."

    return DataResponse(success=True, message=message, data=geo_location)


@router.delete(
    "",
    response_model=DataResponse[None],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_roles(Role.HR))]
)
async def delete_geo_location(db: Session = Depends(get_db)):
    """
    Delete the global attendance location

    **Note:**
    - Afterwards check-ins are accepted from anywhere
    """
    if not geo_location_service.delete_geo_location(db):
        raise NotFoundException("No global attendance location found to delete.")

    return DataResponse(
        success=True,
        message="Global attendance location deleted successfully."
    )
