"""
Geo Location Service - Business logic for the global attendance geofence
"""
from typing import Optional, Tuple
from datetime import datetime
from sqlalchemy.orm import Session

from app.repositories.geo_location_repository import GeoLocationRepository
from app.schemas.geo_location import GeoLocation
from app.utils.geo import Coordinate
from app.core.exceptions import ValidationError
from atams.logging import get_logger

logger = get_logger(__name__)


def validate_coordinate(coordinate: Coordinate) -> None:
    """Reject latitude/longitude outside [-90, 90] / [-180, 180]"""
    if coordinate.latitude is None or coordinate.longitude is None:
        raise ValidationError("Latitude and longitude are required.")
    if not -90 <= coordinate.latitude <= 90:
        raise ValidationError("Latitude must be between -90 and 90.")
    if not -180 <= coordinate.longitude <= 180:
        raise ValidationError("Longitude must be between -180 and 180.")


class GeoLocationService:
    def __init__(self) -> None:
        self.repo = GeoLocationRepository()

    def get_geo_location(self, db: Session) -> Optional[GeoLocation]:
        obj = self.repo.get_current(db)
        if obj is None:
            return None
        return GeoLocation.model_validate(obj)

    def upsert_geo_location(
        self,
        db: Session,
        name: str,
        center: Coordinate,
        radius_meters: int,
        actor: str,
        now: datetime
    ) -> Tuple[GeoLocation, bool]:
        """
        Set or fully replace the global geofence

        Returns:
            (GeoLocation, created): created is False when an existing row was replaced

        Raises:
            ValidationError: Empty name, out of range center, or non-positive radius
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Location name is required.")
        validate_coordinate(center)
        if isinstance(radius_meters, bool) or not isinstance(radius_meters, int):
            raise ValidationError("Radius must be a whole number of meters.")
        if radius_meters <= 0:
            raise ValidationError("Radius must be greater than zero.")

        obj, created = self.repo.upsert(db, {
            "gl_name": name,
            "gl_latitude": center.latitude,
            "gl_longitude": center.longitude,
            "gl_radius_meters": radius_meters,
            "gl_set_by": actor,
            "gl_set_at": now,
        })
        logger.info(
            "Geofence %s by %s: %s (%.6f, %.6f) r=%dm",
            "created" if created else "updated", actor, name,
            center.latitude, center.longitude, radius_meters
        )
        return GeoLocation.model_validate(obj), created

    def delete_geo_location(self, db: Session) -> bool:
        deleted = self.repo.delete_current(db)
        if deleted:
            logger.info("Geofence deleted; check-ins are now unconstrained")
        return deleted
