"""
Attendance Endpoints - Geofenced check-in and history
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.attendance_service import AttendanceService
from app.schemas import (
    AttendanceRecord,
    AttendanceRecordWithEmployee,
    MarkPresentRequest,
    DataResponse
)
from app.schemas.auth import CurrentUser
from app.api.deps import require_auth, require_roles
from app.core.config import settings
from app.core.enums import Role
from app.utils.geo import Coordinate
from app.utils.datetime_helpers import local_now

router = APIRouter()
attendance_service = AttendanceService()


@router.post(
    "/mark-present",
    response_model=DataResponse[AttendanceRecord],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_roles(Role.EMPLOYEE))]
)
async def mark_present(
    request: MarkPresentRequest,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth)
):
    """
    Mark the caller present for today

    **Authorization:**
    - Employee only

    **Process:**
    1. Reject if already marked present today
    2. Geofence validation (skipped with a warning when no location is set)
    3. Store the Present record with time in and coordinates

    **Errors:**
    - 400: Already marked, outside the zone (with distance), invalid coordinates
    """
    record = attendance_service.check_in(
        db,
        current_user.user_id,
        Coordinate(request.latitude, request.longitude),
        local_now(settings.APP_TIMEZONE)
    )

    return DataResponse(
        success=True,
        message="Attendance marked as Present for today!",
        data=record
    )


@router.get(
    "/my-attendance",
    response_model=DataResponse[List[AttendanceRecord]],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_roles(Role.EMPLOYEE))]
)
async def get_my_attendance(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth)
):
    """Get the caller's attendance, most recent day first"""
    records = attendance_service.get_my_attendance(db, current_user.user_id)

    return DataResponse(
        success=True,
        message="Attendance retrieved successfully",
        data=records
    )


@router.get(
    "",
    response_model=DataResponse[List[AttendanceRecordWithEmployee]],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_roles(Role.HR))]
)
async def get_all_attendance(db: Session = Depends(get_db)):
    """
    Get attendance for all employees

    **Authorization:**
    - HR only
    """
    records = attendance_service.get_all_attendance(db)

    return DataResponse(
        success=True,
        message="Attendance retrieved successfully",
        data=records
    )
