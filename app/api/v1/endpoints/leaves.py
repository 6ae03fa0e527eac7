"""
Leave Endpoints - Applications and HR decisions
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.leave_service import LeaveService
from app.schemas import (
    LeaveApplication,
    LeaveApplicationWithEmployee,
    LeaveApplyRequest,
    LeaveStatusUpdate,
    DataResponse
)
from app.schemas.auth import CurrentUser
from app.api.deps import require_auth, require_roles
from app.core.config import settings
from app.core.enums import Role
from app.utils.datetime_helpers import local_now

router = APIRouter()
leave_service = LeaveService()


@router.post(
    "/apply",
    response_model=DataResponse[LeaveApplication],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_roles(Role.EMPLOYEE))]
)
async def apply_leave(
    request: LeaveApplyRequest,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth)
):
    """
    Apply for leave

    **Validation:**
    - from_date <= to_date
    - return_date > to_date
    - num_days > 0
    - reason: required
    """
    application = leave_service.apply_leave(
        db,
        employee_id=current_user.user_id,
        from_date=request.from_date,
        to_date=request.to_date,
        return_date=request.return_date,
        reason=request.reason,
        num_days=request.num_days,
        now=local_now(settings.APP_TIMEZONE)
    )

    return DataResponse(
        success=True,
        message="Leave application submitted successfully.",
        data=application
    )


@router.get(
    "/my-applications",
    response_model=DataResponse[List[LeaveApplication]],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_roles(Role.EMPLOYEE))]
)
async def get_my_applications(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth)
):
    """Get the caller's leave applications, newest first"""
    applications = leave_service.get_my_applications(db, current_user.user_id)

    return DataResponse(
        success=True,
        message="Leave applications retrieved successfully",
        data=applications
    )


@router.get(
    "/pending",
    response_model=DataResponse[List[LeaveApplicationWithEmployee]],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_roles(Role.HR))]
)
async def get_pending_applications(db: Session = Depends(get_db)):
    """Get Pending applications, oldest first (HR only)"""
    applications = leave_service.get_pending_applications(db)

    return DataResponse(
        success=True,
        message="Pending leave applications retrieved successfully",
        data=applications
    )


@router.get(
    "",
    response_model=DataResponse[List[LeaveApplicationWithEmployee]],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_roles(Role.HR))]
)
async def get_all_applications(db: Session = Depends(get_db)):
    """Get every leave application, newest first (HR only)"""
    applications = leave_service.get_all_applications(db)

    return DataResponse(
        success=True,
        message="Leave applications retrieved successfully",
        data=applications
    )


@router.put(
    "/{leave_id}/status",
    response_model=DataResponse[LeaveApplication],
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_roles(Role.HR))]
)
async def update_leave_status(
    leave_id: int,
    request: LeaveStatusUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_auth)
):
    """
    Approve or decline a Pending application

    **Authorization:**
    - HR only

    **Errors:**
    - 400: Status other than Approved or Declined
    - 404: Not found or already reviewed
    """
    application = leave_service.decide_leave(
        db,
        leave_id=leave_id,
        decision=request.status,
        actor=current_user.user_id,
        now=local_now(settings.APP_TIMEZONE),
        hr_comments=request.hr_comments
    )

    return DataResponse(
        success=True,
        message=f"Leave application {application.status.lower()} successfully.",
        data=application
    )
