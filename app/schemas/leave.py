"""
Leave Schemas for applications and HR decisions
"""
from typing import Optional
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field


class LeaveApplyRequest(BaseModel):
    from_date: date
    to_date: date
    return_date: date
    reason: str
    num_days: int


class LeaveStatusUpdate(BaseModel):
    status: str  # 'Approved' or 'Declined'
    hr_comments: Optional[str] = None


class LeaveApplication(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    leave_id: int = Field(validation_alias="la_id")
    employee_id: str = Field(validation_alias="la_employee_id")
    from_date: date = Field(validation_alias="la_from_date")
    to_date: date = Field(validation_alias="la_to_date")
    return_date: date = Field(validation_alias="la_return_date")
    num_days: int = Field(validation_alias="la_num_days")
    reason: str = Field(validation_alias="la_reason")
    status: str = Field(validation_alias="la_status")
    applied_at: datetime = Field(validation_alias="la_applied_at")
    reviewed_by: Optional[str] = Field(default=None, validation_alias="la_reviewed_by")
    reviewed_at: Optional[datetime] = Field(default=None, validation_alias="la_reviewed_at")
    hr_comments: Optional[str] = Field(default=None, validation_alias="la_hr_comments")


class LeaveApplicationWithEmployee(LeaveApplication):
    """HR listing row, joined with the employee identity"""
    employee_name: Optional[str] = None
