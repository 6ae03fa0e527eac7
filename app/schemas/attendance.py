"""
Attendance Schemas for check-in and history
"""
from typing import Optional
from datetime import date, datetime, time
from pydantic import BaseModel, ConfigDict, Field


class MarkPresentRequest(BaseModel):
    """Request schema for the mark-present endpoint"""
    latitude: float
    longitude: float


class AttendanceRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    attendance_id: int = Field(validation_alias="at_id")
    employee_id: str = Field(validation_alias="at_employee_id")
    attendance_date: date = Field(validation_alias="at_date")
    time_in: time = Field(validation_alias="at_time_in")
    status: str = Field(validation_alias="at_status")
    recorded_latitude: float = Field(validation_alias="at_latitude")
    recorded_longitude: float = Field(validation_alias="at_longitude")
    created_at: datetime = Field(validation_alias="at_created_at")


class AttendanceRecordWithEmployee(AttendanceRecord):
    """HR listing row, joined with the employee identity"""
    employee_name: Optional[str] = None
