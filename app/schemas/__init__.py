from .geo_location import GeoLocation, GeoLocationUpsert
from .attendance import (
    AttendanceRecord,
    AttendanceRecordWithEmployee,
    MarkPresentRequest
)
from .leave import (
    LeaveApplication,
    LeaveApplicationWithEmployee,
    LeaveApplyRequest,
    LeaveStatusUpdate
)
from atams.schemas import DataResponse

__all__ = [
    # Geo location schemas
    "GeoLocation",
    "GeoLocationUpsert",
    # Attendance schemas
    "AttendanceRecord",
    "AttendanceRecordWithEmployee",
    "MarkPresentRequest",
    # Leave schemas
    "LeaveApplication",
    "LeaveApplicationWithEmployee",
    "LeaveApplyRequest",
    "LeaveStatusUpdate",
    # Common schemas
    "DataResponse"
]
