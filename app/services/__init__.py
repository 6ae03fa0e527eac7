from .geo_location_service import GeoLocationService
from .jwt_service import JwtService
from .attendance_service import AttendanceService
from .leave_service import LeaveService

__all__ = [
    "GeoLocationService",
    "JwtService",
    "AttendanceService",
    "LeaveService"
]
