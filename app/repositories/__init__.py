from .geo_location_repository import GeoLocationRepository
from .attendance_repository import AttendanceRepository
from .leave_application_repository import LeaveApplicationRepository

__all__ = [
    "GeoLocationRepository",
    "AttendanceRepository",
    "LeaveApplicationRepository"
]
