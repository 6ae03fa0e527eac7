from .user import User
from .geo_location import GeoLocation, GEOFENCE_SINGLETON_ID
from .attendance import Attendance
from .leave_application import LeaveApplication

__all__ = [
    "User",
    "GeoLocation",
    "GEOFENCE_SINGLETON_ID",
    "Attendance",
    "LeaveApplication"
]
