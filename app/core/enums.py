from enum import Enum


class Role(str, Enum):
    """Role claim carried by access tokens"""
    EMPLOYEE = "Employee"
    HR = "HR"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"


class LeaveStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    DECLINED = "Declined"
