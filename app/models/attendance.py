"""
Attendance Model - One Present mark per employee per day
"""
from sqlalchemy import (
    Column, BigInteger, Integer, String, Date, Time, DateTime, Float, ForeignKey, UniqueConstraint
)

from atams.db import Base


class Attendance(Base):
    """Attendance model - Table: attendance"""
    __tablename__ = "attendance"
    __table_args__ = (
        UniqueConstraint("at_employee_id", "at_date", "at_status", name="uq_attendance_employee_day_status"),
    )

    at_id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True, autoincrement=True)
    at_employee_id = Column(String(50), ForeignKey("users.u_id"), nullable=False, index=True)
    at_date = Column(Date, nullable=False, index=True)
    at_time_in = Column(Time, nullable=False)
    at_status = Column(String(20), nullable=False, default="Present")
    at_latitude = Column(Float, nullable=False)
    at_longitude = Column(Float, nullable=False)
    at_created_at = Column(DateTime(timezone=True), nullable=False)
