"""
Leave Application Model - Leave requests and their HR decision
"""
from sqlalchemy import (
    Column, BigInteger, Integer, String, Text, Date, DateTime, ForeignKey, CheckConstraint
)

from atams.db import Base


class LeaveApplication(Base):
    """Leave application model - Table: leave_applications"""
    __tablename__ = "leave_applications"
    __table_args__ = (
        CheckConstraint("la_from_date <= la_to_date", name="ck_leave_date_range"),
        CheckConstraint("la_return_date > la_to_date", name="ck_leave_return_after_end"),
        CheckConstraint("la_num_days > 0", name="ck_leave_num_days_positive"),
        CheckConstraint(
            "la_status IN ('Pending', 'Approved', 'Declined')", name="ck_leave_status"
        ),
    )

    la_id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True, autoincrement=True)
    la_employee_id = Column(String(50), ForeignKey("users.u_id"), nullable=False, index=True)
    la_from_date = Column(Date, nullable=False)
    la_to_date = Column(Date, nullable=False)
    la_return_date = Column(Date, nullable=False)
    la_num_days = Column(Integer, nullable=False)
    la_reason = Column(Text, nullable=False)
    la_status = Column(String(20), nullable=False, default="Pending", index=True)
    la_applied_at = Column(DateTime(timezone=True), nullable=False)
    la_reviewed_by = Column(String(50), nullable=True)  # HR user id
    la_reviewed_at = Column(DateTime(timezone=True), nullable=True)
    la_hr_comments = Column(Text, nullable=True)
