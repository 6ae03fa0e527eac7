"""
Attendance Repository - Data access layer for attendance records
"""
from typing import Any, Dict, List, Optional, Tuple
from datetime import date
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from atams.db import BaseRepository
from app.models.attendance import Attendance
from app.models.user import User
from app.core.enums import AttendanceStatus


class AttendanceRepository(BaseRepository[Attendance]):
    def __init__(self):
        super().__init__(Attendance)

    def exists_present(self, db: Session, employee_id: str, attendance_date: date) -> bool:
        """Check whether the employee is already marked Present on the date"""
        return db.query(Attendance.at_id).filter(
            Attendance.at_employee_id == employee_id,
            Attendance.at_date == attendance_date,
            Attendance.at_status == AttendanceStatus.PRESENT.value
        ).first() is not None

    def insert_present(self, db: Session, data: Dict[str, Any]) -> Attendance:
        """
        Insert a Present record.
        Raises IntegrityError (after rolling back) when the
        (employee, date, status) unique constraint is violated.
        """
        try:
            return self.create(db, {**data, "at_status": AttendanceStatus.PRESENT.value})
        except IntegrityError:
            db.rollback()
            raise

    def get_for_employee(self, db: Session, employee_id: str) -> List[Attendance]:
        """Employee history, most recent day first"""
        return db.query(Attendance).filter(
            Attendance.at_employee_id == employee_id
        ).order_by(
            Attendance.at_date.desc(),
            Attendance.at_time_in.desc(),
            Attendance.at_id.desc()
        ).all()

    def get_all_with_employee(self, db: Session) -> List[Tuple[Attendance, Optional[str]]]:
        """All records joined with the employee's display name"""
        return db.query(Attendance, User.u_name).outerjoin(
            User, User.u_id == Attendance.at_employee_id
        ).order_by(
            Attendance.at_date.desc(),
            Attendance.at_time_in.desc(),
            Attendance.at_id.desc()
        ).all()
