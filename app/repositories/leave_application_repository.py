"""
Leave Application Repository - Data access layer for leave requests
"""
from typing import List, Optional, Tuple
from datetime import datetime
from sqlalchemy import update
from sqlalchemy.orm import Session

from atams.db import BaseRepository
from app.models.leave_application import LeaveApplication
from app.models.user import User
from app.core.enums import LeaveStatus


class LeaveApplicationRepository(BaseRepository[LeaveApplication]):
    def __init__(self):
        super().__init__(LeaveApplication)

    def decide_if_pending(
        self,
        db: Session,
        leave_id: int,
        status: LeaveStatus,
        reviewed_by: str,
        reviewed_at: datetime,
        hr_comments: Optional[str] = None
    ) -> bool:
        """
        Compare-and-swap the status of a Pending request.
        Returns False when no Pending row with this id exists.
        """
        stmt = (
            update(LeaveApplication)
            .where(
                LeaveApplication.la_id == leave_id,
                LeaveApplication.la_status == LeaveStatus.PENDING.value
            )
            .values(
                la_status=status.value,
                la_reviewed_by=reviewed_by,
                la_reviewed_at=reviewed_at,
                la_hr_comments=hr_comments
            )
            .execution_options(synchronize_session=False)
        )
        result = db.execute(stmt)
        db.commit()
        return result.rowcount == 1

    def get_for_employee(self, db: Session, employee_id: str) -> List[LeaveApplication]:
        """Employee's own applications, newest first"""
        return db.query(LeaveApplication).filter(
            LeaveApplication.la_employee_id == employee_id
        ).order_by(
            LeaveApplication.la_applied_at.desc(),
            LeaveApplication.la_id.desc()
        ).all()

    def get_with_employee(
        self,
        db: Session,
        status: Optional[LeaveStatus] = None,
        sort: str = "desc"
    ) -> List[Tuple[LeaveApplication, Optional[str]]]:
        """Applications joined with the employee's display name"""
        query = db.query(LeaveApplication, User.u_name).outerjoin(
            User, User.u_id == LeaveApplication.la_employee_id
        )

        if status:
            query = query.filter(LeaveApplication.la_status == status.value)

        if sort.lower() == "asc":
            query = query.order_by(LeaveApplication.la_applied_at.asc(), LeaveApplication.la_id.asc())
        else:
            query = query.order_by(LeaveApplication.la_applied_at.desc(), LeaveApplication.la_id.desc())

        return query.all()
