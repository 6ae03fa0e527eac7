"""
Leave Service - Leave application lifecycle (Pending -> Approved | Declined)
"""
from typing import List, Optional, Union
from datetime import date, datetime
from sqlalchemy.orm import Session

from app.repositories.leave_application_repository import LeaveApplicationRepository
from app.schemas.leave import LeaveApplication, LeaveApplicationWithEmployee
from app.utils.datetime_helpers import count_working_days
from app.core.config import settings
from app.core.enums import LeaveStatus
from app.core.exceptions import ValidationError, NotFoundOrAlreadyReviewedError
from atams.logging import get_logger

logger = get_logger(__name__)


class LeaveService:
    def __init__(self) -> None:
        self.repo = LeaveApplicationRepository()
        self.enforce_working_days = settings.LEAVE_ENFORCE_WORKING_DAYS

    def _check_num_days(self, employee_id: str, from_date: date, to_date: date, num_days: int) -> None:
        working_days = count_working_days(from_date, to_date)
        if working_days == num_days:
            return
        if self.enforce_working_days:
            raise ValidationError(
                f"Total days ({num_days}) does not match the {working_days} working days "
                f"between {from_date.isoformat()} and {to_date.isoformat()}."
            )
        logger.warning(
            "Leave application by %s reports %d days, %d working days between %s and %s",
            employee_id, num_days, working_days, from_date, to_date
        )

    def apply_leave(
        self,
        db: Session,
        employee_id: str,
        from_date: date,
        to_date: date,
        return_date: date,
        reason: str,
        num_days: int,
        now: datetime
    ) -> LeaveApplication:
        """
        Submit a leave application in Pending state

        Raises:
            ValidationError: Missing field, from_date after to_date,
                return_date not after to_date, or num_days not positive
        """
        reason = (reason or "").strip()
        if not from_date or not to_date or not return_date or not reason or num_days is None:
            raise ValidationError(
                "Please provide all required leave details "
                "(From Date, To Date, Return Date, Reason, and valid Total Days)."
            )
        if isinstance(num_days, bool) or not isinstance(num_days, int) or num_days <= 0:
            raise ValidationError("Total days must be a positive whole number.")
        if from_date > to_date:
            raise ValidationError("Start date cannot be after end date.")
        if return_date <= to_date:
            raise ValidationError("Return date must be after the to date.")

        self._check_num_days(employee_id, from_date, to_date, num_days)

        obj = self.repo.create(db, {
            "la_employee_id": employee_id,
            "la_from_date": from_date,
            "la_to_date": to_date,
            "la_return_date": return_date,
            "la_reason": reason,
            "la_num_days": num_days,
            "la_status": LeaveStatus.PENDING.value,
            "la_applied_at": now,
        })
        return LeaveApplication.model_validate(obj)

    def decide_leave(
        self,
        db: Session,
        leave_id: int,
        decision: Union[LeaveStatus, str],
        actor: str,
        now: datetime,
        hr_comments: Optional[str] = None
    ) -> LeaveApplication:
        """
        Approve or decline a Pending application

        The status check and update happen in one conditional UPDATE, so of
        two reviewers racing on the same request exactly one succeeds.

        Raises:
            ValidationError: Decision is not Approved or Declined
            NotFoundOrAlreadyReviewedError: No Pending application with this id
        """
        try:
            status = LeaveStatus(decision)
        except ValueError:
            raise ValidationError("Invalid leave status.")
        if status == LeaveStatus.PENDING:
            raise ValidationError("Leave status can only be set to Approved or Declined.")

        comments = (hr_comments or "").strip() or None

        if not self.repo.decide_if_pending(db, leave_id, status, actor, now, comments):
            raise NotFoundOrAlreadyReviewedError(leave_id)

        logger.info("Leave application %s %s by %s", leave_id, status.value.lower(), actor)
        return LeaveApplication.model_validate(self.repo.get(db, leave_id))

    def get_my_applications(self, db: Session, employee_id: str) -> List[LeaveApplication]:
        return [LeaveApplication.model_validate(o) for o in self.repo.get_for_employee(db, employee_id)]

    def get_pending_applications(self, db: Session) -> List[LeaveApplicationWithEmployee]:
        """Pending queue, oldest first"""
        rows = self.repo.get_with_employee(db, status=LeaveStatus.PENDING, sort="asc")
        return self._with_employee(rows)

    def get_all_applications(self, db: Session) -> List[LeaveApplicationWithEmployee]:
        rows = self.repo.get_with_employee(db, sort="desc")
        return self._with_employee(rows)

    @staticmethod
    def _with_employee(rows) -> List[LeaveApplicationWithEmployee]:
        return [
            LeaveApplicationWithEmployee.model_validate(obj).model_copy(
                update={"employee_name": name or obj.la_employee_id}
            )
            for obj, name in rows
        ]
