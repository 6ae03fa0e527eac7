"""
Attendance Service - Geofenced check-in and attendance history
"""
from typing import List
from datetime import datetime
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from app.repositories.attendance_repository import AttendanceRepository
from app.repositories.geo_location_repository import GeoLocationRepository
from app.services.geo_location_service import validate_coordinate
from app.schemas.attendance import AttendanceRecord, AttendanceRecordWithEmployee
from app.utils.geo import Coordinate, haversine_distance
from app.core.config import settings
from app.core.exceptions import AlreadyMarkedError, OutOfZoneError
from atams.logging import get_logger

logger = get_logger(__name__)


class AttendanceService:
    def __init__(self) -> None:
        self.repo = AttendanceRepository()
        self.geo_repo = GeoLocationRepository()
        self.geofence_enforced = settings.GEOFENCE_ENFORCED

    def _validate_geofence(self, db: Session, employee_id: str, coordinate: Coordinate) -> None:
        """
        Validate the check-in coordinate against the global geofence

        Raises:
            OutOfZoneError: If the coordinate is farther than the radius (boundary inclusive)
        """
        geo_location = self.geo_repo.get_current(db)
        if geo_location is None:
            logger.warning(
                "Company attendance location is not set by HR. "
                "Accepting check-in for %s without geofence check.", employee_id
            )
            return

        center = Coordinate(geo_location.gl_latitude, geo_location.gl_longitude)
        distance = haversine_distance(center, coordinate)

        if distance > geo_location.gl_radius_meters:
            logger.info(
                "Check-in rejected for %s: %.2fm from %s (allowed %dm)",
                employee_id, distance, geo_location.gl_name, geo_location.gl_radius_meters
            )
            raise OutOfZoneError(distance, geo_location.gl_name, geo_location.gl_radius_meters)

    def check_in(self, db: Session, employee_id: str, coordinate: Coordinate, now: datetime) -> AttendanceRecord:
        """
        Mark the employee Present for the calendar day of `now`

        Raises:
            ValidationError: Coordinate out of range
            AlreadyMarkedError: A Present record already exists for the day
            OutOfZoneError: Outside the configured geofence
        """
        validate_coordinate(coordinate)
        today = now.date()

        if self.repo.exists_present(db, employee_id, today):
            logger.info("Duplicate check-in for %s on %s", employee_id, today)
            raise AlreadyMarkedError()

        if self.geofence_enforced:
            self._validate_geofence(db, employee_id, coordinate)

        try:
            record = self.repo.insert_present(db, {
                "at_employee_id": employee_id,
                "at_date": today,
                "at_time_in": now.time().replace(microsecond=0),
                "at_latitude": coordinate.latitude,
                "at_longitude": coordinate.longitude,
                "at_created_at": now,
            })
        except IntegrityError:
            # Lost a race with a concurrent check-in for the same day
            if self.repo.exists_present(db, employee_id, today):
                logger.info("Concurrent duplicate check-in for %s on %s", employee_id, today)
                raise AlreadyMarkedError()
            raise

        return AttendanceRecord.model_validate(record)

    def get_my_attendance(self, db: Session, employee_id: str) -> List[AttendanceRecord]:
        """Get the employee's attendance, most recent day first"""
        records = self.repo.get_for_employee(db, employee_id)
        return [AttendanceRecord.model_validate(r) for r in records]

    def get_all_attendance(self, db: Session) -> List[AttendanceRecordWithEmployee]:
        """Get every employee's attendance joined with their name (HR)"""
        rows = self.repo.get_all_with_employee(db)
        return [
            AttendanceRecordWithEmployee.model_validate(record).model_copy(
                update={"employee_name": name or record.at_employee_id}
            )
            for record, name in rows
        ]
