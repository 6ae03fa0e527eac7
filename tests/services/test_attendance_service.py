from __future__ import annotations

import math
from datetime import date, datetime, time

import pytest

from app.core.exceptions import AlreadyMarkedError, OutOfZoneError, ValidationError
from app.models import Attendance
from app.services import attendance_service as attendance_module
from app.services.attendance_service import AttendanceService
from app.services.geo_location_service import GeoLocationService
from app.utils.geo import Coordinate, EARTH_RADIUS_M

from tests.conftest import EMPLOYEE_ID, OTHER_EMPLOYEE_ID, HR_ID

METERS_PER_DEGREE_LAT = EARTH_RADIUS_M * 3.141592653589793 / 180
HQ = Coordinate(12.9716, 77.5946)
MONDAY_9AM = datetime(2026, 3, 2, 9, 15, 30, 123456)


def north_of(center: Coordinate, meters: float) -> Coordinate:
    return Coordinate(center.latitude + meters / METERS_PER_DEGREE_LAT, center.longitude)


@pytest.fixture
def service():
    service = AttendanceService()
    service.geofence_enforced = True
    return service


@pytest.fixture
def hq_geofence(db):
    GeoLocationService().upsert_geo_location(
        db, name="HQ", center=HQ, radius_meters=100, actor=HR_ID, now=MONDAY_9AM
    )


def test_check_in_at_center_is_accepted(service, db, hq_geofence):
    record = service.check_in(db, EMPLOYEE_ID, HQ, MONDAY_9AM)

    assert record.employee_id == EMPLOYEE_ID
    assert record.attendance_date == date(2026, 3, 2)
    assert record.time_in == time(9, 15, 30)
    assert record.status == "Present"
    assert record.recorded_latitude == pytest.approx(HQ.latitude)
    assert record.recorded_longitude == pytest.approx(HQ.longitude)


def test_second_check_in_same_day_is_rejected(service, db, hq_geofence):
    service.check_in(db, EMPLOYEE_ID, HQ, MONDAY_9AM)

    with pytest.raises(AlreadyMarkedError):
        service.check_in(db, EMPLOYEE_ID, HQ, MONDAY_9AM.replace(hour=17))

    assert db.query(Attendance).filter(Attendance.at_employee_id == EMPLOYEE_ID).count() == 1


def test_check_in_next_day_is_accepted(service, db, hq_geofence):
    service.check_in(db, EMPLOYEE_ID, HQ, MONDAY_9AM)
    record = service.check_in(db, EMPLOYEE_ID, HQ, datetime(2026, 3, 3, 8, 55))

    assert record.attendance_date == date(2026, 3, 3)


def test_out_of_zone_carries_distance_and_location(service, db, hq_geofence):
    point = north_of(HQ, 500)

    with pytest.raises(OutOfZoneError) as exc_info:
        service.check_in(db, OTHER_EMPLOYEE_ID, point, MONDAY_9AM)

    err = exc_info.value
    assert err.distance == pytest.approx(500, abs=1)
    assert err.location_name == "HQ"
    assert err.radius_meters == 100
    assert "HQ" in err.message
    assert "500.00m" in err.message
    assert db.query(Attendance).count() == 0


def test_antipodal_check_in_is_out_of_zone(service, db):
    center = Coordinate(69.51232454868148, 86.5812282599507)
    GeoLocationService().upsert_geo_location(
        db, name="Polar Site", center=center, radius_meters=100, actor=HR_ID, now=MONDAY_9AM
    )

    with pytest.raises(OutOfZoneError) as exc_info:
        service.check_in(
            db, EMPLOYEE_ID, Coordinate(-69.51232454868148, -93.4187717400493), MONDAY_9AM
        )

    assert exc_info.value.distance == pytest.approx(EARTH_RADIUS_M * math.pi, rel=1e-6)
    assert exc_info.value.details["location_name"] == "Polar Site"


def test_one_meter_past_radius_is_rejected(service, db, hq_geofence):
    with pytest.raises(OutOfZoneError):
        service.check_in(db, EMPLOYEE_ID, north_of(HQ, 101), MONDAY_9AM)


def test_distance_equal_to_radius_is_accepted(service, db, hq_geofence, monkeypatch):
    monkeypatch.setattr(attendance_module, "haversine_distance", lambda a, b: 100.0)

    record = service.check_in(db, EMPLOYEE_ID, HQ, MONDAY_9AM)
    assert record.status == "Present"


def test_distance_radius_plus_one_is_rejected(service, db, hq_geofence, monkeypatch):
    monkeypatch.setattr(attendance_module, "haversine_distance", lambda a, b: 101.0)

    with pytest.raises(OutOfZoneError):
        service.check_in(db, EMPLOYEE_ID, HQ, MONDAY_9AM)


def test_no_geofence_accepts_any_coordinate(service, db, caplog):
    record = service.check_in(db, EMPLOYEE_ID, Coordinate(-33.8688, 151.2093), MONDAY_9AM)

    assert record.status == "Present"
    assert "not set by HR" in caplog.text


def test_geofence_not_enforced_skips_check(service, db, hq_geofence):
    service.geofence_enforced = False

    record = service.check_in(db, EMPLOYEE_ID, north_of(HQ, 5000), MONDAY_9AM)
    assert record.status == "Present"


@pytest.mark.parametrize("lat, lon", [(91, 0), (0, 181), (-90.01, 0), (0, -180.01)])
def test_invalid_coordinate_is_rejected(service, db, lat, lon):
    with pytest.raises(ValidationError):
        service.check_in(db, EMPLOYEE_ID, Coordinate(lat, lon), MONDAY_9AM)


def test_unique_violation_is_reported_as_already_marked(service, db, monkeypatch):
    # Another request inserted the row between our existence check and insert
    db.add(Attendance(
        at_employee_id=EMPLOYEE_ID,
        at_date=date(2026, 3, 2),
        at_time_in=time(9, 0),
        at_status="Present",
        at_latitude=HQ.latitude,
        at_longitude=HQ.longitude,
        at_created_at=datetime(2026, 3, 2, 9, 0),
    ))
    db.commit()

    real_exists = service.repo.exists_present
    calls = []

    def stale_then_real(*args, **kwargs):
        calls.append(1)
        if len(calls) == 1:
            return False
        return real_exists(*args, **kwargs)

    monkeypatch.setattr(service.repo, "exists_present", stale_then_real)

    with pytest.raises(AlreadyMarkedError):
        service.check_in(db, EMPLOYEE_ID, HQ, MONDAY_9AM)

    assert db.query(Attendance).count() == 1


def test_my_attendance_is_most_recent_first(service, db):
    service.check_in(db, EMPLOYEE_ID, HQ, datetime(2026, 3, 2, 9, 0))
    service.check_in(db, EMPLOYEE_ID, HQ, datetime(2026, 3, 4, 8, 30))
    service.check_in(db, EMPLOYEE_ID, HQ, datetime(2026, 3, 3, 10, 0))
    service.check_in(db, OTHER_EMPLOYEE_ID, HQ, datetime(2026, 3, 5, 9, 0))

    records = service.get_my_attendance(db, EMPLOYEE_ID)

    assert [r.attendance_date for r in records] == [
        date(2026, 3, 4), date(2026, 3, 3), date(2026, 3, 2)
    ]


def test_all_attendance_orders_by_day_then_time_and_names_employees(service, db):
    service.check_in(db, EMPLOYEE_ID, HQ, datetime(2026, 3, 2, 9, 0))
    service.check_in(db, OTHER_EMPLOYEE_ID, HQ, datetime(2026, 3, 2, 9, 30))
    service.check_in(db, EMPLOYEE_ID, HQ, datetime(2026, 3, 3, 8, 0))

    records = service.get_all_attendance(db)

    assert [(r.employee_id, r.attendance_date, r.time_in) for r in records] == [
        (EMPLOYEE_ID, date(2026, 3, 3), time(8, 0)),
        (OTHER_EMPLOYEE_ID, date(2026, 3, 2), time(9, 30)),
        (EMPLOYEE_ID, date(2026, 3, 2), time(9, 0)),
    ]
    names = {r.employee_id: r.employee_name for r in records}
    assert names[EMPLOYEE_ID] == "Asha Rao"
    # No display name on file: fall back to the user id
    assert names[OTHER_EMPLOYEE_ID] == OTHER_EMPLOYEE_ID


def test_scenario_hq_geofence(service, db, hq_geofence):
    first = service.check_in(db, EMPLOYEE_ID, Coordinate(12.9716, 77.5946), MONDAY_9AM)
    assert first.status == "Present"

    with pytest.raises(AlreadyMarkedError):
        service.check_in(db, EMPLOYEE_ID, Coordinate(12.9716, 77.5946), MONDAY_9AM)

    with pytest.raises(OutOfZoneError) as exc_info:
        service.check_in(db, OTHER_EMPLOYEE_ID, north_of(HQ, 500), MONDAY_9AM)
    assert exc_info.value.distance == pytest.approx(500, abs=1)
