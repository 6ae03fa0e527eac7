from __future__ import annotations

import os
import tempfile

# File-backed so the pooled engine in app.db.session can be built; tests bind their own engines
os.environ.setdefault(
    "DATABASE_URL", "sqlite:///" + os.path.join(tempfile.gettempdir(), "hrms-attendance-test.db")
)
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-hrms-attendance-suite")
os.environ.setdefault("GEOFENCE_ENFORCED", "true")
os.environ.setdefault("LEAVE_ENFORCE_WORKING_DAYS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.enums import Role
from atams.db import Base
from app.db.session import get_db
from app.main import app
from app.models import User
from app.services.jwt_service import JwtService

EMPLOYEE_ID = "emp-001"
OTHER_EMPLOYEE_ID = "emp-002"
HR_ID = "hr-001"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    session.add_all([
        User(u_id=EMPLOYEE_ID, u_role=Role.EMPLOYEE.value, u_name="Asha Rao"),
        User(u_id=OTHER_EMPLOYEE_ID, u_role=Role.EMPLOYEE.value, u_name=None),
        User(u_id=HR_ID, u_role=Role.HR.value, u_name="Meera Iyer"),
    ])
    session.commit()
    yield session
    session.close()


@pytest.fixture
def client(db, session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    jwt_service = JwtService()

    def _headers(user_id: str, role: Role) -> dict:
        token = jwt_service.create_access_token(user_id, role)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def employee_headers(auth_headers):
    return auth_headers(EMPLOYEE_ID, Role.EMPLOYEE)


@pytest.fixture
def other_employee_headers(auth_headers):
    return auth_headers(OTHER_EMPLOYEE_ID, Role.EMPLOYEE)


@pytest.fixture
def hr_headers(auth_headers):
    return auth_headers(HR_ID, Role.HR)
