"""
Pytest configuration and shared fixtures.
"""

import uuid
from datetime import datetime, timedelta
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from job_portal.db import Base, get_db
from job_portal.main import app
from job_portal.models import Job, JobType

BASE_TIME = datetime(2025, 1, 1, 9, 0, 0)


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads for the test client."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """Test client whose requests use the in-memory database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_job(db_session):
    """Insert a job directly; each call gets a later created_at than the last."""
    counter = {"n": 0}

    def _make(**overrides: Any) -> Job:
        counter["n"] += 1
        created = BASE_TIME + timedelta(minutes=counter["n"])
        fields = dict(
            id=uuid.uuid4(),
            title=f"Engineer {counter['n']}",
            company_name="Acme",
            location="Remote",
            job_type=JobType.FullTime,
            min_salary=None,
            max_salary=None,
            description="Build things",
            experience_years=0,
            created_at=created,
            updated_at=created,
        )
        fields.update(overrides)
        job = Job(**fields)
        db_session.add(job)
        db_session.commit()
        return job

    return _make


@pytest.fixture
def valid_payload() -> Dict[str, Any]:
    """Complete create/update request body."""
    return {
        "title": "Backend Engineer",
        "companyName": "Acme Corp",
        "location": "Berlin, Germany",
        "jobType": "FullTime",
        "minSalary": 60000,
        "maxSalary": 80000,
        "description": "Own the job listing service.",
        "requirements": "Python, SQL",
        "responsibilities": "Design APIs",
        "applicationDeadline": "2025-06-30",
        "experienceYears": 3,
    }
