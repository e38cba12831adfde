"""
Tests for schemas.py - request validation and the response mapper.
"""

import uuid
from datetime import date, datetime

import pytest
from pydantic import ValidationError

from job_portal.models import Job, JobType
from job_portal.schemas import JobIn, JobOut


class TestJobIn:
    """Test create/update payload validation."""

    def test_accepts_camel_case(self, valid_payload):
        payload = JobIn.model_validate(valid_payload)

        assert payload.company_name == "Acme Corp"
        assert payload.job_type is JobType.FullTime
        assert payload.application_deadline == date(2025, 6, 30)

    def test_experience_defaults_to_zero(self, valid_payload):
        del valid_payload["experienceYears"]
        assert JobIn.model_validate(valid_payload).experience_years == 0

    @pytest.mark.parametrize("field", ["title", "companyName", "location", "description"])
    def test_blank_required_field_rejected(self, valid_payload, field):
        valid_payload[field] = "   "
        with pytest.raises(ValidationError):
            JobIn.model_validate(valid_payload)

    def test_blank_title_message(self, valid_payload):
        valid_payload["title"] = ""
        with pytest.raises(ValidationError) as exc_info:
            JobIn.model_validate(valid_payload)
        assert "Job title is required" in str(exc_info.value)

    @pytest.mark.parametrize("field", ["minSalary", "maxSalary", "experienceYears"])
    def test_negative_numbers_rejected(self, valid_payload, field):
        valid_payload[field] = -1
        with pytest.raises(ValidationError):
            JobIn.model_validate(valid_payload)

    def test_unknown_job_type_rejected(self, valid_payload):
        valid_payload["jobType"] = "Freelance"
        with pytest.raises(ValidationError):
            JobIn.model_validate(valid_payload)


class TestJobOut:
    """Test projection of persisted jobs."""

    def test_maps_every_field(self):
        now = datetime(2025, 3, 1, 12, 0, 0)
        job = Job(
            id=uuid.uuid4(),
            title="Data Engineer",
            company_name="Acme",
            location="Remote",
            job_type=JobType.PartTime,
            min_salary=10,
            max_salary=None,
            description="Pipelines",
            requirements=None,
            responsibilities="ETL",
            application_deadline=date(2025, 4, 1),
            experience_years=5,
            created_at=now,
            updated_at=now,
        )

        out = JobOut.model_validate(job).model_dump(by_alias=True)

        assert out["id"] == job.id
        assert out["companyName"] == "Acme"
        assert out["jobType"] == "PartTime"
        assert out["experienceYears"] == "5"
        assert out["minSalary"] == 10
        assert out["maxSalary"] is None
        assert out["applicationDeadline"] == date(2025, 4, 1)
        assert out["createdAt"] == now
