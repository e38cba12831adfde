from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any, List
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .models import JobType


def blank_as_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


# query values where an empty string means the parameter was not given
NonNegativeDecimal = Annotated[Decimal, Field(ge=0)]
OptionalDecimal = Annotated[NonNegativeDecimal | None, BeforeValidator(blank_as_none)]
OptionalInt = Annotated[int | None, BeforeValidator(blank_as_none)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# per-field messages for payload errors, keyed by JSON field name
REQUIRED_MESSAGES = {
    "title": "Job title is required",
    "companyName": "Company name is required",
    "location": "Location is required",
    "jobType": "Job type is required",
    "description": "Description is required",
}
NEGATIVE_MESSAGES = {
    "minSalary": "Minimum salary cannot be negative",
    "maxSalary": "Maximum salary cannot be negative",
    "experienceYears": "Experience years cannot be negative",
}


class JobIn(CamelModel):
    title: str
    company_name: str
    location: str
    job_type: JobType
    min_salary: int | None = Field(None, ge=0)
    max_salary: int | None = Field(None, ge=0)
    description: str
    requirements: str | None = None
    responsibilities: str | None = None
    application_deadline: date | None = None
    experience_years: int | None = Field(0, ge=0)

    @field_validator("title", "company_name", "location", "description")
    @classmethod
    def _not_blank(cls, v: str, info) -> str:
        if not v.strip():
            raise ValueError(REQUIRED_MESSAGES[to_camel(info.field_name)])
        return v


class JobOut(CamelModel):
    """Response projection of a persisted Job."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    company_name: str
    location: str
    job_type: str
    min_salary: int | None
    max_salary: int | None
    description: str
    requirements: str | None
    responsibilities: str | None
    application_deadline: date | None
    experience_years: str
    created_at: datetime
    updated_at: datetime

    @field_validator("job_type", mode="before")
    @classmethod
    def _job_type_name(cls, v: Any) -> Any:
        return v.name if isinstance(v, JobType) else v

    @field_validator("experience_years", mode="before")
    @classmethod
    def _experience_text(cls, v: Any) -> Any:
        if v is None:
            return "0"
        return str(v) if isinstance(v, int) else v


class JobPage(CamelModel):
    data: List[JobOut] = []
    next_cursor: str | None = None
    has_more: bool = False


class ApiSubError(CamelModel):
    object: str
    field: str
    rejected_value: Any = None
    message: str


class ApiError(CamelModel):
    status: str
    timestamp: datetime
    message: str
    debug_message: str | None = None
    sub_errors: List[ApiSubError] = []
