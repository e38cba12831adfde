"""Listing filters.

Each ``*_clause`` helper turns one optional query parameter into zero or one
SQLAlchemy boolean clause over ``Job``; ``build_filters`` collects the active
ones so the caller can AND them together.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import Numeric, and_, func, literal, or_
from sqlalchemy.sql.elements import ColumnElement

from ..models import Job, JobType

logger = logging.getLogger(__name__)

_LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class JobFilters:
    title_or_company: str | None = None
    location: str | None = None
    job_type: str | None = None
    min_salary: Decimal | None = None
    max_salary: Decimal | None = None


def parse_job_type(raw: str | None) -> JobType | None:
    """Exact member-name lookup; ``None`` when the value names no job type."""
    if not raw:
        return None
    try:
        return JobType[raw]
    except KeyError:
        return None


def _contains_pattern(text: str) -> str:
    escaped = (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def title_or_company_clause(text: str | None) -> ColumnElement[bool] | None:
    if not text:
        return None
    kw = _contains_pattern(text)
    return or_(
        Job.title.ilike(kw, escape=_LIKE_ESCAPE),
        Job.company_name.ilike(kw, escape=_LIKE_ESCAPE),
    )


def location_clause(text: str | None) -> ColumnElement[bool] | None:
    if not text:
        return None
    return Job.location.ilike(_contains_pattern(text), escape=_LIKE_ESCAPE)


def job_type_clause(raw: str | None) -> ColumnElement[bool] | None:
    job_type = parse_job_type(raw)
    if job_type is None:
        if raw:
            logger.debug("ignoring unrecognized job type filter %r", raw)
        return None
    return Job.job_type == job_type


def effective_max_salary() -> ColumnElement:
    return func.coalesce(Job.max_salary, Job.min_salary)


def _salary_bound(value: Decimal | int) -> ColumnElement:
    # fractional bounds compare numerically against the integer salary columns
    return literal(Decimal(value), Numeric())


def salary_clause(
    min_salary: Decimal | int | None, max_salary: Decimal | int | None
) -> ColumnElement[bool] | None:
    """Range overlap between the user's bounds and a posting's salary.

    A posting without ``max_salary`` is treated as paying exactly its
    ``min_salary``. Both bounds are inclusive.
    """
    if min_salary is not None and max_salary is not None:
        return and_(
            Job.min_salary <= _salary_bound(max_salary),
            effective_max_salary() >= _salary_bound(min_salary),
        )
    if min_salary is not None:
        return effective_max_salary() >= _salary_bound(min_salary)
    if max_salary is not None:
        return Job.min_salary <= _salary_bound(max_salary)
    return None


def build_filters(filters: JobFilters) -> list[ColumnElement[bool]]:
    clauses = [
        title_or_company_clause(filters.title_or_company),
        location_clause(filters.location),
        job_type_clause(filters.job_type),
        salary_clause(filters.min_salary, filters.max_salary),
    ]
    return [c for c in clauses if c is not None]
