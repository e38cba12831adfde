from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..config import settings
from ..errors import JobNotFound
from ..models import Job
from ..query import (
    JobFilters,
    assemble_page,
    build_filters,
    parse_sort,
    resolve_cursor,
    resolve_limit,
    seek_clause,
)
from ..schemas import JobIn, JobOut, JobPage

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def list_jobs(
    db: Session,
    filters: JobFilters,
    *,
    cursor: str | None = None,
    limit: int | None = None,
    sort_by: str | None = None,
    sort_direction: str | None = None,
) -> JobPage:
    clauses = build_filters(filters)
    sort = parse_sort(sort_by, sort_direction)

    ref = resolve_cursor(cursor, lambda job_id: db.get(Job, job_id))
    if ref is not None:
        clauses.append(seek_clause(sort, ref))

    page_size = resolve_limit(limit, settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    stmt = (
        select(Job)
        .where(*clauses)
        .order_by(*sort.order_by())
        .limit(page_size + 1)
    )
    rows = db.scalars(stmt).all()

    page = assemble_page(rows, page_size)
    return JobPage(
        data=[JobOut.model_validate(x) for x in page.items],
        next_cursor=page.next_cursor,
        has_more=page.has_more,
    )


def get_job(db: Session, job_id: uuid.UUID) -> Job:
    job = db.get(Job, job_id)
    if job is None:
        raise JobNotFound(job_id)
    return job


def _apply(job: Job, payload: JobIn) -> None:
    job.title = payload.title
    job.company_name = payload.company_name
    job.location = payload.location
    job.job_type = payload.job_type
    job.min_salary = payload.min_salary
    job.max_salary = payload.max_salary
    job.description = payload.description
    job.requirements = payload.requirements
    job.responsibilities = payload.responsibilities
    job.application_deadline = payload.application_deadline
    job.experience_years = payload.experience_years or 0


def _commit(db: Session) -> None:
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise


def create_job(db: Session, payload: JobIn) -> Job:
    now = _now()
    job = Job(id=uuid.uuid4(), created_at=now, updated_at=now)
    _apply(job, payload)
    db.add(job)
    _commit(db)
    db.refresh(job)
    logger.info("created job %s", job.id)
    return job


def update_job(db: Session, job_id: uuid.UUID, payload: JobIn) -> Job:
    job = get_job(db, job_id)
    _apply(job, payload)
    job.updated_at = _now()
    _commit(db)
    db.refresh(job)
    logger.info("updated job %s", job.id)
    return job


def delete_job(db: Session, job_id: uuid.UUID) -> None:
    job = get_job(db, job_id)
    db.delete(job)
    _commit(db)
    logger.info("deleted job %s", job_id)
