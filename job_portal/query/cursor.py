"""Sort keys, cursor resolution and keyset (seek) clauses.

A cursor is the id of the last job on the previous page. Listing resolves it
back to that job and asks for rows strictly after it in the current sort
order, with the id as the tie-breaker so the order is total.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable

from sqlalchemy import and_, func, or_
from sqlalchemy.sql.elements import ColumnElement

from ..models import Job

logger = logging.getLogger(__name__)

# postings without a minimum salary sort below every real salary
NO_SALARY = -1


@dataclass(frozen=True)
class SortKey:
    name: str
    expression: Callable[[], ColumnElement]
    value_of: Callable[[Job], Any]


CREATED_AT = SortKey("createdAt", lambda: Job.created_at, lambda job: job.created_at)
SALARY = SortKey(
    "salary",
    lambda: func.coalesce(Job.min_salary, NO_SALARY),
    lambda job: NO_SALARY if job.min_salary is None else job.min_salary,
)
EXPERIENCE = SortKey("experience", lambda: Job.experience_years, lambda job: job.experience_years)

_SORT_KEYS = {"salary": SALARY, "experience": EXPERIENCE}


@dataclass(frozen=True)
class Sort:
    key: SortKey
    descending: bool

    def order_by(self) -> list[ColumnElement]:
        expr = self.key.expression()
        if self.descending:
            return [expr.desc(), Job.id.desc()]
        return [expr.asc(), Job.id.asc()]


def parse_sort(sort_by: str | None, sort_direction: str | None) -> Sort:
    """Unknown keys fall back to createdAt, unknown directions to descending."""
    key = _SORT_KEYS.get(sort_by or "", CREATED_AT)
    return Sort(key=key, descending=(sort_direction != "asc"))


def decode_cursor(cursor: str | None) -> uuid.UUID | None:
    if not cursor:
        return None
    try:
        return uuid.UUID(cursor)
    except ValueError:
        return None


def encode_cursor(job: Job) -> str:
    return str(job.id)


def resolve_cursor(cursor: str | None, lookup: Callable[[uuid.UUID], Job | None]) -> Job | None:
    """Map a cursor to its reference job, or ``None`` to start from the first page.

    Malformed cursors and ids that no longer exist are ignored rather than
    reported; the listing then behaves as if no cursor was given.
    """
    job_id = decode_cursor(cursor)
    if job_id is None:
        if cursor:
            logger.debug("ignoring malformed cursor %r", cursor)
        return None
    ref = lookup(job_id)
    if ref is None:
        logger.debug("ignoring cursor for missing job %s", job_id)
    return ref


def seek_clause(sort: Sort, ref: Job) -> ColumnElement[bool]:
    expr = sort.key.expression()
    ref_value = sort.key.value_of(ref)
    if sort.descending:
        return or_(expr < ref_value, and_(expr == ref_value, Job.id < ref.id))
    return or_(expr > ref_value, and_(expr == ref_value, Job.id > ref.id))
