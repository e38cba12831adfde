from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

from ..models import Job
from .cursor import encode_cursor

T = TypeVar("T", bound=Job)


@dataclass
class Page(Generic[T]):
    items: list[T] = field(default_factory=list)
    has_more: bool = False
    next_cursor: str | None = None


def resolve_limit(limit: int | None, default: int, maximum: int | None = None) -> int:
    if limit is None or limit <= 0:
        return default
    if maximum is not None and limit > maximum:
        return maximum
    return limit


def assemble_page(rows: Sequence[T], limit: int) -> Page[T]:
    """Trim rows fetched with ``limit + 1`` to a page.

    The extra row only signals that another page exists; the cursor points at
    the last row actually returned.
    """
    if len(rows) <= limit:
        return Page(items=list(rows))
    items = list(rows[:limit])
    return Page(items=items, has_more=True, next_cursor=encode_cursor(items[-1]))
