from .filters import JobFilters, build_filters, parse_job_type
from .cursor import Sort, parse_sort, resolve_cursor, seek_clause
from .pages import Page, assemble_page, resolve_limit

__all__ = [
    "JobFilters",
    "build_filters",
    "parse_job_type",
    "Sort",
    "parse_sort",
    "resolve_cursor",
    "seek_clause",
    "Page",
    "assemble_page",
    "resolve_limit",
]
