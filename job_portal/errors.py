"""Error taxonomy and the FastAPI handlers that render it.

Every error response body is an ``ApiError``. Storage and unexpected failures
are reported generically; their details only go to the log.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from .schemas import NEGATIVE_MESSAGES, REQUIRED_MESSAGES, ApiError, ApiSubError, blank_as_none

logger = logging.getLogger(__name__)


class JobNotFound(Exception):
    def __init__(self, job_id: Any):
        self.job_id = job_id
        super().__init__(f"Job not found with id: {job_id}")


def error_response(
    status: HTTPStatus,
    message: str,
    *,
    debug_message: str | None = None,
    sub_errors: Sequence[ApiSubError] = (),
) -> JSONResponse:
    body = ApiError(
        status=status.name,
        timestamp=datetime.now(timezone.utc),
        message=message,
        debug_message=debug_message,
        sub_errors=list(sub_errors),
    )
    return JSONResponse(
        status_code=status.value,
        content=jsonable_encoder(body, by_alias=True),
    )


def _payload_message(err_type: str, field: str, value: Any) -> str | None:
    if err_type == "missing" or (err_type == "enum" and blank_as_none(value) is None):
        return REQUIRED_MESSAGES.get(field)
    if err_type == "greater_than_equal":
        return NEGATIVE_MESSAGES.get(field)
    return None


def _sub_error(err: dict) -> ApiSubError:
    loc = [str(p) for p in err.get("loc", ())]
    where = loc[0] if loc else "request"
    field = ".".join(loc[1:]) or where
    err_type = err.get("type", "")
    # a missing field reports the whole enclosing object as its input
    value = None if err_type == "missing" else err.get("input")

    message = err.get("msg", "invalid value")
    ctx_error = (err.get("ctx") or {}).get("error")
    if isinstance(ctx_error, ValueError):
        message = str(ctx_error)
    elif where == "body":
        message = _payload_message(err_type, field, value) or message

    return ApiSubError(
        object=where,
        field=field,
        rejected_value=value,
        message=message,
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        return error_response(HTTPStatus.BAD_REQUEST, "Malformed JSON request")
    return error_response(
        HTTPStatus.BAD_REQUEST,
        "Validation error",
        sub_errors=[_sub_error(e) for e in errors],
    )


async def handle_not_found(request: Request, exc: JobNotFound) -> JSONResponse:
    return error_response(HTTPStatus.NOT_FOUND, str(exc))


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("integrity violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return error_response(HTTPStatus.CONFLICT, "Database error")


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "An unexpected error occurred")


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(JobNotFound, handle_not_found)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_unexpected)
