# job_portal/main.py
from __future__ import annotations

import logging
from pathlib import Path
from uuid import UUID

from fastapi import FastAPI, Depends, Query, Response, status

from sqlalchemy.orm import Session
from sqlalchemy.engine.url import make_url

from .config import settings
from .db import Base, engine, get_db
from .errors import install_exception_handlers
from .logging_setup import configure_logging
from .query import JobFilters
from .schemas import JobIn, JobOut, JobPage, OptionalDecimal, OptionalInt
from .services import jobs as job_service

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_TITLE)
install_exception_handlers(app)


@app.on_event("startup")
def on_start():
    configure_logging(settings.LOG_LEVEL)
    url = make_url(str(engine.url))
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        db_path = Path(url.database).resolve()
        logger.info("using SQLite at %s (exists=%s)", db_path, db_path.exists())
    else:
        logger.info("using %s database", url.get_backend_name())

    Base.metadata.create_all(bind=engine)


@app.get("/jobs", response_model=JobPage)
def api_list_jobs(
    title: str | None = Query(None, description="substring of title or company name"),
    location: str | None = Query(None),
    job_type: str | None = Query(None, alias="jobType"),
    min_salary: OptionalDecimal = Query(None, alias="minSalary"),
    max_salary: OptionalDecimal = Query(None, alias="maxSalary"),
    cursor: str | None = Query(None),
    limit: OptionalInt = Query(None, description="page size; empty or non-positive means default"),
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_direction: str = Query("desc", alias="sortDirection"),
    db: Session = Depends(get_db),
):
    filters = JobFilters(
        title_or_company=title,
        location=location,
        job_type=job_type,
        min_salary=min_salary,
        max_salary=max_salary,
    )
    return job_service.list_jobs(
        db,
        filters,
        cursor=cursor,
        limit=limit,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )


@app.get("/jobs/{job_id}", response_model=JobOut)
def api_get_job(job_id: UUID, db: Session = Depends(get_db)):
    return JobOut.model_validate(job_service.get_job(db, job_id))


@app.post("/jobs", response_model=JobOut, status_code=status.HTTP_201_CREATED)
def api_create_job(payload: JobIn, db: Session = Depends(get_db)):
    return JobOut.model_validate(job_service.create_job(db, payload))


@app.put("/jobs/{job_id}", response_model=JobOut)
def api_update_job(job_id: UUID, payload: JobIn, db: Session = Depends(get_db)):
    return JobOut.model_validate(job_service.update_job(db, job_id, payload))


@app.delete("/jobs/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def api_delete_job(job_id: UUID, db: Session = Depends(get_db)):
    job_service.delete_job(db, job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
