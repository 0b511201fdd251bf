# jobboard/services/saved_jobs.py
"""
Per-owner set of saved job listings.

The existence check in `save` is only a fast path: two concurrent saves of the
same job can both pass it, and the store's (email, job_id) unique constraint
decides. A late unique violation is reported exactly like the pre-check hit.
"""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.models.saved_job import SavedJob
from jobboard.repositories.constraints import is_unique_violation
from jobboard.repositories.saved_jobs import SavedJobRepository
from jobboard.services.common import clean_str, db_error_detail, normalize_email
from jobboard.services.errors import (
    AlreadyExistsError,
    InternalError,
    MissingFieldError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

JOB_ID_MAX_LENGTH = 255


class SavedJobsService:
    def __init__(self, db: Session):
        self.db = db
        self.saved_jobs = SavedJobRepository(db)

    def list_saved(self, email: str | None) -> list[SavedJob]:
        email = normalize_email(email)
        if not email:
            raise MissingFieldError("Email is required")

        try:
            return self.saved_jobs.find_many(email)
        except SQLAlchemyError as exc:
            self._fail("Error retrieving saved jobs", exc)

    def save(self, email: str | None, job: Any) -> SavedJob:
        email = normalize_email(email)
        if not email:
            raise MissingFieldError("Email is required")
        if not isinstance(job, dict) or job.get("id") is None:
            raise MissingFieldError("Job data is missing or incomplete.")

        job_id = clean_str(job["id"])
        if not job_id:
            raise MissingFieldError("Job data is missing or incomplete.")
        if len(job_id) > JOB_ID_MAX_LENGTH:
            raise ValidationError(f"job.id: must be at most {JOB_ID_MAX_LENGTH} characters")

        try:
            if self.saved_jobs.find_one(email, job_id) is not None:
                logger.info("Save skipped: job_id=%s already saved for email=%s", job_id, email)
                raise AlreadyExistsError("Job already saved.")
            saved = self.saved_jobs.create(email=email, job_id=job_id, job=job)
        except IntegrityError as exc:
            self.db.rollback()
            if is_unique_violation(exc):
                logger.info("Concurrent save lost the race: job_id=%s email=%s", job_id, email)
                raise AlreadyExistsError("Job already saved.") from exc
            raise ValidationError(db_error_detail(exc)) from exc
        except DataError as exc:
            self.db.rollback()
            raise ValidationError(db_error_detail(exc)) from exc
        except SQLAlchemyError as exc:
            self._fail("Error saving job", exc)

        logger.info("Saved job_id=%s for email=%s", job_id, email)
        return saved

    def unsave(self, email: str | None, job_id: Any) -> None:
        email = normalize_email(email)
        job_id = clean_str(job_id)
        if not email or not job_id:
            raise MissingFieldError("Email and jobId are required.")

        try:
            removed = self.saved_jobs.delete_one(email, job_id)
        except SQLAlchemyError as exc:
            self._fail("Error unsaving job", exc)

        if not removed:
            raise NotFoundError("Job not found.")
        logger.info("Unsaved job_id=%s for email=%s", job_id, email)

    def _fail(self, message: str, exc: SQLAlchemyError):
        self.db.rollback()
        logger.exception("%s: %s", message, db_error_detail(exc))
        raise InternalError(message, detail=db_error_detail(exc)) from exc
