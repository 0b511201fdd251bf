# jobboard/repositories/saved_jobs.py
from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from jobboard.models.saved_job import SavedJob


class SavedJobRepository:
    """Saved-item store: one row per (owner email, job id), unique on that pair."""

    def __init__(self, db: Session):
        self.db = db

    def find_one(self, email: str, job_id: str) -> Optional[SavedJob]:
        return (
            self.db.query(SavedJob)
            .filter(SavedJob.email == email, SavedJob.job_id == job_id)
            .first()
        )

    def find_many(self, email: str) -> list[SavedJob]:
        return (
            self.db.query(SavedJob)
            .filter(SavedJob.email == email)
            .order_by(SavedJob.created_at.asc(), SavedJob.id.asc())
            .all()
        )

    def create(self, *, email: str, job_id: str, job: dict[str, Any]) -> SavedJob:
        saved = SavedJob(email=email, job_id=job_id, job=job)
        self.db.add(saved)
        self.db.commit()
        self.db.refresh(saved)
        return saved

    def delete_one(self, email: str, job_id: str) -> bool:
        """Single DELETE statement; returns True if a row was removed."""
        deleted = (
            self.db.query(SavedJob)
            .filter(SavedJob.email == email, SavedJob.job_id == job_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return bool(deleted)

    def count(self, email: Optional[str] = None) -> int:
        q = self.db.query(func.count(SavedJob.id))
        if email is not None:
            q = q.filter(SavedJob.email == email)
        return int(q.scalar() or 0)
