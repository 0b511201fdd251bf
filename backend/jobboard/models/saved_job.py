from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.types import JSON

from jobboard.core.base import Base


class SavedJob(Base):
    __tablename__ = "saved_jobs"
    __table_args__ = (
        UniqueConstraint("email", "job_id", name="uq_saved_jobs_email_job_id"),
    )

    id = Column(Integer, primary_key=True, index=True)

    # Owner reference by email, not a foreign key: the owning user need not exist.
    email = Column(String(255), nullable=False, index=True)

    # Copy of job["id"] as text, so (email, job_id) can carry a unique constraint.
    job_id = Column(String(255), nullable=False)

    # Opaque job listing as supplied by the client.
    job = Column(JSON, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
