from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.schemas.envelope import Envelope, ok
from jobboard.schemas.saved_job import SaveJobIn, dump_saved_job
from jobboard.services.saved_jobs import SavedJobsService

router = APIRouter(prefix="/users/{email}/saved-jobs", tags=["saved-jobs"])


@router.get("", response_model=Envelope, response_model_exclude_unset=True)
def list_saved_jobs(email: str, db: Session = Depends(get_db)):
    saved = SavedJobsService(db).list_saved(email)
    return ok("Saved jobs retrieved", data=[dump_saved_job(s) for s in saved])


@router.post("", response_model=Envelope, response_model_exclude_unset=True, status_code=status.HTTP_201_CREATED)
def save_job(email: str, payload: SaveJobIn, db: Session = Depends(get_db)):
    saved = SavedJobsService(db).save(email, payload.job)
    return ok("Job saved successfully", data=dump_saved_job(saved))


@router.delete("/{job_id}", response_model=Envelope, response_model_exclude_unset=True)
def unsave_job(email: str, job_id: str, db: Session = Depends(get_db)):
    SavedJobsService(db).unsave(email, job_id)
    return ok("Job unsaved successfully.")
