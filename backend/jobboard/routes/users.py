from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.dependencies.auth import get_current_user
from jobboard.models.user import User
from jobboard.schemas.envelope import Envelope, ok
from jobboard.schemas.user import dump_user
from jobboard.services.profiles import get_profile

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=Envelope, response_model_exclude_unset=True)
def get_me(user: User = Depends(get_current_user)):
    return ok("Current user", data=dump_user(user))


@router.get("/profile/{email}", response_model=Envelope, response_model_exclude_unset=True)
def get_user_profile(email: str, db: Session = Depends(get_db)):
    return ok("User profile retrieved", data=dump_user(get_profile(db, email)))
