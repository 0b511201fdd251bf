# jobboard/routes/auth.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.security import TokenIssuer
from jobboard.dependencies.auth import get_token_issuer
from jobboard.schemas.auth import LoginIn, RegisterIn
from jobboard.schemas.envelope import Envelope, ok
from jobboard.schemas.user import dump_user
from jobboard.services.identity import IdentityService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=Envelope, response_model_exclude_unset=True, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterIn,
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    user = IdentityService(db, issuer).register(
        username=payload.username,
        email=payload.email,
        password=payload.password,
        experience_level=payload.experience_level,
    )
    return ok("User created successfully", data=dump_user(user))


@router.post("/login", response_model=Envelope, response_model_exclude_unset=True)
def login(
    payload: LoginIn,
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    result = IdentityService(db, issuer).login(email=payload.email, password=payload.password)
    return ok("Login successful", data=dump_user(result.user, summary=True), token=result.token)
