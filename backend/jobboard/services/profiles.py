# jobboard/services/profiles.py
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.models.user import User
from jobboard.repositories.users import UserRepository
from jobboard.services.common import db_error_detail, normalize_email
from jobboard.services.errors import InternalError, MissingFieldError, NotFoundError

logger = logging.getLogger(__name__)


def get_profile(db: Session, email: str | None) -> User:
    """Look up a user by email. Callers serialise through UserOut, which has no password field."""
    email = normalize_email(email)
    if not email:
        raise MissingFieldError("Email is required")

    try:
        user = UserRepository(db).find_by_email(email)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error in get_profile: %s", db_error_detail(exc))
        raise InternalError("Internal Server Error", detail=db_error_detail(exc)) from exc

    if user is None:
        raise NotFoundError("User not found")
    return user


def get_user_by_id(db: Session, user_id: int) -> User | None:
    try:
        return UserRepository(db).get(user_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Error loading user id=%s: %s", user_id, db_error_detail(exc))
        raise InternalError("Internal Server Error", detail=db_error_detail(exc)) from exc
