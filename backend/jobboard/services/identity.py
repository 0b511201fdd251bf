# jobboard/services/identity.py
"""
Registration and login.

Responsibilities:
- Validating required credential fields before any store access
- Hashing passwords (bcrypt) and discarding the plaintext
- Translating store uniqueness violations into DuplicateKeyError
- Verifying credentials and minting access tokens via TokenIssuer
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.security import (
    BCRYPT_MAX_PASSWORD_BYTES,
    TokenIssuer,
    hash_password,
    password_too_long,
    verify_password,
)
from jobboard.models.user import (
    EMAIL_MAX_LENGTH,
    EXPERIENCE_LEVEL_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    User,
)
from jobboard.repositories.constraints import first_matching, is_unique_violation
from jobboard.repositories.users import UserRepository
from jobboard.services.common import clean_str, db_error_detail, normalize_email
from jobboard.services.errors import (
    DuplicateKeyError,
    InternalError,
    InvalidCredentialsError,
    MissingFieldError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

IDENTITY_FIELDS = ("username", "email")


@dataclass
class LoginResult:
    token: str
    user: User


class IdentityService:
    def __init__(self, db: Session, issuer: TokenIssuer):
        self.db = db
        self.users = UserRepository(db)
        self.issuer = issuer

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def register(
        self,
        *,
        username: str | None,
        email: str | None,
        password: str | None,
        experience_level: str | None,
    ) -> User:
        username = clean_str(username)
        email = normalize_email(email)
        experience_level = clean_str(experience_level)

        if not username or not email or not password or not experience_level:
            raise MissingFieldError(
                "Please provide all required fields: username, email, password, experienceLevel"
            )

        self._check_lengths(username=username, email=email, experience_level=experience_level)
        if password_too_long(password):
            raise ValidationError(f"password: must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")

        password_hash = hash_password(password)

        try:
            user = self.users.create(
                username=username,
                email=email,
                password_hash=password_hash,
                experience_level=experience_level,
            )
        except IntegrityError as exc:
            self.db.rollback()
            if is_unique_violation(exc):
                field = self._collided_field(exc, username=username, email=email)
                value = username if field == "username" else email
                logger.info("Registration rejected: duplicate %s", field)
                raise DuplicateKeyError(field, value) from exc
            raise ValidationError(db_error_detail(exc)) from exc
        except DataError as exc:
            self.db.rollback()
            raise ValidationError(db_error_detail(exc)) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Error in register: %s", db_error_detail(exc))
            raise InternalError("Error creating user", detail=db_error_detail(exc)) from exc

        logger.info("Registered user id=%s email=%s", user.id, user.email)
        return user

    def _check_lengths(self, *, username: str, email: str, experience_level: str) -> None:
        limits = (
            ("username", username, USERNAME_MAX_LENGTH),
            ("email", email, EMAIL_MAX_LENGTH),
            ("experienceLevel", experience_level, EXPERIENCE_LEVEL_MAX_LENGTH),
        )
        for name, value, limit in limits:
            if len(value) > limit:
                raise ValidationError(f"{name}: must be at most {limit} characters")

    def _collided_field(self, exc: IntegrityError, *, username: str, email: str) -> str:
        field = first_matching(exc, IDENTITY_FIELDS, table="users")
        if field:
            return field

        # Driver message didn't name the column; ask the store which value is taken.
        try:
            if self.users.find_by_email(email) is not None:
                return "email"
            if self.users.find_by_username(username) is not None:
                return "username"
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Could not resolve duplicate field after unique violation")
        return "email"

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------
    def login(self, *, email: str | None, password: str | None) -> LoginResult:
        email = normalize_email(email)
        if not email or not password:
            raise MissingFieldError("Please provide both email and password")

        try:
            user = self.users.find_by_email(email)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Error in login: %s", db_error_detail(exc))
            raise InternalError("Error logging in", detail=db_error_detail(exc)) from exc

        # Unknown email and wrong password are reported separately (404 vs 401).
        if user is None:
            logger.info("Login failed: unknown email=%s", email)
            raise NotFoundError("User not found")

        try:
            matched = verify_password(password, user.password_hash)
        except ValueError as exc:
            # Stored hash not recognised by the crypt context.
            logger.exception("Unusable password hash for user id=%s", user.id)
            raise InternalError("Error logging in", detail="stored credential is unreadable") from exc

        if not matched:
            logger.info("Login failed: bad password for user id=%s", user.id)
            raise InvalidCredentialsError()

        return LoginResult(token=self.issuer.issue(user.id), user=user)
