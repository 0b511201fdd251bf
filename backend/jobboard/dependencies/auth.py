# jobboard/dependencies/auth.py
from __future__ import annotations

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.security import TokenIssuer, token_issuer_from_settings
from jobboard.models.user import User
from jobboard.services.profiles import get_user_by_id

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_issuer() -> TokenIssuer:
    """Overridden in tests (app.dependency_overrides) to sign with a fixed key."""
    return token_issuer_from_settings()


def _unauthorized(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> User:
    """
    Validates:
      - Authorization: Bearer <token>
      - token signature + exp
      - subject resolves to an existing user
    """
    if not creds or creds.scheme.lower() != "bearer":
        raise _unauthorized("Missing Authorization header")

    try:
        subject = issuer.subject(creds.credentials)
    except (JWTError, ValueError):
        raise _unauthorized("Invalid or expired token")

    try:
        user_id = int(subject)
    except ValueError:
        raise _unauthorized("Invalid or expired token")

    user = get_user_by_id(db, user_id)
    if user is None:
        raise _unauthorized("User not found")
    return user
