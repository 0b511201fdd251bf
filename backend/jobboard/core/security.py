# jobboard/core/security.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt
from passlib.context import CryptContext
from passlib.exc import PasswordSizeError

from jobboard.core.config import settings

# bcrypt reads only the first 72 bytes of a password.
BCRYPT_MAX_PASSWORD_BYTES = 72

TOKEN_TTL = timedelta(hours=1)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_HASH_ROUNDS,
)


# -------------------------
# Password hashing
# -------------------------
def hash_password(password: str) -> str:
    # bcrypt generates a fresh salt per call, so equal plaintexts never share a hash.
    return pwd_context.hash(password)


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES


def verify_password(password: str, password_hash: str) -> bool:
    """
    Checks `password` against a stored bcrypt hash.
    A password longer than registration accepts never matches. Raises ValueError
    only when `password_hash` itself is unreadable.
    """
    if password_too_long(password):
        return False
    try:
        return pwd_context.verify(password, password_hash)
    except PasswordSizeError:
        return False


# -------------------------
# Access tokens
# -------------------------
def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


class TokenIssuer:
    """
    Mints and verifies signed bearer tokens.

    The signing secret is handed in by the caller (see dependencies.auth.get_token_issuer);
    the issuer never generates or persists a key of its own. Tokens carry only the
    user's id as `sub` plus `iat`/`exp`. There is no refresh and no revocation list.
    """

    def __init__(self, secret: str, *, algorithm: str = "HS256", ttl: timedelta = TOKEN_TTL):
        if not secret or not secret.strip():
            raise ValueError("Token signing secret must be set")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(self, user_id: Any) -> str:
        now = _now_utc()
        payload = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """Returns the verified claims or raises jose.JWTError (bad signature, expired, malformed)."""
        return jwt.decode(token, self._secret, algorithms=[self.algorithm])

    def subject(self, token: str) -> str:
        sub = self.decode(token).get("sub")
        if not sub:
            raise ValueError("Token missing 'sub'")
        return str(sub)


def token_issuer_from_settings() -> TokenIssuer:
    return TokenIssuer(
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )
