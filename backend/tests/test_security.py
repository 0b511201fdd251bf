from __future__ import annotations

from datetime import timedelta

import pytest
from jose import JWTError

from jobboard.core.security import (
    TokenIssuer,
    hash_password,
    token_issuer_from_settings,
    verify_password,
)


def test_hash_is_salted_and_verifiable():
    first = hash_password("p1")
    second = hash_password("p1")

    assert first != "p1"
    assert first != second
    assert verify_password("p1", first)
    assert verify_password("p1", second)
    assert not verify_password("p2", first)


def test_token_carries_only_subject_and_expiry():
    issuer = TokenIssuer("k")
    claims = issuer.decode(issuer.issue(7))

    assert set(claims) == {"sub", "iat", "exp"}
    assert claims["sub"] == "7"
    assert claims["exp"] - claims["iat"] == 3600


def test_token_from_other_key_is_rejected():
    token = TokenIssuer("key-a").issue(1)
    with pytest.raises(JWTError):
        TokenIssuer("key-b").decode(token)


def test_expired_token_is_rejected():
    issuer = TokenIssuer("k", ttl=timedelta(seconds=-1))
    with pytest.raises(JWTError):
        issuer.decode(issuer.issue(1))


def test_issuer_requires_secret():
    with pytest.raises(ValueError):
        TokenIssuer("")
    with pytest.raises(ValueError):
        TokenIssuer("   ")


def test_oversize_password_never_verifies():
    stored = hash_password("x" * 72)

    # bcrypt alone would accept this: it only reads the first 72 bytes.
    assert not verify_password("x" * 73, stored)
    # passlib refuses anything over 4096 characters outright.
    assert not verify_password("x" * 5000, stored)


def test_token_lifetime_ignores_environment(monkeypatch):
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440")
    issuer = token_issuer_from_settings()
    claims = issuer.decode(issuer.issue(1))

    assert issuer.ttl == timedelta(hours=1)
    assert claims["exp"] - claims["iat"] == 3600
