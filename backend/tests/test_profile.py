from __future__ import annotations

import pytest

from jobboard.services.errors import MissingFieldError, NotFoundError
from jobboard.services.profiles import get_profile


def test_profile_is_redacted(client, user):
    res = client.get(f"/users/profile/{user.email}")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    data = body["data"]
    assert data["id"] == user.id
    assert data["username"] == "test_user"
    assert data["experienceLevel"] == "mid"
    assert "createdAt" in data
    assert not any("password" in key.lower() for key in data)


def test_profile_lookup_ignores_email_case(client, user):
    res = client.get("/users/profile/TEST@Example.com")
    assert res.status_code == 200
    assert res.json()["data"]["id"] == user.id


def test_profile_unknown_email_is_404(client, user):
    res = client.get("/users/profile/nobody@example.com")
    assert res.status_code == 404
    body = res.json()
    assert body["code"] == "NOT_FOUND"
    assert body["message"] == "User not found"


def test_profile_service_requires_email(db_session):
    with pytest.raises(MissingFieldError):
        get_profile(db_session, "")
    with pytest.raises(NotFoundError):
        get_profile(db_session, "missing@example.com")
