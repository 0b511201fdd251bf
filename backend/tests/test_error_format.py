from __future__ import annotations

from sqlalchemy.exc import OperationalError

from jobboard.repositories.saved_jobs import SavedJobRepository
from jobboard.repositories.users import UserRepository


def _assert_error_shape(res, *, code: str | None = None):
    data = res.json()
    assert isinstance(data, dict)
    assert data["success"] is False
    assert isinstance(data.get("message"), str) and data["message"]
    assert isinstance(data.get("code"), str) and data["code"]
    assert "data" not in data
    if code is not None:
        assert data["code"] == code


def test_error_shape_400_missing_field(client):
    res = client.post("/auth/login", json={})
    assert res.status_code == 400
    _assert_error_shape(res, code="MISSING_FIELD")
    assert "error" not in res.json()


def test_error_shape_404_unknown_route(client):
    res = client.get("/no-such-route")
    assert res.status_code == 404
    _assert_error_shape(res, code="NOT_FOUND")


def test_error_shape_422_does_not_echo_body(client):
    res = client.post("/auth/register", json=["hunter2-secret"])
    assert res.status_code == 422
    _assert_error_shape(res, code="VALIDATION_ERROR")
    body = res.json()
    assert isinstance(body["details"]["errors"], list)
    assert "hunter2-secret" not in res.text


def test_store_failure_is_500_with_diagnostic(client, monkeypatch):
    def _boom(self, email):
        raise OperationalError("SELECT ...", {}, Exception("database is locked"))

    monkeypatch.setattr(SavedJobRepository, "find_many", _boom)

    res = client.get("/users/owner@example.com/saved-jobs")
    assert res.status_code == 500
    _assert_error_shape(res, code="INTERNAL_ERROR")
    body = res.json()
    assert body["message"] == "Error retrieving saved jobs"
    assert body["error"] == "database is locked"


def test_login_store_failure_never_leaks_password(client, monkeypatch):
    def _boom(self, email):
        raise OperationalError("SELECT ...", {"email": email}, Exception("connection reset"))

    monkeypatch.setattr(UserRepository, "find_by_email", _boom)

    res = client.post("/auth/login", json={"email": "al@x.com", "password": "very-secret-pw"})
    assert res.status_code == 500
    _assert_error_shape(res, code="INTERNAL_ERROR")
    assert "very-secret-pw" not in res.text


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
