# jobboard/schemas/envelope.py
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class Envelope(BaseModel):
    """Shape shared by every response body. Absent optional keys are omitted, not null."""

    success: bool
    message: str
    data: Optional[Any] = None
    error: Optional[str] = None
    code: Optional[str] = None
    token: Optional[str] = None


def ok(message: str, data: Any = None, **extra: Any) -> dict:
    body: dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    for key, value in extra.items():
        if value is not None:
            body[key] = value
    return body


def failure(message: str, code: str, error: str | None = None, **extra: Any) -> dict:
    body: dict[str, Any] = {"success": False, "message": message, "code": code}
    if error:
        body["error"] = error
    for key, value in extra.items():
        if value is not None:
            body[key] = value
    return body
