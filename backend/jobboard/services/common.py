from __future__ import annotations

from typing import Any

from sqlalchemy.exc import SQLAlchemyError


def clean_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def normalize_email(value: Any) -> str:
    return clean_str(value).lower()


def db_error_detail(exc: SQLAlchemyError) -> str:
    # Prefer the driver's own message: SQLAlchemy's str() also renders bound parameters.
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)
