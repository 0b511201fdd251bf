"""
Helpers for reading unique-constraint violations out of driver errors.

Postgres reports SQLSTATE 23505 with a `Key (column)=(value)` detail line;
SQLite reports `UNIQUE constraint failed: table.column[, table.column]`.
"""
from __future__ import annotations

import re
from typing import Iterable

from sqlalchemy.exc import IntegrityError

_PG_KEY_RE = re.compile(r"Key \(([^)]+)\)=")
_SQLITE_UNIQUE_RE = re.compile(r"UNIQUE constraint failed: (.+)$", re.MULTILINE)


def _message(exc: IntegrityError) -> str:
    return str(getattr(exc, "orig", None) or exc)


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) == "23505":
        return True
    message = _message(exc)
    return "UNIQUE constraint failed" in message or "duplicate key value" in message


def violated_columns(exc: IntegrityError) -> list[str]:
    """Column names named by the driver message, or [] when it doesn't say."""
    message = _message(exc)

    m = _PG_KEY_RE.search(message)
    if m:
        return [c.strip() for c in m.group(1).split(",") if c.strip()]

    m = _SQLITE_UNIQUE_RE.search(message)
    if m:
        return [part.strip().split(".")[-1] for part in m.group(1).split(",") if part.strip()]

    return []


def first_matching(exc: IntegrityError, candidates: Iterable[str], *, table: str) -> str | None:
    """Pick the first candidate column of `table` the violation mentions, by column or constraint name."""
    columns = violated_columns(exc)
    message = _message(exc)
    for name in candidates:
        if name in columns:
            return name
        constraint_names = (f"{table}_{name}_key", f"ix_{table}_{name}", f"uq_{table}_{name}")
        if any(c in message for c in constraint_names):
            return name
    return None
