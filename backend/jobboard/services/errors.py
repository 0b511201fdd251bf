# jobboard/services/errors.py
"""
Service-layer failures.

Each carries the HTTP status it maps to and a stable `code`; main.py turns any
ServiceError into the standard `{success: false, message, code, error?}` envelope.
`detail` is diagnostic text for the `error` field and must never hold a
password, hash or signing secret.
"""
from __future__ import annotations

from typing import Optional


class ServiceError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, *, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class MissingFieldError(ServiceError):
    status_code = 400
    code = "MISSING_FIELD"


class DuplicateKeyError(ServiceError):
    status_code = 400
    code = "DUPLICATE_KEY"

    def __init__(self, field: str, value: str):
        super().__init__(f"Duplicate value error: The {field} '{value}' is already taken.")
        self.field = field
        self.value = value


class ValidationError(ServiceError):
    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(self, detail: str):
        super().__init__("Validation error", detail=detail)


class NotFoundError(ServiceError):
    status_code = 404
    code = "NOT_FOUND"


class InvalidCredentialsError(ServiceError):
    status_code = 401
    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AlreadyExistsError(ServiceError):
    status_code = 400
    code = "ALREADY_EXISTS"


class InternalError(ServiceError):
    status_code = 500
    code = "INTERNAL_ERROR"
