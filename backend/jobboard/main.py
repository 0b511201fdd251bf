import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobboard.core.config import settings, require_jwt_secret
from jobboard.core.logging_config import setup_logging
from jobboard.routes.auth import router as auth_router
from jobboard.routes.saved_jobs import router as saved_jobs_router
from jobboard.routes.users import router as users_router
from jobboard.schemas.envelope import failure
from jobboard.services.errors import ServiceError

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

require_jwt_secret()

app = FastAPI(title="Job Board Accounts")
logger.info("Startup config: ENV=%s hash_rounds=%s", settings.ENV, settings.PASSWORD_HASH_ROUNDS)

_ERROR_CODE_BY_STATUS: dict[int, str] = {
    400: "VALIDATION_ERROR",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    422: "VALIDATION_ERROR",
    500: "INTERNAL_ERROR",
}


def _error_code(status_code: int) -> str:
    return _ERROR_CODE_BY_STATUS.get(int(status_code), "HTTP_ERROR")


@app.exception_handler(ServiceError)
def service_error_handler(request: Request, exc: ServiceError):  # noqa: ARG001
    return JSONResponse(
        status_code=exc.status_code,
        content=failure(exc.message, exc.code, error=exc.detail),
    )


@app.exception_handler(StarletteHTTPException)
def http_exception_handler(request: Request, exc: HTTPException):  # noqa: ARG001
    detail = exc.detail
    message = detail if isinstance(detail, str) and detail else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content=failure(message, _error_code(exc.status_code)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
def validation_exception_handler(request: Request, exc: RequestValidationError):  # noqa: ARG001
    # Drop "input"/"ctx": they can echo the submitted body, password included.
    errors = [
        {k: v for k, v in err.items() if k not in ("input", "ctx", "url")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content=failure(
            "Invalid request payload",
            "VALIDATION_ERROR",
            details=jsonable_encoder({"errors": errors}),
        ),
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(saved_jobs_router)


@app.get("/health")
def health_check():
    return {"status": "ok"}
