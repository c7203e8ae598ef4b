import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.dependencies import get_container
from app.api.routers.health import router as health_router
from app.api.routers.reservations import router as reservations_router
from app.api.schemas.reservations import ErrorResponse
from app.config import get_settings
from app.domain.errors import (
    ConfigurationError,
    DomainError,
    PersistenceError,
    UploadFailedError,
    UploadPolicyError,
    ValidationError,
)
from app.infrastructure.db.engine import create_tables

# Configure structured logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Checked in order; subclasses before their bases.
_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ConfigurationError, 500),
    (ValidationError, 400),
    (UploadPolicyError, 400),
    (UploadFailedError, 500),
    (PersistenceError, 400),
)


def status_for(exc: DomainError) -> int:
    for error_cls, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            return status_code
    return 500


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = None
    try:
        container = get_container()
    except ConfigurationError as exc:
        # Requests keep failing with 500 until the settings are fixed.
        logger.error("Server configuration error", extra={"missing": exc.missing})

    if container is not None and container.engine is not None:
        await create_tables(container.engine)
    yield
    # Cleanup
    if container is not None and container.engine is not None:
        await container.engine.dispose()


app = FastAPI(
    title="Property Reservations API",
    version="0.1.0",
    lifespan=lifespan
)


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "Request failed",
        extra={
            "code": exc.code,
            "error": exc.error,
            "path": request.url.path,
            "method": request.method,
            "status_code": status_code,
        },
    )
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=exc.error, message=exc.message).model_dump(exclude_none=True),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters use the same 400 envelope as domain validation."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(
        part for part in first.get("loc", ()) if isinstance(part, str) and part != "body"
    )
    detail = first.get("msg", "Invalid request")
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "method": request.method, "errors": len(errors)},
    )
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error="Invalid request",
            message=f"{location}: {detail}" if location else detail,
        ).model_dump(exclude_none=True),
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            message=(
                "An unexpected error occurred. Please contact support with the "
                "error_id if the issue persists."
            ),
            error_id=error_id,
        ).model_dump(),
    )


app.include_router(health_router, tags=["Health"])
app.include_router(reservations_router, prefix="/api/v1", tags=["Reservations"])
