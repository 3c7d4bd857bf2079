import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from courtcheck.api.routes import availability, resources
from courtcheck.api.schemas.availability import ErrorResponse
from courtcheck.core.config import _ENV_FILE, settings
from courtcheck.core.errors import (
    AvailabilityError,
    InternalError,
    NotFoundError,
    PolicyViolation,
    ValidationError,
)
from courtcheck.services.registry import load_registry

if os.getenv("ENV") != "production":
    logging.basicConfig(level=logging.DEBUG)
else:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}',
    )
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Loading .env from: %s (exists: %s)", _ENV_FILE, _ENV_FILE.exists())
    app.state.registry = load_registry(settings.resources_path)
    if settings.fixed_slot_minutes is not None:
        logger.info("Fixed slot length: %d minutes", settings.fixed_slot_minutes)
    else:
        logger.info("Minimum duration: %d minutes", settings.min_duration_minutes)
    yield


app = FastAPI(
    title="Court Availability API",
    description="Checks whether a court is free for a time window and suggests the next free slot",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(availability.router, prefix="/api/v1")
app.include_router(resources.router, prefix="/api/v1")
app.include_router(availability.legacy_router)


def _cors_headers(origin: str | None) -> dict[str, str]:
    """Add CORS headers to error responses so the browser doesn't block them."""
    headers = {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }
    if origin and origin in settings.cors_origins_list:
        headers["Access-Control-Allow-Origin"] = origin
    elif settings.cors_origins_list:
        headers["Access-Control-Allow-Origin"] = settings.cors_origins_list[0]
    return headers


def _error_response(request: Request, status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
        headers=_cors_headers(request.headers.get("origin")),
    )


@app.exception_handler(AvailabilityError)
async def availability_error_handler(request: Request, exc: AvailabilityError) -> JSONResponse:
    if isinstance(exc, ValidationError):
        logger.debug("Rejected request: %s (%s)", exc.message, exc.reason.value)
        return _error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            ErrorResponse(detail=exc.message, field=exc.field, reason=exc.reason.value),
        )
    if isinstance(exc, NotFoundError):
        logger.info("Unknown resource: %s", exc.resource_id)
        return _error_response(request, status.HTTP_404_NOT_FOUND, ErrorResponse(detail=exc.message))
    if isinstance(exc, PolicyViolation):
        logger.info("Policy %s: %s", exc.kind.value, exc.message)
        return _error_response(
            request,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            ErrorResponse(detail=exc.message, reason=exc.kind.value),
        )
    logger.error("Availability check failed: %s", exc.message)
    return _error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(detail=InternalError().message)
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or a missing query parameter is a client error, not a 422."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.debug("Malformed request: %s", errors)
    return _error_response(request, status.HTTP_400_BAD_REQUEST, ErrorResponse(detail=f"Invalid request: {message}"))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the fault and answer with a generic 500; include CORS so browsers see it."""
    logger.exception("Unhandled exception: %s", exc)
    return _error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(detail=InternalError().message)
    )


@app.get("/")
async def root() -> dict:
    return {"status": "ok", "message": "API running"}


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
