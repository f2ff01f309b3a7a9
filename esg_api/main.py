"""FastAPI application entry point with structured logging, error envelopes and health checks."""

import os
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from esg_api.api import auth, companies, dashboard, emissions, energy, reports
from esg_api.database import init_db
from esg_api.dependencies import get_settings
from esg_api.errors import ESGAPIError
from esg_api.health import router as health_router
from esg_api.logging_config import bind_request_context, clear_request_context, get_logger, setup_logging
from esg_api.schemas.common import ApiResponse, ErrorResponse

setup_logging(
    json_logs=os.getenv("JSON_LOGS", "false").lower() == "true",
    log_level=os.getenv("LOG_LEVEL", "INFO"),
)
logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
API_V1_PREFIX = "/api/v1"

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle for the FastAPI application."""
    logger.info("application_startup", version=settings.app_version)
    init_db()
    logger.info("database_initialized")
    yield
    logger.info("application_shutdown")


app = FastAPI(
    title="ESG Sustainability API",
    description=(
        "Tracks corporate carbon emissions, energy consumption and "
        "sustainability reports, and derives ESG statistics, rankings and scores."
    ),
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization", REQUEST_ID_HEADER],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Assign a trace id to every request and echo it back."""
    trace_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    request.state.trace_id = trace_id
    bind_request_context(trace_id, request.method, request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_request_context()
    response.headers[REQUEST_ID_HEADER] = trace_id
    return response


# ── Error envelopes ─────────────────────────────────────────────────────

def _trace_id(request: Request) -> str:
    return getattr(request.state, "trace_id", None) or request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex


def _error_response(request: Request, status_code: int, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        details=details,
        status_code=status_code,
        trace_id=_trace_id(request),
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(by_alias=True)),
        headers={REQUEST_ID_HEADER: body.trace_id},
    )


def _describe_validation_error(err: dict) -> str:
    location = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path"))
    return f"{location}: {err.get('msg')}" if location else str(err.get("msg"))


@app.exception_handler(ESGAPIError)
async def esg_api_error_handler(request: Request, exc: ESGAPIError) -> JSONResponse:
    logger.warning("request_rejected", status_code=exc.status_code, error=exc.message, details=exc.details)
    return _error_response(request, exc.status_code, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [_describe_validation_error(e) for e in exc.errors()]
    logger.warning("request_validation_failed", errors=errors)
    body = ApiResponse.failure("Invalid data", errors)
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(body.model_dump(by_alias=True)),
        headers={REQUEST_ID_HEADER: _trace_id(request)},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(request, exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_exception", error=str(exc))
    return _error_response(request, 500, "Internal server error", str(exc))


# ── Routes ──────────────────────────────────────────────────────────────

app.include_router(health_router, tags=["health"])

app.include_router(dashboard.router, prefix=f"{API_V1_PREFIX}/dashboard", tags=["dashboard"])
app.include_router(emissions.router, prefix=f"{API_V1_PREFIX}/emissions", tags=["emissions"])
app.include_router(energy.router, prefix=f"{API_V1_PREFIX}/energy-consumption", tags=["energy"])
app.include_router(reports.router, prefix=f"{API_V1_PREFIX}/sustainability-reports", tags=["reports"])
app.include_router(companies.router, prefix=f"{API_V1_PREFIX}/companies", tags=["companies"])
app.include_router(auth.router, prefix=f"{API_V1_PREFIX}/auth", tags=["auth"])


@app.get("/")
def root():
    """Root endpoint - API information."""
    logger.info("root_endpoint_accessed")
    return {
        "name": "ESG Sustainability API",
        "version": settings.app_version,
        "description": "API for tracking ESG sustainability metrics",
        "documentation": "/docs",
        "health": "/health",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
