"""csscolor — CSS color validation service.

FastAPI application with structured logging and error mapping for
configuration and type errors.
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from csscolor.config import get_settings
from csscolor.api.router import api_router
from csscolor.errors import InvalidArgumentError, UnexpectedTypeError
from csscolor.validators import get_validator

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if get_settings().DEBUG else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, get_settings().LOG_LEVEL.upper(), logging.INFO)
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG)

    # Fail fast on a bad DEFAULT_MODE
    validator = get_validator()
    logger.info("app_started", default_mode=validator.default_mode.value)

    yield

    # ── Shutdown ──
    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="csscolor",
    description="Validates CSS color values in hex and named-color formats.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    """Bad rule configuration supplied by the client."""
    return JSONResponse(
        status_code=422,
        content={"error": "invalid_argument", "message": str(exc)},
    )


@app.exception_handler(UnexpectedTypeError)
async def unexpected_type_handler(request: Request, exc: UnexpectedTypeError):
    """Value that cannot be validated as text."""
    return JSONResponse(
        status_code=422,
        content={"error": "unexpected_type", "message": str(exc)},
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "csscolor",
        "version": "1.0.0",
        "description": "CSS color format validation",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
