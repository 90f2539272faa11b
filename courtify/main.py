"""Main FastAPI application for Courtify Booking."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from courtify.config import CORS_ORIGINS
from courtify.errors import CourtifyError, ValidationError
from courtify.models import ErrorResponse
from courtify.rate_limit import limiter
from courtify.routers import availability, bookings, health, services
from courtify.services.registry import registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if registry.ledger is None:
        registry.configure_from_env()
    await registry.start()
    yield
    await registry.stop()


app = FastAPI(
    title="Courtify Booking API",
    description="Court availability search and booking on top of SimplyBook.me",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


# ── Error mapping ──────────────────────────────────────────────────────────


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(400, str(exc))


@app.exception_handler(CourtifyError)
async def handle_courtify_error(request: Request, exc: CourtifyError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return _error(500, str(exc))


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed", request.method, request.url.path)
    return _error(500, str(exc))


app.include_router(health.router)
app.include_router(services.router)
app.include_router(availability.router)
app.include_router(bookings.router)
