"""
Liveness and provider health endpoints.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from courtify.config import Mode
from courtify.errors import CourtifyError
from courtify.models import HealthResponse, PingResponse
from courtify.services.registry import registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["health"])


@router.get(
    "/ping",
    response_model=PingResponse,
    operation_id="ping",
    summary="Liveness probe",
)
async def ping() -> PingResponse:
    return PingResponse(ts=datetime.now(timezone.utc).isoformat())


@router.get(
    "/health",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    operation_id="getHealth",
    summary="Provider token health check",
)
async def get_health():
    """
    Report whether a SimplyBook token can be obtained.

    A token failure is reported in the body, not as an error status.
    """
    try:
        if registry.mode is Mode.SIMULATED:
            return HealthResponse(simplybook_token=False, mock=True)
        try:
            token = await registry.token_cache.get_token()
        except CourtifyError as exc:
            return HealthResponse(simplybook_token=False, token_error=str(exc))
        return HealthResponse(simplybook_token=bool(token))
    except Exception as exc:
        logger.exception("GET /api/health failed")
        return JSONResponse(status_code=500, content={"ok": False, "error": str(exc)})
