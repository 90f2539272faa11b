"""
Service catalog endpoint.
"""

from fastapi import APIRouter

from courtify.models import ServicesResponse
from courtify.services.registry import registry

router = APIRouter(prefix="/api", tags=["services"])


@router.get(
    "/services",
    response_model=ServicesResponse,
    response_model_exclude_none=True,
    operation_id="listServices",
    summary="List bookable services",
)
async def list_services() -> ServicesResponse:
    services = await registry.get_catalog().list_services()
    return ServicesResponse(services=services)
