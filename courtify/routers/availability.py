"""
Court availability search.
"""

from fastapi import APIRouter

from courtify.models import AvailabilityRequest, AvailabilityResponse
from courtify.services.registry import registry

router = APIRouter(prefix="/api/court", tags=["availability"])


@router.post(
    "/availability/check",
    response_model=AvailabilityResponse,
    operation_id="checkCourtAvailability",
    summary="Find free slots matching location, sport and time preferences",
)
async def check_availability(payload: AvailabilityRequest | None = None) -> AvailabilityResponse:
    payload = payload or AvailabilityRequest()
    results = await registry.get_aggregator().check_availability(
        date_from=payload.dateFrom,
        date_to=payload.dateTo,
        preferred_location=payload.preferredLocation or "",
        indoor_outdoor=payload.indoorOutdoor or "any",
        sport=payload.sport or "",
        preferred_time=payload.preferredTime or "",
    )
    return AvailabilityResponse(
        dateFrom=payload.dateFrom,
        dateTo=payload.dateTo,
        preferredTime=payload.preferredTime or "",
        results=results,
    )
