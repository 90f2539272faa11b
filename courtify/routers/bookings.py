"""
Booking endpoints backed by the flat-file ledger.
"""

from fastapi import APIRouter, Request

from courtify.models import BookingListResponse, BookingRequest, BookingResponse
from courtify.rate_limit import BOOKING, limiter
from courtify.services.registry import registry

router = APIRouter(prefix="/api", tags=["bookings"])


@router.post(
    "/book",
    response_model=BookingResponse,
    operation_id="createBooking",
    summary="Record a booking",
)
@limiter.limit(BOOKING)
async def create_booking(request: Request, payload: BookingRequest | None = None) -> BookingResponse:
    payload = payload or BookingRequest()
    booking = await registry.get_ledger().create(
        service_id=payload.serviceId,
        unit_id=payload.unitId,
        date=payload.date,
        time=payload.time,
        customer_name=payload.customerName,
        service_name=payload.serviceName,
        unit_name=payload.unitName,
        contact=payload.contact,
        price=payload.price,
    )
    return BookingResponse(booking=booking)


@router.get(
    "/bookings",
    response_model=BookingListResponse,
    operation_id="listBookings",
    summary="List all bookings in creation order",
)
async def list_bookings() -> BookingListResponse:
    bookings = await registry.get_ledger().list()
    return BookingListResponse(bookings=bookings)
