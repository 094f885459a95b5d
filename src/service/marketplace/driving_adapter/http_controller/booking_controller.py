from typing import Any, List

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.reserve_tickets_use_case import ReserveTicketsUseCase
from src.service.marketplace.app.query.booking_report_use_case import ListMyBookingsUseCase
from src.service.marketplace.domain.value_object.session import Session
from src.service.marketplace.driving_adapter.http_controller.auth.role_auth import (
    get_current_session,
    require_audience,
)
from src.service.marketplace.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    BookingWithDetailsResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    session: Session = Depends(require_audience),
    use_case: ReserveTicketsUseCase = Depends(ReserveTicketsUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('ticket_id', request.ticket_id)
        span.set_attribute('buyer_id', session.principal_id)

        booking = await use_case.reserve(
            ticket_id=request.ticket_id,
            buyer_id=session.principal_id,
            quantity=request.quantity,
        )
        return BookingResponse.model_validate(booking)


@router.get('/my_booking', response_model=List[BookingWithDetailsResponse])
@Logger.io
async def list_my_bookings(
    session: Session = Depends(get_current_session),
    use_case: ListMyBookingsUseCase = Depends(ListMyBookingsUseCase.depends),
) -> list[dict[str, Any]]:
    return await use_case.list_my_bookings(user_id=session.principal_id)
