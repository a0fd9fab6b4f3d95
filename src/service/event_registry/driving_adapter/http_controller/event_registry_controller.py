from collections.abc import AsyncGenerator
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
import orjson
from sse_starlette.sse import EventSourceResponse

from src.platform.logging.loguru_io import Logger
from src.service.event_registry.app.command.buy_tickets_use_case import BuyTicketsUseCase
from src.service.event_registry.app.command.cancel_event_use_case import CancelEventUseCase
from src.service.event_registry.app.command.create_event_use_case import CreateEventUseCase
from src.service.event_registry.app.query.get_event_use_case import GetEventUseCase
from src.service.event_registry.app.query.list_events_use_case import ListEventsUseCase
from src.service.event_registry.app.query.stream_notifications_use_case import (
    StreamNotificationsUseCase,
)
from src.service.event_registry.domain.entity.event_entity import Event
from src.service.event_registry.driving_adapter.schema.event_schema import (
    AccountTicketResponse,
    EventCountResponse,
    EventCreateRequest,
    EventResponse,
    TicketPurchaseRequest,
    TicketPurchaseResponse,
)
from src.service.shared_kernel.domain.enum.notification_topic import NotificationTopic
from src.service.shared_kernel.domain.value_object.native_amount import format_ether, parse_ether
from src.service.shared_kernel.driving_adapter.http_controller.auth.caller_auth import (
    get_caller_address,
)


router = APIRouter()


def _to_event_response(event: Event, *, now: int) -> EventResponse:
    return EventResponse(
        id=event.id,
        name=event.name,
        description=event.description,
        date=event.date,
        ticket_price=event.ticket_price,
        ticket_price_ether=format_ether(event.ticket_price),
        max_tickets=event.max_tickets,
        tickets_sold=event.tickets_sold,
        tickets_available=event.tickets_available,
        venue=event.venue,
        organizer=event.organizer,
        is_active=event.is_active,
        sale_status=event.sale_status(now=now).value,
        created_at=event.created_at,
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    caller: str = Depends(get_caller_address),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventResponse:
    event = await use_case.create_event(
        name=request.name,
        description=request.description,
        date=request.date,
        ticket_price=parse_ether(request.ticket_price),
        max_tickets=request.max_tickets,
        venue=request.venue,
        caller=caller,
    )
    return _to_event_response(event, now=event.created_at)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    organizer: Optional[str] = None,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    if organizer is not None:
        events = use_case.get_by_organizer(organizer=organizer)
    else:
        events = use_case.list_active()

    now = use_case.now()
    return [_to_event_response(event, now=now) for event in events]


@router.get('/count', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event_count(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> EventCountResponse:
    return EventCountResponse(count=use_case.count())


@router.get('/my_tickets', status_code=status.HTTP_200_OK)
@Logger.io
async def list_my_tickets(
    caller: str = Depends(get_caller_address),
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[AccountTicketResponse]:
    now = use_case.now()
    return [
        AccountTicketResponse(
            event=_to_event_response(holding.event, now=now), balance=holding.balance
        )
        for holding in use_case.list_account_tickets(account=caller)
    ]


# ============================ SSE Endpoints ============================


@router.get('/notifications/sse', status_code=status.HTTP_200_OK)
@Logger.io
async def stream_notifications(
    topics: Optional[List[NotificationTopic]] = Query(default=None),
    use_case: StreamNotificationsUseCase = Depends(StreamNotificationsUseCase.depends),
) -> EventSourceResponse:
    """SSE real-time push of ledger notifications (event created, ticket purchased, ...)."""

    async def event_generator() -> AsyncGenerator[dict, None]:
        async for notification in use_case.stream(
            topics=[topic.value for topic in topics] if topics else None
        ):
            yield {
                'event': notification['topic'],
                'data': orjson.dumps(notification['payload']).decode(),
            }

    return EventSourceResponse(event_generator())


# ============================ Single Event Endpoints ============================


@router.get('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event(
    event_id: int,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    event = use_case.get_by_id(event_id=event_id)
    return _to_event_response(event, now=use_case.now())


@router.post('/{event_id}/purchase', status_code=status.HTTP_200_OK)
@Logger.io
async def buy_tickets(
    event_id: int,
    request: TicketPurchaseRequest,
    caller: str = Depends(get_caller_address),
    use_case: BuyTicketsUseCase = Depends(BuyTicketsUseCase.depends),
) -> TicketPurchaseResponse:
    receipt = await use_case.buy_tickets(
        event_id=event_id, quantity=request.quantity, payment=request.payment, caller=caller
    )
    return TicketPurchaseResponse(
        event_id=receipt.event_id,
        buyer=receipt.buyer,
        quantity=receipt.quantity,
        unit_price=receipt.unit_price,
        total_cost=receipt.total_cost,
        refund=receipt.refund,
        token_ids=receipt.token_ids,
    )


@router.post('/{event_id}/cancel', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_event(
    event_id: int,
    caller: str = Depends(get_caller_address),
    use_case: CancelEventUseCase = Depends(CancelEventUseCase.depends),
) -> EventResponse:
    event = await use_case.cancel_event(event_id=event_id, caller=caller)
    return _to_event_response(event, now=use_case.now())
