"""
Unit tests for the event registry use cases

Focus:
1. Each mutation commits under the transaction lock, then publishes one notification
2. Rejected requests publish nothing
3. Concurrent purchases never oversell
"""

from unittest.mock import AsyncMock

import anyio
import pytest

from src.platform.state.transaction_lock import TransactionLock
from src.service.event_registry.app.command.buy_tickets_use_case import BuyTicketsUseCase
from src.service.event_registry.app.command.cancel_event_use_case import CancelEventUseCase
from src.service.event_registry.app.command.create_event_use_case import CreateEventUseCase
from src.service.event_registry.domain.enum.event_sale_status import EventSaleStatus
from src.service.shared_kernel.domain.enum.notification_topic import NotificationTopic
from src.service.shared_kernel.domain.ledger_errors import (
    AlreadyInactiveError,
    InvalidScheduleError,
    SoldOutError,
)
from test.shared.utils import committed_transactions
from test.test_constants import (
    BUYER_ADDRESS,
    FUTURE_DATE,
    ONE_TENTH_ETHER,
    ORGANIZER_ADDRESS,
    TEST_NOW,
)


@pytest.fixture
def notification_publisher():
    publisher = AsyncMock()
    publisher.publish = AsyncMock(return_value=0)
    return publisher


@pytest.fixture
def transaction_lock():
    return TransactionLock()


@pytest.fixture
def create_use_case(event_registry, transaction_lock, notification_publisher):
    return CreateEventUseCase(
        event_registry=event_registry,
        transaction_lock=transaction_lock,
        notification_publisher=notification_publisher,
    )


@pytest.fixture
def buy_use_case(event_registry, transaction_lock, notification_publisher):
    return BuyTicketsUseCase(
        event_registry=event_registry,
        transaction_lock=transaction_lock,
        notification_publisher=notification_publisher,
    )


@pytest.fixture
def cancel_use_case(event_registry, transaction_lock, notification_publisher):
    return CancelEventUseCase(
        event_registry=event_registry,
        transaction_lock=transaction_lock,
        notification_publisher=notification_publisher,
    )


async def _create_event(use_case: CreateEventUseCase, *, max_tickets: int = 100):
    return await use_case.create_event(
        name='Blockchain Summit',
        description='Two days of talks',
        date=FUTURE_DATE,
        ticket_price=ONE_TENTH_ETHER,
        max_tickets=max_tickets,
        venue='Taipei Arena',
        caller=ORGANIZER_ADDRESS,
    )


class TestCreateEventUseCase:
    @pytest.mark.asyncio
    async def test_publishes_event_created(self, create_use_case, notification_publisher):
        event = await _create_event(create_use_case)

        notification_publisher.publish.assert_awaited_once_with(
            topic=NotificationTopic.EVENT_CREATED,
            payload={
                'event_id': event.id,
                'name': 'Blockchain Summit',
                'date': FUTURE_DATE,
                'organizer': ORGANIZER_ADDRESS,
                'ticket_price': ONE_TENTH_ETHER,
                'max_tickets': 100,
            },
        )

    @pytest.mark.asyncio
    async def test_rejected_schedule_publishes_nothing(
        self, create_use_case, notification_publisher
    ):
        committed_before = committed_transactions()

        with pytest.raises(InvalidScheduleError):
            await create_use_case.create_event(
                name='Too late',
                description='Already happened',
                date=TEST_NOW,
                ticket_price=0,
                max_tickets=1,
                venue='Nowhere',
                caller=ORGANIZER_ADDRESS,
            )

        notification_publisher.publish.assert_not_awaited()
        assert committed_transactions() == committed_before


class TestBuyTicketsUseCase:
    @pytest.mark.asyncio
    async def test_publishes_ticket_purchased(
        self, create_use_case, buy_use_case, notification_publisher
    ):
        event = await _create_event(create_use_case)
        notification_publisher.publish.reset_mock()

        receipt = await buy_use_case.buy_tickets(
            event_id=event.id, quantity=2, payment=2 * ONE_TENTH_ETHER, caller=BUYER_ADDRESS
        )

        assert receipt.token_ids == [0, 1]
        notification_publisher.publish.assert_awaited_once_with(
            topic=NotificationTopic.TICKET_PURCHASED,
            payload={
                'event_id': event.id,
                'buyer': BUYER_ADDRESS,
                'price': ONE_TENTH_ETHER,
                'tickets_count': 2,
            },
        )

    @pytest.mark.asyncio
    async def test_sold_out_publishes_nothing(
        self, create_use_case, buy_use_case, notification_publisher
    ):
        event = await _create_event(create_use_case, max_tickets=1)
        notification_publisher.publish.reset_mock()

        with pytest.raises(SoldOutError):
            await buy_use_case.buy_tickets(
                event_id=event.id, quantity=2, payment=2 * ONE_TENTH_ETHER, caller=BUYER_ADDRESS
            )

        notification_publisher.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_concurrent_purchases_never_oversell(
        self, create_use_case, buy_use_case, event_registry
    ):
        """
        Given: an event with 5 tickets
        When: 8 buyers try to buy 1 ticket each at the same time
        Then: exactly 5 succeed and tickets_sold stops at max_tickets
        """
        event = await _create_event(create_use_case, max_tickets=5)
        outcomes: list[str] = []

        async def _buy() -> None:
            try:
                await buy_use_case.buy_tickets(
                    event_id=event.id, quantity=1, payment=ONE_TENTH_ETHER, caller=BUYER_ADDRESS
                )
                outcomes.append('ok')
            except SoldOutError:
                outcomes.append('sold_out')

        async with anyio.create_task_group() as tg:
            for _ in range(8):
                tg.start_soon(_buy)

        assert outcomes.count('ok') == 5
        assert outcomes.count('sold_out') == 3
        assert event_registry.get_event(event_id=event.id).tickets_sold == 5


class TestCancelEventUseCase:
    @pytest.mark.asyncio
    async def test_publishes_event_cancelled_once(
        self, create_use_case, cancel_use_case, notification_publisher
    ):
        event = await _create_event(create_use_case)
        notification_publisher.publish.reset_mock()

        cancelled = await cancel_use_case.cancel_event(event_id=event.id, caller=ORGANIZER_ADDRESS)
        with pytest.raises(AlreadyInactiveError):
            await cancel_use_case.cancel_event(event_id=event.id, caller=ORGANIZER_ADDRESS)

        assert cancelled.is_active is False
        assert cancel_use_case.now() == TEST_NOW
        assert cancelled.sale_status(now=cancel_use_case.now()) == EventSaleStatus.CANCELLED
        notification_publisher.publish.assert_awaited_once_with(
            topic=NotificationTopic.EVENT_CANCELLED,
            payload={'event_id': event.id, 'organizer': ORGANIZER_ADDRESS},
        )
