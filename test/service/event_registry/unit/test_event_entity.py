import pytest

from src.service.event_registry.domain.entity.event_entity import Event
from src.service.event_registry.domain.enum.event_sale_status import EventSaleStatus
from src.service.shared_kernel.domain.ledger_errors import AlreadyInactiveError
from test.test_constants import FUTURE_DATE, ORGANIZER_ADDRESS, TEST_NOW


@pytest.fixture
def event() -> Event:
    return Event(
        id=0,
        name='Blockchain Summit',
        description='Two days of talks',
        date=FUTURE_DATE,
        ticket_price=0,
        max_tickets=2,
        venue='Taipei Arena',
        organizer=ORGANIZER_ADDRESS,
    )


class TestSaleStatus:
    def test_on_sale(self, event):
        assert event.sale_status(now=TEST_NOW) == EventSaleStatus.ON_SALE
        assert event.tickets_available == 2

    def test_sold_out(self, event):
        sold_out = event.record_sale(quantity=2)

        assert sold_out.sale_status(now=TEST_NOW) == EventSaleStatus.SOLD_OUT
        assert sold_out.tickets_available == 0

    def test_still_on_sale_at_event_date(self, event):
        assert event.sale_status(now=FUTURE_DATE) == EventSaleStatus.ON_SALE

    def test_past_once_date_passed(self, event):
        assert event.sale_status(now=FUTURE_DATE + 1) == EventSaleStatus.PAST

    def test_cancelled_wins(self, event):
        cancelled = event.record_sale(quantity=2).cancel()

        assert cancelled.sale_status(now=FUTURE_DATE + 1) == EventSaleStatus.CANCELLED


class TestCancel:
    def test_cancel_returns_new_snapshot(self, event):
        cancelled = event.cancel()

        assert cancelled.is_active is False
        assert event.is_active is True

    def test_cancel_twice(self, event):
        with pytest.raises(AlreadyInactiveError):
            event.cancel().cancel()
