import attrs

from src.platform.logging.loguru_io import Logger
from src.service.event_registry.domain.enum.event_sale_status import EventSaleStatus
from src.service.shared_kernel.domain.ledger_errors import (
    AlreadyInactiveError,
    InvalidEventDataError,
)


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidEventDataError(f'Event {attribute.name} cannot be empty')


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise InvalidEventDataError(f'Event {attribute.name} must be greater than 0')


def _validate_non_negative(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise InvalidEventDataError(f'Event {attribute.name} cannot be negative')


@attrs.define(frozen=True)
class Event:
    id: int
    name: str = attrs.field(validator=_validate_non_empty_string)
    description: str = attrs.field(validator=_validate_non_empty_string)
    date: int
    ticket_price: int = attrs.field(validator=_validate_non_negative)  # wei
    max_tickets: int = attrs.field(validator=_validate_positive)
    venue: str = attrs.field(validator=_validate_non_empty_string)
    organizer: str
    tickets_sold: int = 0
    is_active: bool = True
    created_at: int = 0

    @property
    def tickets_available(self) -> int:
        return self.max_tickets - self.tickets_sold

    def sale_status(self, *, now: int) -> EventSaleStatus:
        if not self.is_active:
            return EventSaleStatus.CANCELLED
        if self.date < now:
            return EventSaleStatus.PAST
        if self.tickets_sold == self.max_tickets:
            return EventSaleStatus.SOLD_OUT
        return EventSaleStatus.ON_SALE

    @Logger.io
    def record_sale(self, *, quantity: int) -> 'Event':
        assert self.tickets_sold + quantity <= self.max_tickets, 'Sale exceeds capacity'
        return attrs.evolve(self, tickets_sold=self.tickets_sold + quantity)

    @Logger.io
    def cancel(self) -> 'Event':
        """
        Cancel event (Domain validation)

        Raises:
            AlreadyInactiveError: Event was already cancelled
        """
        if not self.is_active:
            raise AlreadyInactiveError()
        return attrs.evolve(self, is_active=False)
