"""
Event Registry - Aggregate Root for events and their sale lifecycle

[DDD Design Principles]
- EventRegistry is the Aggregate Root; Event is an entity within it
- Ticket issuance is delegated to the ticket ledger (ITicketMinter), which
  must have authorized this registry's address as a minter

[Business Invariants]
- Event ids are sequential from 0 and never reused
- 0 <= tickets_sold <= max_tickets for every event
- is_active only ever goes from True to False
- A rejected operation leaves events and ticket balances untouched
"""

from typing import List

from src.platform.logging.loguru_io import Logger
from src.platform.state.chain_clock import IChainClock
from src.service.event_registry.domain.entity.event_entity import Event
from src.service.event_registry.domain.ticket_minter import ITicketMinter
from src.service.event_registry.domain.value_object.purchase_receipt import (
    AccountTicketHolding,
    PurchaseReceipt,
)
from src.service.shared_kernel.domain.ledger_errors import (
    EventInactiveError,
    InsufficientPaymentError,
    InvalidAmountError,
    InvalidQuantityError,
    InvalidScheduleError,
    NotOrganizerError,
    SoldOutError,
    UnknownEventError,
)
from src.service.shared_kernel.domain.value_object.account_address import (
    normalize_address,
    short_address,
)


class EventRegistry:
    def __init__(self, *, address: str, ticket_minter: ITicketMinter, clock: IChainClock) -> None:
        self._address = normalize_address(address)
        self.ticket_minter = ticket_minter
        self.clock = clock
        # Append-only; index == event id
        self._events: List[Event] = []

    @property
    def address(self) -> str:
        return self._address

    # ========== Commands ==========

    @Logger.io
    def create_event(
        self,
        *,
        name: str,
        description: str,
        date: int,
        ticket_price: int,
        max_tickets: int,
        venue: str,
        caller: str,
    ) -> Event:
        """
        Create an event organized by the caller.

        Raises:
            InvalidScheduleError: date is not strictly after the current chain time
            InvalidEventDataError: blank text field, max_tickets <= 0 or ticket_price < 0
        """
        now = self.clock.now()
        if date <= now:
            raise InvalidScheduleError()

        event = Event(
            id=len(self._events),
            name=name,
            description=description,
            date=date,
            ticket_price=ticket_price,
            max_tickets=max_tickets,
            venue=venue,
            organizer=normalize_address(caller),
            created_at=now,
        )
        self._events.append(event)

        Logger.base.info(
            f'🎫 [REGISTRY] Created event {event.id} "{event.name}" '
            f'by {short_address(event.organizer)} (capacity {event.max_tickets})'
        )
        return event

    @Logger.io
    def buy_tickets(
        self, *, event_id: int, quantity: int, payment: int, caller: str
    ) -> PurchaseReceipt:
        """
        Buy `quantity` tickets for the caller.

        Checks run in a fixed order and all of them run before anything changes.
        Payment above the total cost is accepted and reported as the receipt's refund.

        Raises:
            UnknownEventError, InvalidQuantityError, InvalidAmountError,
            EventInactiveError, InsufficientPaymentError, SoldOutError,
            NotAuthorizedError (registry not authorized on the ticket ledger)
        """
        event = self._get(event_id=event_id)
        buyer = normalize_address(caller)
        if quantity <= 0:
            raise InvalidQuantityError()
        if payment < 0:
            raise InvalidAmountError(f'Payment cannot be negative: {payment}')
        if not event.is_active:
            raise EventInactiveError()

        total_cost = event.ticket_price * quantity
        if payment < total_cost:
            raise InsufficientPaymentError(
                f'Insufficient payment: required {total_cost} wei, got {payment} wei'
            )
        if event.tickets_sold + quantity > event.max_tickets:
            raise SoldOutError()

        # The ledger validates before minting, so a failure here leaves both sides untouched
        token_ids = self.ticket_minter.mint(
            to=buyer, event_id=event_id, quantity=quantity, caller=self._address
        )
        self._events[event_id] = event.record_sale(quantity=quantity)

        Logger.base.info(
            f'💰 [REGISTRY] {short_address(buyer)} bought {quantity} ticket(s) '
            f'for event {event_id} ({total_cost} wei)'
        )
        return PurchaseReceipt(
            event_id=event_id,
            buyer=buyer,
            quantity=quantity,
            unit_price=event.ticket_price,
            total_cost=total_cost,
            refund=payment - total_cost,
            token_ids=token_ids,
        )

    @Logger.io
    def cancel_event(self, *, event_id: int, caller: str) -> Event:
        """
        Raises:
            UnknownEventError, NotOrganizerError, AlreadyInactiveError
        """
        event = self._get(event_id=event_id)
        if normalize_address(caller) != event.organizer:
            raise NotOrganizerError()

        cancelled = event.cancel()
        self._events[event_id] = cancelled
        Logger.base.info(f'🚫 [REGISTRY] Event {event_id} cancelled')
        return cancelled

    # ========== Queries ==========

    def get_event(self, *, event_id: int) -> Event:
        return self._get(event_id=event_id)

    def get_active_events(self) -> List[Event]:
        return [event for event in self._events if event.is_active]

    def event_count(self) -> int:
        return len(self._events)

    def list_events_by_organizer(self, *, organizer: str) -> List[Event]:
        organizer = normalize_address(organizer)
        return [event for event in self._events if event.organizer == organizer]

    def get_account_tickets(self, *, account: str) -> List[AccountTicketHolding]:
        holdings = []
        for event in self._events:
            balance = self.ticket_minter.balance_of_event(owner=account, event_id=event.id)
            if balance > 0:
                holdings.append(AccountTicketHolding(event=event, balance=balance))
        return holdings

    def now(self) -> int:
        return self.clock.now()

    def _get(self, *, event_id: int) -> Event:
        if not 0 <= event_id < len(self._events):
            raise UnknownEventError(event_id)
        return self._events[event_id]
