"""
Event Registry Domain Events

Published after commit; they carry the same fields as the registry's
event logs so subscribers can rebuild state incrementally.
"""

from typing import Any, Dict

import attrs

from src.service.event_registry.domain.entity.event_entity import Event
from src.service.event_registry.domain.value_object.purchase_receipt import PurchaseReceipt


@attrs.define
class EventCreated:
    event_id: int
    name: str
    date: int
    organizer: str
    ticket_price: int
    max_tickets: int

    @classmethod
    def from_event(cls, *, event: Event) -> 'EventCreated':
        return cls(
            event_id=event.id,
            name=event.name,
            date=event.date,
            organizer=event.organizer,
            ticket_price=event.ticket_price,
            max_tickets=event.max_tickets,
        )

    def to_payload(self) -> Dict[str, Any]:
        return attrs.asdict(self)


@attrs.define
class TicketPurchased:
    event_id: int
    buyer: str
    price: int  # unit price
    tickets_count: int

    @classmethod
    def from_receipt(cls, *, receipt: PurchaseReceipt) -> 'TicketPurchased':
        return cls(
            event_id=receipt.event_id,
            buyer=receipt.buyer,
            price=receipt.unit_price,
            tickets_count=receipt.quantity,
        )

    def to_payload(self) -> Dict[str, Any]:
        return attrs.asdict(self)


@attrs.define
class EventCancelled:
    event_id: int
    organizer: str

    @classmethod
    def from_event(cls, *, event: Event) -> 'EventCancelled':
        return cls(event_id=event.id, organizer=event.organizer)

    def to_payload(self) -> Dict[str, Any]:
        return attrs.asdict(self)
