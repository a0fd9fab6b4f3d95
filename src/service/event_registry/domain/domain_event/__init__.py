"""Domain Events"""

from src.service.event_registry.domain.domain_event.registry_events import (
    EventCancelled,
    EventCreated,
    TicketPurchased,
)

__all__ = ['EventCancelled', 'EventCreated', 'TicketPurchased']
