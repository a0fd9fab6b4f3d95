"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.event_registry.app.command import (
    buy_tickets_use_case,
    cancel_event_use_case,
    create_event_use_case,
)
from src.service.event_registry.app.query import (
    get_event_use_case,
    list_events_use_case,
    stream_notifications_use_case,
)
from src.service.ticket_ledger.app.command import (
    set_authorized_minter_use_case,
    transfer_ticket_use_case,
)
from src.service.ticket_ledger.app.query import (
    get_ticket_balance_use_case,
    get_ticket_info_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_event_use_case,
    buy_tickets_use_case,
    cancel_event_use_case,
    get_event_use_case,
    list_events_use_case,
    stream_notifications_use_case,
    set_authorized_minter_use_case,
    transfer_ticket_use_case,
    get_ticket_info_use_case,
    get_ticket_balance_use_case,
]
