"""
Notification Topic Enum - Shared Kernel

Topics published on the in-memory broadcaster; mirrors the ledger event logs.
"""

from enum import StrEnum


class NotificationTopic(StrEnum):
    EVENT_CREATED = 'event_created'
    TICKET_PURCHASED = 'ticket_purchased'
    EVENT_CANCELLED = 'event_cancelled'
    TICKET_TRANSFERRED = 'ticket_transferred'
