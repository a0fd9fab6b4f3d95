from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.event_registry.domain.entity.event_entity import Event
from src.service.event_registry.domain.event_registry import EventRegistry
from src.service.event_registry.domain.value_object.purchase_receipt import AccountTicketHolding


class ListEventsUseCase:
    def __init__(self, *, event_registry: EventRegistry) -> None:
        self.event_registry = event_registry

    @classmethod
    @inject
    def depends(
        cls, event_registry: EventRegistry = Depends(Provide[Container.event_registry])
    ) -> Self:
        return cls(event_registry=event_registry)

    @Logger.io
    def list_active(self) -> List[Event]:
        """All events that have not been cancelled, in creation order"""
        events = self.event_registry.get_active_events()
        Logger.base.info(f'✅ [LIST_ACTIVE] Found {len(events)} active events')
        return events

    @Logger.io
    def get_by_organizer(self, *, organizer: str) -> List[Event]:
        """All events of an organizer, cancelled ones included"""
        events = self.event_registry.list_events_by_organizer(organizer=organizer)
        Logger.base.info(f'📋 [LIST_BY_ORGANIZER] Found {len(events)} events')
        return events

    def count(self) -> int:
        return self.event_registry.event_count()

    @Logger.io
    def list_account_tickets(self, *, account: str) -> List[AccountTicketHolding]:
        return self.event_registry.get_account_tickets(account=account)

    def now(self) -> int:
        return self.event_registry.now()
