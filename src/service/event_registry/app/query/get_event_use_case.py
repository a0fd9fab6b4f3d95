from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.event_registry.domain.entity.event_entity import Event
from src.service.event_registry.domain.event_registry import EventRegistry


class GetEventUseCase:
    def __init__(self, *, event_registry: EventRegistry) -> None:
        self.event_registry = event_registry

    @classmethod
    @inject
    def depends(
        cls, event_registry: EventRegistry = Depends(Provide[Container.event_registry])
    ) -> Self:
        return cls(event_registry=event_registry)

    @Logger.io
    def get_by_id(self, *, event_id: int) -> Event:
        """Raises UnknownEventError when no event has this id."""
        Logger.base.info(f'🎫 [GET_EVENT] Loading event {event_id}')
        return self.event_registry.get_event(event_id=event_id)

    def now(self) -> int:
        return self.event_registry.now()
