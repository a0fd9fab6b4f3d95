from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.platform.state.transaction_lock import TransactionLock
from src.service.event_registry.domain.domain_event.registry_events import EventCancelled
from src.service.event_registry.domain.entity.event_entity import Event
from src.service.event_registry.domain.event_registry import EventRegistry
from src.service.shared_kernel.app.interface.i_notification_publisher import (
    INotificationPublisher,
)
from src.service.shared_kernel.domain.enum.notification_topic import NotificationTopic


class CancelEventUseCase:
    """
    Cancel an event. Only its organizer may do this, and only once:
    cancelling an already cancelled event fails with AlreadyInactiveError.
    Tickets already sold stay with their holders.
    """

    def __init__(
        self,
        *,
        event_registry: EventRegistry,
        transaction_lock: TransactionLock,
        notification_publisher: INotificationPublisher,
    ) -> None:
        self.event_registry = event_registry
        self.transaction_lock = transaction_lock
        self.notification_publisher = notification_publisher

    @classmethod
    @inject
    def depends(
        cls,
        event_registry: EventRegistry = Depends(Provide[Container.event_registry]),
        transaction_lock: TransactionLock = Depends(Provide[Container.transaction_lock]),
        notification_publisher: INotificationPublisher = Depends(
            Provide[Container.notification_publisher]
        ),
    ) -> Self:
        return cls(
            event_registry=event_registry,
            transaction_lock=transaction_lock,
            notification_publisher=notification_publisher,
        )

    @Logger.io
    async def cancel_event(self, *, event_id: int, caller: str) -> Event:
        with metrics.track_operation(operation='cancel_event'):
            async with self.transaction_lock.hold(operation='cancel_event'):
                event = self.event_registry.cancel_event(event_id=event_id, caller=caller)

        metrics.record_event_cancelled(event_id=event_id)
        await self.notification_publisher.publish(
            topic=NotificationTopic.EVENT_CANCELLED,
            payload=EventCancelled.from_event(event=event).to_payload(),
        )
        return event

    def now(self) -> int:
        return self.event_registry.now()
