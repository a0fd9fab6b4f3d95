"""
Create Event Use Case

Flow:
1. Under the transaction lock, the registry validates the schedule and
   event data and appends the event
2. After commit, publish event_created and update metrics
"""

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.platform.state.transaction_lock import TransactionLock
from src.service.event_registry.domain.domain_event.registry_events import EventCreated
from src.service.event_registry.domain.entity.event_entity import Event
from src.service.event_registry.domain.event_registry import EventRegistry
from src.service.shared_kernel.app.interface.i_notification_publisher import (
    INotificationPublisher,
)
from src.service.shared_kernel.domain.enum.notification_topic import NotificationTopic


class CreateEventUseCase:
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
    async def create_event(
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
        Args:
            date: Event start, seconds since epoch
            ticket_price: Price per ticket in wei
            caller: Organizer account address

        Raises:
            InvalidScheduleError, InvalidEventDataError
        """
        with metrics.track_operation(operation='create_event'):
            async with self.transaction_lock.hold(operation='create_event'):
                event = self.event_registry.create_event(
                    name=name,
                    description=description,
                    date=date,
                    ticket_price=ticket_price,
                    max_tickets=max_tickets,
                    venue=venue,
                    caller=caller,
                )

        metrics.record_event_created(event_id=event.id, max_tickets=event.max_tickets)
        await self.notification_publisher.publish(
            topic=NotificationTopic.EVENT_CREATED,
            payload=EventCreated.from_event(event=event).to_payload(),
        )
        return event
