"""
Buy Tickets Use Case

Flow:
1. Under the transaction lock, the registry runs every purchase check, has
   the ticket ledger mint to the buyer, then records the sale
2. After commit, publish ticket_purchased and update metrics

Any failure in step 1 leaves tickets_sold and all balances unchanged.
"""

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.platform.state.transaction_lock import TransactionLock
from src.service.event_registry.domain.domain_event.registry_events import TicketPurchased
from src.service.event_registry.domain.event_registry import EventRegistry
from src.service.event_registry.domain.value_object.purchase_receipt import PurchaseReceipt
from src.service.shared_kernel.app.interface.i_notification_publisher import (
    INotificationPublisher,
)
from src.service.shared_kernel.domain.enum.notification_topic import NotificationTopic


class BuyTicketsUseCase:
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
    async def buy_tickets(
        self, *, event_id: int, quantity: int, payment: int, caller: str
    ) -> PurchaseReceipt:
        with metrics.track_operation(operation='buy_tickets'):
            async with self.transaction_lock.hold(operation='buy_tickets'):
                receipt = self.event_registry.buy_tickets(
                    event_id=event_id, quantity=quantity, payment=payment, caller=caller
                )
                event = self.event_registry.get_event(event_id=event_id)

        if receipt.refund:
            Logger.base.info(f'💸 [PURCHASE] Refunding {receipt.refund} wei overpayment')

        metrics.record_purchase(
            event_id=event_id, quantity=quantity, tickets_available=event.tickets_available
        )
        await self.notification_publisher.publish(
            topic=NotificationTopic.TICKET_PURCHASED,
            payload=TicketPurchased.from_receipt(receipt=receipt).to_payload(),
        )
        return receipt
