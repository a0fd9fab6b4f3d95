from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.platform.state.transaction_lock import TransactionLock
from src.service.shared_kernel.app.interface.i_notification_publisher import (
    INotificationPublisher,
)
from src.service.shared_kernel.domain.enum.notification_topic import NotificationTopic
from src.service.ticket_ledger.domain.domain_event.ticket_transferred_event import (
    TicketTransferredEvent,
)
from src.service.ticket_ledger.domain.ticket_ledger import TicketLedger


class TransferTicketUseCase:
    """
    Transfer one ticket to another account.

    Flow:
    1. Under the transaction lock, the ledger validates ownership and moves the ticket
    2. After commit, publish ticket_transferred
    """

    def __init__(
        self,
        *,
        ticket_ledger: TicketLedger,
        transaction_lock: TransactionLock,
        notification_publisher: INotificationPublisher,
    ) -> None:
        self.ticket_ledger = ticket_ledger
        self.transaction_lock = transaction_lock
        self.notification_publisher = notification_publisher

    @classmethod
    @inject
    def depends(
        cls,
        ticket_ledger: TicketLedger = Depends(Provide[Container.ticket_ledger]),
        transaction_lock: TransactionLock = Depends(Provide[Container.transaction_lock]),
        notification_publisher: INotificationPublisher = Depends(
            Provide[Container.notification_publisher]
        ),
    ) -> Self:
        return cls(
            ticket_ledger=ticket_ledger,
            transaction_lock=transaction_lock,
            notification_publisher=notification_publisher,
        )

    @Logger.io
    async def execute(self, *, to: str, token_id: int, caller: str) -> TicketTransferredEvent:
        with metrics.track_operation(operation='transfer_ticket'):
            async with self.transaction_lock.hold(operation='transfer_ticket'):
                transferred = self.ticket_ledger.transfer_ticket(
                    to=to, token_id=token_id, caller=caller
                )

        metrics.ticket_transfers.inc()
        await self.notification_publisher.publish(
            topic=NotificationTopic.TICKET_TRANSFERRED, payload=transferred.to_payload()
        )
        return transferred
