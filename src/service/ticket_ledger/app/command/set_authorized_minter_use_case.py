from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.platform.state.transaction_lock import TransactionLock
from src.service.ticket_ledger.domain.ticket_ledger import TicketLedger


class SetAuthorizedMinterUseCase:
    def __init__(self, *, ticket_ledger: TicketLedger, transaction_lock: TransactionLock) -> None:
        self.ticket_ledger = ticket_ledger
        self.transaction_lock = transaction_lock

    @classmethod
    @inject
    def depends(
        cls,
        ticket_ledger: TicketLedger = Depends(Provide[Container.ticket_ledger]),
        transaction_lock: TransactionLock = Depends(Provide[Container.transaction_lock]),
    ) -> Self:
        return cls(ticket_ledger=ticket_ledger, transaction_lock=transaction_lock)

    @Logger.io
    async def execute(self, *, minter: str, enabled: bool, caller: str) -> bool:
        """
        Grant or revoke mint permission on the ticket ledger.

        Returns:
            The minter's authorization state after the call
        """
        with metrics.track_operation(operation='set_authorized_minter'):
            async with self.transaction_lock.hold(operation='set_authorized_minter'):
                self.ticket_ledger.set_authorized_minter(
                    minter=minter, enabled=enabled, caller=caller
                )
        return self.ticket_ledger.is_authorized_minter(minter=minter)
