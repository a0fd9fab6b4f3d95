from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.value_object.account_address import normalize_address
from src.service.ticket_ledger.app.dto.ticket_detail import OwnerHoldings
from src.service.ticket_ledger.domain.ticket_ledger import TicketLedger


class GetTicketBalanceUseCase:
    def __init__(self, *, ticket_ledger: TicketLedger) -> None:
        self.ticket_ledger = ticket_ledger

    @classmethod
    @inject
    def depends(
        cls, ticket_ledger: TicketLedger = Depends(Provide[Container.ticket_ledger])
    ) -> Self:
        return cls(ticket_ledger=ticket_ledger)

    @Logger.io
    def balance_of_event(self, *, owner: str, event_id: int) -> int:
        return self.ticket_ledger.balance_of_event(owner=owner, event_id=event_id)

    @Logger.io
    def holdings_of(self, *, owner: str) -> OwnerHoldings:
        return OwnerHoldings(
            owner=normalize_address(owner),
            balance=self.ticket_ledger.balance_of(owner=owner),
            token_ids=self.ticket_ledger.tokens_of_owner(owner=owner),
        )
