from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticket_ledger.app.dto.ticket_detail import TicketDetail
from src.service.ticket_ledger.domain.ticket_ledger import TicketLedger


class GetTicketInfoUseCase:
    def __init__(self, *, ticket_ledger: TicketLedger) -> None:
        self.ticket_ledger = ticket_ledger

    @classmethod
    @inject
    def depends(
        cls, ticket_ledger: TicketLedger = Depends(Provide[Container.ticket_ledger])
    ) -> Self:
        return cls(ticket_ledger=ticket_ledger)

    @Logger.io
    def get_by_token_id(self, *, token_id: int) -> TicketDetail:
        """Raises UnknownTicketError for a token that was never minted."""
        info = self.ticket_ledger.get_ticket_info(token_id=token_id)
        return TicketDetail(
            token_id=token_id,
            event_id=info.event_id,
            owner=self.ticket_ledger.owner_of(token_id=token_id),
            original_owner=info.original_owner,
            is_used=info.is_used,
        )
