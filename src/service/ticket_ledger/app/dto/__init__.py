"""Application layer DTOs"""

from src.service.ticket_ledger.app.dto.ticket_detail import OwnerHoldings, TicketDetail

__all__ = ['OwnerHoldings', 'TicketDetail']
