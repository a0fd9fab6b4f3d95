"""
Ticket Ledger - Aggregate Root for ticket ownership

[DDD Design Principles]
- TicketLedger is the Aggregate Root; Ticket is an entity within it
- Only authorized minters (the Event Registry) can issue tickets
- Every operation validates fully before mutating anything

[Business Invariants]
- Token ids are sequential from 0 and never reused
- balance_of_event(owner, event_id) equals the number of tickets of that
  event currently owned by owner
- original_owner and event_id of a ticket never change
"""

from typing import Dict, List, Set, Tuple

from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.ledger_errors import (
    InvalidQuantityError,
    NotAuthorizedError,
    NotOwnerError,
    NotTicketOwnerError,
    UnknownTicketError,
)
from src.service.shared_kernel.domain.value_object.account_address import (
    normalize_address,
    normalize_recipient,
    short_address,
)
from src.service.ticket_ledger.domain.domain_event.ticket_transferred_event import (
    TicketTransferredEvent,
)
from src.service.ticket_ledger.domain.entity.ticket_entity import Ticket
from src.service.ticket_ledger.domain.value_object.ticket_info import TicketInfo


class TicketLedger:
    def __init__(self, *, owner: str) -> None:
        self._owner = normalize_address(owner)
        self._authorized_minters: Set[str] = set()
        self._tickets: Dict[int, Ticket] = {}
        self._balances: Dict[Tuple[str, int], int] = {}
        self._next_token_id = 0

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def ticket_count(self) -> int:
        return self._next_token_id

    # ========== Minter authorization ==========

    @Logger.io
    def set_authorized_minter(self, *, minter: str, enabled: bool, caller: str) -> None:
        """
        Grant or revoke mint permission. Only the ledger owner may call this.

        Raises:
            NotOwnerError: caller is not the ledger owner
        """
        if normalize_address(caller) != self._owner:
            raise NotOwnerError()

        minter = normalize_address(minter)
        if enabled:
            self._authorized_minters.add(minter)
        else:
            self._authorized_minters.discard(minter)
        Logger.base.info(
            f'🔑 [LEDGER] Minter {short_address(minter)} {"enabled" if enabled else "disabled"}'
        )

    def is_authorized_minter(self, *, minter: str) -> bool:
        return normalize_address(minter) in self._authorized_minters

    # ========== Mint ==========

    @Logger.io
    def mint(self, *, to: str, event_id: int, quantity: int, caller: str) -> List[int]:
        """
        Issue `quantity` new tickets of `event_id` to `to`.

        Returns:
            Token ids of the new tickets, in ascending order

        Raises:
            NotAuthorizedError: caller is not an enabled minter
            InvalidQuantityError: quantity <= 0
            InvalidAddressError: `to` is malformed or the zero address
        """
        if normalize_address(caller) not in self._authorized_minters:
            raise NotAuthorizedError()
        if quantity <= 0:
            raise InvalidQuantityError()
        to = normalize_recipient(to)

        token_ids: List[int] = []
        for _ in range(quantity):
            token_id = self._next_token_id
            self._tickets[token_id] = Ticket.mint(token_id=token_id, event_id=event_id, to=to)
            token_ids.append(token_id)
            self._next_token_id += 1

        key = (to, event_id)
        self._balances[key] = self._balances.get(key, 0) + quantity
        Logger.base.info(
            f'🎟️ [LEDGER] Minted {quantity} ticket(s) of event {event_id} '
            f'to {short_address(to)}: {token_ids}'
        )
        return token_ids

    # ========== Reads ==========

    def balance_of_event(self, *, owner: str, event_id: int) -> int:
        return self._balances.get((normalize_address(owner), event_id), 0)

    def balance_of(self, *, owner: str) -> int:
        """Total tickets held by owner across all events"""
        owner = normalize_address(owner)
        return sum(count for (account, _), count in self._balances.items() if account == owner)

    def tokens_of_owner(self, *, owner: str) -> List[int]:
        owner = normalize_address(owner)
        return [token_id for token_id, ticket in self._tickets.items() if ticket.owner == owner]

    def get_ticket_info(self, *, token_id: int) -> TicketInfo:
        ticket = self._get_ticket(token_id=token_id)
        return TicketInfo(
            event_id=ticket.event_id,
            original_owner=ticket.original_owner,
            is_used=ticket.is_used,
        )

    def owner_of(self, *, token_id: int) -> str:
        return self._get_ticket(token_id=token_id).owner

    def _get_ticket(self, *, token_id: int) -> Ticket:
        ticket = self._tickets.get(token_id)
        if ticket is None:
            raise UnknownTicketError(token_id)
        return ticket

    # ========== Transfer ==========

    @Logger.io
    def transfer_ticket(self, *, to: str, token_id: int, caller: str) -> TicketTransferredEvent:
        """
        Move one ticket from its current owner (the caller) to `to`.

        Raises:
            UnknownTicketError: token was never minted
            NotTicketOwnerError: caller does not currently own the ticket
            InvalidAddressError: `to` is malformed or the zero address
        """
        ticket = self._get_ticket(token_id=token_id)
        sender = normalize_address(caller)
        if ticket.owner != sender:
            raise NotTicketOwnerError()
        to = normalize_recipient(to)

        if to != sender:
            self._tickets[token_id] = ticket.transfer_to(new_owner=to)
            from_key = (sender, ticket.event_id)
            self._balances[from_key] -= 1
            to_key = (to, ticket.event_id)
            self._balances[to_key] = self._balances.get(to_key, 0) + 1

        Logger.base.info(
            f'🔁 [LEDGER] Ticket {token_id} transferred '
            f'{short_address(sender)} -> {short_address(to)}'
        )
        return TicketTransferredEvent(
            token_id=token_id,
            event_id=ticket.event_id,
            from_address=sender,
            to_address=to,
        )
