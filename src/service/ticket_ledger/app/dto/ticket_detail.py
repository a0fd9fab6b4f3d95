from typing import List

import attrs


@attrs.define(frozen=True)
class TicketDetail:
    """Ticket info plus its current owner"""

    token_id: int
    event_id: int
    owner: str
    original_owner: str
    is_used: bool


@attrs.define(frozen=True)
class OwnerHoldings:
    owner: str
    balance: int
    token_ids: List[int]
