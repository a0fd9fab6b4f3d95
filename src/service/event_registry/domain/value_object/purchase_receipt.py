from typing import List

import attrs

from src.service.event_registry.domain.entity.event_entity import Event


@attrs.define(frozen=True)
class PurchaseReceipt:
    """
    Purchase Receipt (Value Object)

    `refund` is the part of the payment above `total_cost`; it is returned
    to the buyer, never kept by the registry.
    """

    event_id: int
    buyer: str
    quantity: int
    unit_price: int
    total_cost: int
    refund: int
    token_ids: List[int]


@attrs.define(frozen=True)
class AccountTicketHolding:
    event: Event
    balance: int
