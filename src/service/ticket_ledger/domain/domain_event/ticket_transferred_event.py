"""
Ticket Ledger Domain Events
"""

from typing import Any, Dict

import attrs


@attrs.define
class TicketTransferredEvent:
    """Domain event fired when a ticket changes hands"""

    token_id: int
    event_id: int
    from_address: str
    to_address: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            'token_id': self.token_id,
            'event_id': self.event_id,
            'from': self.from_address,
            'to': self.to_address,
        }
