import attrs


@attrs.define(frozen=True)
class TicketInfo:
    """Ticket Info (Value Object) - what get_ticket_info reports about a token"""

    event_id: int
    original_owner: str
    is_used: bool
