import attrs

from src.platform.logging.loguru_io import Logger


@attrs.define(frozen=True)
class Ticket:
    token_id: int
    event_id: int
    owner: str
    original_owner: str
    is_used: bool = False

    @classmethod
    def mint(cls, *, token_id: int, event_id: int, to: str) -> 'Ticket':
        return cls(token_id=token_id, event_id=event_id, owner=to, original_owner=to)

    @Logger.io
    def transfer_to(self, *, new_owner: str) -> 'Ticket':
        # original_owner and event_id never change after mint
        return attrs.evolve(self, owner=new_owner)
