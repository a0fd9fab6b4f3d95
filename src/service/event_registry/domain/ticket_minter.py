from typing import List, Protocol


class ITicketMinter(Protocol):
    """The part of the ticket ledger the registry relies on"""

    def mint(self, *, to: str, event_id: int, quantity: int, caller: str) -> List[int]: ...

    def balance_of_event(self, *, owner: str, event_id: int) -> int: ...
