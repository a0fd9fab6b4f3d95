"""
Chain Clock

Source of "current chain time" (integer seconds since epoch) for
schedule validation and read-time event classification.
"""

import time
from typing import Protocol


class IChainClock(Protocol):
    def now(self) -> int: ...


class SystemChainClock:
    """Wall-clock time truncated to whole seconds, like a block timestamp."""

    def now(self) -> int:
        return int(time.time())
