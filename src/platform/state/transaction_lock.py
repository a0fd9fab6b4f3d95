"""
Serial Transaction Lock

Every state-mutating ledger operation runs while holding this lock, so
purchases, cancellations, mints and transfers are applied one at a time
in the order they were accepted.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import time

import anyio

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics


class TransactionLock:
    def __init__(self) -> None:
        self._lock = anyio.Lock()

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    @asynccontextmanager
    async def hold(self, *, operation: str) -> AsyncIterator[None]:
        """
        Hold the lock for the duration of one operation.

        Args:
            operation: Operation name, used for logging only
        """
        start = time.perf_counter()
        async with self._lock:
            waited_ms = (time.perf_counter() - start) * 1000
            if waited_ms > 50:
                Logger.base.warning(f'⏳ [TX] {operation} waited {waited_ms:.1f}ms for lock')
            yield
            metrics.transactions_committed.inc()
