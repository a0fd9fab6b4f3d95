"""
Stream Notifications Use Case

SSE streaming of ledger notifications as they are published.
"""

from collections.abc import AsyncGenerator
from typing import Any, Dict, Iterable, Optional, Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.event.i_in_memory_broadcaster import IInMemoryEventBroadcaster
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics


class StreamNotificationsUseCase:
    def __init__(self, *, broadcaster: IInMemoryEventBroadcaster) -> None:
        self.broadcaster = broadcaster

    @classmethod
    @inject
    def depends(
        cls,
        broadcaster: IInMemoryEventBroadcaster = Depends(Provide[Container.broadcaster]),
    ) -> Self:
        return cls(broadcaster=broadcaster)

    async def stream(
        self, *, topics: Optional[Iterable[str]] = None
    ) -> AsyncGenerator[Dict[str, Any], None]:
        """
        Yields:
            Dict with `topic` and `payload` for every notification published after subscribing
        """
        stream = await self.broadcaster.subscribe(topics=topics)
        metrics.notification_subscribers.inc()
        try:
            async for notification in stream:
                yield notification
        except anyio.get_cancelled_exc_class():
            Logger.base.info('[SSE] Client disconnected from notifications')
            raise
        finally:
            metrics.notification_subscribers.dec()
            await self.broadcaster.unsubscribe(stream=stream)
