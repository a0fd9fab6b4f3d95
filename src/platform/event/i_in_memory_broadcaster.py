"""
In-memory Notification Broadcaster Interface

Provides pub/sub for ledger notifications (event created, ticket purchased, ...)
so that SSE endpoints in the same process can stream them to clients.
"""

from typing import Any, Iterable, Optional, Protocol

from anyio.streams.memory import MemoryObjectReceiveStream


class IInMemoryEventBroadcaster(Protocol):
    """
    Interface for in-memory notification broadcasting

    Uses anyio's MemoryObjectStream for async support and type safety.
    """

    async def subscribe(
        self, *, topics: Optional[Iterable[str]] = None
    ) -> MemoryObjectReceiveStream[dict[str, Any]]:
        """
        Subscribe to notifications

        Args:
            topics: Topics to receive; None subscribes to every topic

        Returns:
            MemoryObjectReceiveStream that will receive notification dictionaries
        """
        ...

    async def broadcast(self, *, topic: str, payload: dict[str, Any]) -> int:
        """
        Broadcast a notification to all subscribers of the topic

        Returns:
            Number of subscribers the notification was delivered to

        Note:
            - Silently ignores if no subscribers exist
            - Drops the notification for a subscriber whose stream is full
        """
        ...

    async def unsubscribe(self, *, stream: MemoryObjectReceiveStream[dict[str, Any]]) -> None:
        """Remove a subscriber and close its streams. Safe to call twice."""
        ...
