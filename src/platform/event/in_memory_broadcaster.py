"""
In-memory Notification Broadcaster Implementation

Distributes ledger notifications from use cases to SSE endpoints.
"""

from typing import Any, Iterable, List, Optional

import attrs
from anyio import BrokenResourceError, ClosedResourceError, WouldBlock, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from src.platform.logging.loguru_io import Logger


@attrs.define
class _Subscriber:
    topics: Optional[frozenset[str]]
    send_stream: MemoryObjectSendStream[dict[str, Any]]
    receive_stream: MemoryObjectReceiveStream[dict[str, Any]]

    def wants(self, topic: str) -> bool:
        return self.topics is None or topic in self.topics


class InMemoryEventBroadcasterImpl:
    """
    In-memory pub/sub for ledger notifications

    Architecture:
    - Use Case -> broadcast() -> SSE Endpoint
    - Each subscriber owns one bounded memory stream and an optional topic filter

    Memory Management:
    - Stream max buffer: configured per broadcaster
    - Drop policy: drop for that subscriber if its stream is full (send_nowait raises WouldBlock)
    - Cleanup: unsubscribe closes both ends of the stream
    """

    def __init__(self, *, max_buffer_size: int = 100) -> None:
        self.max_buffer_size = max_buffer_size
        self._subscribers: List[_Subscriber] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    async def subscribe(
        self, *, topics: Optional[Iterable[str]] = None
    ) -> MemoryObjectReceiveStream[dict[str, Any]]:
        send_stream, receive_stream = create_memory_object_stream[dict[str, Any]](
            max_buffer_size=self.max_buffer_size
        )
        topic_set = frozenset(topics) if topics is not None else None
        self._subscribers.append(
            _Subscriber(
                topics=topic_set,
                send_stream=send_stream,
                receive_stream=receive_stream,
            )
        )

        scope = sorted(topic_set) if topic_set is not None else 'all topics'
        Logger.base.debug(
            f'📡 [BROADCASTER] Subscribed to {scope} '
            f'(total subscribers: {len(self._subscribers)})'
        )
        return receive_stream

    async def broadcast(self, *, topic: str, payload: dict[str, Any]) -> int:
        targets = [s for s in self._subscribers if s.wants(topic)]
        if not targets:
            Logger.base.debug(f'📡 [BROADCASTER] No subscribers for {topic}')
            return 0

        delivered = 0
        dropped = 0
        notification = {'topic': topic, 'payload': payload}

        for subscriber in targets:
            try:
                subscriber.send_stream.send_nowait(notification)
                delivered += 1
            except WouldBlock:
                # Slow consumer
                dropped += 1
                Logger.base.warning(f'⚠️ [BROADCASTER] Stream full, dropping {topic}')
            except (BrokenResourceError, ClosedResourceError):
                # Receiver went away without unsubscribing
                dropped += 1
                self._subscribers.remove(subscriber)

        Logger.base.info(
            f'📡 [BROADCASTER] Broadcast {topic}: delivered={delivered}, dropped={dropped}'
        )
        return delivered

    async def unsubscribe(self, *, stream: MemoryObjectReceiveStream[dict[str, Any]]) -> None:
        for subscriber in self._subscribers:
            if subscriber.receive_stream is stream:
                await subscriber.send_stream.aclose()
                await subscriber.receive_stream.aclose()
                self._subscribers.remove(subscriber)
                Logger.base.debug(
                    f'📡 [BROADCASTER] Unsubscribed (remaining: {len(self._subscribers)})'
                )
                break
