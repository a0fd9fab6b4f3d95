from typing import Any, Dict

from src.platform.event.i_in_memory_broadcaster import IInMemoryEventBroadcaster
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.enum.notification_topic import NotificationTopic


class NotificationPublisherImpl:
    def __init__(self, *, broadcaster: IInMemoryEventBroadcaster) -> None:
        self.broadcaster = broadcaster

    @Logger.io
    async def publish(self, *, topic: NotificationTopic, payload: Dict[str, Any]) -> int:
        delivered = await self.broadcaster.broadcast(topic=topic.value, payload=payload)
        Logger.base.info(f'📤 [NOTIFY] {topic.value} -> {delivered} subscriber(s)')
        return delivered
