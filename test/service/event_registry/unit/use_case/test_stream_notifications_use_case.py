from typing import Any

import anyio
from anyio import fail_after
import pytest

from src.platform.event.in_memory_broadcaster import InMemoryEventBroadcasterImpl
from src.service.event_registry.app.query.stream_notifications_use_case import (
    StreamNotificationsUseCase,
)
from src.service.shared_kernel.domain.enum.notification_topic import NotificationTopic
from src.service.shared_kernel.driven_adapter.notification_publisher_impl import (
    NotificationPublisherImpl,
)


class TestStreamNotifications:
    @pytest.fixture
    def broadcaster(self):
        return InMemoryEventBroadcasterImpl(max_buffer_size=10)

    @pytest.mark.asyncio
    async def test_stream_yields_published_notifications(self, broadcaster):
        """
        Given: a client streaming only ticket_purchased
        When: event_created and then ticket_purchased are published
        Then:
          - only ticket_purchased reaches the client
          - closing the stream unsubscribes it
        """
        use_case = StreamNotificationsUseCase(broadcaster=broadcaster)
        publisher = NotificationPublisherImpl(broadcaster=broadcaster)
        stream = use_case.stream(topics=[NotificationTopic.TICKET_PURCHASED.value])
        received: list[dict[str, Any]] = []

        async def _consume() -> None:
            async for notification in stream:
                received.append(notification)
                break

        with fail_after(1.0):
            async with anyio.create_task_group() as tg:
                tg.start_soon(_consume)
                while broadcaster.subscriber_count == 0:
                    await anyio.sleep(0)

                skipped = await publisher.publish(
                    topic=NotificationTopic.EVENT_CREATED, payload={'event_id': 0}
                )
                delivered = await publisher.publish(
                    topic=NotificationTopic.TICKET_PURCHASED,
                    payload={'event_id': 0, 'tickets_count': 2},
                )

        assert skipped == 0
        assert delivered == 1
        assert received == [
            {'topic': 'ticket_purchased', 'payload': {'event_id': 0, 'tickets_count': 2}}
        ]

        await stream.aclose()
        assert broadcaster.subscriber_count == 0
