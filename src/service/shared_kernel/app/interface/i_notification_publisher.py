"""
Notification Publisher Interface

Abstraction for announcing committed ledger changes (the equivalent of
contract event logs) to live subscribers.

Follows Dependency Inversion Principle:
- Use cases depend on this interface
- The platform in-memory broadcaster backs the implementation
"""

from typing import Any, Dict, Protocol

from src.service.shared_kernel.domain.enum.notification_topic import NotificationTopic


class INotificationPublisher(Protocol):
    async def publish(self, *, topic: NotificationTopic, payload: Dict[str, Any]) -> int:
        """
        Publish one notification after the change it describes has committed

        Returns:
            Number of subscribers the notification was delivered to

        Note:
            Non-blocking; with no subscribers the notification is discarded
        """
        ...
