"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.event.in_memory_broadcaster import InMemoryEventBroadcasterImpl
from src.platform.logging.loguru_io import Logger
from src.platform.state.chain_clock import SystemChainClock
from src.platform.state.transaction_lock import TransactionLock
from src.service.event_registry.domain.event_registry import EventRegistry
from src.service.shared_kernel.driven_adapter.notification_publisher_impl import (
    NotificationPublisherImpl,
)
from src.service.ticket_ledger.domain.ticket_ledger import TicketLedger


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Chain time source (overridden with a fixed clock in tests)
    clock = providers.Singleton(SystemChainClock)

    # One lock for every state-mutating ledger operation
    transaction_lock = providers.Singleton(TransactionLock)

    # In-memory pub/sub for SSE notifications
    broadcaster = providers.Singleton(
        InMemoryEventBroadcasterImpl,
        max_buffer_size=config_service.provided.NOTIFICATION_BUFFER_SIZE,
    )
    notification_publisher = providers.Singleton(
        NotificationPublisherImpl, broadcaster=broadcaster
    )

    # Ledgers (in-memory state, one instance per process)
    ticket_ledger = providers.Singleton(
        TicketLedger, owner=config_service.provided.DEPLOYER_ADDRESS
    )
    event_registry = providers.Singleton(
        EventRegistry,
        address=config_service.provided.REGISTRY_ADDRESS,
        ticket_minter=ticket_ledger,
        clock=clock,
    )


container = Container()


def setup() -> None:
    """
    Deploy the ledgers: the ticket ledger is owned by the deployer account
    and authorizes the event registry as its minter.
    """
    ticket_ledger = container.ticket_ledger()
    event_registry = container.event_registry()
    ticket_ledger.set_authorized_minter(
        minter=event_registry.address, enabled=True, caller=ticket_ledger.owner
    )
    Logger.base.info(
        f'🔑 [DEPLOY] Registry {event_registry.address} authorized on ledger '
        f'owned by {ticket_ledger.owner}'
    )


def cleanup() -> None:
    container.reset_singletons()
