"""
Test Configuration and Fixtures

- Unit tests (test/**/unit/): build ledgers and use cases directly
- Integration tests: go through the FastAPI app with a TestClient; every
  test gets freshly deployed ledgers
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Logging config reads TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.service.event_registry.domain.event_registry import EventRegistry  # noqa: E402
from src.service.ticket_ledger.domain.ticket_ledger import TicketLedger  # noqa: E402
from test.shared.utils import FixedClock  # noqa: E402
from test.test_constants import DEPLOYER_ADDRESS, REGISTRY_ADDRESS, TEST_NOW  # noqa: E402


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        path = str(item.path)
        if '/unit/' in path or '\\unit\\' in path:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Domain Fixtures (no app, no container)
# =============================================================================
@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(now=TEST_NOW)


@pytest.fixture
def ticket_ledger() -> TicketLedger:
    return TicketLedger(owner=DEPLOYER_ADDRESS)


@pytest.fixture
def event_registry(ticket_ledger: TicketLedger, clock: FixedClock) -> EventRegistry:
    """Registry deployed and authorized as minter on ticket_ledger"""
    registry = EventRegistry(address=REGISTRY_ADDRESS, ticket_minter=ticket_ledger, clock=clock)
    ticket_ledger.set_authorized_minter(
        minter=REGISTRY_ADDRESS, enabled=True, caller=DEPLOYER_ADDRESS
    )
    return registry


# =============================================================================
# HTTP Client
# =============================================================================
@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
