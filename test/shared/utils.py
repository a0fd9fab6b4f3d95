from typing import Any, Dict

from prometheus_client import REGISTRY

from src.platform.config.core_setting import settings


class FixedClock:
    """Chain clock that only moves when a test moves it"""

    def __init__(self, *, now: int) -> None:
        self._now = now

    def now(self) -> int:
        return self._now

    def advance(self, seconds: int) -> None:
        self._now += seconds


def caller_headers(address: str) -> Dict[str, str]:
    return {settings.CALLER_ADDRESS_HEADER: address}


def extract_table_data(step) -> Dict[str, Any]:
    rows = step.data_table.rows
    headers = [cell.value for cell in rows[0].cells]
    values = [cell.value for cell in rows[1].cells]
    return dict(zip(headers, values, strict=True))


def assert_error_response(response, expected_status: int, expected_error: str) -> None:
    response_text = getattr(response, 'text', 'N/A')
    assert response.status_code == expected_status, (
        f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )
    assert response.json()['error'] == expected_error, response_text


def committed_transactions() -> float:
    """Process-wide count of transactions committed under the serial lock"""
    return REGISTRY.get_sample_value('ledger_transactions_committed_total') or 0.0
