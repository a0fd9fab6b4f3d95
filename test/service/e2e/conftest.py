"""
BDD Step Definitions for the end-to-end ticketing flow

Drives the HTTP API only: organizer creates an event, buyers purchase,
cancel and transfer, and every check reads state back through the API.
"""

from typing import Any

from fastapi.testclient import TestClient
import httpx
import pytest
from pytest_bdd import given, parsers, scenarios, then, when
from pytest_bdd.model import Step

from src.platform.constant.route_constant import (
    EVENT_BASE,
    EVENT_CANCEL,
    EVENT_GET,
    EVENT_LIST,
    EVENT_PURCHASE,
    TICKET_BALANCE,
    TICKET_TRANSFER,
)
from src.service.shared_kernel.domain.value_object.native_amount import parse_ether
from test.shared.utils import caller_headers, extract_table_data
from test.test_constants import (
    ANOTHER_BUYER_ADDRESS,
    BUYER_ADDRESS,
    FUTURE_DATE,
    ORGANIZER_ADDRESS,
)


scenarios('ticketing_flow.feature')


@pytest.fixture
def context() -> dict[str, Any]:
    """Shared test context for storing state between steps"""
    return {}


def _purchase(client: TestClient, context: dict[str, Any], quantity: int, payment: str):
    return client.post(
        EVENT_PURCHASE.format(event_id=context['event']['id']),
        json={'quantity': quantity, 'payment': parse_ether(payment)},
        headers=caller_headers(BUYER_ADDRESS),
    )


def _balance(client: TestClient, context: dict[str, Any], owner: str) -> int:
    response = client.get(
        TICKET_BALANCE, params={'owner': owner, 'event_id': context['event']['id']}
    )
    assert response.status_code == 200, response.text
    return response.json()['balance']


# ============ Given Steps ============


@given('an organizer has created an event with')
def given_event_created(step: Step, client: TestClient, context: dict[str, Any]) -> None:
    data = extract_table_data(step)
    request = {
        'name': data['name'],
        'description': data['description'],
        'date': FUTURE_DATE,
        'ticket_price': data['ticket_price'],
        'max_tickets': int(data['max_tickets']),
        'venue': data['venue'],
    }
    response = client.post(EVENT_BASE, json=request, headers=caller_headers(ORGANIZER_ADDRESS))
    assert response.status_code == 201, response.text
    context['event'] = response.json()


@given(parsers.parse('the buyer bought {quantity:d} tickets paying {payment} ether'))
def given_buyer_bought(
    quantity: int, payment: str, client: TestClient, context: dict[str, Any]
) -> None:
    response = _purchase(client, context, quantity, payment)
    assert response.status_code == 200, response.text


# ============ When Steps ============


@when(parsers.parse('the buyer buys {quantity:d} tickets paying {payment} ether'))
def when_buyer_buys(
    quantity: int, payment: str, client: TestClient, context: dict[str, Any]
) -> None:
    context['response'] = _purchase(client, context, quantity, payment)


@when('the organizer cancels the event')
def when_organizer_cancels(client: TestClient, context: dict[str, Any]) -> None:
    context['response'] = client.post(
        EVENT_CANCEL.format(event_id=context['event']['id']),
        headers=caller_headers(ORGANIZER_ADDRESS),
    )


@when(parsers.parse('the buyer transfers ticket {token_id:d} to another buyer'))
def when_buyer_transfers(token_id: int, client: TestClient, context: dict[str, Any]) -> None:
    context['response'] = client.post(
        TICKET_TRANSFER.format(token_id=token_id),
        json={'to': ANOTHER_BUYER_ADDRESS},
        headers=caller_headers(BUYER_ADDRESS),
    )


# ============ Then Steps ============


@then(parsers.parse('the response status code should be {status_code:d}'))
def then_response_status_code(status_code: int, context: dict[str, Any]) -> None:
    response: httpx.Response = context['response']
    assert response.status_code == status_code, (
        f'Expected {status_code}, got {response.status_code}: {response.text}'
    )


@then(parsers.parse('the error should be "{error}"'))
def then_error_is(error: str, context: dict[str, Any]) -> None:
    assert context['response'].json()['error'] == error


@then(parsers.parse('the event should have {sold:d} tickets sold'))
def then_event_tickets_sold(sold: int, client: TestClient, context: dict[str, Any]) -> None:
    event = client.get(EVENT_GET.format(event_id=context['event']['id'])).json()
    assert event['tickets_sold'] == sold
    assert event['tickets_available'] == event['max_tickets'] - sold


@then(parsers.parse('the buyer should hold {balance:d} tickets for the event'))
def then_buyer_balance(balance: int, client: TestClient, context: dict[str, Any]) -> None:
    assert _balance(client, context, BUYER_ADDRESS) == balance


@then(parsers.parse('another buyer should hold {balance:d} tickets for the event'))
def then_another_buyer_balance(
    balance: int, client: TestClient, context: dict[str, Any]
) -> None:
    assert _balance(client, context, ANOTHER_BUYER_ADDRESS) == balance


@then('the event should not be listed as active')
def then_event_not_active(client: TestClient, context: dict[str, Any]) -> None:
    active_ids = [event['id'] for event in client.get(EVENT_LIST).json()]
    assert context['event']['id'] not in active_ids
