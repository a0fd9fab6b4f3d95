"""
Unit tests for TransferTicketUseCase

Focus:
1. Successful transfer publishes ticket_transferred after commit
2. Rejected transfer publishes nothing and leaves the ledger unchanged
"""

from unittest.mock import AsyncMock

import pytest

from src.platform.state.transaction_lock import TransactionLock
from src.service.shared_kernel.domain.enum.notification_topic import NotificationTopic
from src.service.shared_kernel.domain.ledger_errors import NotTicketOwnerError
from src.service.ticket_ledger.app.command.set_authorized_minter_use_case import (
    SetAuthorizedMinterUseCase,
)
from src.service.ticket_ledger.app.command.transfer_ticket_use_case import TransferTicketUseCase
from test.shared.utils import committed_transactions
from test.test_constants import (
    ANOTHER_BUYER_ADDRESS,
    BUYER_ADDRESS,
    DEPLOYER_ADDRESS,
    ORGANIZER_ADDRESS,
    REGISTRY_ADDRESS,
)


class TestTransferTicket:
    @pytest.fixture
    def notification_publisher(self):
        publisher = AsyncMock()
        publisher.publish = AsyncMock(return_value=1)
        return publisher

    @pytest.fixture
    def use_case(self, ticket_ledger, notification_publisher):
        ticket_ledger.set_authorized_minter(
            minter=REGISTRY_ADDRESS, enabled=True, caller=DEPLOYER_ADDRESS
        )
        ticket_ledger.mint(to=BUYER_ADDRESS, event_id=0, quantity=1, caller=REGISTRY_ADDRESS)
        return TransferTicketUseCase(
            ticket_ledger=ticket_ledger,
            transaction_lock=TransactionLock(),
            notification_publisher=notification_publisher,
        )

    @pytest.mark.asyncio
    async def test_transfer_publishes_notification(self, use_case, notification_publisher):
        """
        Given: buyer owns token 0
        When: buyer transfers it to another account
        Then:
          - the ledger reflects the new owner
          - one ticket_transferred notification is published
        """
        committed_before = committed_transactions()
        transferred = await use_case.execute(
            to=ANOTHER_BUYER_ADDRESS, token_id=0, caller=BUYER_ADDRESS
        )

        assert use_case.ticket_ledger.owner_of(token_id=0) == ANOTHER_BUYER_ADDRESS
        assert committed_transactions() - committed_before == 1
        notification_publisher.publish.assert_awaited_once_with(
            topic=NotificationTopic.TICKET_TRANSFERRED,
            payload={
                'token_id': 0,
                'event_id': 0,
                'from': BUYER_ADDRESS,
                'to': ANOTHER_BUYER_ADDRESS,
            },
        )
        assert transferred.to_address == ANOTHER_BUYER_ADDRESS

    @pytest.mark.asyncio
    async def test_rejected_transfer_publishes_nothing(self, use_case, notification_publisher):
        with pytest.raises(NotTicketOwnerError):
            await use_case.execute(to=ORGANIZER_ADDRESS, token_id=0, caller=ANOTHER_BUYER_ADDRESS)

        notification_publisher.publish.assert_not_awaited()
        assert use_case.ticket_ledger.owner_of(token_id=0) == BUYER_ADDRESS
        assert not use_case.transaction_lock.locked


class TestSetAuthorizedMinter:
    @pytest.mark.asyncio
    async def test_owner_toggles_minter(self, ticket_ledger):
        use_case = SetAuthorizedMinterUseCase(
            ticket_ledger=ticket_ledger, transaction_lock=TransactionLock()
        )

        assert await use_case.execute(
            minter=ORGANIZER_ADDRESS, enabled=True, caller=DEPLOYER_ADDRESS
        )
        assert not await use_case.execute(
            minter=ORGANIZER_ADDRESS, enabled=False, caller=DEPLOYER_ADDRESS
        )
