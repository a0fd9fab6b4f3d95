from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.value_object.account_address import normalize_address
from src.service.shared_kernel.driving_adapter.http_controller.auth.caller_auth import (
    get_caller_address,
)
from src.service.ticket_ledger.app.command.set_authorized_minter_use_case import (
    SetAuthorizedMinterUseCase,
)
from src.service.ticket_ledger.app.command.transfer_ticket_use_case import TransferTicketUseCase
from src.service.ticket_ledger.app.query.get_ticket_balance_use_case import (
    GetTicketBalanceUseCase,
)
from src.service.ticket_ledger.app.query.get_ticket_info_use_case import GetTicketInfoUseCase
from src.service.ticket_ledger.driving_adapter.schema.ticket_schema import (
    OwnerTicketsResponse,
    SetMinterRequest,
    SetMinterResponse,
    TicketBalanceResponse,
    TicketResponse,
    TicketTransferRequest,
    TicketTransferResponse,
)


router = APIRouter()


# Static paths first so they are not captured by /{token_id}


@router.get('/balance', status_code=status.HTTP_200_OK)
@Logger.io
async def get_balance_of_event(
    owner: str,
    event_id: int,
    use_case: GetTicketBalanceUseCase = Depends(GetTicketBalanceUseCase.depends),
) -> TicketBalanceResponse:
    balance = use_case.balance_of_event(owner=owner, event_id=event_id)
    return TicketBalanceResponse(owner=normalize_address(owner), event_id=event_id, balance=balance)


@router.post('/minter', status_code=status.HTTP_200_OK)
@Logger.io
async def set_authorized_minter(
    request: SetMinterRequest,
    caller: str = Depends(get_caller_address),
    use_case: SetAuthorizedMinterUseCase = Depends(SetAuthorizedMinterUseCase.depends),
) -> SetMinterResponse:
    enabled = await use_case.execute(minter=request.minter, enabled=request.enabled, caller=caller)
    return SetMinterResponse(minter=normalize_address(request.minter), enabled=enabled)


@router.get('/owner/{owner}', status_code=status.HTTP_200_OK)
@Logger.io
async def list_tickets_of_owner(
    owner: str,
    use_case: GetTicketBalanceUseCase = Depends(GetTicketBalanceUseCase.depends),
) -> OwnerTicketsResponse:
    holdings = use_case.holdings_of(owner=owner)
    return OwnerTicketsResponse(
        owner=holdings.owner, balance=holdings.balance, token_ids=holdings.token_ids
    )


@router.get('/{token_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket_info(
    token_id: int,
    use_case: GetTicketInfoUseCase = Depends(GetTicketInfoUseCase.depends),
) -> TicketResponse:
    ticket = use_case.get_by_token_id(token_id=token_id)
    return TicketResponse(
        token_id=ticket.token_id,
        event_id=ticket.event_id,
        owner=ticket.owner,
        original_owner=ticket.original_owner,
        is_used=ticket.is_used,
    )


@router.post('/{token_id}/transfer', status_code=status.HTTP_200_OK)
@Logger.io
async def transfer_ticket(
    token_id: int,
    request: TicketTransferRequest,
    caller: str = Depends(get_caller_address),
    use_case: TransferTicketUseCase = Depends(TransferTicketUseCase.depends),
) -> TicketTransferResponse:
    transferred = await use_case.execute(to=request.to, token_id=token_id, caller=caller)
    return TicketTransferResponse(
        token_id=transferred.token_id,
        event_id=transferred.event_id,
        from_address=transferred.from_address,
        to=transferred.to_address,
    )
