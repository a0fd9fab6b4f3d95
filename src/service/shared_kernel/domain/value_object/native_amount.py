"""
Native currency amount helpers.

All amounts inside the ledgers are integers in wei. These helpers convert the
decimal ether strings clients display (e.g. "0.1") to wei and back.
"""

from decimal import Decimal, InvalidOperation, localcontext

from src.service.shared_kernel.domain.ledger_errors import InvalidAmountError


WEI_PER_ETHER = 10**18
ETHER_DECIMALS = 18


def parse_ether(value: str | int | Decimal) -> int:
    """
    Convert an ether amount to wei.

    Raises:
        InvalidAmountError: Negative amounts, non-numeric input, or precision finer than 1 wei
    """
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidAmountError(f'Invalid ether amount: {value!r}')

    if not amount.is_finite():
        raise InvalidAmountError(f'Invalid ether amount: {value!r}')
    if amount < 0:
        raise InvalidAmountError(f'Amount cannot be negative: {value}')

    with localcontext() as ctx:
        # Exact: room for every digit of the amount plus the 18 decimal shift
        ctx.prec = len(amount.as_tuple().digits) + ETHER_DECIMALS + 2
        wei = amount * WEI_PER_ETHER

    if wei != wei.to_integral_value():
        raise InvalidAmountError(f'Amount has more than {ETHER_DECIMALS} decimals: {value}')
    return int(wei)


def format_ether(wei: int) -> str:
    """Convert wei to a plain decimal ether string without trailing zeros ("0.1", "2")."""
    if wei < 0:
        raise InvalidAmountError(f'Amount cannot be negative: {wei}')
    whole, fraction = divmod(wei, WEI_PER_ETHER)
    if not fraction:
        return str(whole)
    return f'{whole}.{str(fraction).rjust(ETHER_DECIMALS, "0").rstrip("0")}'
