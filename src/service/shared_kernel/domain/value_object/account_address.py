"""
Account Address Value Object

Account Address Value Object - Shared Kernel
Used by both the Event Registry and Ticket Ledger bounded contexts to identify
organizers, buyers, ticket holders and minters.
"""

import re
from typing import Any

from src.service.shared_kernel.domain.ledger_errors import InvalidAddressError


_ADDRESS_PATTERN = re.compile(r'^0x[0-9a-fA-F]{40}$')

ZERO_ADDRESS = '0x' + '0' * 40


def normalize_address(value: Any) -> str:
    """
    Validate an account address and return its canonical (lower-cased) form.

    Raises:
        InvalidAddressError: When the value is not `0x` followed by 40 hex characters
    """
    if not isinstance(value, str) or not _ADDRESS_PATTERN.match(value.strip()):
        raise InvalidAddressError(f'Invalid account address: {value!r}')
    return value.strip().lower()


def normalize_recipient(value: Any) -> str:
    """Like normalize_address, but the zero address cannot receive tickets."""
    address = normalize_address(value)
    if address == ZERO_ADDRESS:
        raise InvalidAddressError('Cannot send tickets to the zero address')
    return address


def short_address(address: str) -> str:
    """0x1234...abcd, for log lines"""
    return f'{address[:6]}...{address[-4:]}'
