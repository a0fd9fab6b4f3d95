"""
Caller identity for HTTP requests.

The caller's account address travels in a request header (default
`X-Caller-Address`); proving control of that account is the wallet's job.
"""

from fastapi import Request

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.shared_kernel.domain.value_object.account_address import normalize_address


async def get_caller_address(request: Request) -> str:
    raw_address = request.headers.get(settings.CALLER_ADDRESS_HEADER)
    if not raw_address:
        raise AuthenticationError(f'Missing {settings.CALLER_ADDRESS_HEADER} header')
    return normalize_address(raw_address)
