from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# Use test log directory if in test environment
LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)


# Keys whose values never reach a log line
SENSITIVE_KEYWORDS = {
    'password',
    'private_key',
    'signature',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


_DEFAULT_EXTRA = {
    ExtraField.SERVICE_CONTEXT: get_service_context(),
    ExtraField.CHAIN_START_TIME: '',
    ExtraField.CALL_TARGET: '',
}


def _parse_http_status_level(message: str) -> str | None:
    """
    Map a granian access log line to a log level by its status code.

    Format: '127.0.0.1 - "POST /api/event/0/purchase HTTP/1.1" - 409 - 2ms'
    """
    if ' - "' not in message or ' HTTP/' not in message:
        return None

    try:
        status_parts = message.split('"')[2].split()
        if len(status_parts) < 2 or status_parts[0] != '-':
            return None
        status_code = int(status_parts[1])
    except (ValueError, IndexError):
        return None

    if status_code >= 500:
        return 'CRITICAL'
    if status_code >= 400:
        # Rejected ledger requests are routine
        return 'WARNING'
    if status_code >= 200:
        return 'SUCCESS'
    return 'INFO'


class InterceptHandler(logging.Handler):
    """Route stdlib logging (granian, asyncio, pytest-bdd) through loguru"""

    def __init__(self, bound_logger: 'LoguruLogger') -> None:
        super().__init__()
        self._bound_logger = bound_logger

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()

        if record.levelno <= logging.DEBUG:
            # gherkin step pattern matching
            if 'format ' in message and ' -> ' in message:
                return
            if 'Using selector:' in message:
                return

        level = _parse_http_status_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self._bound_logger.opt(depth=depth, exception=record.exc_info).log(level, message)


# Log format for LoguruIO decorated functions
io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


# Configure logger
loguru_logger.remove()  # Drop loguru's default stderr sink
custom_logger = loguru_logger.bind(**_DEFAULT_EXTRA)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'

if settings.LOG_SERIALIZE:
    # One JSON object per line for log collectors
    custom_logger.add(sys.stdout, serialize=True, level=min_log_level, enqueue=True)
else:
    custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)

# File output only in DEBUG mode
if settings.DEBUG:
    hour = datetime.now(timezone.utc).strftime('%Y-%m-%d_%H')
    log_prefix = 'test_ledger' if os.environ.get('TEST_LOG_DIR') else 'ledger'
    custom_logger.add(
        f'{LOG_DIR}/{log_prefix}_{hour}.log',
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=min_log_level,
    )

logging.basicConfig(handlers=[InterceptHandler(custom_logger)], level=0, force=True)
