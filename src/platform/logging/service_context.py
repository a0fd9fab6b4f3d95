"""
Service context tag for log lines.

Identifies which service instance emitted a log line when several
gateway processes share one log collector.
"""

import os
import socket
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'ticketing-ledger')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    instance = os.getenv('HOSTNAME') or socket.gethostname() or 'local'

    return f'{service_name}@{deploy_env}:{instance[:12]}:{os.getpid()}'
