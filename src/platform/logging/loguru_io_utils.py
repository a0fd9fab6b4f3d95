from inspect import getfile, getfullargspec, getsourcelines
from os.path import basename
import re
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'
MAX_CONTENT_LENGTH = 500

# key=value / 'key': value pairs inside a repr
_SENSITIVE_PATTERN = re.compile(
    r"""(['"]?)({keywords})(['"]?\s*[:=]\s*)(['"]?)[^,'"\s)}}]+""".format(
        keywords='|'.join(sorted(SENSITIVE_KEYWORDS))
    )
)


def get_chain_start_time() -> float:
    """Start time of the outermost traced call in this context"""
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def enter_call() -> None:
    call_depth_var.set(call_depth_var.get() + 1)


def exit_call() -> None:
    depth = max(call_depth_var.get() - 1, 0)
    call_depth_var.set(depth)
    if not depth:
        chain_start_time_var.set(0)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(target))}::{func.__qualname__}:{lineno}'


def filter_accepted_kwargs(func: Callable[..., Any], kwargs: dict[str, Any]) -> dict[str, Any]:
    """Drop keyword arguments the wrapped function cannot accept."""
    spec = getfullargspec(getattr(func, '__wrapped__', func))
    if spec.varkw:
        return kwargs
    accepted = set(spec.args) | set(spec.kwonlyargs)
    return {k: v for k, v in kwargs.items() if k in accepted}


def mask_text(data: Any) -> Any:
    try:
        data_str = str(data)
    except Exception:
        return data
    masked = _SENSITIVE_PATTERN.sub(rf'\1\2\3\4{MASK}', data_str)
    return data if masked == data_str else masked


def mask_value(data: Any) -> Any:
    if isinstance(data, dict):
        return {
            key: MASK if key in SENSITIVE_KEYWORDS else mask_value(value)
            for key, value in data.items()
        }
    if isinstance(data, list | tuple):
        return type(data)(mask_value(item) for item in data)
    return mask_text(data)


def truncate_content(data: Any, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    text = data if isinstance(data, str) else repr(data)
    if len(text) <= max_length:
        return data
    return f'{text[:max_length]}... (truncated {len(text) - max_length} chars)'
