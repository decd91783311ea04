# app/state - Session state management
from .session import (
    get_result,
    set_result,
    clear_result,
    get_trace_top,
    set_trace_top,
)

__all__ = [
    'get_result',
    'set_result',
    'clear_result',
    'get_trace_top',
    'set_trace_top',
]
