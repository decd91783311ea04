# app/state/session.py
"""
Session state management for Streamlit.

Provides typed accessors for session state to avoid
scattered st.session_state['key'] calls throughout the app.
"""

import streamlit as st
from typing import Optional

from gjstep.session import SolveResult


# ============================================================================
# Solve Result State
# ============================================================================

def get_result() -> Optional[SolveResult]:
    """Get the latest solve result from session state."""
    return st.session_state.get('solve_result', None)


def set_result(result: SolveResult) -> None:
    """Store a new solve result and rewind the viewer."""
    st.session_state.solve_result = result
    st.session_state.trace_top = 0


def clear_result() -> None:
    """Clear the solve result (e.g., when the shape changes)."""
    if 'solve_result' in st.session_state:
        del st.session_state.solve_result
    st.session_state.trace_top = 0


# ============================================================================
# Viewer State
# ============================================================================

def get_trace_top() -> int:
    """First visible trace line."""
    return st.session_state.get('trace_top', 0)


def set_trace_top(top: int) -> None:
    st.session_state.trace_top = top
