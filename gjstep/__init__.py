# gjstep - Step-by-step Gauss-Jordan solver
"""
GJSTEP: Gauss-Jordan Elimination You Can Read
=============================================

Solves 2x2 and 3x3 linear systems given as an augmented matrix [A | b],
recording every swap, scale and elimination as a line of text with the
numbers shown as fractions where possible.

ARCHITECTURE:
-------------
    kernel/       Numeric core (number formatter, step recorder, eliminator)
    config.py     SolverConfig limits (eps, trace capacity, line widths)
    parse.py      Decimal / fraction parsing, shape fallback
    collect.py    Prompt-driven matrix entry
    session.py    SolveSession: one recorder per session, reset per solve
    pager.py      LogPager: paging through a trace
    cli.py        `gjstep` command
"""

from .config import SolverConfig, DEFAULT_CONFIG
from .kernel import (
    format_frac,
    format_value,
    StepRecorder,
    gauss_jordan,
    solution_vector,
    Outcome,
    DimensionError,
)
from .parse import InvalidNumberError, Shape, parse_number, parse_int, parse_matrix, resolve_shape
from .pager import LogPager
from .session import SolveSession, SolveResult, solve_system

__version__ = "0.1.0"
