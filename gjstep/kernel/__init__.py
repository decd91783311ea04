# gjstep/kernel - Numeric core
"""
KERNEL: FORMATTER, RECORDER, ELIMINATOR
=======================================

Three pieces, leaves first:

    numfmt.py     floats -> "3", "-2/3", "3.14159"
    trace.py      StepRecorder, the bounded narrative of a solve
    eliminate.py  gauss_jordan(), partial-pivoting reduction that writes
                  into a StepRecorder after every swap, scale and elimination

Nothing in here prompts, prints or keeps state between calls; the caller
owns both the matrix and the recorder.
"""

from .numfmt import format_frac, format_value
from .trace import StepRecorder
from .eliminate import gauss_jordan, solution_vector, Outcome, DimensionError

__all__ = [
    'format_frac',
    'format_value',
    'StepRecorder',
    'gauss_jordan',
    'solution_vector',
    'Outcome',
    'DimensionError',
]
