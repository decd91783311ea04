# gjstep/kernel/eliminate.py
"""Verbose Gauss-Jordan elimination with partial pivoting."""

import logging
from enum import Enum

import numpy as np

from .numfmt import format_value
from .trace import StepRecorder

LOG = logging.getLogger(__name__)

EPS = 1e-10
MAX_ROWS = 3


class Outcome(Enum):
    """Terminal state of an elimination."""
    DONE = "done"
    SINGULAR = "singular"


class DimensionError(ValueError):
    """Raised when the matrix shape is not an n x (n+1) augmented system."""
    pass


def check_dimensions(A: np.ndarray, rows: int, cols: int, max_rows: int = MAX_ROWS) -> None:
    """
    Validate ``rows``/``cols`` against each other and against ``A``.

    Raises:
        DimensionError: If rows is outside 2..max_rows, cols != rows + 1,
            or A holds fewer than rows x cols entries.
    """
    if not 2 <= rows <= max_rows:
        raise DimensionError(f"rows must be in 2..{max_rows}, got {rows}")
    if cols != rows + 1:
        raise DimensionError(f"augmented matrix needs cols = rows + 1, got {rows}x{cols}")
    if A.ndim != 2 or A.shape[0] < rows or A.shape[1] < cols:
        raise DimensionError(f"matrix of shape {A.shape} is smaller than {rows}x{cols}")
    if not np.issubdtype(A.dtype, np.floating):
        raise TypeError(f"matrix must hold floats for in-place reduction, got {A.dtype}")


def gauss_jordan(
    A: np.ndarray,
    rows: int,
    cols: int,
    recorder: StepRecorder,
    eps: float = EPS,
    max_rows: int = MAX_ROWS,
) -> Outcome:
    """
    Reduce the augmented matrix ``A`` to ``[I | x]`` in place, narrating
    every row operation into ``recorder``.

    For each pivot column the row with the strictly largest magnitude (first
    one on ties) is swapped up, scaled so the pivot is 1, and used to clear
    the column in every other row. Rows whose entry is already below ``eps``
    are skipped without a trace line.

    Args:
        A: Augmented matrix, float array of at least rows x cols. Mutated.
        rows: Number of equations (size of the coefficient block)
        cols: rows + 1
        recorder: Trace sink; not reset here
        eps: Pivot / factor negligibility threshold
        max_rows: Largest supported coefficient block

    Returns:
        Outcome.DONE when the left block became the identity and the
        solution lines were written, Outcome.SINGULAR when a pivot column
        had no usable entry (A is left partially reduced, no solution lines).

    Raises:
        DimensionError: If the shape is not a supported augmented system.
    """
    check_dimensions(A, rows, cols, max_rows)

    it = 1
    recorder.append("Initial matrix:")
    recorder.render_matrix(A, rows, cols)

    n = rows  # left block is n x n
    for col in range(n):
        # pivot search
        pivot = col
        best = abs(A[col, col])
        for r in range(col + 1, n):
            v = abs(A[r, col])
            if v > best:
                best = v
                pivot = r

        if not best >= eps:
            recorder.append(
                f"Iter {it}: ~0 pivot in column {col + 1}. Singular/underdetermined."
            )
            recorder.render_matrix(A, rows, cols)
            LOG.debug("Singular pivot in column %d (best=%.3e)", col + 1, best)
            return Outcome.SINGULAR

        # swap
        if pivot != col:
            recorder.append(f"Iter {it}: Swap R{col + 1} <-> R{pivot + 1}")
            it += 1
            A[[col, pivot], :cols] = A[[pivot, col], :cols]
            recorder.render_matrix(A, rows, cols)

        # scale pivot row
        p = A[col, col]
        # not reached after the pivot search above: |p| == best >= eps
        if abs(p) < eps:
            recorder.append(f"Iter {it}: pivot vanished; abort.")
            LOG.debug("Pivot vanished in column %d after swap", col + 1)
            return Outcome.SINGULAR
        inv = 1.0 / p
        A[col, col:cols] *= inv
        recorder.append(
            f"Iter {it}: Scale R{col + 1} by {format_value(inv, recorder.cell_width)} (pivot->1)"
        )
        it += 1
        recorder.render_matrix(A, rows, cols)

        # eliminate every other row
        for r in range(n):
            if r == col:
                continue
            factor = A[r, col]
            if abs(factor) < eps:
                continue

            A[r, col:cols] -= factor * A[col, col:cols]

            fs = format_value(factor, recorder.cell_width)
            recorder.append(f"Iter {it}: R{r + 1} <- R{r + 1} - ({fs}) * R{col + 1}")
            it += 1
            recorder.render_matrix(A, rows, cols)

    recorder.append("Finished Gauss-Jordan. Expect [I | x].")
    recorder.render_matrix(A, rows, cols)
    recorder.append("Solution x:")
    for i in range(rows):
        recorder.append(f"  x[{i}] = {format_value(A[i, cols - 1], recorder.cell_width)}")
    return Outcome.DONE


def solution_vector(A: np.ndarray, rows: int, cols: int) -> np.ndarray:
    """Last column of the first ``rows`` rows, i.e. x once A is [I | x]."""
    return np.array(A[:rows, cols - 1], dtype=float)
