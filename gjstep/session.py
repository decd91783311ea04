# gjstep/session.py
"""
One solve = one session: a fresh copy of the matrix, a reset recorder,
one elimination, one result.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .config import SolverConfig, DEFAULT_CONFIG
from .kernel import StepRecorder, gauss_jordan, solution_vector, Outcome, DimensionError

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveResult:
    """Everything a viewer needs after a solve."""
    outcome: Outcome
    matrix: np.ndarray               # final (possibly partially reduced) [A | b]
    solution: Optional[np.ndarray]   # None unless outcome is DONE
    lines: Tuple[str, ...]
    dropped: int = 0

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.DONE

    @property
    def rows(self) -> int:
        return self.matrix.shape[0]

    @property
    def cols(self) -> int:
        return self.matrix.shape[1]


class SolveSession:
    """
    Owns the StepRecorder for a run of solves.

    Each call to ``solve`` resets the recorder first, so a trace never
    contains lines from an earlier system.
    """

    def __init__(self, config: SolverConfig = DEFAULT_CONFIG):
        self.config = config
        self.recorder = StepRecorder(
            capacity=config.log_capacity,
            width=config.line_width,
            cell_width=config.cell_width,
        )

    def solve(self, matrix) -> SolveResult:
        """
        Reduce a copy of ``matrix`` (array-like, rows x rows+1).

        Raises:
            DimensionError: If the shape is not a supported augmented system.
        """
        A = np.array(matrix, dtype=float)
        if A.ndim != 2:
            raise DimensionError(f"expected a 2-D augmented matrix, got shape {A.shape}")
        rows, cols = A.shape

        self.recorder.reset()
        LOG.debug("Solving %dx%d system", rows, cols)
        outcome = gauss_jordan(A, rows, cols, self.recorder,
                               eps=self.config.eps, max_rows=self.config.max_rows)
        LOG.debug("Outcome %s, %d trace lines (%d dropped)",
                  outcome.value, self.recorder.count, self.recorder.dropped)

        solution = solution_vector(A, rows, cols) if outcome is Outcome.DONE else None
        return SolveResult(
            outcome=outcome,
            matrix=A,
            solution=solution,
            lines=self.recorder.lines,
            dropped=self.recorder.dropped,
        )


def solve_system(matrix, config: SolverConfig = DEFAULT_CONFIG) -> SolveResult:
    """One-shot convenience: solve with a throwaway session."""
    return SolveSession(config).solve(matrix)
