# gjstep/config.py
"""
Solver configuration and defaults.

The numbers here are the display/storage budget of a solve session: how
small a pivot may get before the system counts as singular, how many trace
lines are kept, and how wide each line and each rendered value may be.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SolverConfig:
    """Limits shared by the eliminator, the step recorder and the front ends."""

    # Pivot / elimination factor threshold
    eps: float = 1e-10

    # Largest coefficient block (rows x rows, augmented to rows x rows+1)
    max_rows: int = 3

    # Step trace budget
    log_capacity: int = 280
    line_width: int = 55    # characters per trace line
    cell_width: int = 15    # characters per formatted value

    # Viewer
    page_size: int = 20

    # Accepted (rows, cols) pairs and the fallback used for anything else
    allowed_shapes: Tuple[Tuple[int, int], ...] = ((2, 3), (3, 4))
    default_shape: Tuple[int, int] = (2, 3)


# Global config instance
DEFAULT_CONFIG = SolverConfig()
