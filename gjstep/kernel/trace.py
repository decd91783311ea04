# gjstep/kernel/trace.py
"""
STEP RECORDER: Bounded, Append-Only Trace of an Elimination
===========================================================

The recorder is the narrative of a solve: one text line per operation,
plus a rendering of the matrix after each one. It is owned by a single
solve session and handed to whatever displays it.

CAPACITY POLICY:
----------------
- Lines longer than ``width`` are cut to ``width`` characters.
- Once ``capacity`` lines are stored, further appends are dropped
  silently. Nothing is overwritten and nothing wraps around; ``dropped``
  counts what was lost.
- ``reset()`` empties the recorder; call it before every new solve.
"""

import logging
from typing import Iterator, Tuple

from .numfmt import format_value, CELL_WIDTH

LOG = logging.getLogger(__name__)

MATRIX_HEADER = "Matrix [A | b]:"


class StepRecorder:
    """
    Fixed-capacity ordered log of formatted lines.

    Examples:
    ---------
    >>> rec = StepRecorder(capacity=2)
    >>> rec.append("one"); rec.append("two"); rec.append("three")
    >>> rec.count, rec.dropped
    (2, 1)
    >>> rec[1]
    'two'
    """

    def __init__(self, capacity: int = 280, width: int = 55,
                 cell_width: int = CELL_WIDTH):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        if width < 1:
            raise ValueError(f"width must be >= 1, got {width}")
        self.capacity = capacity
        self.width = width
        self.cell_width = cell_width
        self._lines: list[str] = []
        self.dropped = 0

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def append(self, text: str) -> None:
        """Store ``text`` (cut to ``width``) unless the recorder is full."""
        if len(self._lines) >= self.capacity:
            if self.dropped == 0:
                LOG.debug("Step trace full at %d lines; dropping further lines",
                          self.capacity)
            self.dropped += 1
            return
        self._lines.append(str(text)[:self.width])

    def reset(self) -> None:
        self._lines.clear()
        self.dropped = 0

    def render_matrix(self, A, rows: int, cols: int) -> None:
        """
        Append a header, one ``"  [ a b ... | rhs ]"`` line per row and a
        blank separator.

        Every value goes through ``format_value`` and is cut to
        ``cell_width``; the assembled row is then cut to ``width`` by
        ``append``.
        """
        self.append(MATRIX_HEADER)
        for i in range(rows):
            cells = " ".join(format_value(A[i][j], self.cell_width)
                             for j in range(cols - 1))
            rhs = format_value(A[i][cols - 1], self.cell_width)
            self.append(f"  [ {cells} | {rhs} ]")
        self.append("")

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    @property
    def count(self) -> int:
        return len(self._lines)

    @property
    def is_full(self) -> bool:
        return len(self._lines) >= self.capacity

    @property
    def lines(self) -> Tuple[str, ...]:
        """Snapshot of the stored lines in insertion order."""
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index):
        return self._lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))

    def text(self) -> str:
        """All lines joined with newlines (for export)."""
        return "\n".join(self._lines)

    def __repr__(self) -> str:
        return (f"StepRecorder(count={len(self._lines)}, "
                f"capacity={self.capacity}, dropped={self.dropped})")
