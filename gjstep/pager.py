# gjstep/pager.py
"""
Paging state for reading a step trace a screenful at a time.

The pager only tracks which lines are visible; reading keys and drawing
belong to the front end (CLI loop, streamlit buttons, HTTP query params).
"""

from dataclasses import dataclass


@dataclass
class LogPager:
    """
    Window of ``page_size`` lines over a trace of ``total`` lines.

    ``top`` always stays within ``[0, max(0, total - page_size)]``.

    Examples:
    ---------
    >>> pager = LogPager(total=50, page_size=20)
    >>> pager.page_down(); pager.page_down(); pager.top
    30
    >>> pager.footer()
    'Lines 31-50 / 50'
    """
    total: int
    page_size: int = 20
    top: int = 0

    def __post_init__(self):
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        self.top = self._clamp(self.top)

    @property
    def max_top(self) -> int:
        return max(0, self.total - self.page_size)

    def _clamp(self, top: int) -> int:
        return min(max(top, 0), self.max_top)

    def line_up(self) -> None:
        if self.top > 0:
            self.top -= 1

    def line_down(self) -> None:
        if self.top + self.page_size < self.total:
            self.top += 1

    def page_up(self) -> None:
        self.top = self._clamp(self.top - self.page_size)

    def page_down(self) -> None:
        self.top = self._clamp(self.top + self.page_size)

    def home(self) -> None:
        self.top = 0

    def end(self) -> None:
        self.top = self.max_top

    def window(self) -> range:
        """Indices of the visible lines."""
        return range(self.top, min(self.top + self.page_size, self.total))

    def visible(self, lines) -> list:
        return [lines[i] for i in self.window()]

    def footer(self) -> str:
        shown = len(self.window())
        return f"Lines {self.top + 1}-{self.top + shown} / {self.total}"
