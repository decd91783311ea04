# app/config.py
"""
Application configuration and defaults.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass
class AppConfig:
    """Global application configuration."""

    # App metadata
    app_name: str = "GJSTEP"
    app_subtitle: str = "Gauss-Jordan Steps"
    version: str = "0.1.0"

    # Trace viewer
    page_size: int = 20
    page_size_range: Tuple[int, int] = (5, 60)

    # Shapes offered in the sidebar: label -> (rows, cols)
    shapes: List[Tuple[str, int, int]] = None

    # Starting cells per shape (strings, so fractions can be typed in place)
    default_cells_2x3: List[List[str]] = None
    default_cells_3x4: List[List[str]] = None

    def __post_init__(self):
        if self.shapes is None:
            self.shapes = [("2 x 3 (2 unknowns)", 2, 3), ("3 x 4 (3 unknowns)", 3, 4)]
        if self.default_cells_2x3 is None:
            self.default_cells_2x3 = [["2", "1", "5"], ["1", "-1", "1"]]
        if self.default_cells_3x4 is None:
            self.default_cells_3x4 = [
                ["2", "1", "-1", "8"],
                ["-3", "-1", "2", "-11"],
                ["-2", "1", "2", "-3"],
            ]

    def default_cells(self, rows: int) -> List[List[str]]:
        return self.default_cells_2x3 if rows == 2 else self.default_cells_3x4


# Global config instance
CONFIG = AppConfig()
