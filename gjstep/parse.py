# gjstep/parse.py
"""
Parsing of user-typed numbers and matrix shapes.

Cells may be typed as decimals (``-2.5``, ``1e-3``) or as fractions
(``-7/3``, ``4/-6``). Shapes other than 2x3 and 3x4 are replaced by the
default 2x3 with a warning rather than rejected.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from .config import SolverConfig, DEFAULT_CONFIG

LOG = logging.getLogger(__name__)

MIN_DENOMINATOR = 1e-18

_ROW_SPLIT = re.compile(r"[;\n]+")
_CELL_SPLIT = re.compile(r"[,\s]+")


class InvalidNumberError(ValueError):
    """Raised when text cannot be read as a number, fraction or integer."""
    pass


@dataclass(frozen=True)
class Shape:
    rows: int
    cols: int
    warning: Optional[str] = None


def _to_float(text: str, original: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise InvalidNumberError(f"Invalid number: {original!r}") from None


def parse_number(text: str) -> float:
    """
    Read a decimal or an ``a/b`` fraction. Blank input reads as 0.

    Raises:
        InvalidNumberError: If either part is malformed or |b| < 1e-18.

    Examples:
    ---------
    >>> parse_number(" 3/4")
    0.75
    >>> parse_number("-1/-2")
    0.5
    >>> parse_number("")
    0.0
    """
    s = text.strip(" \t")
    if not s:
        return 0.0

    if "/" in s:
        num_text, den_text = s.split("/", 1)
        num = _to_float(num_text.strip(), text)
        den = _to_float(den_text.strip(), text)
        if abs(den) < MIN_DENOMINATOR:
            raise InvalidNumberError(f"Denominator is zero in {text!r}")
        return num / den

    return _to_float(s, text)


def parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidNumberError(f"Invalid integer: {text!r}") from None


def resolve_shape(rows: int, cols: int, config: SolverConfig = DEFAULT_CONFIG) -> Shape:
    """
    Accept an allowed (rows, cols) pair or fall back to the default shape.

    The fallback is not an error: the returned Shape carries the warning
    text to show the user.
    """
    if (rows, cols) in config.allowed_shapes:
        return Shape(rows, cols)

    allowed = " or ".join(f"{r}x{c}" for r, c in config.allowed_shapes)
    r, c = config.default_shape
    warning = f"Only {allowed} allowed. Using {r}x{c}."
    LOG.warning("Unsupported shape %dx%d; falling back to %dx%d", rows, cols, r, c)
    return Shape(r, c, warning)


def parse_matrix(text: str) -> List[List[float]]:
    """
    Read a whole augmented matrix, rows split by ``;`` or newlines and cells
    by commas or whitespace.

    >>> parse_matrix("2, 1, 5; 1, -1, 1")
    [[2.0, 1.0, 5.0], [1.0, -1.0, 1.0]]

    Raises:
        InvalidNumberError: On a malformed cell, an empty matrix or rows of
            different lengths.
    """
    rows = []
    for row_text in _ROW_SPLIT.split(text):
        row_text = row_text.strip()
        if not row_text:
            continue
        cells = [c for c in _CELL_SPLIT.split(row_text) if c]
        rows.append([parse_number(c) for c in cells])

    if not rows:
        raise InvalidNumberError("Empty matrix")
    widths = {len(r) for r in rows}
    if len(widths) != 1:
        raise InvalidNumberError(f"Rows have different lengths: {sorted(widths)}")
    return rows
