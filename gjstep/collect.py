# gjstep/collect.py
"""Prompt-driven entry of an augmented matrix, one cell at a time."""

from typing import Callable, List, Optional, Tuple

import numpy as np

from .config import SolverConfig, DEFAULT_CONFIG
from .parse import InvalidNumberError, Shape, parse_int, parse_number, resolve_shape


def _ask(prompt: Callable[[str], str], echo: Callable[[str], None],
         message: str, parse, error: str):
    # reprompt until the text parses
    while True:
        try:
            return parse(prompt(message))
        except InvalidNumberError:
            echo(error)


def cell_prompt(i: int, j: int, cols: int) -> str:
    if j == cols - 1:
        return f"Enter b[{i + 1}]: "
    return f"Enter A[{i + 1},{j + 1}]: "


def collect_system(
    prompt: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
    config: SolverConfig = DEFAULT_CONFIG,
    shape: Optional[Shape] = None,
) -> Tuple[np.ndarray, Shape]:
    """
    Ask for the shape and then every cell of ``[A | b]``.

    Args:
        prompt: Called with the prompt text, returns what the user typed
        echo: Receives error and warning messages
        config: Allowed shapes and fallback
        shape: Already-resolved shape; skips the Rows?/Cols? questions

    Returns:
        (A, shape): float array of shape (rows, cols) and the resolved Shape
    """
    if shape is None:
        rows = _ask(prompt, echo, "Rows? (2 or 3): ", parse_int, "Invalid integer.")
        cols = _ask(prompt, echo, "Cols? (3 or 4): ", parse_int, "Invalid integer.")

        shape = resolve_shape(rows, cols, config)
        if shape.warning:
            echo(shape.warning)

    A = np.zeros((shape.rows, shape.cols), dtype=float)
    for i in range(shape.rows):
        for j in range(shape.cols):
            A[i, j] = _ask(prompt, echo, cell_prompt(i, j, shape.cols),
                           parse_number, "Invalid number.")
    return A, shape


def rows_to_array(
    cells: List[List[float]],
    config: SolverConfig = DEFAULT_CONFIG,
    shape: Optional[Shape] = None,
) -> Tuple[np.ndarray, Shape]:
    """
    Turn an already-parsed grid into a solvable array.

    Without ``shape`` the grid's own size is resolved, and a grid that falls
    back to the default shape is cropped to it. With an explicit ``shape``
    that needed no fallback, the grid must match it exactly.

    Raises:
        InvalidNumberError: If the grid is ragged, smaller than the resolved
            shape, or different from an explicitly requested shape.
    """
    n_rows = len(cells)
    n_cols = len(cells[0]) if cells else 0
    if any(len(r) != n_cols for r in cells):
        raise InvalidNumberError("Rows have different lengths")

    if shape is None:
        shape = resolve_shape(n_rows, n_cols, config)
    elif shape.warning is None and (n_rows, n_cols) != (shape.rows, shape.cols):
        raise InvalidNumberError(
            f"Expected a {shape.rows}x{shape.cols} matrix, got {n_rows}x{n_cols}"
        )

    if n_rows < shape.rows or n_cols < shape.cols:
        raise InvalidNumberError(
            f"Need at least {shape.rows}x{shape.cols} cells, got {n_rows}x{n_cols}"
        )
    A = np.array([row[:shape.cols] for row in cells[:shape.rows]], dtype=float)
    return A, shape
