# File: tests/test_trace.py
"""
Test the StepRecorder capacity policy and matrix rendering.
"""

import numpy as np
import pytest

from gjstep.kernel.trace import StepRecorder, MATRIX_HEADER


def test_append_keeps_order():
    rec = StepRecorder()
    for i in range(5):
        rec.append(f"line {i}")

    assert rec.count == 5
    assert len(rec) == 5
    assert list(rec) == [f"line {i}" for i in range(5)]
    assert rec[0] == "line 0"
    assert rec[-1] == "line 4"
    print("✓ Lines come back in insertion order")


def test_append_at_capacity_is_silent_noop():
    """
    A full recorder ignores further appends: no exception, no overwrite,
    count stays at capacity, earlier lines untouched.
    """
    rec = StepRecorder(capacity=3)
    for text in ["a", "b", "c"]:
        rec.append(text)
    before = rec.lines

    rec.append("d")
    rec.append("e")

    assert rec.count == 3
    assert rec.lines == before == ("a", "b", "c")
    assert rec.is_full
    assert rec.dropped == 2
    print("✓ Appends beyond capacity are dropped")


def test_long_lines_are_cut_to_width():
    rec = StepRecorder(width=55)
    rec.append("x" * 80)
    assert rec[0] == "x" * 55


def test_reset_clears_everything():
    rec = StepRecorder(capacity=2)
    rec.append("a")
    rec.append("b")
    rec.append("c")
    rec.reset()

    assert rec.count == 0
    assert rec.dropped == 0
    assert rec.lines == ()
    rec.append("fresh")
    assert rec.lines == ("fresh",)


def test_lines_snapshot_is_read_only():
    rec = StepRecorder()
    rec.append("a")
    snapshot = rec.lines
    rec.append("b")
    assert snapshot == ("a",)
    with pytest.raises(TypeError):
        snapshot[0] = "z"


def test_render_matrix_layout():
    """Header, one bracketed row per matrix row with the rhs after '|', blank line."""
    A = np.array([[0.5, -1e-13, 1 / 3],
                  [2.0, -4.0, 7.0]])
    rec = StepRecorder()
    rec.render_matrix(A, 2, 3)

    assert rec.lines == (
        MATRIX_HEADER,
        "  [ 1/2 0 | 1/3 ]",
        "  [ 2 -4 | 7 ]",
        "",
    )
    print("✓ Matrix rows render as '[ a b | rhs ]'")


def test_render_matrix_row_respects_width():
    A = np.full((3, 4), np.pi * 1e7)
    rec = StepRecorder(width=30)
    rec.render_matrix(A, 3, 4)
    assert all(len(line) <= 30 for line in rec)


def test_text_joins_lines():
    rec = StepRecorder()
    rec.append("one")
    rec.append("two")
    assert rec.text() == "one\ntwo"


@pytest.mark.parametrize("kwargs", [{"capacity": -1}, {"width": 0}])
def test_invalid_construction(kwargs):
    with pytest.raises(ValueError):
        StepRecorder(**kwargs)
