# File: tests/test_cli.py
"""
Test the gjstep command: --matrix input, exit codes, the pager loop.
"""

import io

import pytest

import gjstep.cli
from gjstep.cli import (
    main, show_pages, PAGER_HELP, EXIT_DONE, EXIT_SINGULAR, EXIT_BAD_INPUT,
)


def test_cli_solves_matrix_argument(capsys):
    code = main(["--matrix", "2,1,5; 1,-1,1", "--all"])
    out = capsys.readouterr().out

    assert code == EXIT_DONE
    assert out.startswith("Initial matrix:")
    assert "  x[0] = 2" in out
    assert out.rstrip().endswith("x = [2, 1]")


def test_cli_accepts_fractions(capsys):
    code = main(["--matrix", "1/2, 1/3, 1; 1/4, -1, 0", "--all"])
    assert code == EXIT_DONE
    assert "Initial matrix:" in capsys.readouterr().out


def test_cli_singular_exit_code(capsys):
    code = main(["-m", "1,2,3; 2,4,7", "--all"])
    out = capsys.readouterr().out

    assert code == EXIT_SINGULAR
    assert "Singular/underdetermined" in out
    assert "Solution x:" not in out


def test_cli_bad_matrix(capsys):
    code = main(["--matrix", "1,two,3; 4,5,6", "--all"])
    err = capsys.readouterr().err
    assert code == EXIT_BAD_INPUT
    assert "error:" in err


def test_cli_shape_fallback_warns(capsys):
    code = main(["--matrix", "2,1,5,9; 1,-1,1,9", "--all"])
    captured = capsys.readouterr()
    assert code == EXIT_DONE
    assert "Only 2x3 or 3x4 allowed" in captured.err


def test_show_pages_loop():
    """Page down once, then quit; each screen ends with its footer."""
    lines = [f"line {i}" for i in range(30)]
    commands = iter(["n", "q"])
    written = []

    show_pages(lines, page_size=20, read=lambda _: next(commands), write=written.append)

    footers = [w for w in written if w.startswith("Lines ")]
    assert footers == ["Lines 1-20 / 30", "Lines 11-30 / 30"]
    assert written[:20] == lines[:20]


def test_show_pages_stops_on_eof():
    def read(_):
        raise EOFError

    written = []
    show_pages(["a", "b"], page_size=5, read=read, write=written.append)
    assert written == ["a", "b", "Lines 1-2 / 2"]


@pytest.mark.parametrize("size", ["0", "-3", "x"])
def test_cli_rejects_bad_page_size(size, capsys):
    """A page size below 1 is a usage error, not a crash inside the pager."""
    with pytest.raises(SystemExit) as excinfo:
        main(["--matrix", "2,1,5; 1,-1,1", "--page-size", size])
    assert excinfo.value.code == EXIT_BAD_INPUT
    assert "--page-size" in capsys.readouterr().err


def test_cli_rows_cols_with_matching_matrix(capsys):
    code = main(["--rows", "2", "--cols", "3", "--matrix", "2,1,5; 1,-1,1", "--all"])
    captured = capsys.readouterr()
    assert code == EXIT_DONE
    assert captured.err == ""
    assert captured.out.rstrip().endswith("x = [2, 1]")


def test_cli_rows_cols_mismatch_is_bad_input(capsys):
    code = main(["--rows", "3", "--cols", "4", "--matrix", "2,1,5; 1,-1,1", "--all"])
    err = capsys.readouterr().err
    assert code == EXIT_BAD_INPUT
    assert "Expected a 3x4 matrix, got 2x3" in err


def test_cli_unsupported_rows_cols_fall_back(capsys):
    code = main(["--rows", "4", "--cols", "4", "--matrix", "2,1,5; 1,-1,1", "--all"])
    captured = capsys.readouterr()
    assert code == EXIT_DONE
    assert "Only 2x3 or 3x4 allowed. Using 2x3." in captured.err
    assert captured.out.rstrip().endswith("x = [2, 1]")


@pytest.mark.parametrize("argv", [["--rows", "2"], ["--cols", "3"]])
def test_cli_rows_and_cols_go_together(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv + ["--matrix", "2,1,5; 1,-1,1"])
    assert excinfo.value.code == EXIT_BAD_INPUT


def test_cli_rows_cols_skip_shape_prompts(monkeypatch, capsys):
    """With --rows/--cols only the cells are asked for."""
    asked = []
    answers = iter(["2", "1", "5", "1", "-1", "1"])

    def fake_input(message=""):
        asked.append(message)
        return next(answers)

    real_collect = gjstep.cli.collect_system
    monkeypatch.setattr(gjstep.cli, "collect_system",
                        lambda **kw: real_collect(prompt=fake_input, **kw))
    code = main(["--rows", "2", "--cols", "3", "--all"])

    assert code == EXIT_DONE
    assert not any(m.startswith(("Rows?", "Cols?")) for m in asked)
    assert asked[0] == "Enter A[1,1]: "
    assert capsys.readouterr().out.rstrip().endswith("x = [2, 1]")


def test_cli_prints_whole_trace_when_stdin_is_not_a_tty(monkeypatch, capsys):
    """
    Without --all the pager is only used for an interactive stdin, since
    that is where its commands come from. Piped input gets the full trace.
    """
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    code = main(["--matrix", "2,1,5; 1,-1,1"])
    out = capsys.readouterr().out

    assert code == EXIT_DONE
    assert out.startswith("Initial matrix:")
    assert "Solution x:" in out
    assert "Lines 1-" not in out
    assert PAGER_HELP not in out
    print("✓ non-tty stdin prints the whole trace")
