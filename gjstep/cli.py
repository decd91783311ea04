# gjstep/cli.py
"""
Command-line front end.

EXAMPLE USAGE:
--------------
    gjstep --matrix "2,1,5; 1,-1,1" --all
    gjstep                      # prompts for the shape and each cell
    gjstep --matrix "1,2,3; 2,4,7" --page-size 10
    gjstep --rows 3 --cols 4     # fixed shape, prompts only for the cells
"""

import argparse
import logging
import sys

from .config import SolverConfig, DEFAULT_CONFIG
from .collect import collect_system, rows_to_array
from .kernel import format_value
from .pager import LogPager
from .parse import InvalidNumberError, parse_matrix, resolve_shape
from .session import SolveSession

EXIT_DONE = 0
EXIT_SINGULAR = 1
EXIT_BAD_INPUT = 2

PAGER_HELP = "[j] down  [k] up  [n] next page  [p] prev page  [q] quit"


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gjstep",
        description="Solve a 2x2 or 3x3 linear system by Gauss-Jordan elimination "
                    "and show every row operation.",
    )
    parser.add_argument(
        "--matrix", "-m",
        help='augmented matrix, rows split by ";" and cells by "," '
             '(fractions like 1/3 allowed), e.g. "2,1,5; 1,-1,1"',
    )
    parser.add_argument("--page-size", type=positive_int, default=DEFAULT_CONFIG.page_size,
                        help="trace lines per page (default: %(default)s)")
    parser.add_argument("--rows", type=int,
                        help="number of equations (2 or 3); needs --cols")
    parser.add_argument("--cols", type=int,
                        help="columns of [A | b] (3 or 4); needs --rows")
    parser.add_argument("--all", action="store_true",
                        help="print the whole trace instead of paging")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="debug logging")
    return parser


def show_pages(lines, page_size: int, read=input, write=print) -> None:
    """
    Interactive pager loop. ``read`` returns one command per call; EOF or
    ``q`` ends the loop.
    """
    pager = LogPager(total=len(lines), page_size=page_size)
    actions = {
        "j": pager.line_down,
        "k": pager.line_up,
        "n": pager.page_down,
        "": pager.page_down,
        "p": pager.page_up,
    }
    while True:
        for line in pager.visible(lines):
            write(line)
        write(pager.footer())
        try:
            cmd = read(PAGER_HELP + " > ").strip().lower()
        except EOFError:
            return
        if cmd == "q":
            return
        action = actions.get(cmd)
        if action is not None:
            action()


def main(argv=None, config: SolverConfig = DEFAULT_CONFIG) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.rows is None) != (args.cols is None):
        parser.error("--rows and --cols must be given together")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    shape = None
    if args.rows is not None:
        shape = resolve_shape(args.rows, args.cols, config)
        if shape.warning:
            print(shape.warning, file=sys.stderr)

    if args.matrix is not None:
        try:
            A, resolved = rows_to_array(parse_matrix(args.matrix), config, shape=shape)
        except InvalidNumberError as e:
            print(f"error: {e}", file=sys.stderr)
            return EXIT_BAD_INPUT
        if shape is None and resolved.warning:
            print(resolved.warning, file=sys.stderr)
    else:
        try:
            A, _ = collect_system(config=config, shape=shape)
        except (EOFError, KeyboardInterrupt):
            print("\ninput aborted", file=sys.stderr)
            return EXIT_BAD_INPUT

    result = SolveSession(config).solve(A)

    if args.all or not sys.stdin.isatty():
        for line in result.lines:
            print(line)
    else:
        show_pages(result.lines, args.page_size)

    if result.ok:
        print("x = [" + ", ".join(format_value(v) for v in result.solution) + "]")
        return EXIT_DONE
    print("No unique solution (singular coefficient block).")
    return EXIT_SINGULAR


if __name__ == "__main__":
    sys.exit(main())
