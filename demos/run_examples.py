"""
GAUSS-JORDAN TRACE DEMO
=======================

Solves three small systems and prints the full step trace for each:

1. A 2x2 system with a unique solution (x = 2, y = 1)
2. A 3x3 system that needs a row swap (x = 2, y = 3, z = -1)
3. A singular 2x2 system (second equation repeats the first's left side)

Usage:
    python demos/run_examples.py
    python demos/run_examples.py --only 3x3
"""

import argparse

from gjstep.kernel import format_value
from gjstep.session import SolveSession

SYSTEMS = {
    "2x2": [[2, 1, 5],
            [1, -1, 1]],
    "3x3": [[2, 1, -1, 8],
            [-3, -1, 2, -11],
            [-2, 1, 2, -3]],
    "singular": [[1, 2, 3],
                 [2, 4, 7]],
}


def main():
    parser = argparse.ArgumentParser(description="Print Gauss-Jordan traces for sample systems")
    parser.add_argument("--only", choices=sorted(SYSTEMS), help="run a single system")
    args = parser.parse_args()

    # One session, reused: every solve starts from an empty trace
    session = SolveSession()

    names = [args.only] if args.only else list(SYSTEMS)
    for name in names:
        print("=" * 60)
        print(f"SYSTEM: {name}")
        print("=" * 60)

        result = session.solve(SYSTEMS[name])
        for line in result.lines:
            print(line)

        if result.ok:
            xs = ", ".join(format_value(v) for v in result.solution)
            print(f"✓ solved: x = [{xs}] ({len(result.lines)} trace lines)")
        else:
            print(f"✗ no unique solution ({len(result.lines)} trace lines)")
        print()


if __name__ == "__main__":
    main()
