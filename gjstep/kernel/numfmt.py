# gjstep/kernel/numfmt.py
"""
NUMBER FORMATTER: Floats as Integers, Fractions or Short Decimals
=================================================================

Every number that ends up in a step trace goes through this module, so a
row like ``[ 1 -1/2 | 7/3 ]`` reads the way it would on paper instead of
``[ 1.0 -0.49999999999 | 2.3333333333 ]``.

Order of attempts:

    1. Non-finite          -> "NaN" / "inf"
    2. |x| < 1e-14         -> "0"
    3. within 1e-12 of int -> "<n>"
    4. continued fraction  -> "<p>/<q>" with q <= 1000
    5. anything else       -> 6 significant digits ("%.6g")

The fallback in step 5 is the normal answer for irrational-looking values
(pi, sqrt(2), ...), not an error.
"""

import math

ZERO_SNAP = 1e-14       # below this |x| formats as "0"
INT_TOL = 1e-12         # distance to nearest integer treated as exact
DISPLAY_ZERO = 1e-12    # format_value clamps below this to 0.0
MAX_DEN = 1000          # largest denominator worth showing
MAX_TERMS = 32          # continued-fraction expansion steps
CF_TOL = 5e-8           # convergent accepted when this close
REMAINDER_EPS = 1e-15   # fractional remainder treated as exhausted

CELL_WIDTH = 15


def _best_convergent(ax: float):
    """
    Continued-fraction expansion of ``ax`` (non-negative).

    Returns ``(p, q, ok)`` where ``ok`` says the convergent is within
    ``CF_TOL`` of ``ax`` (or the expansion terminated exactly). When the
    denominator cap is hit first, the last convergent under the cap is
    returned together with its own accuracy verdict.
    """
    v = ax
    # (p_{k-2}, q_{k-2}), (p_{k-1}, q_{k-1})
    p0, q0 = 0, 1
    p1, q1 = 1, 0

    for _ in range(MAX_TERMS):
        a = math.floor(v)
        p = a * p1 + p0
        q = a * q1 + q0

        if q > MAX_DEN:
            break

        if abs(p / q - ax) < CF_TOL:
            return p, q, True

        p0, q0, p1, q1 = p1, q1, p, q
        r = v - a
        if r < REMAINDER_EPS:
            return p, q, True
        v = 1.0 / r

    if q1 == 0:
        return p1, q1, False
    return p1, q1, abs(p1 / q1 - ax) < CF_TOL


def format_frac(x: float) -> str:
    """
    Format ``x`` as an integer, a fraction with denominator <= 1000, or a
    6-significant-digit decimal.

    >>> format_frac(0.5)
    '1/2'
    >>> format_frac(-4 / 6)
    '-2/3'
    >>> format_frac(3.0000000000001)
    '3'
    """
    x = float(x)
    if not math.isfinite(x):
        return "NaN" if math.isnan(x) else "inf"

    if abs(x) < ZERO_SNAP:
        return "0"

    n = round(x)
    if abs(x - n) < INT_TOL:
        return str(n)

    num, den, ok = _best_convergent(abs(x))
    if not ok or den == 0 or den > MAX_DEN:
        return f"{x:.6g}"

    # sign lives on the numerator
    if x < 0:
        num = -num

    if den == 1:
        return str(num)
    return f"{num}/{den}"


def format_value(x: float, width: int = CELL_WIDTH) -> str:
    """
    Display entry point: clamp numerical dust to zero, format, and cut the
    result to ``width`` characters.

    Used for every matrix cell and every operand quoted in a step line.
    """
    x = float(x)
    if abs(x) < DISPLAY_ZERO:
        x = 0.0
    return format_frac(x)[:width]
