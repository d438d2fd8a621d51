"""distribution_engine.core.solver.integration

Numerical quadrature used where a distribution has no closed-form CDF.

- adaptive_simpson: adaptive Simpson rule with Richardson correction,
  driven by an explicit stack of intervals instead of recursion
- trapezoid: composite trapezoidal rule on a uniform grid
- graded_trapezoid: trapezoidal rule on a geometric grid fixed independently
  of the upper limit, so running integrals of a density are monotone
"""

from __future__ import annotations

import math
from typing import Callable, List, Tuple

from ..errors import IntegrationError


# (a, b, f(a), f(mid), f(b), whole-interval estimate, tolerance, depth)
_Interval = Tuple[float, float, float, float, float, float, float, int]


def _simpson(a: float, b: float, fa: float, fm: float, fb: float) -> float:
    return (b - a) / 6.0 * (fa + 4.0 * fm + fb)


def adaptive_simpson(
    f: Callable[[float], float],
    a: float,
    b: float,
    tolerance: float = 1e-6,
    max_depth: int = 50,
    max_intervals: int = 100_000,
) -> float:
    """Integrate f over [a, b] with the adaptive Simpson rule.

    An interval is accepted when |left + right - whole| <= 15 * tol, with
    the Richardson term (left + right - whole) / 15 added to the estimate.
    Otherwise it is halved and each half inherits tol / 2.

    Args:
        f: integrand
        a: lower limit
        b: upper limit (b < a integrates in reverse and negates)
        tolerance: error target for the whole interval
        max_depth: maximum number of halvings of any interval
        max_intervals: maximum number of intervals processed

    Returns:
        estimate of the integral

    Raises:
        IntegrationError: a limit was exceeded or the estimate is not finite
    """
    if a == b:
        return 0.0
    if b < a:
        return -adaptive_simpson(f, b, a, tolerance, max_depth, max_intervals)

    fa = f(a)
    fb = f(b)
    fm = f(0.5 * (a + b))

    stack: List[_Interval] = [(a, b, fa, fm, fb, _simpson(a, b, fa, fm, fb), tolerance, 0)]
    total = 0.0
    processed = 0

    while stack:
        lo, hi, flo, fmid, fhi, whole, tol, depth = stack.pop()

        processed += 1
        if processed > max_intervals:
            raise IntegrationError(f"adaptive Simpson exceeded {max_intervals} intervals")

        mid = 0.5 * (lo + hi)
        f_left = f(0.5 * (lo + mid))
        f_right = f(0.5 * (mid + hi))

        left = _simpson(lo, mid, flo, f_left, fmid)
        right = _simpson(mid, hi, fmid, f_right, fhi)
        delta = left + right - whole

        if abs(delta) <= 15.0 * tol:
            total += left + right + delta / 15.0
            continue

        if depth >= max_depth:
            raise IntegrationError(f"adaptive Simpson exceeded depth {max_depth} on [{lo}, {hi}]")

        # Right half first so the left half is processed next
        stack.append((mid, hi, fmid, f_right, fhi, right, 0.5 * tol, depth + 1))
        stack.append((lo, mid, flo, f_left, fmid, left, 0.5 * tol, depth + 1))

    if not math.isfinite(total):
        raise IntegrationError("adaptive Simpson produced a non-finite value")

    return total


def trapezoid(f: Callable[[float], float], a: float, b: float, intervals: int = 1000) -> float:
    """Composite trapezoidal rule with ``intervals`` equal subintervals.

    h/2 * (f(a) + 2 * sum f(a + i h) + f(b)),  h = (b - a) / intervals
    """
    if intervals < 1:
        raise ValueError("intervals must be at least 1")

    h = (b - a) / intervals
    total = f(a) + f(b)
    for i in range(1, intervals):
        total += 2.0 * f(a + i * h)

    return 0.5 * h * total


def graded_trapezoid(
    f: Callable[[float], float],
    lower: float,
    x: float,
    reference: float,
    intervals: int = 1000,
) -> float:
    """Trapezoidal integral of f from lower to x on a fixed geometric grid.

    The nodes lower * r**i, r = (reference / lower) ** (1 / intervals), do
    not depend on x, so for f >= 0 the result never decreases as x grows.
    ``intervals`` cells cover [lower, reference]; the grid continues with the
    same ratio past reference. The cell containing x is closed with a
    partial trapezoid ending at x.

    Args:
        f: integrand, evaluated at the nodes and at x
        lower: start of the grid (> 0)
        x: upper integration limit (finite)
        reference: end of the first ``intervals`` cells (> lower)
        intervals: cells between lower and reference
    """
    if intervals < 1:
        raise ValueError("intervals must be at least 1")
    if lower <= 0 or reference <= lower:
        raise ValueError("graded grid needs 0 < lower < reference")
    if not math.isfinite(x):
        raise ValueError(f"upper limit must be finite, got {x}")
    if x <= lower:
        return 0.0

    log_ratio = math.log(reference / lower) / intervals

    total = 0.0
    left = lower
    f_left = f(left)
    i = 1
    while True:
        right = lower * math.exp(i * log_ratio)
        if right > x:
            break
        f_right = f(right)
        total += 0.5 * (right - left) * (f_left + f_right)
        left, f_left = right, f_right
        i += 1

    if x > left:
        total += 0.5 * (x - left) * (f_left + f(x))
    return total
