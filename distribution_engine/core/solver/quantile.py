"""distribution_engine.core.solver.quantile

Inverse-CDF solvers.

Continuous case:
  Bisection on a monotone non-decreasing CDF inside a caller-supplied
  bracket [lower, upper]. The caller must guarantee
  cdf(lower) <= p <= cdf(upper); otherwise the result is the bracket
  boundary, not an error.

Discrete case:
  Walk k = start, start+1, ... accumulating pmf(k) and return the first k
  whose running sum reaches p. The walk is capped so that slowly
  converging mass functions still terminate.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-8
DEFAULT_MAX_BISECTIONS = 200
DEFAULT_MAX_WALK = 10_000


def bisection_quantile(
    cdf: Callable[[float], float],
    p: float,
    lower: float,
    upper: float,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_BISECTIONS,
) -> float:
    """Find x with cdf(x) = p by bisection.

    Args:
        cdf: non-decreasing cumulative distribution function
        p: target probability in [0, 1]
        lower: lower end of the search bracket
        upper: upper end of the search bracket
        tolerance: stop once upper - lower <= tolerance
        max_iterations: hard cap on halvings (guards tolerances below the
            float spacing of the bracket)

    Returns:
        midpoint of the final bracket
    """
    lo = float(lower)
    hi = float(upper)

    for _ in range(max_iterations):
        if hi - lo <= tolerance:
            break
        mid = 0.5 * (lo + hi)
        if cdf(mid) < p:
            lo = mid
        else:
            hi = mid
    else:
        logger.debug("Bisection stopped after %d iterations (width %.3g)", max_iterations, hi - lo)

    return 0.5 * (lo + hi)


def discrete_quantile(
    pmf: Callable[[int], float],
    p: float,
    start: int = 0,
    stop: Optional[int] = None,
    max_iterations: int = DEFAULT_MAX_WALK,
) -> int:
    """Smallest k >= start whose cumulative mass reaches p.

    Args:
        pmf: probability mass function
        p: target probability in [0, 1]
        start: first support point
        stop: last support point (None for unbounded support)
        max_iterations: maximum number of support points visited

    Returns:
        the quantile k; ``stop`` when the support is exhausted first, the
        last visited k when the iteration cap is hit
    """
    k = int(start)
    cumulative = 0.0

    for _ in range(max_iterations):
        cumulative += pmf(k)
        if cumulative >= p:
            return k
        if stop is not None and k >= stop:
            return int(stop)
        k += 1

    logger.warning(
        "Discrete quantile walk hit the %d iteration cap (p=%g, cumulative=%g)",
        max_iterations, p, cumulative,
    )
    return k - 1
