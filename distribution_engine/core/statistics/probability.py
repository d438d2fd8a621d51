"""distribution_engine.core.statistics.probability

Probabilities of inequality events built from a density and a CDF.

| selector | discrete         | continuous               |
|----------|------------------|--------------------------|
| le       | cdf(x)           | cdf(x)                   |
| lt       | cdf(x-1)         | cdf(x) - density(x)      |
| ge       | 1 - cdf(x-1)     | 1 - cdf(x) + density(x)  |
| gt       | 1 - cdf(x)       | 1 - cdf(x)               |
| eq       | density(x)       | density(x)               |
| ne       | 1 - density(x)   | 1 - density(x)           |

The continuous lt/ge/ne rows mix a point density into the result. A
continuous variable has zero point probability, so these rows are not
P(X < x), P(X >= x), P(X != x) in the strict sense; callers depend on the
values as tabulated above.
"""

from __future__ import annotations

from typing import Callable, Union

from ..models.inequality import InequalityType

Density = Callable[[float], float]
Cdf = Callable[[float], float]


def calculate_probability(
    x: float,
    density: Density,
    cdf: Cdf,
    inequality: Union[InequalityType, str] = InequalityType.LE,
    discrete: bool = True,
) -> float:
    """Probability of the event selected by ``inequality`` at x.

    Args:
        x: evaluation point
        density: pmf (discrete) or pdf (continuous)
        cdf: cumulative distribution function
        inequality: selector (enum member or its string value)
        discrete: True for discrete distributions

    Returns:
        probability as tabulated in the module docstring

    Raises:
        DomainError: unknown selector string
    """
    kind = InequalityType.coerce(inequality)

    if kind is InequalityType.LE:
        return cdf(x)
    if kind is InequalityType.LT:
        return cdf(x - 1) if discrete else cdf(x) - density(x)
    if kind is InequalityType.GE:
        return 1.0 - cdf(x - 1) if discrete else 1.0 - cdf(x) + density(x)
    if kind is InequalityType.GT:
        return 1.0 - cdf(x)
    if kind is InequalityType.EQ:
        return density(x)
    # InequalityType.NE
    return 1.0 - density(x)


def calculate_interval_probability(a: float, b: float, cdf: Cdf, inclusive: bool = True) -> float:
    """Probability of an integer interval of a discrete distribution.

    inclusive:  P(a <= X <= b) = cdf(b) - cdf(a - 1)
    exclusive:  P(a <  X <  b) = cdf(b - 1) - cdf(a)
    """
    if inclusive:
        return cdf(b) - cdf(a - 1)
    return cdf(b - 1) - cdf(a)
