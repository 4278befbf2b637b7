from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from polyfit.samples import SampleSet


def power(x: float, exp: int) -> float:
    """x**exp that saturates to a signed infinity instead of raising OverflowError."""
    try:
        return x ** exp
    except OverflowError:
        return math.copysign(math.inf, x) if exp % 2 else math.inf


def regress(x: float, terms: Sequence[Any]) -> float:
    """Evaluate sum(terms[k] * x**k), lowest power first."""
    x = float(x)
    a = 0.0
    for exp, term in enumerate(terms):
        a += float(term) * power(x, exp)
    return a


def correlation_coefficient(samples: SampleSet, terms: Sequence[Any]) -> float:
    """Squared Pearson correlation between the fitted and observed y values.

    Returns 0 when either series has no variance.
    """
    pairs = samples.pairs()
    first_y = pairs[0][1]
    if all(y == first_y for _, y in pairs):
        return 0.0

    n = len(pairs)
    sx = sx2 = sy = sy2 = sxy = 0.0

    for x_i, y in pairs:
        x = regress(x_i, terms)
        sx += x
        sy += y
        sxy += x * y
        sx2 += x * x
        sy2 += y * y

    spread = (sx2 - (sx * sx) / n) * (sy2 - (sy * sy) / n)
    # rounding can leave a constant prediction with a tiny negative spread
    if spread <= 0:
        return 0.0
    div = math.sqrt(spread)
    return power((sxy - (sx * sy) / n) / div, 2)


def standard_error(samples: SampleSet, terms: Sequence[Any]) -> float:
    n = len(samples)
    if n <= 2:
        return 0.0
    a = 0.0
    for x, y in samples.pairs():
        a += power(regress(x, terms) - y, 2)
    return math.sqrt(a / (n - 2))
