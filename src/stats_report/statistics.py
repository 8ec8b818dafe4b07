"""Mean, median and mode over an in-memory sequence of numbers.

These are pure functions: they never perform I/O, never suspend and never
mutate their input. An empty sequence yields NaN for mean and median and an
empty list for mode, so callers check with ``math.isnan`` instead of catching
an exception.
"""

import math
from collections import Counter
from typing import Iterable

from stats_report.types import NumberSequence


def mean(xs: Iterable[float]) -> float:
    """Arithmetic mean; NaN when xs is empty."""
    values = list(xs)
    if not values:
        return math.nan
    return sum(values) / len(values)


def median(xs: Iterable[float]) -> float:
    """Middle value of the sorted sequence, or the mean of the two central values."""
    ordered = sorted(xs)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 1:
        return float(ordered[middle])
    # Empty input slices to [] here, and mean([]) is NaN.
    return mean(ordered[max(middle - 1, 0):middle + 1])


def mode(xs: Iterable[float]) -> NumberSequence:
    """Every value sharing the highest occurrence count, ascending.

    When every value occurs exactly once, all of them are returned.
    """
    counts = Counter(xs)
    if not counts:
        return []
    highest = max(counts.values())
    return sorted(float(value) for value, count in counts.items() if count == highest)
