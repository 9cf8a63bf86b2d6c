"""
Quartile algorithm: numpy reference for the box plot landmarks.

Reduces one sample set to the five box plot landmarks plus its outliers:

  1. Sort a copy of the values ascending.
  2. Pick median, lower median and upper median by fixed index formulas.
     This is not the "median of each half" method; with n = len and
     mid = n // 2:
       - even n: median = (a[mid-1] + a[mid]) / 2, upper = a[mid + mid//2]
       - odd n:  median = a[mid],                  upper = a[mid + 1 + mid//2]
       - both:   lower = a[mid // 2]
  3. iqr = upper - lower; fences at 1.5 * iqr beyond the lower/upper median.
  4. Lower outliers are the leading run below the lower fence, upper outliers
     the trailing run above the upper fence. Everything in between is the body
     and its extremes are the whisker ends.

Pure function of its input. No logging.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from boxplotchart.chart.errors import MIN_QUARTILE_VALUES, InsufficientData

# Tukey fence multiplier.
FENCE_FACTOR = 1.5


@dataclass(frozen=True)
class QuartileSummary:
    """Box plot landmarks for one sample set."""
    median: float
    lower_median: float
    upper_median: float
    iqr: float
    lower_fence: float
    upper_fence: float
    min_before_lower_fence: float   # lower whisker end
    max_before_upper_fence: float   # upper whisker end
    lower_outliers: tuple[float, ...]
    upper_outliers: tuple[float, ...]
    count: int

    @property
    def min_value(self) -> float:
        """Smallest value in the set, outlier or not."""
        if self.lower_outliers:
            return self.lower_outliers[0]
        return self.min_before_lower_fence

    @property
    def max_value(self) -> float:
        """Largest value in the set, outlier or not."""
        if self.upper_outliers:
            return self.upper_outliers[-1]
        return self.max_before_upper_fence

    @property
    def outliers(self) -> tuple[float, ...]:
        return self.lower_outliers + self.upper_outliers


def _as_floats(arr: np.ndarray) -> tuple[float, ...]:
    return tuple(float(v) for v in arr)


def summarize(values: Sequence[float]) -> QuartileSummary:
    """
    Compute the quartile summary of one sample set.

    Args:
        values: Sample values in any order. Not modified.

    Returns:
        QuartileSummary with medians, fences, whisker ends and outliers.

    Raises:
        InsufficientData: If fewer than 3 values are given.
    """
    if len(values) < MIN_QUARTILE_VALUES:
        raise InsufficientData(len(values))

    # Step 1: sorted copy
    arr = np.sort(np.asarray(values, dtype=float))

    # Step 2: medians by position
    n = len(arr)
    mid = n // 2
    if n % 2 == 0:
        median = (arr[mid - 1] + arr[mid]) / 2.0
        upper_median = arr[mid + mid // 2]
    else:
        median = arr[mid]
        upper_median = arr[mid + 1 + mid // 2]
    lower_median = arr[mid // 2]

    # Step 3: Tukey fences
    iqr = upper_median - lower_median
    lower_fence = lower_median - FENCE_FACTOR * iqr
    upper_fence = upper_median + FENCE_FACTOR * iqr

    # Step 4: outliers; arr is sorted so each mask selects a leading/trailing run
    lower_outliers = arr[arr < lower_fence]
    upper_outliers = arr[arr > upper_fence]
    min_before_lower_fence = arr[len(lower_outliers)]
    max_before_upper_fence = arr[n - len(upper_outliers) - 1]

    return QuartileSummary(
        median=float(median),
        lower_median=float(lower_median),
        upper_median=float(upper_median),
        iqr=float(iqr),
        lower_fence=float(lower_fence),
        upper_fence=float(upper_fence),
        min_before_lower_fence=float(min_before_lower_fence),
        max_before_upper_fence=float(max_before_upper_fence),
        lower_outliers=_as_floats(lower_outliers),
        upper_outliers=_as_floats(upper_outliers),
        count=n,
    )
