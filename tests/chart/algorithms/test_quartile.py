"""Unit tests for the quartile algorithm (medians, fences, outliers)."""

from __future__ import annotations

from collections import Counter

import numpy as np
import pytest

from boxplotchart.chart.algorithms.quartile import summarize
from boxplotchart.chart.errors import InsufficientData


def test_even_count_worked_example():
    q = summarize([48.0, 52.0, 57.0, 64.0, 72.0, 76.0, 77.0, 81.0, 85.0, 88.0])

    assert q.iqr == 24.0
    assert q.median == 74.0
    assert q.lower_median == 57.0
    assert q.upper_median == 81.0
    assert q.lower_fence == 21.0
    assert q.upper_fence == 117.0
    assert q.min_before_lower_fence == 48.0
    assert q.max_before_upper_fence == 88.0
    assert q.lower_outliers == ()
    assert q.upper_outliers == ()
    assert q.min_value == 48.0
    assert q.max_value == 88.0
    assert q.count == 10


def test_odd_count_with_lower_outliers():
    q = summarize([5.0, 6.0, 48.0, 52.0, 57.0, 61.0, 64.0, 72.0, 76.0, 77.0, 81.0, 85.0, 88.0])

    assert q.iqr == 29.0
    assert q.median == 64.0
    assert q.lower_median == 52.0
    assert q.upper_median == 81.0
    assert q.lower_fence == 8.5
    assert q.upper_fence == 124.5
    assert q.min_before_lower_fence == 48.0
    assert q.max_before_upper_fence == 88.0
    assert q.lower_outliers == (5.0, 6.0)
    assert q.upper_outliers == ()
    assert q.min_value == 5.0
    assert q.max_value == 88.0


def test_upper_outliers_come_from_the_tail():
    """A high value is an upper outlier even though low values precede it."""
    q = summarize([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 100.0])

    # even n=8: mid=4, lower=a[2]=3, upper=a[6]=7, iqr=4 -> fences -3 and 13
    assert q.lower_median == 3.0
    assert q.upper_median == 7.0
    assert q.upper_fence == 13.0
    assert q.upper_outliers == (100.0,)
    assert q.lower_outliers == ()
    assert q.max_before_upper_fence == 7.0
    assert q.max_value == 100.0


def test_unsorted_input_is_not_modified():
    values = [88.0, 48.0, 77.0, 52.0, 64.0]
    q = summarize(values)
    assert values == [88.0, 48.0, 77.0, 52.0, 64.0]
    assert q.median == 64.0


def test_minimum_three_values():
    q = summarize([3.0, 1.0, 2.0])
    # odd n=3: mid=1, median=a[1], upper=a[2], lower=a[0]
    assert (q.lower_median, q.median, q.upper_median) == (1.0, 2.0, 3.0)


@pytest.mark.parametrize("values", [[], [1.0], [1.0, 2.0]])
def test_insufficient_data(values):
    with pytest.raises(InsufficientData) as exc_info:
        summarize(values)
    assert exc_info.value.count == len(values)
    assert "minimum of 3" in str(exc_info.value)


def test_identical_values():
    q = summarize([4.0, 4.0, 4.0, 4.0])
    assert q.iqr == 0.0
    assert q.lower_outliers == () and q.upper_outliers == ()
    assert q.min_value == q.max_value == 4.0


def test_invariants_on_random_samples():
    """Ordering, membership and partition invariants hold for arbitrary inputs."""
    rng = np.random.default_rng(42)
    for n in range(3, 60):
        values = list(rng.normal(50.0, 20.0, size=n))
        if n % 5 == 0:
            values += [500.0, -400.0]
        q = summarize(values)

        assert q.min_before_lower_fence <= q.lower_median <= q.median
        assert q.median <= q.upper_median <= q.max_before_upper_fence
        assert q.min_before_lower_fence in values
        assert q.max_before_upper_fence in values
        assert all(v < q.lower_fence for v in q.lower_outliers)
        assert all(v > q.upper_fence for v in q.upper_outliers)

        body = [v for v in values if q.lower_fence <= v <= q.upper_fence]
        assert min(body) == q.min_before_lower_fence
        assert max(body) == q.max_before_upper_fence
        assert Counter(list(q.lower_outliers) + body + list(q.upper_outliers)) == Counter(values)
