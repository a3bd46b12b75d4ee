import math

import numpy as np
import pytest

from tabscope.core.correlation import find_correlations, pearson


def test_perfect_positive_and_negative():
    x = [1, 2, 3, 4, 5]

    assert pearson(x, [2, 4, 6, 8, 10]) == pytest.approx(1.0)
    assert pearson(x, [10, 8, 6, 4, 2]) == pytest.approx(-1.0)


def test_coefficient_is_symmetric_and_bounded():
    x = [1.5, 2.25, 7.0, 3.1, 9.9, 4.0]
    y = [3.0, 1.0, 8.5, 2.2, 7.7, 5.5]

    r_xy = pearson(x, y)
    r_yx = pearson(y, x)

    assert r_xy == r_yx
    assert -1.0 <= r_xy <= 1.0


def test_linear_relationship_stays_within_bounds():
    x = np.linspace(0.1, 1000.3, 97)
    r = pearson(x, 3 * x + 1)

    assert -1.0 <= r <= 1.0
    assert r == pytest.approx(1.0)


def test_zero_variance_is_undefined():
    assert pearson([5, 5, 5], [1, 2, 3]) is None
    assert pearson([1, 2, 3], [0.1, 0.1, 0.1]) is None


def test_too_few_rows_is_undefined():
    assert pearson([1], [2]) is None
    assert pearson([], []) is None


def test_rows_with_nan_are_excluded_pairwise():
    r = pearson([1, 2, math.nan, 4], [2, 4, 6, 8])

    assert r == pytest.approx(1.0)


def test_known_coefficient():
    sales = [1200, 25, 75, 300, 1200, 450, 200, 50, 25, 75]
    quantity = [2, 5, 3, 1, 1, 2, 4, 3, 10, 5]

    assert pearson(sales, quantity) == pytest.approx(-0.559, abs=1e-3)


def test_edges_keep_pair_discovery_order():
    columns = [
        ("a", [1, 2, 3, 4]),
        ("b", [2, 4, 6, 8]),
        ("c", [4, 3, 2, 1]),
    ]

    edges = find_correlations(columns)

    assert [(e.column_a, e.column_b) for e in edges] == [("a", "b"), ("a", "c"), ("b", "c")]
    assert edges[1].coefficient == pytest.approx(-1.0)


def test_weak_correlations_are_dropped():
    columns = [
        ("a", [1, 2, 3, 4, 5, 6]),
        ("b", [1, -1, 1, -1, 1, -1]),
    ]

    # r is about -0.29, below the 0.3 threshold
    assert find_correlations(columns) == ()
    assert len(find_correlations(columns, threshold=0.2)) == 1


def test_constant_column_produces_no_edge_and_no_nan():
    columns = [
        ("a", [1, 2, 3]),
        ("flat", [7, 7, 7]),
        ("b", [3, 2, 1]),
    ]

    edges = find_correlations(columns)

    assert [(e.column_a, e.column_b) for e in edges] == [("a", "b")]
    assert all(math.isfinite(e.coefficient) for e in edges)
