import pytest

from tabscope.core.charts import (
    _round_label,
    build_category_charts,
    build_histograms,
    bucket_labels,
    category_chart,
    histogram,
)
from tabscope.core.models import CategoryBar


# -------------------------------------------------
# Histograms
# -------------------------------------------------

def test_four_buckets_with_rounded_labels():
    hist = histogram("Sales", [1200, 25, 75, 300, 1200, 450, 200, 50, 25, 75])

    assert [b.label for b in hist.buckets] == ["25-319", "319-613", "613-906", "906-1200"]
    assert [b.count for b in hist.buckets] == [7, 1, 0, 2]


def test_max_value_lands_in_last_bucket():
    hist = histogram("q", [1, 2, 3])

    assert [b.count for b in hist.buckets] == [1, 0, 1, 1]
    assert [b.label for b in hist.buckets] == ["1-2", "2-2", "2-3", "3-3"]


def test_constant_column_goes_to_first_bucket():
    hist = histogram("flat", [5, 5, 5])

    assert [b.count for b in hist.buckets] == [3, 0, 0, 0]
    assert [b.label for b in hist.buckets] == ["5-5"] * 4


@pytest.mark.parametrize(
    "values",
    [
        [1.0],
        [0.1, 0.2, 0.3, 0.7, 0.9],
        [-10, -5, 0, 5, 10, 10, 10],
        list(range(101)),
        [3.3] * 7,
    ],
)
def test_bucket_counts_sum_to_value_count(values):
    hist = histogram("v", values)

    assert len(hist.buckets) == 4
    assert hist.total == len(values)


def test_nan_values_are_ignored():
    hist = histogram("v", [1.0, float("nan"), 3.0])

    assert hist.total == 2


def test_empty_values_give_no_buckets():
    assert histogram("v", []).buckets == ()


def test_bin_count_is_configurable():
    hist = histogram("v", [0, 10], bins=2)

    assert [b.label for b in hist.buckets] == ["0-5", "5-10"]
    assert [b.count for b in hist.buckets] == [1, 1]


def test_negative_range_labels():
    assert bucket_labels(-2.5, 2.5, 4) == ("-3--1", "-1-0", "0-1", "1-3")


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 3), (-2.5, -3), (0.4, 0), (-0.4, 0), (612.5, 613), (906.25, 906)],
)
def test_label_rounding_halves_away_from_zero(value, expected):
    assert _round_label(value) == expected


def test_only_first_two_numeric_columns_get_histograms():
    columns = [("a", [1, 2]), ("b", [3, 4]), ("c", [5, 6])]

    assert [h.column for h in build_histograms(columns)] == ["a", "b"]
    assert [h.column for h in build_histograms(columns, max_columns=3)] == ["a", "b", "c"]


# -------------------------------------------------
# Category charts
# -------------------------------------------------

def test_category_bars_sorted_by_count_then_first_seen():
    chart = category_chart("Region", ["North", "South", "East", "South", "North", "West"])

    assert chart.bars == (
        CategoryBar("North", 2),
        CategoryBar("South", 2),
        CategoryBar("East", 1),
        CategoryBar("West", 1),
    )


def test_category_bars_skip_missing_and_cap_at_ten():
    cells = [f"v{i}" for i in range(12)] + [None, ""]
    chart = category_chart("c", cells)

    assert len(chart.bars) == 10
    assert all(bar.category for bar in chart.bars)


def test_all_missing_category_chart_is_empty():
    assert category_chart("c", [None, None]).bars == ()


def test_only_first_three_categorical_columns_are_charted():
    columns = [(name, ["x"]) for name in "abcd"]

    assert [c.column for c in build_category_charts(columns)] == ["a", "b", "c"]
