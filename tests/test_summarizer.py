import numpy as np
import pytest

from tabscope.config.options import AnalysisOptions
from tabscope.core.models import (
    NO_DATA,
    CategoricalStats,
    ColumnKind,
    NumericStats,
    ValueCount,
)
from tabscope.core.parser import parse_table
from tabscope.core.summarizer import (
    numeric_stats,
    numeric_values,
    summarize_column,
    summarize_table,
    value_frequencies,
)


# -------------------------------------------------
# Classification
# -------------------------------------------------

def test_all_parseable_values_make_a_numeric_column():
    profile = summarize_column("n", ["1", "2.5", "-3", "1e3"])

    assert profile.kind is ColumnKind.NUMERIC
    assert isinstance(profile.stats, NumericStats)


def test_single_text_value_forces_categorical():
    profile = summarize_column("n", ["1", "2", "abc", "4"])

    assert profile.kind is ColumnKind.CATEGORICAL
    assert isinstance(profile.stats, CategoricalStats)


def test_missing_cells_do_not_affect_classification():
    profile = summarize_column("n", ["1", None, "", "3"])

    assert profile.kind is ColumnKind.NUMERIC
    assert profile.missing_count == 2


@pytest.mark.parametrize("token", ["nan", "inf", "-inf"])
def test_non_finite_tokens_are_not_numbers(token):
    profile = summarize_column("n", ["1", token])

    assert profile.kind is ColumnKind.CATEGORICAL


def test_all_missing_column_is_categorical_with_no_data():
    profile = summarize_column("empty", [None, None, None])

    assert profile.kind is ColumnKind.CATEGORICAL
    assert profile.missing_count == 3
    assert profile.unique_count == 0
    assert profile.stats.min is NO_DATA
    assert profile.stats.max is NO_DATA
    assert profile.stats.top_values == ()


# -------------------------------------------------
# Numeric statistics
# -------------------------------------------------

def test_population_standard_deviation():
    stats = numeric_stats(np.array([2, 4, 4, 4, 5, 5, 7, 9], dtype=float))

    assert stats.mean == 5
    assert stats.std == 2  # sample std would be 2.138


def test_median_odd_length():
    assert numeric_stats(np.array([5.0, 1.0, 3.0])).median == 3


def test_median_even_length():
    assert numeric_stats(np.array([4.0, 1.0, 3.0, 2.0])).median == 2.5


def test_min_max_from_sorted_values():
    stats = numeric_stats(np.array([3.0, -1.0, 10.0, 2.0]))

    assert stats.min == -1
    assert stats.max == 10


def test_numeric_profile_counts():
    profile = summarize_column("A", ["1", "2", "3"])

    assert profile.missing_count == 0
    assert profile.unique_count == 3
    assert profile.stats.mean == 2
    assert profile.stats.median == 2
    assert profile.stats.std == pytest.approx(0.8165, abs=1e-4)


def test_unique_count_uses_raw_strings():
    profile = summarize_column("n", ["1", "1.0", "1"])

    assert profile.unique_count == 2


# -------------------------------------------------
# Categorical statistics
# -------------------------------------------------

def test_top_values_sorted_by_count_then_first_seen():
    profile = summarize_column("c", ["b", "a", "b", "a", "c", "c", "c"])

    assert profile.stats.top_values == (
        ValueCount("c", 3),
        ValueCount("b", 2),
        ValueCount("a", 2),
    )


def test_top_values_limited_to_five_by_default():
    cells = ["v1", "v2", "v3", "v4", "v5", "v6", "v7", "v1"]
    profile = summarize_column("c", cells)

    assert len(profile.stats.top_values) == 5
    assert profile.stats.top_values[0] == ValueCount("v1", 2)
    assert [vc.value for vc in profile.stats.top_values[1:]] == ["v2", "v3", "v4", "v5"]


def test_top_values_limit_is_configurable():
    profile = summarize_column("c", ["a", "b", "c"], AnalysisOptions(top_values=2))

    assert [vc.value for vc in profile.stats.top_values] == ["a", "b"]


def test_categorical_min_max_follow_first_seen_order():
    profile = summarize_column("c", ["zeta", "alpha", "zeta", "mid"])

    assert profile.stats.min == "zeta"
    assert profile.stats.max == "mid"
    assert profile.unique_count == 3


def test_value_frequencies_empty():
    assert value_frequencies([]).empty


# -------------------------------------------------
# Table level
# -------------------------------------------------

def test_summarize_table_keeps_column_order(basic_text):
    profiles = summarize_table(parse_table(basic_text))

    assert [p.name for p in profiles] == ["A", "B"]
    assert [p.kind for p in profiles] == [ColumnKind.NUMERIC, ColumnKind.CATEGORICAL]


def test_missing_plus_present_equals_row_count(missing_text):
    table = parse_table(missing_text)

    for profile in summarize_table(table):
        present = sum(1 for c in table.column(profile.name) if c is not None)
        assert profile.missing_count + present == table.row_count


def test_numeric_values_are_aligned_with_rows(missing_text):
    values = numeric_values(parse_table(missing_text), "A")

    assert values[0] == 1
    assert np.isnan(values[1])
    assert values[2] == 3
