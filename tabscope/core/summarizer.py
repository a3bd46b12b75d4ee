"""
Column classification and descriptive statistics.

A column is numeric only when every non-missing cell parses to a
finite float and at least one cell is present. Anything else,
including an all-missing column, is categorical.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from tabscope.config.options import AnalysisOptions
from tabscope.core.models import (
    NO_DATA,
    Cell,
    CategoricalStats,
    ColumnKind,
    ColumnProfile,
    NumericStats,
    Table,
    ValueCount,
)

logger = logging.getLogger(__name__)


# -------------------------------------------------
# PARSING HELPERS
# -------------------------------------------------
def parse_floats(cells: Sequence[Cell]) -> np.ndarray:
    """
    Float array aligned with ``cells``.
    Missing, unparseable and non-finite cells become NaN.
    """
    parsed = pd.to_numeric(
        pd.Series(list(cells), dtype=object), errors="coerce"
    ).to_numpy(dtype=float, copy=True)
    parsed[~np.isfinite(parsed)] = np.nan
    return parsed


def numeric_values(table: Table, column: str) -> np.ndarray:
    """Per-row floats of one column, NaN where a cell is not a number."""
    return parse_floats(table.column(column))


def value_frequencies(values: Sequence[str]) -> pd.Series:
    """
    Counts of each distinct value, highest first.
    Ties keep first-seen order.
    """
    series = pd.Series(list(values), dtype=object)
    if series.empty:
        return pd.Series(dtype="int64")

    counts = series.value_counts(sort=False).reindex(pd.unique(series))
    return counts.sort_values(ascending=False, kind="stable")


# -------------------------------------------------
# STATISTICS
# -------------------------------------------------
def numeric_stats(values: np.ndarray) -> NumericStats:
    """
    Mean, median, population std (divide by n), min and max.
    ``values`` must be non-empty and finite.
    """
    ordered = np.sort(values)
    n = len(ordered)
    mid = n // 2

    if n % 2:
        median = ordered[mid]
    else:
        median = (ordered[mid - 1] + ordered[mid]) / 2

    return NumericStats(
        mean=float(ordered.mean()),
        median=float(median),
        std=float(np.std(ordered, ddof=0)),
        min=float(ordered[0]),
        max=float(ordered[-1]),
    )


def categorical_stats(values: Sequence[str], top_values: int) -> CategoricalStats:
    uniques = pd.unique(pd.Series(list(values), dtype=object))
    counts = value_frequencies(values).head(top_values)

    return CategoricalStats(
        min=str(uniques[0]) if len(uniques) else NO_DATA,
        max=str(uniques[-1]) if len(uniques) else NO_DATA,
        top_values=tuple(
            ValueCount(value=str(value), count=int(count))
            for value, count in counts.items()
        ),
    )


# -------------------------------------------------
# PUBLIC API
# -------------------------------------------------
def summarize_column(
    name: str,
    cells: Sequence[Cell],
    options: Optional[AnalysisOptions] = None,
) -> ColumnProfile:
    options = options or AnalysisOptions()

    present = [c for c in cells if c not in (None, "")]
    missing = len(cells) - len(present)
    unique = len(set(present))

    parsed = parse_floats(present)
    is_numeric = len(present) > 0 and bool(np.isfinite(parsed).all())

    if is_numeric:
        kind = ColumnKind.NUMERIC
        stats = numeric_stats(parsed)
    else:
        kind = ColumnKind.CATEGORICAL
        stats = categorical_stats(present, options.top_values)

    logger.debug(
        "Column %r: %s, %s missing, %s unique", name, kind.value, missing, unique
    )

    return ColumnProfile(
        name=name,
        kind=kind,
        missing_count=missing,
        unique_count=unique,
        stats=stats,
    )


def summarize_table(
    table: Table,
    options: Optional[AnalysisOptions] = None,
) -> Tuple[ColumnProfile, ...]:
    """One profile per column, in column order."""
    options = options or AnalysisOptions()
    return tuple(
        summarize_column(name, table.column(name), options)
        for name in table.columns
    )
