"""
Chart-ready aggregates: fixed-width histograms for numeric columns
and top-N frequency bars for categorical columns.
"""

import math
from typing import Sequence, Tuple

import numpy as np

from tabscope.core.models import (
    Cell,
    CategoryBar,
    CategoryChart,
    Histogram,
    HistogramBucket,
)
from tabscope.core.summarizer import value_frequencies


def _round_label(value: float) -> int:
    """Nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def bucket_labels(low: float, high: float, bins: int) -> Tuple[str, ...]:
    width = (high - low) / bins
    labels = []

    for i in range(bins):
        lower = low + i * width
        upper = high if i == bins - 1 else low + (i + 1) * width
        labels.append(f"{_round_label(lower)}-{_round_label(upper)}")

    return tuple(labels)


def histogram(column: str, values: Sequence[float], bins: int = 4) -> Histogram:
    """
    ``bins`` contiguous equal-width buckets spanning [min, max].

    A value lands in ``floor((v - min) / width)``, clamped to the last
    bucket so ``v == max`` is counted. When min == max every value goes
    to the first bucket. NaN values are ignored.
    """
    values = np.asarray(values, dtype=float)
    values = values[np.isfinite(values)]

    if not len(values):
        return Histogram(column=column, buckets=())

    low, high = float(values.min()), float(values.max())
    width = (high - low) / bins

    if width > 0:
        positions = np.floor((values - low) / width).astype(int)
        positions = np.clip(positions, 0, bins - 1)
    else:
        positions = np.zeros(len(values), dtype=int)

    counts = np.bincount(positions, minlength=bins)

    return Histogram(
        column=column,
        buckets=tuple(
            HistogramBucket(label=label, count=int(count))
            for label, count in zip(bucket_labels(low, high, bins), counts)
        ),
    )


def category_chart(column: str, cells: Sequence[Cell], limit: int = 10) -> CategoryChart:
    """Most frequent non-missing values, highest count first."""
    present = [c for c in cells if c not in (None, "")]
    counts = value_frequencies(present).head(limit)

    return CategoryChart(
        column=column,
        bars=tuple(
            CategoryBar(category=str(value), count=int(count))
            for value, count in counts.items()
        ),
    )


# -------------------------------------------------
# PUBLIC API
# -------------------------------------------------
def build_histograms(
    columns: Sequence[Tuple[str, Sequence[float]]],
    bins: int = 4,
    max_columns: int = 2,
) -> Tuple[Histogram, ...]:
    """Histograms for the first ``max_columns`` numeric columns."""
    return tuple(
        histogram(name, values, bins) for name, values in list(columns)[:max_columns]
    )


def build_category_charts(
    columns: Sequence[Tuple[str, Sequence[Cell]]],
    limit: int = 10,
    max_columns: int = 3,
) -> Tuple[CategoryChart, ...]:
    """Bar data for the first ``max_columns`` categorical columns."""
    return tuple(
        category_chart(name, cells, limit) for name, cells in list(columns)[:max_columns]
    )
