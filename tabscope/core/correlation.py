"""
Pairwise Pearson correlation across numeric columns.
"""

import logging
import math
from itertools import combinations
from typing import Optional, Sequence, Tuple

import numpy as np

from tabscope.core.models import CorrelationEdge

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.3


def pearson(x: Sequence[float], y: Sequence[float]) -> Optional[float]:
    """
    Pearson correlation of two aligned sequences.

    Rows where either side is NaN are dropped pairwise. Returns ``None``
    when the coefficient is undefined: fewer than two aligned rows, or
    a constant column on either side.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)

    mask = np.isfinite(x) & np.isfinite(y)
    x, y = x[mask], y[mask]

    if len(x) < 2:
        return None

    # exact constant check; x - mean(x) is not always exactly 0 for constants
    if x.max() == x.min() or y.max() == y.min():
        return None

    dx = x - x.mean()
    dy = y - y.mean()

    denominator = math.sqrt(float((dx * dx).sum()) * float((dy * dy).sum()))
    if denominator == 0 or not math.isfinite(denominator):
        return None

    r = float((dx * dy).sum()) / denominator
    if not math.isfinite(r):
        return None

    return min(1.0, max(-1.0, r))


def find_correlations(
    columns: Sequence[Tuple[str, Sequence[float]]],
    threshold: float = DEFAULT_THRESHOLD,
) -> Tuple[CorrelationEdge, ...]:
    """
    Significant correlations between every pair of numeric columns.

    ``columns`` is ``(name, per-row floats)`` in column order. An edge is
    kept when ``|r| > threshold``; output follows pair discovery order
    (first column ascending, then second).
    """
    edges = []

    for (name_a, values_a), (name_b, values_b) in combinations(columns, 2):
        r = pearson(values_a, values_b)

        if r is None:
            logger.debug("Correlation %s/%s undefined, skipped", name_a, name_b)
            continue

        if abs(r) > threshold:
            edges.append(CorrelationEdge(column_a=name_a, column_b=name_b, coefficient=r))

    return tuple(edges)
