import math
from typing import List, Sequence, Tuple

from tabscope.core.models import ColumnProfile, CorrelationEdge


def data_quality_score(row_count: int, column_count: int, missing: int) -> int:
    """
    Share of non-missing cells as a whole percentage (halves round up).
    An empty table scores 100.
    """
    cells = row_count * column_count
    if cells == 0:
        return 100
    return int(math.floor(100 * (1 - missing / cells) + 0.5))


def generate_insights(
    row_count: int,
    profiles: Sequence[ColumnProfile],
    correlations: Sequence[CorrelationEdge],
) -> Tuple[str, ...]:
    """
    Short, deterministic summary statements.

    Order is fixed: shape, data quality, numeric columns, categorical
    columns, correlations. The last three only appear when non-zero.
    """
    column_count = len(profiles)
    missing = sum(p.missing_count for p in profiles)
    numeric = sum(1 for p in profiles if p.is_numeric)
    categorical = column_count - numeric

    insights: List[str] = [
        f"Dataset contains {row_count} rows and {column_count} columns",
        f"Data quality score: {data_quality_score(row_count, column_count, missing)}% "
        f"({missing} missing values)",
    ]

    if numeric:
        insights.append(
            f"{numeric} numeric columns detected for statistical analysis"
        )
    if categorical:
        insights.append(
            f"{categorical} categorical columns identified for grouping operations"
        )
    if correlations:
        insights.append(
            f"Found {len(correlations)} significant correlations between numeric variables"
        )

    return tuple(insights)
