"""
Typed data model shared by every engine component.

Rules:
- Everything here is frozen and built from tuples
- A Table row is positional, aligned with Table.columns
- Column statistics are a tagged variant (NumericStats | CategoricalStats)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import pandas as pd


# Explicit "no data" marker for categorical min/max of an all-missing column
NO_DATA = None

Cell = Optional[str]


# =====================================================
# TABLE
# =====================================================

@dataclass(frozen=True)
class Table:
    """
    Parsed delimited text.

    ``rows`` holds fixed-arity tuples; a cell is a trimmed string or
    ``None`` when the value is empty or absent.
    """

    columns: Tuple[str, ...]
    rows: Tuple[Tuple[Cell, ...], ...]
    index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        width = len(self.columns)
        for row in self.rows:
            if len(row) != width:
                raise ValueError(
                    f"Row arity {len(row)} does not match {width} columns"
                )
        object.__setattr__(
            self, "index", {name: i for i, name in enumerate(self.columns)}
        )

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def column(self, name: str) -> Tuple[Cell, ...]:
        """All cells of one column, in row order."""
        pos = self.index[name]
        return tuple(row[pos] for row in self.rows)

    def to_frame(self) -> pd.DataFrame:
        """Object-dtype DataFrame view; missing cells are ``None``."""
        return pd.DataFrame(
            list(self.rows), columns=list(self.columns), dtype=object
        )


# =====================================================
# COLUMN PROFILES
# =====================================================

class ColumnKind(str, Enum):
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


@dataclass(frozen=True)
class ValueCount:
    value: str
    count: int


@dataclass(frozen=True)
class NumericStats:
    mean: float
    median: float
    std: float
    min: float
    max: float

    kind = ColumnKind.NUMERIC

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean": self.mean,
            "median": self.median,
            "std": self.std,
            "min": self.min,
            "max": self.max,
        }


@dataclass(frozen=True)
class CategoricalStats:
    """
    ``min`` / ``max`` are the first and last distinct values in
    first-seen order, not sorted extremes.
    """

    min: Optional[str]
    max: Optional[str]
    top_values: Tuple[ValueCount, ...]

    kind = ColumnKind.CATEGORICAL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "topValues": [
                {"value": vc.value, "count": vc.count} for vc in self.top_values
            ],
        }


ColumnStats = Union[NumericStats, CategoricalStats]


@dataclass(frozen=True)
class ColumnProfile:
    name: str
    kind: ColumnKind
    missing_count: int
    unique_count: int
    stats: ColumnStats

    @property
    def is_numeric(self) -> bool:
        return self.kind is ColumnKind.NUMERIC

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.kind.value,
            "missing": self.missing_count,
            "unique": self.unique_count,
            "stats": self.stats.to_dict(),
        }


# =====================================================
# RELATIONSHIPS & CHART DATA
# =====================================================

@dataclass(frozen=True)
class CorrelationEdge:
    column_a: str
    column_b: str
    coefficient: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "col1": self.column_a,
            "col2": self.column_b,
            "value": self.coefficient,
        }


@dataclass(frozen=True)
class HistogramBucket:
    label: str
    count: int


@dataclass(frozen=True)
class Histogram:
    column: str
    buckets: Tuple[HistogramBucket, ...]

    @property
    def total(self) -> int:
        return sum(b.count for b in self.buckets)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "column": self.column,
            "data": [{"bin": b.label, "count": b.count} for b in self.buckets],
        }


@dataclass(frozen=True)
class CategoryBar:
    category: str
    count: int


@dataclass(frozen=True)
class CategoryChart:
    column: str
    bars: Tuple[CategoryBar, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "column": self.column,
            "data": [
                {"category": b.category, "count": b.count} for b in self.bars
            ],
        }


# =====================================================
# ANALYSIS RESULT
# =====================================================

@dataclass(frozen=True)
class AnalysisResult:
    row_count: int
    column_count: int
    column_names: Tuple[str, ...]
    column_profiles: Tuple[ColumnProfile, ...]
    insights: Tuple[str, ...]
    correlations: Tuple[CorrelationEdge, ...]
    histograms: Tuple[Histogram, ...]
    category_charts: Tuple[CategoryChart, ...]

    def profile(self, name: str) -> ColumnProfile:
        for p in self.column_profiles:
            if p.name == name:
                return p
        raise KeyError(name)

    def numeric_profiles(self) -> List[ColumnProfile]:
        return [p for p in self.column_profiles if p.is_numeric]

    def categorical_profiles(self) -> List[ColumnProfile]:
        return [p for p in self.column_profiles if not p.is_numeric]

    @property
    def total_missing(self) -> int:
        return sum(p.missing_count for p in self.column_profiles)

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-safe payload in the layout the dashboard renders:
        overview / columns / insights / correlations / visualizationData.
        """
        return {
            "overview": {
                "rows": self.row_count,
                "columns": self.column_count,
                "columnNames": list(self.column_names),
            },
            "columns": [p.to_dict() for p in self.column_profiles],
            "insights": list(self.insights),
            "correlations": [c.to_dict() for c in self.correlations],
            "visualizationData": {
                "distributions": [h.to_dict() for h in self.histograms],
                "categoryCharts": [c.to_dict() for c in self.category_charts],
            },
        }
