"""Core Engine Module - parsing, column profiling, correlations, chart data."""

from .engine import analyze
from .models import (
    AnalysisResult,
    CategoricalStats,
    ColumnKind,
    ColumnProfile,
    CorrelationEdge,
    NumericStats,
    Table,
)
from .parser import parse_table

__all__ = [
    "analyze",
    "parse_table",
    "AnalysisResult",
    "CategoricalStats",
    "ColumnKind",
    "ColumnProfile",
    "CorrelationEdge",
    "NumericStats",
    "Table",
]
