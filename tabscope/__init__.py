"""
Tabscope

Tabular data-profiling engine: schema inference, column statistics,
correlations and chart-ready aggregates from raw delimited text.
"""

from .__version__ import __version__

# Keep package init lightweight
# Renderers (reporting, visuals) and the service layer are imported explicitly

from .config import AnalysisOptions, load_config
from .core import AnalysisResult, analyze, parse_table
from .errors import (
    AnalysisError,
    ComputationError,
    ConfigError,
    InvalidFileType,
    MalformedInputError,
)

__all__ = [
    "__version__",
    "analyze",
    "parse_table",
    "AnalysisOptions",
    "AnalysisResult",
    "load_config",
    "AnalysisError",
    "ComputationError",
    "ConfigError",
    "InvalidFileType",
    "MalformedInputError",
]
