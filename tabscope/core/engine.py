"""
Analysis orchestrator.

``analyze`` is the single entry point of the engine: parse, summarize
each column, correlate numeric columns, build chart data, write the
insights and return one frozen AnalysisResult.

The function keeps no state between calls. The same text and options
always produce an equal result, so concurrent calls are independent
and a caller that wants to cancel simply drops the result.
"""

import logging
import math
from typing import Optional

from tabscope.config.options import AnalysisOptions
from tabscope.core.charts import build_category_charts, build_histograms
from tabscope.core.correlation import find_correlations
from tabscope.core.insights import generate_insights
from tabscope.core.models import AnalysisResult, NumericStats
from tabscope.core.parser import parse_table
from tabscope.core.summarizer import numeric_values, summarize_table
from tabscope.errors import AnalysisError, ComputationError, ConfigError

logger = logging.getLogger(__name__)


def _check_finite(result: AnalysisResult) -> None:
    """No NaN / inf may leave the engine."""
    for profile in result.column_profiles:
        if isinstance(profile.stats, NumericStats):
            for name, value in profile.stats.to_dict().items():
                if not math.isfinite(value):
                    raise ComputationError(
                        f"Column '{profile.name}' produced a non-finite {name}"
                    )

    for edge in result.correlations:
        if not math.isfinite(edge.coefficient):
            raise ComputationError(
                f"Correlation {edge.column_a}/{edge.column_b} is not finite"
            )


def _run(text: str, options: AnalysisOptions) -> AnalysisResult:
    table = parse_table(text, options.delimiter)
    profiles = summarize_table(table, options)

    numeric = [
        (p.name, numeric_values(table, p.name)) for p in profiles if p.is_numeric
    ]
    categorical = [
        (p.name, table.column(p.name)) for p in profiles if not p.is_numeric
    ]

    correlations = find_correlations(numeric, options.correlation_threshold)

    histograms = build_histograms(
        numeric, bins=options.histogram_bins, max_columns=options.histogram_columns
    )
    category_charts = build_category_charts(
        categorical,
        limit=options.category_bar_limit,
        max_columns=options.category_columns,
    )

    insights = generate_insights(table.row_count, profiles, correlations)

    return AnalysisResult(
        row_count=table.row_count,
        column_count=table.column_count,
        column_names=table.columns,
        column_profiles=profiles,
        insights=insights,
        correlations=correlations,
        histograms=histograms,
        category_charts=category_charts,
    )


def analyze(text: str, options: Optional[AnalysisOptions] = None) -> AnalysisResult:
    """
    Profile delimited text.

    Returns a complete AnalysisResult or raises; a partial result is
    never returned.

    Raises:
        MalformedInputError: empty input or no header line
        ComputationError: a numeric step failed unexpectedly
        ConfigError: invalid options
    """
    options = options or AnalysisOptions()

    try:
        result = _run(text, options)
    except (AnalysisError, ConfigError):
        raise
    except (ArithmeticError, ValueError) as exc:
        logger.exception("Unexpected numeric failure during analysis")
        raise ComputationError(f"Numeric computation failed: {exc}") from exc

    _check_finite(result)

    logger.debug(
        "Analysis complete: %s rows, %s columns, %s correlations",
        result.row_count,
        result.column_count,
        len(result.correlations),
    )
    return result
