import io
import json
from pathlib import Path
from typing import Optional, TextIO, Union

from tabscope.core.models import AnalysisResult, CategoricalStats, NumericStats
from tabscope.reporting.formatters import fmt_coefficient, fmt_number, fmt_text


# =====================================================
# MARKDOWN REPORT
# =====================================================

class MarkdownReport:
    """
    Markdown rendering of an AnalysisResult.

    Sections follow the dashboard tabs: overview, insights,
    column details, correlations and chart data.
    """

    name = "markdown"

    def __init__(self, title: Optional[str] = None):
        self.title = title or "Data Analysis Report"

    def render(self, result: AnalysisResult) -> str:
        buffer = io.StringIO()
        self.write(result, buffer)
        return buffer.getvalue()

    def build(self, result: AnalysisResult, output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            self.write(result, f)

        return output_path

    def write(self, result: AnalysisResult, f: TextIO) -> None:
        self._write_overview(f, result)
        self._write_insights(f, result)
        self._write_columns(f, result)
        self._write_correlations(f, result)
        self._write_charts(f, result)

    # -------------------------------------------------
    # SECTIONS
    # -------------------------------------------------

    def _write_overview(self, f, result: AnalysisResult):
        f.write(f"# {self.title}\n\n")
        f.write("## Overview\n\n")
        f.write(f"- **Rows:** {result.row_count}\n")
        f.write(f"- **Columns:** {result.column_count}\n")
        f.write(f"- **Numeric columns:** {len(result.numeric_profiles())}\n")
        f.write(f"- **Categorical columns:** {len(result.categorical_profiles())}\n")
        f.write(f"- **Missing values:** {result.total_missing}\n")
        if result.column_names:
            names = ", ".join(f"`{n}`" for n in result.column_names)
            f.write(f"- **Column names:** {names}\n")
        f.write("\n")

    def _write_insights(self, f, result: AnalysisResult):
        f.write("## Key Insights\n\n")
        for insight in result.insights:
            f.write(f"- {insight}\n")
        f.write("\n")

    def _write_columns(self, f, result: AnalysisResult):
        if not result.column_profiles:
            return

        f.write("## Column Details\n\n")
        f.write("| Column | Type | Missing | Unique | Summary |\n")
        f.write("| :--- | :--- | ---: | ---: | :--- |\n")

        for profile in result.column_profiles:
            f.write(
                f"| {fmt_text(profile.name)} | {profile.kind.value} | "
                f"{profile.missing_count} | {profile.unique_count} | "
                f"{self._summary(profile.stats)} |\n"
            )
        f.write("\n")

    def _write_correlations(self, f, result: AnalysisResult):
        f.write("## Correlations\n\n")
        if not result.correlations:
            f.write("_No significant correlations detected._\n\n")
            return

        f.write("| Column A | Column B | r |\n")
        f.write("| :--- | :--- | ---: |\n")
        for edge in result.correlations:
            f.write(
                f"| {fmt_text(edge.column_a)} | {fmt_text(edge.column_b)} | "
                f"{fmt_coefficient(edge.coefficient)} |\n"
            )
        f.write("\n")

    def _write_charts(self, f, result: AnalysisResult):
        if not result.histograms and not result.category_charts:
            return

        f.write("## Distributions\n\n")

        for hist in result.histograms:
            f.write(f"### {fmt_text(hist.column)}\n\n")
            f.write("| Range | Count |\n| :--- | ---: |\n")
            for bucket in hist.buckets:
                f.write(f"| {bucket.label} | {bucket.count} |\n")
            f.write("\n")

        for chart in result.category_charts:
            f.write(f"### {fmt_text(chart.column)}\n\n")
            if not chart.bars:
                f.write("_No values._\n\n")
                continue
            f.write("| Category | Count |\n| :--- | ---: |\n")
            for bar in chart.bars:
                f.write(f"| {fmt_text(bar.category)} | {bar.count} |\n")
            f.write("\n")

    # -------------------------------------------------
    # HELPERS
    # -------------------------------------------------

    def _summary(self, stats) -> str:
        if isinstance(stats, NumericStats):
            return (
                f"mean {fmt_number(stats.mean)}, median {fmt_number(stats.median)}, "
                f"std {fmt_number(stats.std)}, range {fmt_number(stats.min)} to "
                f"{fmt_number(stats.max)}"
            )
        if isinstance(stats, CategoricalStats):
            if not stats.top_values:
                return "no data"
            top = ", ".join(
                f"{fmt_text(vc.value)} ({vc.count})" for vc in stats.top_values
            )
            return f"top: {top}"
        raise TypeError(f"Unsupported stats type: {type(stats).__name__}")


# =====================================================
# CONVENIENCE ENTRY POINTS
# =====================================================

def render_markdown(result: AnalysisResult, title: Optional[str] = None) -> str:
    return MarkdownReport(title).render(result)


def write_json(result: AnalysisResult, path: Union[str, Path]) -> Path:
    """Dashboard payload (``AnalysisResult.to_dict``) as pretty JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
    return path
