"""
PNG renderers for chart-ready aggregates.

Every renderer takes already computed data from an AnalysisResult;
nothing here touches the raw table.
"""

import re
from pathlib import Path
from typing import List, Union

from tabscope.core.models import AnalysisResult

from .categorical import category_bar
from .correlation import correlation_heatmap, correlation_matrix
from .distributions import histogram


def _slug(name: str) -> str:
    slug = re.sub(r"[^A-Za-z0-9]+", "_", name).strip("_").lower()
    return slug or "column"


def render_all(
    result: AnalysisResult,
    out_dir: Union[str, Path],
    dpi: int = 150,
) -> List[Path]:
    """Render every chart of a result into ``out_dir``; returns the written files."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []

    for i, hist in enumerate(result.histograms, start=1):
        path = histogram(hist, out_dir / f"hist_{i}_{_slug(hist.column)}.png", dpi)
        if path:
            written.append(path)

    for i, chart in enumerate(result.category_charts, start=1):
        path = category_bar(chart, out_dir / f"bar_{i}_{_slug(chart.column)}.png", dpi)
        if path:
            written.append(path)

    path = correlation_heatmap(result, out_dir / "correlations.png", dpi)
    if path:
        written.append(path)

    return written


__all__ = [
    "category_bar",
    "correlation_heatmap",
    "correlation_matrix",
    "histogram",
    "render_all",
]
