from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
import seaborn as sns

from tabscope.core.models import CategoryChart


def category_bar(chart: CategoryChart, out: Union[str, Path], dpi: int = 150) -> Optional[Path]:
    """
    Horizontal frequency bars, most common category on top.
    Returns None when the column has no values.
    """
    if not chart.bars:
        return None

    out = Path(out)

    fig, ax = plt.subplots(figsize=(6, 3))
    sns.barplot(
        x=[b.count for b in chart.bars],
        y=[b.category for b in chart.bars],
        color=sns.color_palette("Blues_r", 1)[0],
        orient="h",
        ax=ax,
    )

    top = chart.bars[0]
    ax.set_title(f"{chart.column}: most common is {top.category} ({top.count})")
    ax.set_xlabel("Count")
    ax.set_ylabel(chart.column)
    ax.grid(axis="x", linestyle="--", alpha=0.4)

    fig.tight_layout()
    fig.savefig(str(out), dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    return out
