from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
import seaborn as sns

from tabscope.core.models import Histogram


def histogram(hist: Histogram, out: Union[str, Path], dpi: int = 150) -> Optional[Path]:
    """
    Bar rendering of precomputed histogram buckets.
    Returns the PNG path, or None when the histogram is empty.
    """
    if not hist.buckets:
        return None

    out = Path(out)
    positions = range(len(hist.buckets))

    fig, ax = plt.subplots(figsize=(5, 3))
    ax.bar(
        list(positions),
        [b.count for b in hist.buckets],
        color=sns.color_palette("Blues_d", 1)[0],
        width=0.9,
    )
    # labels repeat when min == max
    ax.set_xticks(list(positions))
    ax.set_xticklabels([b.label for b in hist.buckets])
    ax.set_title(f"Distribution: {hist.column}")
    ax.set_ylabel("Count")

    fig.tight_layout()
    fig.savefig(str(out), dpi=dpi)
    plt.close(fig)

    return out
