from pathlib import Path
from typing import List, Optional, Union

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from tabscope.core.models import AnalysisResult


def correlation_matrix(result: AnalysisResult) -> pd.DataFrame:
    """
    Square matrix over the columns that appear in a retained edge.
    Pairs below the threshold stay NaN and render blank.
    """
    names: List[str] = []
    for edge in result.correlations:
        for name in (edge.column_a, edge.column_b):
            if name not in names:
                names.append(name)

    # keep column order
    names.sort(key=result.column_names.index)

    matrix = pd.DataFrame(np.nan, index=names, columns=names)
    for name in names:
        matrix.loc[name, name] = 1.0
    for edge in result.correlations:
        matrix.loc[edge.column_a, edge.column_b] = edge.coefficient
        matrix.loc[edge.column_b, edge.column_a] = edge.coefficient

    return matrix


def correlation_heatmap(
    result: AnalysisResult,
    out: Union[str, Path],
    dpi: int = 150,
) -> Optional[Path]:
    """
    Heatmap of significant correlations.
    Saves a non-empty PNG, or returns None when there is no edge.
    """
    if not result.correlations:
        return None

    out = Path(out).resolve()
    matrix = correlation_matrix(result)

    fig, ax = plt.subplots(figsize=(6, 5))
    sns.heatmap(
        matrix,
        annot=True,
        fmt=".2f",
        cmap="coolwarm",
        center=0,
        vmin=-1,
        vmax=1,
        ax=ax,
    )
    ax.set_title("Significant Correlations")

    fig.tight_layout()
    fig.savefig(str(out), dpi=dpi)
    plt.close(fig)

    if out.exists() and out.stat().st_size > 0:
        return out

    return None
