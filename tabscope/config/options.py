from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from tabscope.errors import ConfigError


# -------------------------------------------------
# ENGINE OPTIONS
# -------------------------------------------------
@dataclass(frozen=True)
class AnalysisOptions:
    """
    Tunables passed to ``analyze``.

    Defaults reproduce the dashboard: top 5 values per categorical
    column, top 10 bars per category chart, 4 histogram bins, first 2
    numeric / first 3 categorical columns charted, and correlations
    kept when |r| > 0.3.
    """
    delimiter: str = ","
    top_values: int = 5
    category_bar_limit: int = 10
    histogram_bins: int = 4
    histogram_columns: int = 2
    category_columns: int = 3
    correlation_threshold: float = 0.3

    def __post_init__(self):
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise ConfigError("delimiter must be a non-empty string")

        for name in (
            "histogram_bins",
            "top_values",
            "category_bar_limit",
            "histogram_columns",
            "category_columns",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer")

        if self.histogram_bins < 1:
            raise ConfigError("histogram_bins must be at least 1")

        threshold = self.correlation_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise ConfigError("correlation_threshold must be a number")
        if not 0.0 <= threshold < 1.0:
            raise ConfigError("correlation_threshold must be in [0, 1)")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def options_from_config(
    config: Optional[Mapping[str, Any]] = None,
) -> AnalysisOptions:
    """
    Build AnalysisOptions from the ``analysis`` section of a config dict.
    Unknown keys are rejected so typos do not silently fall back to defaults.
    """
    section = dict((config or {}).get("analysis") or {})

    known = {f.name for f in fields(AnalysisOptions)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ConfigError(f"Unknown analysis option(s): {', '.join(unknown)}")

    try:
        return AnalysisOptions(**section)
    except TypeError as exc:
        raise ConfigError(str(exc)) from exc
