from .defaults import DEFAULT_CONFIG
from .loader import load_config
from .options import AnalysisOptions, options_from_config

__all__ = [
    "DEFAULT_CONFIG",
    "load_config",
    "AnalysisOptions",
    "options_from_config",
]
