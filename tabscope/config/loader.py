import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .defaults import DEFAULT_CONFIG
from tabscope.errors import ConfigError


# -------------------------------------------------
# MAIN CONFIG LOADER
# -------------------------------------------------
def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load a YAML config and merge it over the built-in defaults.

    Rules:
    - Defaults always win if the user omits a field
    - Sections are merged key by key, not replaced
    - The file must contain a YAML mapping
    """
    user_config: Dict[str, Any] = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                user_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

        if not isinstance(user_config, dict):
            raise ConfigError("Config file must contain a YAML dictionary")

    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in user_config.items():
        if isinstance(config.get(key), dict):
            if not isinstance(value, dict):
                raise ConfigError(f"Config section '{key}' must be a mapping")
            config[key].update(value)
        else:
            config[key] = value

    return config
