"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from docpaths.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "root_path": ".",
    "package_name": None,
    "main_file_path": None,
    "package_json": None,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"'{p}' is not a YAML mapping."
                raise TypeError(msg)
            config = deep_merge(config, user_config)
            logger.info("Loaded configuration from %s", p)
        else:
            logger.warning("Config file not found: %s. Using defaults.", p)
    return config
