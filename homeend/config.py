"""User configuration for the homeend editor.

Settings live in a JSON file in the OS-appropriate config directory. A
missing or unreadable file is not an error: every key has a default, and
bad values are logged and replaced by their defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class NavigationConfig:
    """Tunable knobs for the editor and its navigation commands."""

    mark_ring_size: int = EditorConstants.DEFAULT_MARK_RING_SIZE
    page_context_lines: int = EditorConstants.DEFAULT_PAGE_CONTEXT_LINES
    log_level: str = EditorConstants.DEFAULT_LOG_LEVEL

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)


def default_config_path() -> Path:
    """Return the path of config.json in the user's config directory."""
    return Path(platformdirs.user_config_dir("homeend")) / "config.json"


def validate_setting(key: str, value: Any) -> bool:
    """Check a single config value.

    Args:
        key: Setting key name.
        value: Value read from the config file.

    Returns:
        True if the value can be used as-is.
    """
    if key == 'mark_ring_size':
        return isinstance(value, int) and not isinstance(value, bool) and value >= 1
    if key == 'page_context_lines':
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    if key == 'log_level':
        return isinstance(value, str) and value.upper() in _LOG_LEVELS
    return False


def _read_json(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Config file {path} has invalid format (not a dict), ignoring")
        return {}
    return data


def load_config(path: Optional[Path] = None) -> NavigationConfig:
    """Load configuration, falling back to defaults for anything invalid.

    Args:
        path: Config file to read. Defaults to default_config_path().

    Returns:
        A fully populated NavigationConfig.
    """
    if path is None:
        path = default_config_path()
    data = _read_json(Path(path))

    config = NavigationConfig()
    known = {f.name for f in fields(NavigationConfig)}
    for key, value in data.items():
        if key not in known:
            logger.debug(f"Ignoring unknown config key {key!r}")
            continue
        if not validate_setting(key, value):
            logger.warning(f"Invalid value {value!r} for {key}, using default")
            continue
        if key == 'log_level':
            value = value.upper()
        setattr(config, key, value)
    return config
