"""
YAML → settings loader.

Reads optional user overrides from ~/.vitasync/config.yaml (or
$VITASYNC_HOME/config.yaml) and merges them over the defaults in config.py.

Usage:
    from vitasync.core.config_loader import load_settings
    settings = load_settings()
    indent = settings["json_indent"]

Recognised keys: data_path, data_name, json_indent.  If the override file
exists but cannot be parsed, a warning is emitted and the defaults are used.
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path
from typing import Any

import yaml

from .config import (
    CONFIG_FILE,
    DEFAULT_DATA_DIR,
    DEFAULT_DATA_FILE,
    DEFAULT_DATA_NAME,
    HOME_ENV_VAR,
    JSON_INDENT,
)

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML mapping; warn and return {} when it is unusable."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as e:
        warnings.warn(f"Ignoring unreadable config file {path}: {e}", stacklevel=3)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        warnings.warn(f"Ignoring config file {path}: top level must be a mapping", stacklevel=3)
        return {}
    return data


def _coerce(raw: dict[str, Any], path: Path) -> dict[str, Any]:
    """Keep only known keys with usable values."""
    result: dict[str, Any] = {}
    if "data_path" in raw:
        if isinstance(raw["data_path"], str) and raw["data_path"].strip():
            result["data_path"] = Path(raw["data_path"]).expanduser()
        else:
            warnings.warn(f"{path}: data_path must be a non-empty string", stacklevel=3)
    if "data_name" in raw:
        if isinstance(raw["data_name"], str):
            result["data_name"] = raw["data_name"]
        else:
            warnings.warn(f"{path}: data_name must be a string", stacklevel=3)
    if "json_indent" in raw:
        indent = raw["json_indent"]
        if isinstance(indent, int) and not isinstance(indent, bool) and indent >= 0:
            result["json_indent"] = indent
        else:
            warnings.warn(f"{path}: json_indent must be a non-negative integer", stacklevel=3)
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_home_dir() -> Path:
    """Return the vitasync base directory ($VITASYNC_HOME or ~/.vitasync)."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path(DEFAULT_DATA_DIR).expanduser()


def get_user_yaml_path() -> Path | None:
    """Return the user config.yaml if it exists, else None."""
    p = get_home_dir() / CONFIG_FILE
    return p if p.exists() else None


def default_settings() -> dict[str, Any]:
    """Settings used when no override file is present."""
    return {
        "data_path": get_home_dir() / DEFAULT_DATA_FILE,
        "data_name": DEFAULT_DATA_NAME,
        "json_indent": JSON_INDENT,
    }


def load_settings() -> dict[str, Any]:
    """
    Load and merge settings.

    Load order (later overrides earlier):
    1. Defaults from config.py
    2. User override at <home>/config.yaml

    Returns:
        Dict with data_path (Path), data_name (str) and json_indent (int)
    """
    settings = default_settings()

    user = get_user_yaml_path()
    if user is not None:
        settings.update(_coerce(_load_yaml_file(user), user))

    return settings
