"""
Configuration constants for vitasync.

Defaults for the persisted document location and format.  User overrides
are merged on top of these by config_loader.
"""

from typing import Final

# =============================================================================
# STORAGE
# =============================================================================

DEFAULT_DATA_DIR: Final[str] = "~/.vitasync"  # Base directory for data and config
DEFAULT_DATA_FILE: Final[str] = "vitasync.json"  # Document file name inside the data dir
CONFIG_FILE: Final[str] = "config.yaml"  # Optional user override file inside the data dir
HOME_ENV_VAR: Final[str] = "VITASYNC_HOME"  # Overrides DEFAULT_DATA_DIR when set

# =============================================================================
# DOCUMENT FORMAT
# =============================================================================

DEFAULT_DATA_NAME: Final[str] = "My VitaSync Data"  # Name given to a fresh aggregate
JSON_INDENT: Final[int] = 4  # Pretty-print indent of the written document
