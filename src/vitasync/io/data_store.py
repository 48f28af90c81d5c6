"""
JSON document storage for the VitaSync aggregate.

Handles reading and writing the single document file.  The store holds a
path, not an aggregate: callers load an aggregate, mutate it, and hand it
back to save().
"""

from pathlib import Path

from ..core.config_loader import load_settings
from ..core.models import VitaSyncData
from .serializers import data_to_json, json_to_data


class StorageError(OSError):
    """Raised when the document file cannot be opened for reading or writing."""

    pass


class DataStore:
    """
    Manages the VitaSync document stored as one UTF-8 JSON file.

    Every load replaces the caller's aggregate wholesale; there is no
    partial or incremental load.
    """

    def __init__(self, data_path: str | Path, indent: int | None = None):
        """
        Initialize the data store.

        Args:
            data_path: Path to the JSON document
            indent: Pretty-print indent for save(); None uses the configured default
        """
        self.data_path = Path(data_path)
        self.indent = indent

    def exists(self) -> bool:
        """Check if the document file exists."""
        return self.data_path.exists()

    def _indent(self) -> int:
        if self.indent is not None:
            return self.indent
        return load_settings()["json_indent"]

    def save(self, data: VitaSyncData) -> None:
        """
        Write the aggregate to the document file, replacing its contents.

        Creates parent directories if needed.

        Args:
            data: Aggregate to persist

        Raises:
            StorageError: If the file cannot be opened for writing
        """
        text = data_to_json(data, indent=self._indent())
        try:
            self.data_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.data_path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise StorageError(f"Unable to write {self.data_path}: {e}") from e

    def load(self) -> VitaSyncData:
        """
        Read the aggregate from the document file.

        Returns:
            A newly built VitaSyncData

        Raises:
            StorageError: If the file does not exist or cannot be read
            ParseError: If the document is malformed
        """
        if not self.data_path.exists():
            raise StorageError(
                f"Data file not found: {self.data_path}. Run 'init' first."
            )

        try:
            with open(self.data_path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Unable to read {self.data_path}: {e}") from e

        return json_to_data(text)

    def load_or_create(self, name: str | None = None) -> VitaSyncData:
        """
        Load the aggregate, or return a fresh one if the file is absent.

        Args:
            name: Name for a fresh aggregate; None uses the configured default
        """
        if self.exists():
            return self.load()
        return VitaSyncData(name if name is not None else load_settings()["data_name"])


def get_default_data_path() -> Path:
    """
    Get the default document path.

    Uses data_path from the user config when set, otherwise
    <home>/vitasync.json where home is $VITASYNC_HOME or ~/.vitasync.

    Returns:
        Default data path
    """
    return load_settings()["data_path"]


def get_default_store() -> DataStore:
    """
    Get a DataStore with the default path.

    Returns:
        DataStore instance
    """
    return DataStore(get_default_data_path())
