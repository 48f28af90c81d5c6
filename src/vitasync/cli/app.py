"""Shared Typer app object, shared option types, and store utilities."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ..core.models import VitaSyncData
from ..io.data_store import DataStore, StorageError, get_default_data_path
from ..io.serializers import ParseError
from . import views

# Shared --data-path option type used across all commands
DataPathOption = Annotated[
    Optional[Path],
    typer.Option("--data-path", "-p", help="Path to the VitaSync JSON document"),
]

app = typer.Typer(
    name="vitasync",
    help="VitaSync: log workouts, plan meals and keep a recipe library.",
    no_args_is_help=False,
    invoke_without_command=True,
)


def get_store(data_path: Path | None) -> DataStore:
    """Get data store from path or the configured default location."""
    if data_path is None:
        data_path = get_default_data_path()
    return DataStore(data_path)


def load_data(store: DataStore) -> VitaSyncData:
    """Load the aggregate (or start a fresh one), exiting with code 1 on failure."""
    try:
        return store.load_or_create()
    except (StorageError, ParseError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)


def save_data(store: DataStore, data: VitaSyncData) -> None:
    """Persist the aggregate, exiting with code 1 on failure."""
    try:
        store.save(data)
    except StorageError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
