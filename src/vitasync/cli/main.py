"""
CLI entry point using Typer.

Provides commands for tracker management:
- init: Create an empty data file
- log-workout / history: Workout log
- add-meal / macros: Meal plan and daily totals
- recipes / add-recipe / edit-recipe / delete-recipe / find-recipe /
  filter-recipes: Recipe library

Running without a command opens the interactive menu, which keeps one
aggregate in memory for the session and only touches the file on
explicit save/load.
"""

import typer

from ..core.models import VitaSyncData
from ..io.data_store import DataStore, StorageError
from ..io.serializers import ParseError
from . import views
from .app import app, get_store, load_data
from .commands import meals, recipes, workouts  # noqa: F401  (registers commands)
from .commands.meals import _menu_add_meal
from .commands.recipes import _menu_recipe_library
from .commands.workouts import _menu_log_workout


MENU = {
    "1": "Log a workout session",
    "2": "View workout history",
    "3": "Add a meal to the meal plan",
    "4": "View daily macros",
    "5": "Recipe library",
    "6": "Save data",
    "7": "Load data",
    "0": "Quit",
}


def _menu_save(store: DataStore, data: VitaSyncData) -> None:
    try:
        store.save(data)
    except StorageError as e:
        views.print_error(str(e))
        return
    views.print_success(f"Data saved to {store.data_path}")


def _menu_load(store: DataStore, data: VitaSyncData) -> VitaSyncData:
    """Return the freshly loaded aggregate, or the current one if loading fails."""
    try:
        loaded = store.load()
    except (StorageError, ParseError) as e:
        views.print_error(str(e))
        return data
    views.print_success(f"Data loaded from {store.data_path}")
    return loaded


def _run_choice(choice: str, store: DataStore, data: VitaSyncData) -> VitaSyncData:
    """Dispatch one main-menu choice; returns the (possibly reloaded) aggregate."""
    if choice == "1":
        _menu_log_workout(data)
    elif choice == "2":
        views.print_history(data.workout_tracker.workouts)
    elif choice == "3":
        _menu_add_meal(data)
    elif choice == "4":
        views.print_macros(data.meal_plan)
    elif choice == "5":
        _menu_recipe_library(data)
    elif choice == "6":
        _menu_save(store, data)
    elif choice == "7":
        data = _menu_load(store, data)
    else:
        views.print_error(f"Unknown choice: {choice}")
    return data


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    """
    Workout, meal and recipe tracker. Run without a command for interactive mode.
    """
    if ctx.invoked_subcommand is not None:
        return  # a sub-command handles its own I/O

    store = get_store(None)
    data = load_data(store)

    views.console.print(views.BANNER, highlight=False)

    while True:
        views.console.print()
        for key, desc in MENU.items():
            views.console.print(f"  \\[{key}] {desc}")
        views.console.print()

        # end of input anywhere in the menu quits without saving
        try:
            choice = views.console.input("Choose: ").strip()
            if choice != "0":
                data = _run_choice(choice, store, data)
                continue
        except EOFError:
            pass

        views.console.print("Exiting VitaSync. Goodbye!")
        raise typer.Exit(0)


if __name__ == "__main__":
    app()
