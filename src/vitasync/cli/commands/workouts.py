"""Workout commands: init, log-workout, history, and interactive helpers."""

import json
from datetime import date as Date
from typing import Annotated, List, Optional

import typer

from ...core.config_loader import load_settings
from ...core.models import Exercise, ExerciseSet, InvalidArgumentError, VitaSyncData, Workout
from ...io.serializers import ParseError, parse_exercise_spec, validate_date, workout_to_dict
from .. import views
from ..app import DataPathOption, app, get_store, load_data, save_data


@app.command()
def init(
    data_path: DataPathOption = None,
    name: Annotated[
        Optional[str],
        typer.Option("--name", "-n", help="Display name for the data set"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing data file"),
    ] = False,
) -> None:
    """
    Create a new, empty VitaSync document.
    """
    store = get_store(data_path)

    if store.exists() and not force:
        views.print_error(f"Data file already exists: {store.data_path}")
        views.print_info("Use --force to overwrite it.")
        raise typer.Exit(1)

    data = VitaSyncData(name if name is not None else load_settings()["data_name"])
    save_data(store, data)
    views.print_success(f"Created {store.data_path}")


@app.command("log-workout")
def log_workout(
    data_path: DataPathOption = None,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="Workout date (YYYY-MM-DD, default: today)"),
    ] = None,
    exercises: Annotated[
        Optional[List[str]],
        typer.Option(
            "--exercise",
            "-x",
            help="NAME=SETS, repeatable. SETS: 10,10,8 (all done) or 8/10 (done/target)",
        ),
    ] = None,
) -> None:
    """
    Log a workout session with its exercises and sets.
    """
    store = get_store(data_path)
    data = load_data(store)

    try:
        workout_date = validate_date(date) if date else Date.today()
        workout = Workout(workout_date)
        for spec in exercises or []:
            workout.add_exercise(parse_exercise_spec(spec))
    except (ParseError, InvalidArgumentError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    data.workout_tracker.add_workout(workout)
    save_data(store, data)

    n_sets = sum(len(e.sets) for e in workout.exercises)
    views.print_success(
        f"Logged workout on {workout.date.isoformat()}: "
        f"{len(workout.exercises)} exercise(s), {n_sets} set(s)"
    )


@app.command()
def history(
    data_path: DataPathOption = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", help="Show only the most recent N workouts"),
    ] = None,
    json_out: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for machine processing"),
    ] = False,
) -> None:
    """
    Display workout history in the order it was logged.
    """
    store = get_store(data_path)
    workouts = load_data(store).workout_tracker.workouts

    if limit is not None:
        workouts = workouts[-limit:] if limit > 0 else []

    if json_out:
        print(json.dumps([workout_to_dict(w) for w in workouts], indent=2))
        return

    views.print_history(workouts)


# ---------------------------------------------------------------------------
# Interactive menu helpers
# ---------------------------------------------------------------------------


def _prompt_sets(exercise: Exercise) -> None:
    """Ask for a set count and each set's target reps; sets are fully checked off."""
    n_sets = int(views.console.input("Number of sets for this exercise: ").strip())
    for i in range(1, n_sets + 1):
        target = int(views.console.input(f"  Target reps for set {i}: ").strip())
        exercise_set = ExerciseSet(target)
        exercise_set.complete()
        exercise.add_set(exercise_set)


def _menu_log_workout(data: VitaSyncData) -> None:
    """Interactive log-workout helper called from the main menu."""
    try:
        raw_date = views.console.input("Workout date (YYYY-MM-DD): ").strip()
        workout = Workout(validate_date(raw_date))
        while True:
            name = views.console.input("Exercise name (blank to finish): ").strip()
            if not name:
                break
            exercise = Exercise(name)
            _prompt_sets(exercise)
            workout.add_exercise(exercise)
    except (ParseError, InvalidArgumentError) as e:
        views.print_error(str(e))
        return
    except ValueError:
        views.print_error("Invalid number entered. Please try again.")
        return

    data.workout_tracker.add_workout(workout)
    views.print_success("Workout logged successfully.")
