"""Shared fixtures for vitasync tests."""

from datetime import date

import pytest

from vitasync.core.models import Exercise, ExerciseSet, Meal, Recipe, VitaSyncData, Workout


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point VITASYNC_HOME at a temp dir so no test touches ~/.vitasync."""
    home = tmp_path / "vitasync-home"
    monkeypatch.setenv("VITASYNC_HOME", str(home))
    return home


@pytest.fixture
def sample_data() -> VitaSyncData:
    """One workout (one fully checked-off set of 10), one meal, one recipe."""
    data = VitaSyncData("Test Data")

    exercise_set = ExerciseSet(10)
    for _ in range(10):
        exercise_set.check_off_rep()
    exercise = Exercise("Push-ups")
    exercise.add_set(exercise_set)
    workout = Workout(date(2024, 3, 15))
    workout.add_exercise(exercise)
    data.workout_tracker.add_workout(workout)

    data.meal_plan.add_meal(Meal("Oatmeal", 10, 30, 5))

    data.recipe_library.add_recipe(
        Recipe("Alfredo Pasta", ["pasta", "cream", "cheese"], "Boil pasta. Make sauce. Combine.")
    )
    return data
