"""
JSON serialization for the VitaSync document.

Handles conversion between the domain model and JSON-compatible dicts, and
between those dicts and document text.

Reading never assigns model fields directly: each record is rebuilt through
the same constructors and append operations used interactively, so every
domain invariant is re-checked on load.  In particular a set's completed
count is restored through check_off_reps(completedReps), which has the
same effect as that many check_off_rep() calls and clamps an out-of-range
value to targetReps without looping over it.
"""

import json
import re
from datetime import date as Date
from typing import Any

from ..core.config import JSON_INDENT
from ..core.models import (
    Exercise,
    ExerciseSet,
    InvalidArgumentError,
    Meal,
    MealPlan,
    Recipe,
    RecipeLibrary,
    VitaSyncData,
    Workout,
    WorkoutTracker,
)


class ParseError(ValueError):
    """Raised when a document is malformed or missing a required field."""

    pass


_TYPE_NAMES = {str: "a string", int: "an integer", list: "an array", dict: "an object"}


def _require(data: Any, key: str, path: str, kind: type) -> Any:
    """
    Fetch a required field and check its JSON type.

    Args:
        data: Parent JSON object
        key: Field name
        path: Dotted path of the parent, used in error messages
        kind: Expected Python type (str, int, list or dict)

    Returns:
        The field value

    Raises:
        ParseError: If the parent is not an object, the field is missing,
            or the value has the wrong type
    """
    where = f"{path}.{key}" if path else key
    if not isinstance(data, dict):
        raise ParseError(f"{path or 'document'} must be an object")
    if key not in data:
        raise ParseError(f"Missing required field: {where}")

    value = data[key]
    wrong_type = not isinstance(value, kind) or (kind is int and isinstance(value, bool))
    if wrong_type:
        raise ParseError(f"Field {where} must be {_TYPE_NAMES[kind]}, got {value!r}")
    return value


def validate_date(date_str: str) -> Date:
    """
    Parse an ISO calendar date.

    Args:
        date_str: Date string to validate

    Returns:
        The parsed date

    Raises:
        ParseError: If format is invalid or the date does not exist
    """
    if not isinstance(date_str, str) or not re.match(r"^\d{4}-\d{2}-\d{2}$", date_str):
        raise ParseError(f"Invalid date format: {date_str!r}. Expected YYYY-MM-DD")

    try:
        return Date.fromisoformat(date_str)
    except ValueError as e:
        raise ParseError(f"Invalid date: {date_str}") from e


# =============================================================================
# MODEL -> DICT
# =============================================================================


def exercise_set_to_dict(exercise_set: ExerciseSet) -> dict[str, Any]:
    return {
        "targetReps": exercise_set.target_reps,
        "completedReps": exercise_set.completed_reps,
    }


def exercise_to_dict(exercise: Exercise) -> dict[str, Any]:
    return {
        "name": exercise.name,
        "sets": [exercise_set_to_dict(s) for s in exercise.sets],
    }


def workout_to_dict(workout: Workout) -> dict[str, Any]:
    """
    Convert Workout to JSON-compatible dict.

    Args:
        workout: Workout to convert

    Returns:
        Dict with an ISO date string and nested exercises
    """
    return {
        "date": workout.date.isoformat(),
        "exercises": [exercise_to_dict(e) for e in workout.exercises],
    }


def meal_to_dict(meal: Meal) -> dict[str, Any]:
    return {
        "name": meal.name,
        "protein": meal.protein,
        "carbs": meal.carbs,
        "fat": meal.fat,
    }


def recipe_to_dict(recipe: Recipe) -> dict[str, Any]:
    return {
        "name": recipe.name,
        "instructions": recipe.instructions,
        "ingredients": list(recipe.ingredients),
    }


def data_to_dict(data: VitaSyncData) -> dict[str, Any]:
    """
    Convert the whole aggregate to a JSON-compatible dict.

    Key order is name, workouts, meals, recipes; every array keeps the
    insertion order of its container.

    Args:
        data: Aggregate to convert

    Returns:
        Dict representation of the document
    """
    return {
        "name": data.name,
        "workouts": [workout_to_dict(w) for w in data.workout_tracker.workouts],
        "meals": [meal_to_dict(m) for m in data.meal_plan.meals],
        "recipes": [recipe_to_dict(r) for r in data.recipe_library.all_recipes()],
    }


# =============================================================================
# DICT -> MODEL
# =============================================================================


def dict_to_exercise_set(data: dict[str, Any], path: str = "set") -> ExerciseSet:
    """
    Rebuild an ExerciseSet by replaying check-offs.

    Args:
        data: Dict representation
        path: Location of this record, for error messages

    Returns:
        ExerciseSet with completed_reps = min(completedReps, targetReps)

    Raises:
        ParseError: If a field is missing or invalid
    """
    target_reps = _require(data, "targetReps", path, int)
    completed_reps = _require(data, "completedReps", path, int)

    try:
        exercise_set = ExerciseSet(target_reps)
    except InvalidArgumentError as e:
        raise ParseError(f"Invalid set at {path}: {e}") from e

    exercise_set.check_off_reps(completed_reps)
    return exercise_set


def dict_to_exercise(data: dict[str, Any], path: str = "exercise") -> Exercise:
    name = _require(data, "name", path, str)
    sets = _require(data, "sets", path, list)

    try:
        exercise = Exercise(name)
    except InvalidArgumentError as e:
        raise ParseError(f"Invalid exercise at {path}: {e}") from e

    for i, set_data in enumerate(sets):
        exercise.add_set(dict_to_exercise_set(set_data, f"{path}.sets[{i}]"))
    return exercise


def dict_to_workout(data: dict[str, Any], path: str = "workout") -> Workout:
    """
    Convert dict to Workout.

    Args:
        data: Dict representation
        path: Location of this record, for error messages

    Returns:
        Workout instance

    Raises:
        ParseError: If the date is malformed or a field is missing
    """
    date_str = _require(data, "date", path, str)
    exercises = _require(data, "exercises", path, list)

    try:
        workout_date = validate_date(date_str)
    except ParseError as e:
        raise ParseError(f"{path}.date: {e}") from e

    workout = Workout(workout_date)
    for i, exercise_data in enumerate(exercises):
        workout.add_exercise(dict_to_exercise(exercise_data, f"{path}.exercises[{i}]"))
    return workout


def dict_to_meal(data: dict[str, Any], path: str = "meal") -> Meal:
    """
    Convert dict to Meal.

    Raises:
        ParseError: If a field is missing or a macro is negative
    """
    name = _require(data, "name", path, str)
    protein = _require(data, "protein", path, int)
    carbs = _require(data, "carbs", path, int)
    fat = _require(data, "fat", path, int)

    try:
        return Meal(name, protein, carbs, fat)
    except InvalidArgumentError as e:
        raise ParseError(f"Invalid meal at {path}: {e}") from e


def dict_to_recipe(data: dict[str, Any], path: str = "recipe") -> Recipe:
    """
    Convert dict to Recipe.

    Raises:
        ParseError: If a field is missing or an ingredient is not a string
    """
    name = _require(data, "name", path, str)
    instructions = _require(data, "instructions", path, str)
    ingredients = _require(data, "ingredients", path, list)

    for i, ingredient in enumerate(ingredients):
        if not isinstance(ingredient, str):
            raise ParseError(
                f"Field {path}.ingredients[{i}] must be a string, got {ingredient!r}"
            )

    try:
        return Recipe(name, ingredients, instructions)
    except InvalidArgumentError as e:
        raise ParseError(f"Invalid recipe at {path}: {e}") from e


def _replay_workouts(items: list, tracker: WorkoutTracker) -> None:
    for i, item in enumerate(items):
        tracker.add_workout(dict_to_workout(item, f"workouts[{i}]"))


def _replay_meals(items: list, meal_plan: MealPlan) -> None:
    for i, item in enumerate(items):
        meal_plan.add_meal(dict_to_meal(item, f"meals[{i}]"))


def _replay_recipes(items: list, library: RecipeLibrary) -> None:
    for i, item in enumerate(items):
        library.add_recipe(dict_to_recipe(item, f"recipes[{i}]"))


def dict_to_data(data: dict[str, Any]) -> VitaSyncData:
    """
    Convert a document dict to a VitaSyncData aggregate.

    All four top-level fields are required.  Records are replayed in
    document order, so the rebuilt containers keep the persisted order.

    Args:
        data: Parsed JSON document

    Returns:
        VitaSyncData instance

    Raises:
        ParseError: If the document is malformed or a field is missing
    """
    name = _require(data, "name", "", str)
    workouts = _require(data, "workouts", "", list)
    meals = _require(data, "meals", "", list)
    recipes = _require(data, "recipes", "", list)

    vs_data = VitaSyncData(name)
    _replay_workouts(workouts, vs_data.workout_tracker)
    _replay_meals(meals, vs_data.meal_plan)
    _replay_recipes(recipes, vs_data.recipe_library)
    return vs_data


# =============================================================================
# TEXT
# =============================================================================


def data_to_json(data: VitaSyncData, indent: int | None = JSON_INDENT) -> str:
    """
    Serialize the aggregate to document text.

    Args:
        data: Aggregate to serialize
        indent: Pretty-print indent; None for a single line

    Returns:
        JSON string
    """
    return json.dumps(data_to_dict(data), indent=indent, ensure_ascii=False)


def json_to_data(text: str) -> VitaSyncData:
    """
    Deserialize document text to a VitaSyncData aggregate.

    Args:
        text: JSON document

    Returns:
        VitaSyncData instance

    Raises:
        ParseError: If JSON is invalid or data validation fails
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}") from e

    return dict_to_data(data)


# =============================================================================
# COMMAND-LINE INPUT
# =============================================================================


def parse_sets_string(sets_str: str) -> list[tuple[int, int]]:
    """
    Parse a comma-separated sets string.

    Each token is either:
        N      set of N target reps, all completed
        D/N    set of N target reps with D completed

    Examples:
        "10, 10, 8"   → [(10, 10), (10, 10), (8, 8)]
        "10, 7/10"    → [(10, 10), (7, 10)]

    Args:
        sets_str: Sets string to parse

    Returns:
        List of (completed_reps, target_reps) tuples

    Raises:
        ParseError: If format is invalid
    """
    if not sets_str or not sets_str.strip():
        raise ParseError("Sets string cannot be empty")

    sets: list[tuple[int, int]] = []
    for part in (p.strip() for p in sets_str.split(",")):
        if not part:
            continue
        match_partial = re.fullmatch(r"(\d+)\s*/\s*(\d+)", part)
        match_bare = re.fullmatch(r"\d+", part)
        if match_partial:
            done, target = int(match_partial.group(1)), int(match_partial.group(2))
        elif match_bare:
            target = int(part)
            done = target
        else:
            raise ParseError(
                f"Invalid set format: '{part}'. Use target reps (e.g. 10) "
                f"or completed/target (e.g. 8/10)."
            )
        if done > target:
            raise ParseError(f"Completed reps exceed target in '{part}'")
        sets.append((done, target))

    if not sets:
        raise ParseError("No valid sets found in sets string")
    return sets


def parse_exercise_spec(spec: str) -> Exercise:
    """
    Build an Exercise from a "Name=sets" string, e.g. "Squat=10,10,8/10".

    Raises:
        ParseError: If the string has no '=' or the sets are malformed
        InvalidArgumentError: If the name is empty or a target is 0
    """
    name, sep, sets_str = spec.partition("=")
    if not sep:
        raise ParseError(f"Invalid exercise '{spec}'. Expected NAME=SETS, e.g. Squat=10,10,8")

    exercise = Exercise(name.strip())
    for done, target in parse_sets_string(sets_str):
        exercise_set = ExerciseSet(target)
        exercise_set.check_off_reps(done)
        exercise.add_set(exercise_set)
    return exercise


def parse_ingredients(ingredients_str: str) -> list[str]:
    """Split a comma-separated ingredient line, dropping blank entries."""
    return [i.strip() for i in ingredients_str.split(",") if i.strip()]
