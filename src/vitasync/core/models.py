"""
Data models for vitasync.

All core dataclasses representing workouts, meals and recipes, plus the
VitaSyncData aggregate that owns one of each collection.

Constructors validate their own invariants and raise InvalidArgumentError
on violation.  Accessors that expose a collection return a fresh list so
callers cannot mutate internal state through them.
"""

from collections.abc import Iterable
from dataclasses import FrozenInstanceError, dataclass, field
from datetime import date as Date
from datetime import datetime


class InvalidArgumentError(ValueError):
    """Raised when a constructor or mutator receives a value violating its invariant."""

    pass


class _AssignOnce:
    """Fields may be set by __init__ but never reassigned afterwards."""

    def __setattr__(self, name: str, value: object) -> None:
        if name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)


def _require_name(name: str | None, what: str) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError(f"{what} name cannot be null or empty.")


def _require_present(value: object, what: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{what} cannot be null.")


# =============================================================================
# WORKOUTS
# =============================================================================


@dataclass
class ExerciseSet(_AssignOnce):
    """
    A single set with a target rep count.

    completed_reps only ever grows through check-offs and saturates at
    target_reps.  Neither field can be assigned from outside.
    """

    target_reps: int
    completed_reps: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Validate set data."""
        if isinstance(self.target_reps, bool) or not isinstance(self.target_reps, int):
            raise InvalidArgumentError(
                f"Target reps must be an integer, got {self.target_reps!r}."
            )
        if self.target_reps <= 0:
            raise InvalidArgumentError("Target reps must be greater than 0.")

    def check_off_rep(self) -> None:
        """Mark one rep as completed; no-op once the target is reached."""
        self.check_off_reps(1)

    def check_off_reps(self, count: int) -> None:
        """Same result as calling check_off_rep() *count* times."""
        if count > 0:
            done = min(self.target_reps, self.completed_reps + count)
            object.__setattr__(self, "completed_reps", done)

    def complete(self) -> None:
        """Check off every remaining rep."""
        self.check_off_reps(self.target_reps - self.completed_reps)

    def is_completed(self) -> bool:
        """True when completed_reps equals target_reps."""
        return self.completed_reps == self.target_reps


@dataclass
class Exercise(_AssignOnce):
    """A named exercise owning an ordered list of sets."""

    name: str
    _sets: list[ExerciseSet] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        _require_name(self.name, "Exercise")

    @property
    def sets(self) -> list[ExerciseSet]:
        return list(self._sets)

    def add_set(self, exercise_set: ExerciseSet) -> None:
        """Append a set.  Raises InvalidArgumentError if it is None."""
        _require_present(exercise_set, "Exercise set")
        self._sets.append(exercise_set)


@dataclass
class Workout(_AssignOnce):
    """A workout session on a specific calendar date (not a datetime)."""

    date: Date
    _exercises: list[Exercise] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate workout date."""
        _require_present(self.date, "Date")
        if isinstance(self.date, datetime) or not isinstance(self.date, Date):
            raise InvalidArgumentError(f"Date must be a calendar date, got {self.date!r}.")

    @property
    def exercises(self) -> list[Exercise]:
        return list(self._exercises)

    def add_exercise(self, exercise: Exercise) -> None:
        """Append an exercise.  Raises InvalidArgumentError if it is None."""
        _require_present(exercise, "Exercise")
        self._exercises.append(exercise)


@dataclass
class WorkoutTracker:
    """
    Append-only workout history.

    Insertion order is the display order (oldest logged first); workouts
    are never re-sorted by date.
    """

    _workouts: list[Workout] = field(default_factory=list, init=False, repr=False)

    @property
    def workouts(self) -> list[Workout]:
        return list(self._workouts)

    def add_workout(self, workout: Workout) -> None:
        """Append a workout.  Raises InvalidArgumentError if it is None."""
        _require_present(workout, "Workout")
        self._workouts.append(workout)


# =============================================================================
# NUTRITION
# =============================================================================


@dataclass(frozen=True)
class Meal:
    """
    A meal with macronutrient amounts in grams.

    Immutable once constructed.
    """

    name: str
    protein: int
    carbs: int
    fat: int

    def __post_init__(self) -> None:
        """Validate meal data."""
        _require_name(self.name, "Meal")
        for label in ("protein", "carbs", "fat"):
            value = getattr(self, label)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"{label} must be an integer, got {value!r}.")
            if value < 0:
                raise InvalidArgumentError("Macronutrients cannot be negative.")


@dataclass
class MealPlan:
    """Ordered list of meals with derived macronutrient totals."""

    _meals: list[Meal] = field(default_factory=list, init=False, repr=False)

    @property
    def meals(self) -> list[Meal]:
        return list(self._meals)

    def add_meal(self, meal: Meal) -> None:
        """Append a meal.  Raises InvalidArgumentError if it is None."""
        _require_present(meal, "Meal")
        self._meals.append(meal)

    def total_protein(self) -> int:
        """Sum of protein across all meals (0 for an empty plan)."""
        return sum(m.protein for m in self._meals)

    def total_carbs(self) -> int:
        """Sum of carbohydrates across all meals (0 for an empty plan)."""
        return sum(m.carbs for m in self._meals)

    def total_fat(self) -> int:
        """Sum of fat across all meals (0 for an empty plan)."""
        return sum(m.fat for m in self._meals)


# =============================================================================
# RECIPES
# =============================================================================


@dataclass(frozen=True)
class Recipe:
    """
    A recipe with a name, an ingredient list and preparation instructions.

    An empty ingredient list or empty instructions are allowed; only a
    missing (None) value is rejected.  Ingredients are copied into a tuple,
    so the recipe cannot be changed after construction.
    """

    name: str
    ingredients: tuple[str, ...]
    instructions: str

    def __post_init__(self) -> None:
        """Validate recipe data and freeze the ingredient list."""
        _require_name(self.name, "Recipe")
        if self.ingredients is None:
            raise InvalidArgumentError("Ingredients cannot be null.")
        if self.instructions is None:
            raise InvalidArgumentError("Instructions cannot be null.")
        if isinstance(self.ingredients, str) or not isinstance(self.ingredients, Iterable):
            raise InvalidArgumentError(
                f"Ingredients must be a sequence of strings, got {self.ingredients!r}."
            )
        if not isinstance(self.instructions, str):
            raise InvalidArgumentError(
                f"Instructions must be a string, got {self.instructions!r}."
            )
        ingredients = tuple(self.ingredients)
        for item in ingredients:
            if not isinstance(item, str):
                raise InvalidArgumentError(f"Ingredient must be a string, got {item!r}.")
        object.__setattr__(self, "ingredients", ingredients)


@dataclass
class RecipeLibrary:
    """
    Insertion-ordered collection of recipes.

    Lookup is by case-insensitive exact name and returns the first match in
    insertion order.  Adding never checks for duplicate names, so a later
    recipe whose name differs only in case is unreachable by name while an
    earlier one exists.
    """

    _recipes: list[Recipe] = field(default_factory=list, init=False, repr=False)

    def all_recipes(self) -> list[Recipe]:
        """Return a snapshot of every recipe in insertion order."""
        return list(self._recipes)

    def add_recipe(self, recipe: Recipe | None) -> bool:
        """Append a recipe.  Returns False (without raising) if it is None."""
        if recipe is None:
            return False
        self._recipes.append(recipe)
        return True

    def _index_of(self, name: str | None) -> int | None:
        if not name:
            return None
        wanted = name.casefold()
        for i, recipe in enumerate(self._recipes):
            if recipe.name.casefold() == wanted:
                return i
        return None

    def get_recipe_by_name(self, name: str | None) -> Recipe | None:
        """Return the first recipe whose name matches case-insensitively, or None."""
        idx = self._index_of(name)
        return self._recipes[idx] if idx is not None else None

    def filter_recipes_by_ingredient(self, ingredient: str | None) -> list[Recipe]:
        """Return recipes listing *ingredient* exactly (case-sensitive)."""
        if not ingredient:
            return []
        return [r for r in self._recipes if ingredient in r.ingredients]

    def delete_recipe(self, name: str | None) -> bool:
        """Remove the first case-insensitive match.  Returns False if none."""
        idx = self._index_of(name)
        if idx is None:
            return False
        del self._recipes[idx]
        return True

    def edit_recipe(
        self,
        name: str | None,
        new_ingredients: list[str] | None,
        new_instructions: str | None,
    ) -> bool:
        """
        Replace a recipe's ingredients and instructions.

        The existing recipe is removed and a replacement built under its
        stored name.  If the replacement is rejected with InvalidArgumentError
        the original is put back at its previous position and False is
        returned.  Any other exception is re-raised after the same restore,
        so the library is never left without the recipe.

        Args:
            name: Recipe name (case-insensitive)
            new_ingredients: Replacement ingredient list
            new_instructions: Replacement instructions

        Returns:
            True if the recipe was replaced, False otherwise
        """
        idx = self._index_of(name)
        if idx is None:
            return False

        original = self._recipes.pop(idx)
        try:
            updated = Recipe(original.name, new_ingredients, new_instructions)
        except InvalidArgumentError:
            self._recipes.insert(idx, original)
            return False
        except BaseException:
            self._recipes.insert(idx, original)
            raise

        self._recipes.append(updated)
        return True


# =============================================================================
# AGGREGATE
# =============================================================================


@dataclass
class VitaSyncData(_AssignOnce):
    """
    Complete tracker state: one workout tracker, one meal plan and one
    recipe library under a display name.

    This is the unit of persistence; see vitasync.io.serializers.
    """

    name: str
    workout_tracker: WorkoutTracker = field(default_factory=WorkoutTracker, init=False)
    meal_plan: MealPlan = field(default_factory=MealPlan, init=False)
    recipe_library: RecipeLibrary = field(default_factory=RecipeLibrary, init=False)
