"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of workouts, meals and recipes.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.models import MealPlan, Recipe, Workout

console = Console()

BANNER = r"""
 _    ___ __        _____
| |  / (_) /_____ _/ ___/__  ______  _____
| | / / / __/ __ `/\__ \/ / / / __ \/ ___/
| |/ / / /_/ /_/ /___/ / /_/ / / / / /__
|___/_/\__/\__,_//____/\__, /_/ /_/\___/
                      /____/
"""


def _fmt_sets(workout: Workout) -> list[tuple[str, str]]:
    """One (exercise name, "done/target ...") pair per exercise."""
    rows = []
    for exercise in workout.exercises:
        cells = []
        for s in exercise.sets:
            mark = "✓" if s.is_completed() else " "
            cells.append(f"{s.completed_reps}/{s.target_reps}{mark}")
        rows.append((escape(exercise.name), "  ".join(cells) or "-"))
    return rows


def format_workout_table(workouts: list[Workout]) -> Table:
    """
    Format workouts as a Rich table.

    Workouts appear in the order they were logged; each exercise gets its
    own row with per-set completed/target reps.

    Args:
        workouts: Workouts to display

    Returns:
        Rich Table object
    """
    table = Table(title="Workout History")

    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Exercise", style="green")
    table.add_column("Sets (done/target)")

    for i, workout in enumerate(workouts, 1):
        rows = _fmt_sets(workout)
        if not rows:
            table.add_row(str(i), workout.date.isoformat(), "-", "-")
            continue
        for j, (name, sets) in enumerate(rows):
            table.add_row(
                str(i) if j == 0 else "",
                workout.date.isoformat() if j == 0 else "",
                name,
                sets,
            )

    return table


def print_history(workouts: list[Workout]) -> None:
    """
    Print workout history table.

    Args:
        workouts: Workouts to display
    """
    if not workouts:
        print_info("No workouts logged yet.")
        return

    console.print(format_workout_table(workouts))


def print_macros(meal_plan: MealPlan) -> None:
    """Print each meal and the daily macronutrient totals."""
    table = Table(title="Daily Macronutrients")
    table.add_column("Meal", style="green")
    table.add_column("Protein (g)", justify="right")
    table.add_column("Carbs (g)", justify="right")
    table.add_column("Fat (g)", justify="right")

    for meal in meal_plan.meals:
        table.add_row(escape(meal.name), str(meal.protein), str(meal.carbs), str(meal.fat))

    table.add_row(
        "[bold]Total[/bold]",
        f"[bold]{meal_plan.total_protein()}[/bold]",
        f"[bold]{meal_plan.total_carbs()}[/bold]",
        f"[bold]{meal_plan.total_fat()}[/bold]",
        end_section=True,
    )
    console.print(table)


def print_recipe(recipe: Recipe) -> None:
    """Print a single recipe."""
    console.print(f"[bold cyan]{escape(recipe.name)}[/bold cyan]")
    ingredients = escape(", ".join(recipe.ingredients)) if recipe.ingredients else "(none)"
    console.print(f"  Ingredients:  {ingredients}")
    console.print(f"  Instructions: {escape(recipe.instructions) or '(none)'}")


def print_recipes(recipes: list[Recipe], empty_message: str = "No recipes saved yet.") -> None:
    """Print a list of recipes separated by rules."""
    if not recipes:
        print_info(empty_message)
        return

    for recipe in recipes:
        print_recipe(recipe)
        console.rule(style="dim")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{escape(message)}[/blue]")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(message)}[/green]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Args:
        message: Confirmation message

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{escape(message)} \\[y/N]: ")
    return response.lower() in ("y", "yes")
