"""Meal plan commands: add-meal, macros."""

from typing import Annotated

import typer

from ...core.models import InvalidArgumentError, Meal, VitaSyncData
from .. import views
from ..app import DataPathOption, app, get_store, load_data, save_data


@app.command("add-meal")
def add_meal(
    name: Annotated[str, typer.Argument(help="Meal name")],
    protein: Annotated[int, typer.Option("--protein", "-P", help="Protein in grams")] = 0,
    carbs: Annotated[int, typer.Option("--carbs", "-C", help="Carbohydrates in grams")] = 0,
    fat: Annotated[int, typer.Option("--fat", "-F", help="Fat in grams")] = 0,
    data_path: DataPathOption = None,
) -> None:
    """
    Add a meal to the meal plan.
    """
    store = get_store(data_path)
    data = load_data(store)

    try:
        meal = Meal(name, protein, carbs, fat)
    except InvalidArgumentError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    data.meal_plan.add_meal(meal)
    save_data(store, data)
    views.print_success(f"Added meal: {meal.name}")


@app.command()
def macros(data_path: DataPathOption = None) -> None:
    """
    Show daily macronutrient totals across all meals.
    """
    store = get_store(data_path)
    views.print_macros(load_data(store).meal_plan)


def _menu_add_meal(data: VitaSyncData) -> None:
    """Interactive add-meal helper called from the main menu."""
    try:
        name = views.console.input("Meal name: ").strip()
        protein = int(views.console.input("Protein (g): ").strip())
        carbs = int(views.console.input("Carbohydrates (g): ").strip())
        fat = int(views.console.input("Fat (g): ").strip())
        meal = Meal(name, protein, carbs, fat)
    except InvalidArgumentError as e:
        views.print_error(str(e))
        return
    except ValueError:
        views.print_error("Invalid number. Please try again.")
        return

    data.meal_plan.add_meal(meal)
    views.print_success("Meal added to plan.")
