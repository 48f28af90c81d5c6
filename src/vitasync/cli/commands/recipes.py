"""Recipe library commands: list, add, edit, delete, find, filter."""

from typing import Annotated, Optional

import typer

from ...core.models import InvalidArgumentError, Recipe, RecipeLibrary, VitaSyncData
from ...io.serializers import parse_ingredients
from .. import views
from ..app import DataPathOption, app, get_store, load_data, save_data


@app.command("recipes")
def list_recipes(data_path: DataPathOption = None) -> None:
    """
    List every recipe in the library.
    """
    store = get_store(data_path)
    views.print_recipes(load_data(store).recipe_library.all_recipes())


@app.command("add-recipe")
def add_recipe(
    name: Annotated[str, typer.Argument(help="Recipe name")],
    ingredients: Annotated[
        str,
        typer.Option("--ingredients", "-i", help="Comma-separated ingredients"),
    ] = "",
    instructions: Annotated[
        str,
        typer.Option("--instructions", "-s", help="Preparation instructions"),
    ] = "",
    data_path: DataPathOption = None,
) -> None:
    """
    Add a recipe to the library.
    """
    store = get_store(data_path)
    data = load_data(store)

    try:
        recipe = Recipe(name, parse_ingredients(ingredients), instructions)
    except InvalidArgumentError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if data.recipe_library.get_recipe_by_name(name) is not None:
        views.print_warning(
            f"A recipe named '{name}' already exists; lookups will keep finding the first one."
        )

    data.recipe_library.add_recipe(recipe)
    save_data(store, data)
    views.print_success(f"Recipe added: {recipe.name}")


@app.command("edit-recipe")
def edit_recipe(
    name: Annotated[str, typer.Argument(help="Name of the recipe to edit (case-insensitive)")],
    ingredients: Annotated[
        Optional[str],
        typer.Option("--ingredients", "-i", help="New comma-separated ingredients"),
    ] = None,
    instructions: Annotated[
        Optional[str],
        typer.Option("--instructions", "-s", help="New preparation instructions"),
    ] = None,
    data_path: DataPathOption = None,
) -> None:
    """
    Replace a recipe's ingredients and/or instructions.

    Options left out keep their current value.
    """
    store = get_store(data_path)
    data = load_data(store)
    library = data.recipe_library

    current = library.get_recipe_by_name(name)
    if current is None:
        views.print_error(f"No recipe named '{name}'")
        raise typer.Exit(1)

    new_ingredients = (
        parse_ingredients(ingredients) if ingredients is not None else list(current.ingredients)
    )
    new_instructions = instructions if instructions is not None else current.instructions

    if not library.edit_recipe(name, new_ingredients, new_instructions):
        views.print_error(
            "Failed to update recipe. Please check if the recipe exists and your inputs are valid."
        )
        raise typer.Exit(1)

    save_data(store, data)
    views.print_success(f"Recipe updated: {current.name}")


@app.command("delete-recipe")
def delete_recipe(
    name: Annotated[str, typer.Argument(help="Name of the recipe to delete (case-insensitive)")],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
    data_path: DataPathOption = None,
) -> None:
    """
    Delete a recipe from the library.
    """
    store = get_store(data_path)
    data = load_data(store)

    target = data.recipe_library.get_recipe_by_name(name)
    if target is None:
        views.print_error(f"No recipe named '{name}'")
        raise typer.Exit(1)

    if not force and not views.confirm_action(f"Delete recipe '{target.name}'?"):
        views.print_info("Cancelled.")
        raise typer.Exit(0)

    data.recipe_library.delete_recipe(name)
    save_data(store, data)
    views.print_success(f"Deleted recipe: {target.name}")


@app.command("find-recipe")
def find_recipe(
    name: Annotated[str, typer.Argument(help="Recipe name (case-insensitive)")],
    data_path: DataPathOption = None,
) -> None:
    """
    Show a single recipe by name.
    """
    store = get_store(data_path)
    recipe = load_data(store).recipe_library.get_recipe_by_name(name)
    if recipe is None:
        views.print_error(f"No recipe named '{name}'")
        raise typer.Exit(1)
    views.print_recipe(recipe)


@app.command("filter-recipes")
def filter_recipes(
    ingredient: Annotated[str, typer.Argument(help="Ingredient to match exactly (case-sensitive)")],
    data_path: DataPathOption = None,
) -> None:
    """
    List recipes that use an ingredient.
    """
    store = get_store(data_path)
    matches = load_data(store).recipe_library.filter_recipes_by_ingredient(ingredient)
    views.print_recipes(matches, empty_message=f"No recipes use '{ingredient}'.")


# ---------------------------------------------------------------------------
# Interactive menu helpers
# ---------------------------------------------------------------------------


def _menu_add_recipe(library: RecipeLibrary) -> None:
    try:
        name = views.console.input("Recipe name: ").strip()
        ingredients = parse_ingredients(views.console.input("Ingredients (comma-separated): "))
        instructions = views.console.input("Preparation instructions: ").strip()
        recipe = Recipe(name, ingredients, instructions)
    except InvalidArgumentError as e:
        views.print_error(str(e))
        return

    if library.add_recipe(recipe):
        views.print_success("Recipe added successfully.")
    else:
        views.print_error("Failed to add recipe.")


def _menu_edit_recipe(library: RecipeLibrary) -> None:
    name = views.console.input("Name of the recipe to edit: ").strip()
    ingredients = parse_ingredients(views.console.input("New ingredients (comma-separated): "))
    instructions = views.console.input("New preparation instructions: ").strip()
    if library.edit_recipe(name, ingredients, instructions):
        views.print_success("Recipe updated successfully.")
    else:
        views.print_error(
            "Failed to update recipe. Please check if the recipe exists and your inputs are valid."
        )


def _menu_delete_recipe(library: RecipeLibrary) -> None:
    name = views.console.input("Name of the recipe to delete: ").strip()
    if library.delete_recipe(name):
        views.print_success("Recipe deleted successfully.")
    else:
        views.print_error("Failed to delete recipe. Please check if the recipe exists.")


def _menu_recipe_library(data: VitaSyncData) -> None:
    """Interactive recipe sub-menu called from the main menu."""
    library = data.recipe_library
    menu = {
        "1": "View all recipes",
        "2": "Add new recipe",
        "3": "Edit recipe",
        "4": "Delete recipe",
        "0": "Back to main menu",
    }

    while True:
        views.console.print()
        views.console.print("[bold]Recipe Library[/bold]")
        for key, desc in menu.items():
            views.console.print(f"  \\[{key}] {desc}")
        try:
            choice = views.console.input("Choose: ").strip()
        except EOFError:
            return

        if choice == "0":
            return
        elif choice == "1":
            views.print_recipes(library.all_recipes())
        elif choice == "2":
            _menu_add_recipe(library)
        elif choice == "3":
            _menu_edit_recipe(library)
        elif choice == "4":
            _menu_delete_recipe(library)
        else:
            views.print_error(f"Unknown choice: {choice}")
