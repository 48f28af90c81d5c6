"""
Tests for RecipeLibrary lookup, filtering, deletion and the rollback in
edit_recipe.
"""

import pytest

from vitasync.core.models import Recipe, RecipeLibrary


def _alfredo() -> Recipe:
    return Recipe("Alfredo Pasta", ["pasta", "cream", "cheese"], "Boil pasta. Make sauce. Combine.")


@pytest.fixture
def library() -> RecipeLibrary:
    lib = RecipeLibrary()
    lib.add_recipe(_alfredo())
    lib.add_recipe(Recipe("Greek Salad", ["tomato", "feta", "olive oil"], "Chop and toss."))
    lib.add_recipe(Recipe("Caprese", ["tomato", "mozzarella", "basil"], "Slice and layer."))
    return lib


class TestAddAndList:
    def test_add_returns_true(self):
        lib = RecipeLibrary()
        assert lib.add_recipe(_alfredo()) is True
        assert len(lib.all_recipes()) == 1

    def test_add_none_returns_false(self):
        lib = RecipeLibrary()
        assert lib.add_recipe(None) is False
        assert lib.all_recipes() == []

    def test_all_recipes_in_insertion_order(self, library):
        names = [r.name for r in library.all_recipes()]
        assert names == ["Alfredo Pasta", "Greek Salad", "Caprese"]

    def test_all_recipes_returns_snapshot(self, library):
        library.all_recipes().clear()
        assert len(library.all_recipes()) == 3

    def test_duplicate_names_are_not_rejected(self):
        lib = RecipeLibrary()
        assert lib.add_recipe(Recipe("Soup", ["water"], "Boil."))
        assert lib.add_recipe(Recipe("SOUP", ["stock"], "Simmer."))
        assert len(lib.all_recipes()) == 2


class TestGetRecipeByName:
    @pytest.mark.parametrize("query", ["Alfredo Pasta", "alfredo pasta", "ALFREDO PASTA"])
    def test_case_insensitive_match(self, library, query):
        found = library.get_recipe_by_name(query)
        assert found is not None
        assert found.name == "Alfredo Pasta"

    def test_partial_name_does_not_match(self, library):
        assert library.get_recipe_by_name("Alfredo") is None

    @pytest.mark.parametrize("query", [None, "", "Pizza"])
    def test_no_match_returns_none(self, library, query):
        assert library.get_recipe_by_name(query) is None

    def test_first_inserted_match_wins(self):
        lib = RecipeLibrary()
        first = Recipe("Soup", ["water"], "Boil.")
        lib.add_recipe(first)
        lib.add_recipe(Recipe("soup", ["stock"], "Simmer."))
        assert lib.get_recipe_by_name("SOUP") is first


class TestFilterByIngredient:
    def test_matches_all_recipes_with_ingredient(self, library):
        names = [r.name for r in library.filter_recipes_by_ingredient("tomato")]
        assert names == ["Greek Salad", "Caprese"]

    def test_match_is_case_sensitive(self, library):
        assert library.filter_recipes_by_ingredient("Tomato") == []

    def test_match_is_exact(self, library):
        assert library.filter_recipes_by_ingredient("tom") == []

    @pytest.mark.parametrize("ingredient", [None, ""])
    def test_empty_query_returns_empty_list(self, library, ingredient):
        assert library.filter_recipes_by_ingredient(ingredient) == []


class TestDeleteRecipe:
    def test_delete_existing(self, library):
        assert library.delete_recipe("greek salad") is True
        assert library.get_recipe_by_name("Greek Salad") is None
        assert len(library.all_recipes()) == 2

    @pytest.mark.parametrize("name", [None, "", "Pizza"])
    def test_delete_missing_returns_false(self, library, name):
        assert library.delete_recipe(name) is False
        assert len(library.all_recipes()) == 3

    def test_delete_removes_only_first_match(self):
        lib = RecipeLibrary()
        lib.add_recipe(Recipe("Soup", ["water"], "Boil."))
        second = Recipe("soup", ["stock"], "Simmer.")
        lib.add_recipe(second)
        assert lib.delete_recipe("SOUP") is True
        assert lib.all_recipes() == [second]


class TestEditRecipe:
    def test_successful_edit_replaces_contents(self, library):
        assert library.edit_recipe("Alfredo Pasta", ["fettuccine", "butter"], "Toss.") is True

        updated = library.get_recipe_by_name("Alfredo Pasta")
        assert list(updated.ingredients) == ["fettuccine", "butter"]
        assert updated.instructions == "Toss."
        assert len(library.all_recipes()) == 3

    def test_edit_keeps_stored_name(self, library):
        assert library.edit_recipe("alfredo pasta", ["pasta"], "Boil.") is True
        assert library.get_recipe_by_name("ALFREDO PASTA").name == "Alfredo Pasta"

    def test_edit_allows_empty_values(self, library):
        assert library.edit_recipe("Caprese", [], "") is True
        recipe = library.get_recipe_by_name("Caprese")
        assert list(recipe.ingredients) == []
        assert recipe.instructions == ""

    def test_none_ingredients_rolls_back(self, library):
        original = library.get_recipe_by_name("Alfredo Pasta")
        before = library.all_recipes()

        assert library.edit_recipe("Alfredo Pasta", None, "Anything.") is False

        restored = library.get_recipe_by_name("Alfredo Pasta")
        assert restored is original
        assert "cream" in restored.ingredients
        assert list(restored.ingredients) == ["pasta", "cream", "cheese"]
        assert library.all_recipes() == before

    def test_none_instructions_rolls_back(self, library):
        before = library.all_recipes()
        assert library.edit_recipe("Greek Salad", ["feta"], None) is False
        assert library.all_recipes() == before

    def test_rollback_preserves_position(self, library):
        assert library.edit_recipe("Greek Salad", None, None) is False
        names = [r.name for r in library.all_recipes()]
        assert names == ["Alfredo Pasta", "Greek Salad", "Caprese"]

    @pytest.mark.parametrize("name", [None, "", "Pizza"])
    def test_missing_recipe_returns_false(self, library, name):
        before = library.all_recipes()
        assert library.edit_recipe(name, ["x"], "y") is False
        assert library.all_recipes() == before

    def test_edit_targets_first_match_only(self):
        lib = RecipeLibrary()
        lib.add_recipe(Recipe("Soup", ["water"], "Boil."))
        second = Recipe("soup", ["stock"], "Simmer.")
        lib.add_recipe(second)

        assert lib.edit_recipe("SOUP", ["broth"], "Heat.") is True

        assert second in lib.all_recipes()
        assert any(list(r.ingredients) == ["broth"] for r in lib.all_recipes())

    def test_non_iterable_ingredients_rolls_back(self, library):
        before = library.all_recipes()
        assert library.edit_recipe("Alfredo Pasta", 5, "Anything.") is False
        assert library.all_recipes() == before

    def test_non_string_ingredient_rolls_back(self, library):
        before = library.all_recipes()
        assert library.edit_recipe("Caprese", ["tomato", None], "Slice.") is False
        assert library.all_recipes() == before

    def test_unexpected_error_restores_and_propagates(self, library):
        def exploding():
            yield "tomato"
            raise RuntimeError("ingredient source failed")

        before = library.all_recipes()
        with pytest.raises(RuntimeError):
            library.edit_recipe("Greek Salad", exploding(), "Chop.")
        assert library.all_recipes() == before
