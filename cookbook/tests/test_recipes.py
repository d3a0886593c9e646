"""
Tests for recipe operations (cookbook.services.recipes).
"""

import pytest
from django.contrib.auth import get_user_model

from cookbook import CookbookError
from cookbook.models import Category, Recipe
from cookbook.service import Cookbook
from cookbook.services.recipes import RecipeFields

User = get_user_model()


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def alice(db):
    return User.objects.create_user(username="alice", password="pw")


@pytest.fixture
def bob(db):
    return User.objects.create_user(username="bob", password="pw")


@pytest.fixture
def soups(db):
    return Category.objects.defaults().get(name="Soups")


@pytest.fixture
def alice_private(alice):
    return Cookbook.create_category("Grandma's", owner_id=alice.pk)


@pytest.fixture
def bob_private(bob):
    return Cookbook.create_category("Bob only", owner_id=bob.pk)


@pytest.fixture
def pancakes(alice):
    return Cookbook.create_recipe(
        RecipeFields("Pancakes", "flour, eggs, milk", "Mix. Fry."),
        owner_id=alice.pk,
    )


# ═══════════════════════════════════════════════════════════════════
# Create
# ═══════════════════════════════════════════════════════════════════


class TestCreateRecipe:
    """Recipe creation."""

    def test_create_basic(self, alice):
        recipe = Cookbook.create_recipe(
            RecipeFields("Pancakes", "flour, eggs, milk", "Mix. Fry."),
            owner_id=alice.pk,
        )

        assert recipe.pk is not None
        assert recipe.owner_id == alice.pk
        assert recipe.category_id is None
        assert recipe.is_favorite is False
        assert recipe.image_url is None
        assert recipe.created_at is not None

    def test_create_in_default_category(self, alice, soups):
        recipe = Cookbook.create_recipe(
            RecipeFields("Borscht", "beets", "simmer", category_id=soups.pk),
            owner_id=alice.pk,
        )

        assert recipe.category == soups
        assert recipe.category_name == "Soups"

    def test_create_in_own_category(self, alice, alice_private):
        recipe = Cookbook.create_recipe(
            RecipeFields("Apple cake", "apples", "bake", category_id=alice_private.pk),
            owner_id=alice.pk,
        )
        assert recipe.category_id == alice_private.pk

    def test_create_in_foreign_category_rejected(self, alice, bob_private):
        with pytest.raises(CookbookError) as exc:
            Cookbook.create_recipe(
                RecipeFields("Sneaky", "x", "y", category_id=bob_private.pk),
                owner_id=alice.pk,
            )

        assert exc.value.code == "INVALID_INPUT"
        assert not Recipe.objects.filter(title="Sneaky").exists()

    def test_create_in_missing_category_rejected(self, alice):
        with pytest.raises(CookbookError) as exc:
            Cookbook.create_recipe(
                RecipeFields("Ghost", "x", "y", category_id=99999), owner_id=alice.pk
            )
        assert exc.value.code == "INVALID_INPUT"

    def test_create_favorite_with_image_url(self, alice):
        recipe = Cookbook.create_recipe(
            RecipeFields("Toast", "bread", "toast", is_favorite=True, image_url="/m/t.png"),
            owner_id=alice.pk,
        )

        assert recipe.is_favorite is True
        assert recipe.image_url == "/m/t.png"

    @pytest.mark.parametrize("field", ["title", "ingredients", "instructions"])
    def test_required_fields(self, alice, field):
        fields = RecipeFields("Title", "Ingredients", "Instructions")
        setattr(fields, field, "   ")

        with pytest.raises(CookbookError) as exc:
            Cookbook.create_recipe(fields, owner_id=alice.pk)

        assert exc.value.code == "INVALID_INPUT"
        assert exc.value.details["fields"] == [field]
        assert Recipe.objects.count() == 0

    def test_missing_requester(self, db):
        with pytest.raises(CookbookError) as exc:
            Cookbook.create_recipe(RecipeFields("T", "I", "S"), owner_id=None)
        assert exc.value.code == "MISSING_REQUESTER"

    def test_unknown_owner_rejected(self, db):
        with pytest.raises(CookbookError) as exc:
            Cookbook.create_recipe(RecipeFields("T", "I", "S"), owner_id=424242)

        assert exc.value.code == "INVALID_INPUT"
        assert Recipe.objects.count() == 0


# ═══════════════════════════════════════════════════════════════════
# Read
# ═══════════════════════════════════════════════════════════════════


class TestGetAndList:
    """Reads are always scoped to the requester."""

    def test_get_own(self, alice, pancakes):
        assert Cookbook.get_recipe(pancakes.pk, alice.pk) == pancakes

    def test_get_returns_stored_fields(self, alice, pancakes):
        recipe = Cookbook.get_recipe(pancakes.pk, alice.pk)

        assert RecipeFields.from_recipe(recipe) == RecipeFields(
            "Pancakes", "flour, eggs, milk", "Mix. Fry."
        )

    def test_get_foreign_looks_missing(self, bob, pancakes):
        with pytest.raises(CookbookError) as foreign:
            Cookbook.get_recipe(pancakes.pk, bob.pk)
        with pytest.raises(CookbookError) as missing:
            Cookbook.get_recipe(99999, bob.pk)

        assert foreign.value.code == missing.value.code == "NOT_FOUND_OR_FORBIDDEN"
        assert foreign.value.as_dict() == missing.value.as_dict()

    def test_get_accepts_string_ids(self, alice, pancakes):
        assert Cookbook.get_recipe(str(pancakes.pk), str(alice.pk)) == pancakes

    def test_list_newest_first(self, alice):
        first = Cookbook.create_recipe(RecipeFields("First", "i", "s"), alice.pk)
        second = Cookbook.create_recipe(RecipeFields("Second", "i", "s"), alice.pk)

        assert list(Cookbook.list_recipes(alice.pk)) == [second, first]

    def test_list_only_own(self, alice, bob, pancakes):
        Cookbook.create_recipe(RecipeFields("Bob's", "i", "s"), bob.pk)

        assert list(Cookbook.list_recipes(alice.pk)) == [pancakes]

    def test_list_by_category(self, alice, soups, pancakes):
        soup = Cookbook.create_recipe(
            RecipeFields("Soup", "i", "s", category_id=soups.pk), alice.pk
        )

        assert list(Cookbook.list_recipes(alice.pk, category_id=soups.pk)) == [soup]
        assert list(Cookbook.list_recipes(alice.pk, category_id=str(soups.pk))) == [soup]

    def test_list_favorites_only(self, alice, pancakes):
        fav = Cookbook.create_recipe(
            RecipeFields("Fav", "i", "s", is_favorite=True), alice.pk
        )

        assert list(Cookbook.list_recipes(alice.pk, favorites_only=True)) == [fav]

    def test_list_in_category(self, alice, bob, soups):
        mine = Cookbook.create_recipe(
            RecipeFields("Mine", "i", "s", category_id=soups.pk), alice.pk
        )
        Cookbook.create_recipe(
            RecipeFields("Theirs", "i", "s", category_id=soups.pk), bob.pk
        )

        assert list(Cookbook.list_in_category(soups.pk, alice.pk)) == [mine]

    def test_list_in_invisible_category(self, alice, bob_private):
        with pytest.raises(CookbookError) as exc:
            Cookbook.list_in_category(bob_private.pk, alice.pk)
        assert exc.value.code == "NOT_FOUND"

    def test_list_missing_requester(self, db):
        with pytest.raises(CookbookError) as exc:
            Cookbook.list_recipes(None)
        assert exc.value.code == "MISSING_REQUESTER"


# ═══════════════════════════════════════════════════════════════════
# Update / delete
# ═══════════════════════════════════════════════════════════════════


class TestUpdateRecipe:
    """Full replacement of a recipe's writable fields."""

    def test_update_replaces_fields(self, alice, soups, pancakes):
        fields = RecipeFields(
            "Crepes", "flour, eggs, more milk", "Thin. Fry.",
            category_id=soups.pk, is_favorite=True, image_url="/m/c.png",
        )

        recipe = Cookbook.update_recipe(pancakes.pk, alice.pk, fields)
        recipe.refresh_from_db()

        assert recipe.title == "Crepes"
        assert recipe.category_id == soups.pk
        assert recipe.is_favorite is True
        assert recipe.image_url == "/m/c.png"
        assert recipe.owner_id == alice.pk

    def test_update_clears_category(self, alice, soups):
        recipe = Cookbook.create_recipe(
            RecipeFields("Soup", "i", "s", category_id=soups.pk), alice.pk
        )
        fields = RecipeFields.from_recipe(recipe)
        fields.category_id = None

        recipe = Cookbook.update_recipe(recipe.pk, alice.pk, fields)
        assert recipe.category_id is None

    def test_update_foreign_recipe(self, bob, pancakes):
        with pytest.raises(CookbookError) as exc:
            Cookbook.update_recipe(pancakes.pk, bob.pk, RecipeFields("Mine", "i", "s"))

        assert exc.value.code == "NOT_FOUND_OR_FORBIDDEN"
        pancakes.refresh_from_db()
        assert pancakes.title == "Pancakes"

    def test_update_to_foreign_category(self, alice, bob_private, pancakes):
        fields = RecipeFields.from_recipe(pancakes)
        fields.category_id = bob_private.pk

        with pytest.raises(CookbookError) as exc:
            Cookbook.update_recipe(pancakes.pk, alice.pk, fields)

        assert exc.value.code == "INVALID_INPUT"
        pancakes.refresh_from_db()
        assert pancakes.category_id is None

    def test_update_blank_title(self, alice, pancakes):
        with pytest.raises(CookbookError) as exc:
            Cookbook.update_recipe(pancakes.pk, alice.pk, RecipeFields("", "i", "s"))
        assert exc.value.code == "INVALID_INPUT"

    def test_update_records_history(self, alice, pancakes):
        fields = RecipeFields.from_recipe(pancakes)
        fields.title = "Better pancakes"
        Cookbook.update_recipe(pancakes.pk, alice.pk, fields)

        titles = [h.title for h in pancakes.history.all()]
        assert titles == ["Better pancakes", "Pancakes"]


class TestDeleteRecipe:
    def test_delete_own(self, alice, pancakes):
        Cookbook.delete_recipe(pancakes.pk, alice.pk)
        assert not Recipe.objects.filter(pk=pancakes.pk).exists()

    def test_delete_foreign(self, bob, pancakes):
        with pytest.raises(CookbookError) as exc:
            Cookbook.delete_recipe(pancakes.pk, bob.pk)

        assert exc.value.code == "NOT_FOUND_OR_FORBIDDEN"
        assert Recipe.objects.filter(pk=pancakes.pk).exists()

    def test_delete_twice(self, alice, pancakes):
        Cookbook.delete_recipe(pancakes.pk, alice.pk)
        with pytest.raises(CookbookError) as exc:
            Cookbook.delete_recipe(pancakes.pk, alice.pk)
        assert exc.value.code == "NOT_FOUND_OR_FORBIDDEN"


# ═══════════════════════════════════════════════════════════════════
# Favorite
# ═══════════════════════════════════════════════════════════════════


class TestSetFavorite:
    """Explicit values set the flag; no value flips it."""

    def test_set_true(self, alice, pancakes):
        recipe = Cookbook.set_favorite(pancakes.pk, alice.pk, True)

        assert recipe.is_favorite is True
        pancakes.refresh_from_db()
        assert pancakes.is_favorite is True

    def test_flip(self, alice, pancakes):
        assert Cookbook.set_favorite(pancakes.pk, alice.pk).is_favorite is True
        assert Cookbook.set_favorite(pancakes.pk, alice.pk).is_favorite is False

    def test_set_same_value_writes_nothing(self, alice, pancakes):
        before = pancakes.history.count()

        recipe = Cookbook.set_favorite(pancakes.pk, alice.pk, False)

        assert recipe.is_favorite is False
        assert pancakes.history.count() == before

    def test_foreign_recipe(self, bob, pancakes):
        with pytest.raises(CookbookError) as exc:
            Cookbook.set_favorite(pancakes.pk, bob.pk, True)

        assert exc.value.code == "NOT_FOUND_OR_FORBIDDEN"
        pancakes.refresh_from_db()
        assert pancakes.is_favorite is False
