"""
Recipe service -- create, get, list, update, delete, favorite.

Every lookup is scoped to the requester: a recipe that exists but belongs to
someone else is reported exactly like one that does not exist.
"""

import logging
from dataclasses import dataclass

from django.core.exceptions import ValidationError
from django.db import transaction

from cookbook.conf import get_image_store
from cookbook.exceptions import CookbookError
from cookbook.models import Category, Recipe
from cookbook.protocols.images import ImageMetadata
from cookbook.services.categories import CategoryOperations
from cookbook.services.identity import coerce_id, require_requester

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "ingredients", "instructions")


@dataclass
class RecipeFields:
    """
    Complete writable state of a recipe.

    Defaults: uncategorized, not a favorite, no image.
    """

    title: str
    ingredients: str
    instructions: str
    category_id: int | None = None
    is_favorite: bool = False
    image_url: str | None = None

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeFields":
        return cls(
            title=recipe.title,
            ingredients=recipe.ingredients,
            instructions=recipe.instructions,
            category_id=recipe.category_id,
            is_favorite=recipe.is_favorite,
            image_url=recipe.image_url,
        )


class RecipeOperations:
    """
    Recipe operations.

    Writes that set a category lock that category row, matching the lock
    taken by CategoryOperations.delete_category.
    """

    @classmethod
    def create_recipe(cls, fields: RecipeFields, owner_id, image=None) -> Recipe:
        """
        Create a recipe for ``owner_id``.

        Args:
            fields: Recipe content
            owner_id: Requester, becomes the owner
            image: Optional uploaded file; stored before the row is written

        Raises:
            CookbookError('INVALID_INPUT') for empty required fields, a
            category the owner cannot use, or an image the store rejects
        """
        owner_id = require_requester(owner_id)
        cls._validate(fields)

        with transaction.atomic():
            category = cls._resolve_category(fields.category_id, owner_id)
            image_url = cls.store_image(image) if image is not None else fields.image_url

            recipe = Recipe(
                title=fields.title,
                ingredients=fields.ingredients,
                instructions=fields.instructions,
                category=category,
                owner_id=owner_id,
                is_favorite=bool(fields.is_favorite),
                image_url=image_url or None,
            )
            cls._save(recipe)

        logger.info(
            f"Created recipe {recipe.pk}",
            extra={"recipe_id": recipe.pk, "owner_id": owner_id},
        )

        return recipe

    @classmethod
    def get_recipe(cls, recipe_id, requester_id) -> Recipe:
        requester_id = require_requester(requester_id)
        return cls._owned(recipe_id, requester_id)

    @classmethod
    def list_recipes(cls, requester_id, category_id=None, favorites_only=False):
        """The requester's recipes, newest first, optionally filtered."""
        requester_id = require_requester(requester_id)

        recipes = Recipe.objects.owned_by(requester_id).select_related("category")
        if favorites_only:
            recipes = recipes.favorites()
        if category_id is not None and category_id != "":
            category_id = coerce_id(category_id, field="category_id")
            recipes = recipes.filter(category_id=category_id)

        return recipes.newest_first()

    @classmethod
    def list_in_category(cls, category_id, requester_id):
        """The requester's recipes in a category they can see."""
        requester_id = require_requester(requester_id)
        category = CategoryOperations.get_visible(category_id, requester_id)
        return cls.list_recipes(requester_id, category_id=category.pk)

    @classmethod
    def update_recipe(
        cls, recipe_id, requester_id, fields: RecipeFields, image=None
    ) -> Recipe:
        """
        Replace every writable field of a recipe in one row write.

        Callers wanting partial updates merge with RecipeFields.from_recipe().
        A new ``image`` replaces fields.image_url once stored.
        """
        requester_id = require_requester(requester_id)
        cls._validate(fields)

        with transaction.atomic():
            recipe = cls._owned(recipe_id, requester_id, lock=True)
            category = cls._resolve_category(fields.category_id, requester_id)
            image_url = cls.store_image(image) if image is not None else fields.image_url

            recipe.title = fields.title
            recipe.ingredients = fields.ingredients
            recipe.instructions = fields.instructions
            recipe.category = category
            recipe.is_favorite = bool(fields.is_favorite)
            recipe.image_url = image_url or None
            cls._save(recipe)

        logger.info(
            f"Updated recipe {recipe.pk}",
            extra={"recipe_id": recipe.pk, "owner_id": requester_id},
        )

        return recipe

    @classmethod
    def delete_recipe(cls, recipe_id, requester_id) -> None:
        requester_id = require_requester(requester_id)

        with transaction.atomic():
            recipe = cls._owned(recipe_id, requester_id, lock=True)
            pk = recipe.pk
            recipe.delete()

        logger.info(
            f"Deleted recipe {pk}", extra={"recipe_id": pk, "owner_id": requester_id}
        )

    @classmethod
    def set_favorite(cls, recipe_id, requester_id, value: bool | None = None) -> Recipe:
        """
        Set the favorite flag, or flip it when ``value`` is None.

        Setting the value a recipe already has writes nothing.
        """
        requester_id = require_requester(requester_id)

        with transaction.atomic():
            recipe = cls._owned(recipe_id, requester_id, lock=True)
            target = (not recipe.is_favorite) if value is None else bool(value)
            if recipe.is_favorite != target:
                recipe.is_favorite = target
                recipe.save(update_fields=["is_favorite", "updated_at"])

        return recipe

    @classmethod
    def store_image(cls, upload) -> str:
        """Hand an uploaded file to the image store and return its reference."""
        metadata = ImageMetadata(
            filename=getattr(upload, "name", "") or "",
            content_type=getattr(upload, "content_type", None),
            size=getattr(upload, "size", 0) or 0,
        )
        return get_image_store().store(upload, metadata)

    # ── internals ──

    @classmethod
    def _owned(cls, recipe_id, requester_id: int, lock: bool = False) -> Recipe:
        recipe_id = coerce_id(recipe_id, "NOT_FOUND_OR_FORBIDDEN")
        recipes = Recipe.objects.select_related("category")
        if lock:
            recipes = recipes.select_for_update(of=("self",))
        recipe = recipes.filter(pk=recipe_id, owner_id=requester_id).first()
        if recipe is None:
            raise CookbookError("NOT_FOUND_OR_FORBIDDEN")
        return recipe

    @classmethod
    def _resolve_category(cls, category_id, owner_id: int) -> Category | None:
        if category_id is None or category_id == "":
            return None
        category_id = coerce_id(category_id, field="category_id")
        category = Category.objects.select_for_update().filter(pk=category_id).first()
        if category is None or not category.is_visible_to(owner_id):
            raise CookbookError(
                "INVALID_INPUT",
                message="Category not available",
                category_id=category_id,
            )
        return category

    @classmethod
    def _validate(cls, fields: RecipeFields) -> None:
        missing = [
            name
            for name in REQUIRED_FIELDS
            if not str(getattr(fields, name) or "").strip()
        ]
        if missing:
            raise CookbookError(
                "INVALID_INPUT", message="Missing required fields", fields=missing
            )

    @classmethod
    def _save(cls, recipe: Recipe) -> None:
        try:
            recipe.save()
        except ValidationError as e:
            raise CookbookError(
                "INVALID_INPUT",
                message="Invalid recipe",
                fields=sorted(e.message_dict),
            )
