"""
Category service -- list visible, get, create, delete.

Deletion is a single transactional precondition:

    delete C  iff  C is private  AND  C.owner == requester  AND  no recipe uses C

The category row is locked (SELECT FOR UPDATE) for the whole check-and-delete.
Recipe writes lock the category they point to in the same way, so a recipe
cannot be attached between the reference count and the DELETE.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import RestrictedError

from cookbook.exceptions import CookbookError
from cookbook.models import Category
from cookbook.services.identity import coerce_id, optional_requester, require_requester

logger = logging.getLogger(__name__)


class CategoryOperations:
    """
    Category operations.

    Names are compared case-insensitively within a scope (default scope,
    or one user's private scope).
    """

    @classmethod
    def list_visible(cls, requester_id=None):
        """Default categories, plus the requester's own when given, by name."""
        requester_id = optional_requester(requester_id)
        return Category.objects.visible_to(requester_id).order_by("name", "id")

    @classmethod
    def get_visible(cls, category_id, requester_id=None) -> Category:
        requester_id = optional_requester(requester_id)
        category_id = coerce_id(category_id, "NOT_FOUND")
        category = (
            Category.objects.visible_to(requester_id).filter(pk=category_id).first()
        )
        if category is None:
            raise CookbookError("NOT_FOUND", message="Category not found")
        return category

    @classmethod
    def create_category(cls, name: str, owner_id=None) -> Category:
        """
        Create a category.

        Args:
            name: Display name (surrounding whitespace is dropped)
            owner_id: Owner for a private category; None for a default one

        Raises:
            CookbookError('INVALID_INPUT') if the name is empty or too long,
            or the owner does not exist
            CookbookError('CONFLICT') if the name exists in that scope
        """
        owner_id = optional_requester(owner_id)
        name = (name or "").strip()
        if not name:
            raise CookbookError("INVALID_INPUT", message="Category name is required")

        if Category.objects.in_scope(owner_id).filter(name__iexact=name).exists():
            raise CookbookError(
                "CONFLICT", message="Category with this name already exists"
            )

        try:
            with transaction.atomic():
                category = Category.objects.create(name=name, owner_id=owner_id)
        except IntegrityError:
            raise CookbookError(
                "CONFLICT", message="Category with this name already exists"
            )
        except ValidationError as e:
            raise CookbookError(
                "INVALID_INPUT",
                message="Invalid category",
                fields=sorted(e.message_dict),
            )

        logger.info(
            f"Created category {category.pk}",
            extra={"category_id": category.pk, "owner_id": owner_id},
        )

        return category

    @classmethod
    def delete_category(cls, category_id, requester_id) -> None:
        """
        Delete a private category the requester owns and nobody uses.

        Raises:
            CookbookError('NOT_FOUND') if the category does not exist
            CookbookError('FORBIDDEN') for default or foreign categories
            CookbookError('IN_USE', count=n) while n recipes reference it
        """
        requester_id = require_requester(requester_id)
        category_id = coerce_id(category_id, "NOT_FOUND")

        with transaction.atomic():
            category = (
                Category.objects.select_for_update().filter(pk=category_id).first()
            )
            if category is None:
                raise CookbookError("NOT_FOUND", message="Category not found")

            if category.is_default:
                raise CookbookError(
                    "FORBIDDEN", message="Default categories cannot be deleted"
                )

            if category.owner_id != requester_id:
                raise CookbookError(
                    "FORBIDDEN", message="Not authorized to delete this category"
                )

            in_use = category.recipes.count()
            if in_use:
                logger.warning(
                    f"Blocked deletion of category {category_id}: {in_use} recipes",
                    extra={"category_id": category_id, "count": in_use},
                )
                raise cls._in_use(in_use)

            try:
                category.delete()
            except RestrictedError as e:
                raise cls._in_use(len(e.restricted_objects))

        logger.info(
            f"Deleted category {category_id}",
            extra={"category_id": category_id, "owner_id": requester_id},
        )

    @staticmethod
    def _in_use(count: int) -> CookbookError:
        noun = "recipe" if count == 1 else "recipes"
        return CookbookError(
            "IN_USE", message=f"Category in use by {count} {noun}", count=count
        )
