"""
Cookbook Models.

Core models for personal recipe management:
- Category: default (shared, ownerless) or private (owned by one user)
- Recipe: a user's recipe, optionally filed under a visible category
"""

from cookbook.models.category import Category, CategoryQuerySet
from cookbook.models.recipe import Recipe, RecipeQuerySet

__all__ = [
    "Category",
    "CategoryQuerySet",
    "Recipe",
    "RecipeQuerySet",
]
