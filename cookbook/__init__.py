"""
Django Cookbook - Personal recipe management.

Users keep their own recipes, file them under shared default categories or
their own private ones, mark favorites and attach images.

Usage:
    from cookbook import cookbook, CookbookError

    user = cookbook.register("alice", "a@example.com", "s3cret")
    cookbook.authenticate("alice", "s3cret")  # AuthenticatedUser(id=..., username="alice")

    for recipe in cookbook.list_recipes(user.pk, favorites_only=True):
        print(recipe.title)

    summary = cookbook.summarize(user.pk)

Ownership: every operation takes the requester id, and a user only ever
sees, edits or deletes what they own.
"""

from cookbook.exceptions import CookbookError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in ("cookbook", "Cookbook"):
        from cookbook.service import Cookbook

        return Cookbook
    if name == "RecipeFields":
        from cookbook.services.recipes import RecipeFields

        return RecipeFields
    if name == "DashboardSummary":
        from cookbook.results import DashboardSummary

        return DashboardSummary
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["cookbook", "Cookbook", "CookbookError", "RecipeFields", "DashboardSummary"]
__version__ = "0.1.0"
