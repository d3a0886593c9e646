"""
Cookbook Service - Thin facade over the service mixins.

Usage:
    from cookbook import cookbook, CookbookError, RecipeFields

    alice = cookbook.register("alice", "a@example.com", "s3cret")
    soups = cookbook.create_category("Soups", owner_id=alice.pk)

    recipe = cookbook.create_recipe(
        RecipeFields(
            title="Leek soup",
            ingredients="leeks\npotatoes",
            instructions="Simmer, blend.",
            category_id=soups.pk,
        ),
        owner_id=alice.pk,
    )
    cookbook.set_favorite(recipe.pk, alice.pk, True)

    try:
        cookbook.delete_category(soups.pk, alice.pk)
    except CookbookError as e:
        print(e.code, e.details)  # IN_USE {'count': 1}
"""

from cookbook.services import (
    AccountOperations,
    CategoryOperations,
    DashboardQueries,
    RecipeOperations,
)


class Cookbook(
    AccountOperations,
    RecipeOperations,
    CategoryOperations,
    DashboardQueries,
):
    """
    Main API for Cookbook.

    Every operation takes the requester explicitly; nothing is read from
    ambient request state.
    """
