"""
Cookbook Services.

Business logic that doesn't belong in models:
- accounts: register, authenticate, delete account
- recipes: owner-scoped recipe CRUD and favorites
- categories: visible listing, scoped creation, guarded deletion
- dashboard: per-user summary
"""

from cookbook.services.accounts import AccountOperations
from cookbook.services.categories import CategoryOperations
from cookbook.services.dashboard import DashboardQueries
from cookbook.services.recipes import RecipeFields, RecipeOperations

__all__ = [
    "AccountOperations",
    "CategoryOperations",
    "DashboardQueries",
    "RecipeFields",
    "RecipeOperations",
]
