"""
Cookbook Result Types.

Structured results for read-side operations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cookbook.models import Recipe


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity handed back after a successful login. Never carries the hash."""

    id: int
    username: str


@dataclass
class DashboardSummary:
    """
    Per-user overview.

    recent_recipes and favorite_recipes are newest first and capped at
    DASHBOARD_PREVIEW_SIZE.
    """

    total_recipes: int
    favorite_recipe_count: int
    distinct_category_count: int
    recent_recipes: list[Recipe] = field(default_factory=list)
    favorite_recipes: list[Recipe] = field(default_factory=list)
