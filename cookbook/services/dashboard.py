"""
Dashboard service -- per-user summary, recomputed on every call.
"""

from django.db.models import Count, Q

from cookbook.conf import get_setting
from cookbook.models import Recipe
from cookbook.results import DashboardSummary
from cookbook.services.identity import require_requester


class DashboardQueries:
    """Read-only aggregates over the requester's recipes."""

    @classmethod
    def summarize(cls, requester_id) -> DashboardSummary:
        requester_id = require_requester(requester_id)
        size = get_setting("DASHBOARD_PREVIEW_SIZE")

        recipes = Recipe.objects.owned_by(requester_id)
        stats = recipes.aggregate(
            total=Count("id"),
            favorites=Count("id", filter=Q(is_favorite=True)),
            categories=Count("category", distinct=True),
        )

        preview = recipes.select_related("category").newest_first()

        return DashboardSummary(
            total_recipes=stats["total"],
            favorite_recipe_count=stats["favorites"],
            distinct_category_count=stats["categories"],
            recent_recipes=list(preview[:size]),
            favorite_recipes=list(preview.favorites()[:size]),
        )
