"""
Cookbook Admin — Django admin for Category and Recipe.

Recipe edits are browsable through django-simple-history's admin.
"""

from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from cookbook.models import Category, Recipe


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """Admin for default and private categories."""

    list_display = ("name", "owner", "is_default", "created_at")
    list_filter = (("owner", admin.EmptyFieldListFilter),)
    search_fields = ("name", "owner__username")
    raw_id_fields = ("owner",)
    readonly_fields = ("created_at",)

    @admin.display(boolean=True, description="Default")
    def is_default(self, obj):
        return obj.is_default


@admin.register(Recipe)
class RecipeAdmin(SimpleHistoryAdmin):
    """Admin for recipes."""

    list_display = ("title", "owner", "category", "is_favorite", "created_at")
    list_filter = ("is_favorite",)
    search_fields = ("title", "owner__username")
    raw_id_fields = ("owner", "category")
    readonly_fields = ("created_at", "updated_at")
