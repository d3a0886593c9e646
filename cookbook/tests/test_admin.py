"""
Tests for Cookbook admin registration (cookbook.admin).
"""

import pytest
from django.contrib import admin
from django.contrib.auth import get_user_model
from simple_history.admin import SimpleHistoryAdmin

from cookbook.admin import CategoryAdmin
from cookbook.models import Category, Recipe

User = get_user_model()


class TestAdminRegistration:
    def test_models_registered(self):
        assert admin.site.is_registered(Category)
        assert admin.site.is_registered(Recipe)

    def test_recipe_admin_shows_history(self):
        assert isinstance(admin.site._registry[Recipe], SimpleHistoryAdmin)

    @pytest.mark.django_db
    def test_is_default_column(self):
        model_admin = CategoryAdmin(Category, admin.site)
        owner = User.objects.create_user(username="alice", password="pw")
        private = Category.objects.create(name="Mine", owner=owner)
        soups = Category.objects.defaults().get(name="Soups")

        assert model_admin.is_default(soups) is True
        assert model_admin.is_default(private) is False
