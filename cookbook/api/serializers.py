"""
Cookbook API Serializers.
"""

from rest_framework import serializers

from cookbook.models import Category, Recipe


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for Category model."""

    user_id = serializers.IntegerField(source="owner_id", read_only=True, allow_null=True)
    is_default = serializers.BooleanField(read_only=True)

    class Meta:
        model = Category
        fields = ["id", "name", "user_id", "is_default", "created_at"]
        read_only_fields = fields


class RecipeSerializer(serializers.ModelSerializer):
    """Serializer for Recipe model."""

    category_id = serializers.IntegerField(read_only=True, allow_null=True)
    category_name = serializers.CharField(read_only=True, allow_null=True)
    user_id = serializers.IntegerField(source="owner_id", read_only=True)

    class Meta:
        model = Recipe
        fields = [
            "id",
            "title",
            "ingredients",
            "instructions",
            "category_id",
            "category_name",
            "user_id",
            "is_favorite",
            "image_url",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class RecipeSummarySerializer(serializers.ModelSerializer):
    """Short form used by the dashboard previews."""

    category_id = serializers.IntegerField(read_only=True, allow_null=True)
    category_name = serializers.CharField(read_only=True, allow_null=True)

    class Meta:
        model = Recipe
        fields = ["id", "title", "category_id", "category_name", "is_favorite", "image_url"]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    """Serializer for registration."""

    username = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False, write_only=True)


class LoginSerializer(serializers.Serializer):
    """Serializer for login."""

    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False, write_only=True)


class RecipeInputSerializer(serializers.Serializer):
    """
    Serializer for recipe create/update payloads (JSON or multipart).

    Optional fields left out of the payload are absent from validated_data,
    so the view can tell "omitted" from an explicit null.
    """

    title = serializers.CharField(max_length=200)
    ingredients = serializers.CharField()
    instructions = serializers.CharField()
    category_id = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    is_favorite = serializers.BooleanField(required=False)
    image_url = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=500
    )
    image = serializers.FileField(required=False, write_only=True)


class FavoriteSerializer(serializers.Serializer):
    """Serializer for the favorite action. Omit is_favorite to flip the flag."""

    is_favorite = serializers.BooleanField(required=False, allow_null=True, default=None)


class CategoryInputSerializer(serializers.Serializer):
    """Serializer for category creation."""

    name = serializers.CharField(max_length=100)


class ImageUploadSerializer(serializers.Serializer):
    """Serializer for standalone image upload."""

    image = serializers.FileField()


class DashboardSerializer(serializers.Serializer):
    """Serializer for DashboardSummary."""

    total_recipes = serializers.IntegerField()
    favorite_recipe_count = serializers.IntegerField()
    distinct_category_count = serializers.IntegerField()
    recent_recipes = RecipeSummarySerializer(many=True)
    favorite_recipes = RecipeSummarySerializer(many=True)
