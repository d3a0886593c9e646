"""
Cookbook API Views.

The requester is the authenticated Django user when the request carries a
session or credentials; otherwise it is the ``user_id`` the client echoes
back (query string first, then body).
"""

from django.contrib.auth import get_user_model
from django.db import connection
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from cookbook.exceptions import CookbookError
from cookbook.service import Cookbook
from cookbook.services.recipes import RecipeFields
from .serializers import (
    CategoryInputSerializer,
    CategorySerializer,
    DashboardSerializer,
    FavoriteSerializer,
    ImageUploadSerializer,
    LoginSerializer,
    RecipeInputSerializer,
    RecipeSerializer,
    RegisterSerializer,
)

STATUS_BY_CODE = {
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "MISSING_REQUESTER": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "NOT_FOUND_OR_FORBIDDEN": status.HTTP_404_NOT_FOUND,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "CONFLICT": status.HTTP_400_BAD_REQUEST,
    "IN_USE": status.HTTP_400_BAD_REQUEST,
}


def error_response(error: CookbookError) -> Response:
    return Response(
        error.as_dict(),
        status=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def invalid_response(errors) -> Response:
    return Response(
        {"error": "Invalid input", "code": "INVALID_INPUT", "fields": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


def requester_of(request):
    """Authenticated user id, else the user_id the client sent (may be None)."""
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return user.pk
    value = request.query_params.get("user_id")
    if value in (None, "") and hasattr(request.data, "get"):
        value = request.data.get("user_id")
    return value


class CookbookAPIMixin:
    """Turns CookbookError into the structured error response."""

    permission_classes = [AllowAny]

    def handle_exception(self, exc):
        if isinstance(exc, CookbookError):
            return error_response(exc)
        return super().handle_exception(exc)


# ── Accounts ──


class RegisterView(CookbookAPIMixin, APIView):
    """
    POST /register/
    {"username": "alice", "email": "a@example.com", "password": "..."}
    """

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_response(serializer.errors)

        user = Cookbook.register(**serializer.validated_data)
        return Response(
            {
                "id": user.pk,
                "username": user.get_username(),
                "message": "User registered successfully",
            },
            status=status.HTTP_201_CREATED,
        )


class LoginView(CookbookAPIMixin, APIView):
    """
    POST /login/
    {"username": "alice", "password": "..."}

    Returns only the id and username; clients echo the id as user_id.
    """

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_response(serializer.errors)

        identity = Cookbook.authenticate(**serializer.validated_data)
        return Response({"id": identity.id, "username": identity.username})


class AccountView(CookbookAPIMixin, APIView):
    """DELETE /users/{id}/ -- delete own account with all its data."""

    def delete(self, request, pk):
        Cookbook.delete_account(pk, requester_of(request))
        return Response({"message": "User account deleted successfully"})


class ImageUploadView(CookbookAPIMixin, APIView):
    """POST /upload/ (multipart, field ``image``) -> {"image_url": ...}"""

    def post(self, request):
        serializer = ImageUploadSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_response(serializer.errors)

        image_url = Cookbook.store_image(serializer.validated_data["image"])
        return Response({"image_url": image_url}, status=status.HTTP_201_CREATED)


# ── Recipes ──


class RecipeViewSet(CookbookAPIMixin, viewsets.ViewSet):
    """
    ViewSet for Recipe. Everything is scoped to the requester.

    list: List own recipes (?category_id=, ?favorites=1)
    create: Create a recipe (JSON, or multipart with ``image``)
    retrieve: Get an own recipe
    update: Replace an own recipe
    destroy: Delete an own recipe
    favorite: Set or flip the favorite flag
    """

    def list(self, request):
        favorites = request.query_params.get("favorites", "")
        recipes = Cookbook.list_recipes(
            requester_of(request),
            category_id=request.query_params.get("category_id"),
            favorites_only=favorites.lower() in ("1", "true", "yes"),
        )
        return Response(RecipeSerializer(recipes, many=True).data)

    def retrieve(self, request, pk=None):
        recipe = Cookbook.get_recipe(pk, requester_of(request))
        return Response(RecipeSerializer(recipe).data)

    def create(self, request):
        serializer = RecipeInputSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_response(serializer.errors)

        data = serializer.validated_data
        recipe = Cookbook.create_recipe(
            RecipeFields(
                title=data["title"],
                ingredients=data["ingredients"],
                instructions=data["instructions"],
                category_id=data.get("category_id"),
                is_favorite=data.get("is_favorite", False),
                image_url=data.get("image_url"),
            ),
            owner_id=requester_of(request),
            image=data.get("image"),
        )
        return Response(RecipeSerializer(recipe).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        """
        PUT /recipes/{pk}/

        title, ingredients and instructions are required. category_id,
        is_favorite and image_url keep their stored values when omitted;
        an explicit null clears category_id or image_url.
        """
        requester_id = requester_of(request)
        current = Cookbook.get_recipe(pk, requester_id)

        serializer = RecipeInputSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_response(serializer.errors)

        data = serializer.validated_data
        fields = RecipeFields.from_recipe(current)
        fields.title = data["title"]
        fields.ingredients = data["ingredients"]
        fields.instructions = data["instructions"]
        for name in ("category_id", "is_favorite", "image_url"):
            # Multipart parsing reports an absent boolean as False
            if name in data and name in request.data:
                setattr(fields, name, data[name])

        recipe = Cookbook.update_recipe(
            pk, requester_id, fields, image=data.get("image")
        )
        return Response(RecipeSerializer(recipe).data)

    def destroy(self, request, pk=None):
        Cookbook.delete_recipe(pk, requester_of(request))
        return Response({"message": "Recipe deleted successfully"})

    @action(detail=True, methods=["put", "post"])
    def favorite(self, request, pk=None):
        """
        Set or flip the favorite flag.

        PUT /recipes/{pk}/favorite/
        {
            "is_favorite": true  // optional, omitted = flip
        }
        """
        serializer = FavoriteSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_response(serializer.errors)

        recipe = Cookbook.set_favorite(
            pk, requester_of(request), serializer.validated_data.get("is_favorite")
        )
        return Response(
            {
                "message": (
                    "Recipe added to favorites"
                    if recipe.is_favorite
                    else "Recipe removed from favorites"
                ),
                "is_favorite": recipe.is_favorite,
            }
        )


# ── Categories ──


class CategoryViewSet(CookbookAPIMixin, viewsets.ViewSet):
    """
    ViewSet for Category.

    list: Default categories, plus the requester's own when known
    create: Create a private category (default one when no requester)
    retrieve: Get a visible category
    destroy: Delete an own, unused category
    recipes: Own recipes in a visible category
    """

    def list(self, request):
        categories = Cookbook.list_visible(requester_of(request))
        return Response(CategorySerializer(categories, many=True).data)

    def retrieve(self, request, pk=None):
        category = Cookbook.get_visible(pk, requester_of(request))
        return Response(CategorySerializer(category).data)

    def create(self, request):
        serializer = CategoryInputSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_response(serializer.errors)

        category = Cookbook.create_category(
            serializer.validated_data["name"], owner_id=requester_of(request)
        )
        return Response(
            CategorySerializer(category).data, status=status.HTTP_201_CREATED
        )

    def destroy(self, request, pk=None):
        Cookbook.delete_category(pk, requester_of(request))
        return Response({"message": "Category deleted successfully"})

    @action(detail=True, methods=["get"])
    def recipes(self, request, pk=None):
        """GET /categories/{pk}/recipes/"""
        recipes = Cookbook.list_in_category(pk, requester_of(request))
        return Response(RecipeSerializer(recipes, many=True).data)


# ── Read-side ──


class DashboardView(CookbookAPIMixin, APIView):
    """GET /dashboard/ -- counts plus recent and favorite previews."""

    def get(self, request):
        summary = Cookbook.summarize(requester_of(request))
        return Response(DashboardSerializer(summary).data)


class HealthView(CookbookAPIMixin, APIView):
    """GET /health/ -- database reachability and user count."""

    def get(self, request):
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            connected = cursor.fetchone() is not None

        return Response(
            {
                "status": "OK",
                "database": {
                    "connected": connected,
                    "user_count": get_user_model()._default_manager.count(),
                },
            }
        )
