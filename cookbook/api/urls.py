"""
Cookbook API URLs.

Include this in your project's urlpatterns:

    path('api/', include('cookbook.api.urls')),
"""

from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import (
    AccountView,
    CategoryViewSet,
    DashboardView,
    HealthView,
    ImageUploadView,
    LoginView,
    RecipeViewSet,
    RegisterView,
)

router = DefaultRouter()
router.register("recipes", RecipeViewSet, basename="recipe")
router.register("categories", CategoryViewSet, basename="category")

urlpatterns = [
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    path("users/<int:pk>/", AccountView.as_view(), name="account"),
    path("upload/", ImageUploadView.as_view(), name="image-upload"),
    path("dashboard/", DashboardView.as_view(), name="dashboard"),
    path("health/", HealthView.as_view(), name="health"),
] + router.urls
