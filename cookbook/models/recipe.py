"""
Recipe model.

Every recipe belongs to exactly one user. Its category, when set, must be a
default category or one of the owner's private categories.
"""

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

from cookbook.models.category import Category


class RecipeQuerySet(models.QuerySet):
    def owned_by(self, user_id):
        return self.filter(owner_id=user_id)

    def favorites(self):
        return self.filter(is_favorite=True)

    def newest_first(self):
        return self.order_by("-id")


class Recipe(models.Model):
    """
    A user's recipe.

    Holds:
    - Title, ingredients and instructions (free text)
    - Optional category (default or owned by the same user)
    - Favorite flag
    - Optional image reference returned by the image store
    """

    title = models.CharField(
        max_length=200,
        verbose_name=_("Title"),
    )
    ingredients = models.TextField(
        verbose_name=_("Ingredients"),
    )
    instructions = models.TextField(
        verbose_name=_("Instructions"),
    )

    category = models.ForeignKey(
        Category,
        on_delete=models.RESTRICT,
        null=True,
        blank=True,
        related_name="recipes",
        verbose_name=_("Category"),
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="recipes",
        verbose_name=_("Owner"),
    )

    is_favorite = models.BooleanField(
        default=False,
        verbose_name=_("Favorite"),
    )
    image_url = models.CharField(
        max_length=500,
        null=True,
        blank=True,
        verbose_name=_("Image"),
        help_text=_("Reference returned by the image store"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    # History
    history = HistoricalRecords()

    objects = RecipeQuerySet.as_manager()

    class Meta:
        db_table = "cookbook_recipe"
        verbose_name = _("Recipe")
        verbose_name_plural = _("Recipes")
        ordering = ["-id"]
        indexes = [
            models.Index(
                fields=["owner", "is_favorite"], name="cookbook_recipe_owner_fav_idx"
            ),
            models.Index(
                fields=["owner", "category"], name="cookbook_recipe_owner_cat_idx"
            ),
        ]

    def clean(self):
        super().clean()
        for field in ("title", "ingredients", "instructions"):
            value = getattr(self, field)
            if value is None or not str(value).strip():
                raise ValidationError({field: _("This field is required.")})
        if self.category_id is not None and self.category is not None:
            if not self.category.is_visible_to(self.owner_id):
                raise ValidationError({
                    "category": _("Category is not available to this user.")
                })

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.title

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category_id else None
