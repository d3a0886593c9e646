"""
Category model.

A category with no owner is a *default* category: shared by every user,
read-only, never deletable. A category with an owner is private to that user.

Names are unique per scope and compared case-insensitively:
- no two default categories share a name
- no user owns two categories with the same name
A private category may reuse the name of a default one.
"""

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.db.models.functions import Lower
from django.utils.translation import gettext_lazy as _


class CategoryQuerySet(models.QuerySet):
    def defaults(self):
        return self.filter(owner__isnull=True)

    def owned_by(self, user_id):
        return self.filter(owner_id=user_id)

    def visible_to(self, user_id=None):
        """Default categories plus, when given, the user's private ones."""
        if user_id is None:
            return self.defaults()
        return self.filter(Q(owner__isnull=True) | Q(owner_id=user_id))

    def in_scope(self, owner_id=None):
        """Categories whose names compete with a new one for ``owner_id``."""
        if owner_id is None:
            return self.defaults()
        return self.owned_by(owner_id)


class Category(models.Model):
    """Recipe category: Breakfast, Soups, Grandma's..."""

    name = models.CharField(
        max_length=100,
        verbose_name=_("Name"),
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="categories",
        verbose_name=_("Owner"),
        help_text=_("Empty for default categories shared by everyone"),
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))

    objects = CategoryQuerySet.as_manager()

    class Meta:
        db_table = "cookbook_category"
        verbose_name = _("Category")
        verbose_name_plural = _("Categories")
        ordering = ["name", "id"]
        constraints = [
            models.UniqueConstraint(
                Lower("name"),
                condition=Q(owner__isnull=True),
                name="cookbook_category_unique_default_name",
            ),
            models.UniqueConstraint(
                Lower("name"),
                "owner",
                condition=Q(owner__isnull=False),
                name="cookbook_category_unique_owner_name",
            ),
        ]

    def clean(self):
        super().clean()
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError({"name": _("Category name is required.")})

    def save(self, *args, **kwargs):
        # Name collisions are left to the unique constraints.
        self.full_clean(validate_constraints=False)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name

    @property
    def is_default(self) -> bool:
        return self.owner_id is None

    def is_visible_to(self, user_id) -> bool:
        return self.owner_id is None or self.owner_id == user_id
