# Seeds the shared default categories.

from django.db import migrations


DEFAULT_CATEGORIES = [
    "Breakfast",
    "Lunch",
    "Dinner",
    "Dessert",
    "Appetizers",
    "Soups",
    "Salads",
    "Vegetarian",
    "Vegan",
    "Gluten-Free",
]


def add_default_categories(apps, schema_editor):
    Category = apps.get_model("cookbook", "Category")
    for name in DEFAULT_CATEGORIES:
        if not Category.objects.filter(owner__isnull=True, name__iexact=name).exists():
            Category.objects.create(name=name, owner=None)


def remove_default_categories(apps, schema_editor):
    Category = apps.get_model("cookbook", "Category")
    Category.objects.filter(
        owner__isnull=True, name__in=DEFAULT_CATEGORIES, recipes__isnull=True
    ).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("cookbook", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(add_default_categories, remove_default_categories),
    ]
