"""
Load demo data for Cookbook.

Creates a demo account with a few recipes:
- User "testuser" / "password123"
- A private category
- Recipes in default and private categories, some favorites

Usage:
    python manage.py load_cookbook_demo
    python manage.py load_cookbook_demo --clear
"""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from cookbook.exceptions import CookbookError
from cookbook.service import Cookbook
from cookbook.services.recipes import RecipeFields

DEMO_USERNAME = "testuser"
DEMO_EMAIL = "test@example.com"
DEMO_PASSWORD = "password123"

DEMO_RECIPES = [
    {
        "title": "Overnight oats",
        "ingredients": "1 cup oats\n1 cup milk\n1 tbsp honey",
        "instructions": "Mix everything in a jar.\nRefrigerate overnight.",
        "category": "Breakfast",
        "is_favorite": True,
    },
    {
        "title": "Tomato soup",
        "ingredients": "1 kg tomatoes\n1 onion\n2 cloves garlic\n500 ml stock",
        "instructions": "Soften onion and garlic.\nAdd tomatoes and stock.\nSimmer 20 min, blend.",
        "category": "Soups",
        "is_favorite": False,
    },
    {
        "title": "Grandma's apple cake",
        "ingredients": "3 apples\n200 g flour\n150 g sugar\n3 eggs\n100 g butter",
        "instructions": "Cream butter and sugar.\nAdd eggs, flour, sliced apples.\nBake 45 min at 180°C.",
        "category": "Family classics",
        "is_favorite": True,
    },
    {
        "title": "Green salad",
        "ingredients": "Lettuce\nCucumber\nOlive oil\nLemon",
        "instructions": "Chop, dress, toss.",
        "category": None,
        "is_favorite": False,
    },
]

PRIVATE_CATEGORY = "Family classics"


class Command(BaseCommand):
    help = "Loads Cookbook demo data (user testuser / password123)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete the demo user and all its data first",
        )

    def handle(self, *args, **options):
        User = get_user_model()

        self.stdout.write("=" * 60)
        self.stdout.write("Loading Cookbook demo data...")
        self.stdout.write("=" * 60)

        if options["clear"]:
            deleted, _ = User._default_manager.filter(username=DEMO_USERNAME).delete()
            if deleted:
                self.stdout.write(self.style.SUCCESS("   ✓ Demo data cleared"))

        user = User._default_manager.filter(username=DEMO_USERNAME).first()
        if user is None:
            user = Cookbook.register(DEMO_USERNAME, DEMO_EMAIL, DEMO_PASSWORD)
            self.stdout.write(f"   ✓ User created: {DEMO_USERNAME} / {DEMO_PASSWORD}")
        else:
            self.stdout.write(f"   • User {DEMO_USERNAME} already exists")

        categories = {c.name: c.pk for c in Cookbook.list_visible(user.pk)}
        if PRIVATE_CATEGORY not in categories:
            category = Cookbook.create_category(PRIVATE_CATEGORY, owner_id=user.pk)
            categories[category.name] = category.pk
            self.stdout.write(f"   ✓ Category created: {category.name}")

        existing = set(
            Cookbook.list_recipes(user.pk).values_list("title", flat=True)
        )
        for data in DEMO_RECIPES:
            if data["title"] in existing:
                continue
            category_id = categories.get(data["category"]) if data["category"] else None
            if data["category"] and category_id is None:
                self.stdout.write(
                    self.style.WARNING(
                        f"   ! Category {data['category']} missing, "
                        f"{data['title']} left uncategorized"
                    )
                )
            try:
                recipe = Cookbook.create_recipe(
                    RecipeFields(
                        title=data["title"],
                        ingredients=data["ingredients"],
                        instructions=data["instructions"],
                        category_id=category_id,
                        is_favorite=data["is_favorite"],
                    ),
                    owner_id=user.pk,
                )
            except CookbookError as e:
                self.stdout.write(self.style.ERROR(f"   ✗ {data['title']}: {e}"))
                continue
            self.stdout.write(f"   ✓ {recipe.title}")

        summary = Cookbook.summarize(user.pk)
        self.stdout.write("\nSummary:")
        self.stdout.write(f"   • {summary.total_recipes} recipes")
        self.stdout.write(f"   • {summary.favorite_recipe_count} favorites")
        self.stdout.write(f"   • {summary.distinct_category_count} categories in use")

        self.stdout.write("\n" + "=" * 60)
        self.stdout.write(self.style.SUCCESS("Demo data loaded."))
        self.stdout.write("=" * 60)
