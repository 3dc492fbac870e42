"""Management command to seed the database with a synthetic data set."""

from datetime import timedelta
from random import choice, randint, sample

from django.core.management.base import BaseCommand
from django.utils import timezone
from faker import Faker

from recipes.services import ImportService
from recipes.utils.durations import total_duration
from .seed_data import INGREDIENT_POOL, categories, duration_pool, review_phrases, user_fixtures


class Command(BaseCommand):
    """Generate users, follows, recipes, reviews and likes, then load them through the importer."""
    USER_COUNT = 200
    RECIPES_PER_USER = 2
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT)
        parser.add_argument("--recipes-per-user", type=int, default=self.RECIPES_PER_USER)
        parser.add_argument("--follow-k", type=int, default=5)
        parser.add_argument("--max-reviews", type=int, default=5)
        parser.add_argument("--seed", type=int, default=None, help="Faker seed for reproducible data.")

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Build the records and hand them to ImportService in one transaction."""
        if options.get("seed") is not None:
            Faker.seed(options["seed"])
        users = self.build_users(options["users"], follow_k=options["follow_k"])
        recipes = self.build_recipes(users, per_user=options["recipes_per_user"])
        reviews = self.build_reviews(users, recipes, max_reviews=options["max_reviews"])
        summary = ImportService().import_data(reviews=reviews, users=users, recipes=recipes)
        self.stdout.write(self.style.SUCCESS(f"Seeding complete: {summary}"))

    def build_users(self, count, follow_k=5):
        """Fixture users first, then random ones with unique names, each following up to follow_k others."""
        users = []
        names = set()
        for data in user_fixtures:
            names.add(data["author_name"])
            users.append({**data, "author_id": len(users) + 1, "password": self.DEFAULT_PASSWORD})
        while len(users) < count:
            name = self.faker.user_name()
            if name in names:
                continue
            names.add(name)
            users.append({
                "author_id": len(users) + 1,
                "author_name": name,
                "gender": choice(["male", "female"]),
                "age": randint(16, 80),
                "password": self.DEFAULT_PASSWORD,
            })

        ids = [u["author_id"] for u in users]
        k = max(0, min(follow_k, len(ids) - 1))
        for user in users:
            pool = [x for x in ids if x != user["author_id"]]
            user["following_users"] = sample(pool, k) if k else []
        return users

    def build_recipes(self, users, per_user=2):
        recipes = []
        now = timezone.now()
        for user in users:
            for _ in range(per_user):
                cook, prep = choice(duration_pool), choice(duration_pool)
                recipes.append({
                    "recipe_id": len(recipes) + 1,
                    "author_id": user["author_id"],
                    "name": self.faker.sentence(nb_words=3).rstrip("."),
                    "description": self.faker.paragraph(nb_sentences=2),
                    "category": choice(categories),
                    "cook_time": cook,
                    "prep_time": prep,
                    "total_time": total_duration(cook, prep),
                    "date_published": now - timedelta(days=randint(0, 365), minutes=randint(0, 1440)),
                    "calories": round(self.faker.pyfloat(min_value=50, max_value=1200, right_digits=1), 1),
                    "fat_content": round(self.faker.pyfloat(min_value=0, max_value=80, right_digits=1), 1),
                    "protein_content": round(self.faker.pyfloat(min_value=0, max_value=60, right_digits=1), 1),
                    "servings": randint(1, 8),
                    "ingredients": sample(INGREDIENT_POOL, randint(3, 10)),
                })
        return recipes

    def build_reviews(self, users, recipes, max_reviews=5):
        """Reviews by non-authors, each liked by a few other non-authors."""
        reviews = []
        ids = [u["author_id"] for u in users]
        now = timezone.now()
        for recipe in recipes:
            pool = [x for x in ids if x != recipe["author_id"]]
            for author_id in sample(pool, min(len(pool), randint(0, max_reviews))):
                submitted = now - timedelta(days=randint(0, 120))
                likers = [x for x in ids if x != author_id]
                reviews.append({
                    "review_id": len(reviews) + 1,
                    "recipe_id": recipe["recipe_id"],
                    "author_id": author_id,
                    "rating": randint(1, 5),
                    "review": choice(review_phrases),
                    "date_submitted": submitted,
                    "date_modified": submitted,
                    "likes": sample(likers, min(len(likers), randint(0, 4))),
                })
        return reviews
