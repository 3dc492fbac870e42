"""
One-shot bulk loader for historical users, recipes and reviews.

The whole load runs in one transaction. Rows keep their external ids; once
they are in, every id arena is advanced past the loaded maxima so later
generated ids cannot collide, and all recipe aggregates are recomputed so
the loaded data satisfies the same invariants as live writes.
"""

import logging
from datetime import datetime

from django.contrib.auth.hashers import make_password
from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_datetime
from rest_framework.authtoken.models import Token

from recipes.models import Follower, IdSequence, Ingredient, Like, Recipe, Review, User
from recipes.records import RecipeRecord, ReviewRecord, UserRecord
from recipes.services.aggregates import AggregateEngine
from recipes.services.recipes import clean_ingredient_names
from recipes.services.users import parse_gender

logger = logging.getLogger(__name__)

BATCH_SIZE = 1000

RECIPE_DATA_FIELDS = (
    "name",
    "description",
    "category",
    "cook_time",
    "prep_time",
    "total_time",
    "calories",
    "fat_content",
    "saturated_fat_content",
    "cholesterol_content",
    "sodium_content",
    "carbohydrate_content",
    "fiber_content",
    "sugar_content",
    "protein_content",
    "servings",
    "recipe_yield",
)


def to_datetime(value):
    """Coerce an ISO string or datetime to an aware datetime; None stays None."""
    if value in (None, ""):
        return None
    parsed = value if isinstance(value, datetime) else parse_datetime(str(value))
    if parsed is None:
        return None
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, timezone.get_default_timezone())
    return parsed


def _coerce(records, record_cls):
    return [r if isinstance(r, record_cls) else record_cls.from_dict(r) for r in records]


class ImportService:
    """Replace the data set with externally supplied records."""

    def __init__(self, *, engine=None):
        self.engine = engine or AggregateEngine()

    @transaction.atomic
    def import_data(self, reviews, users, recipes):
        """Load users, follows, recipes, ingredients, reviews and likes; returns per-entity counts."""
        if reviews is None or users is None or recipes is None:
            raise ValueError("reviews, users and recipes are all required")
        reviews = _coerce(reviews, ReviewRecord)
        users = _coerce(users, UserRecord)
        recipes = _coerce(recipes, RecipeRecord)

        self.clear()
        user_states = self._insert_users(users)
        follows = self._insert_follows(users, user_states)
        recipe_ids = self._insert_recipes(recipes, user_states)
        ingredients = self._insert_ingredients(recipes, recipe_ids)
        review_authors = self._insert_reviews(reviews, recipe_ids, user_states)

        for model in (User, Recipe, Review):
            IdSequence.objects.advance_past_max(model)

        likes = self._insert_likes(reviews, review_authors, user_states)
        self.engine.recompute_all()

        summary = {
            "users": len(user_states),
            "follows": follows,
            "recipes": len(recipe_ids),
            "ingredients": ingredients,
            "reviews": len(review_authors),
            "likes": likes,
        }
        logger.info("Imported %s", summary)
        return summary

    @transaction.atomic
    def clear(self):
        """Remove every row the importer owns and reset the id arenas."""
        Like.objects.all().delete()
        Recipe.objects.all().delete()
        Follower.objects.all().delete()
        Token.objects.all().delete()
        User.objects.all().delete()
        IdSequence.objects.all().delete()

    # --- internal helpers -----------------------------------------------
    def _insert_users(self, users):
        states = {}
        rows = []
        for record in users:
            gender = parse_gender(record.gender)
            if record.author_id in states or gender is None or not record.age or int(record.age) <= 0:
                logger.warning("Skipping user record %s", record.author_id)
                continue
            states[record.author_id] = bool(record.is_deleted)
            rows.append(
                User(
                    id=record.author_id,
                    username=record.author_name,
                    gender=gender,
                    age=int(record.age),
                    password=make_password(record.password or None),
                    is_deleted=bool(record.is_deleted),
                )
            )
        User.objects.bulk_create(rows, batch_size=BATCH_SIZE)
        return states

    def _insert_follows(self, users, user_states):
        edges = set()
        for record in users:
            if user_states.get(record.author_id) is not False:
                continue
            for followee in record.following_users or []:
                if followee == record.author_id or user_states.get(followee) is not False:
                    continue
                edges.add((record.author_id, followee))
        Follower.objects.bulk_create(
            [Follower(follower_id=a, followee_id=b) for a, b in sorted(edges)],
            ignore_conflicts=True,
            batch_size=BATCH_SIZE,
        )
        return len(edges)

    def _insert_recipes(self, recipes, user_states):
        ids = set()
        rows = []
        for record in recipes:
            if record.author_id not in user_states or record.recipe_id in ids or not record.name:
                logger.warning("Skipping recipe record %s", record.recipe_id)
                continue
            ids.add(record.recipe_id)
            data = {key: getattr(record, key) for key in RECIPE_DATA_FIELDS}
            rows.append(
                Recipe(
                    id=record.recipe_id,
                    author_id=record.author_id,
                    date_published=to_datetime(record.date_published),
                    **data,
                )
            )
        Recipe.objects.bulk_create(rows, batch_size=BATCH_SIZE)
        return ids

    def _insert_ingredients(self, recipes, recipe_ids):
        rows = [
            Ingredient(recipe_id=record.recipe_id, name=name)
            for record in recipes
            if record.recipe_id in recipe_ids
            for name in clean_ingredient_names(record.ingredients)
        ]
        Ingredient.objects.bulk_create(rows, ignore_conflicts=True, batch_size=BATCH_SIZE)
        return len(rows)

    def _insert_reviews(self, reviews, recipe_ids, user_states):
        authors = {}
        rows = []
        now = timezone.now()
        for record in reviews:
            valid_rating = isinstance(record.rating, int) and 1 <= record.rating <= 5
            if (
                record.review_id in authors
                or record.recipe_id not in recipe_ids
                or record.author_id not in user_states
                or not valid_rating
            ):
                logger.warning("Skipping review record %s", record.review_id)
                continue
            authors[record.review_id] = record.author_id
            submitted = to_datetime(record.date_submitted) or now
            rows.append(
                Review(
                    id=record.review_id,
                    recipe_id=record.recipe_id,
                    author_id=record.author_id,
                    rating=record.rating,
                    text=record.review or "",
                    date_submitted=submitted,
                    date_modified=to_datetime(record.date_modified) or submitted,
                )
            )
        Review.objects.bulk_create(rows, batch_size=BATCH_SIZE)
        return authors

    def _insert_likes(self, reviews, review_authors, user_states):
        pairs = set()
        for record in reviews:
            author = review_authors.get(record.review_id)
            if author is None:
                continue
            for user_id in record.likes or []:
                if user_id == author or user_id not in user_states:
                    continue
                pairs.add((record.review_id, user_id))
        Like.objects.bulk_create(
            [Like(review_id=r, user_id=u) for r, u in sorted(pairs)],
            ignore_conflicts=True,
            batch_size=BATCH_SIZE,
        )
        return len(pairs)
