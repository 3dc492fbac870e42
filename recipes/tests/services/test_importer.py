from decimal import Decimal

from django.test import TestCase

from recipes.models import Follower, IdSequence, Ingredient, Like, Recipe, Review, User
from recipes.records import RecipeRecord, UserRecord
from recipes.services import ImportService, ReviewService
from recipes.tests.helpers import make_user


def sample_users():
    return [
        {"author_id": 10, "author_name": "alice", "gender": "Female", "age": 30, "password": "pw", "following_users": [20, 10, 99, 30]},
        {"author_id": 20, "author_name": "bob", "gender": "male", "age": 40, "password": "pw", "following_users": [10]},
        {"author_id": 30, "author_name": "ghost", "gender": "male", "age": 50, "password": "pw", "is_deleted": True, "following_users": [10]},
    ]


def sample_recipes():
    return [
        {"recipe_id": 100, "author_id": 10, "name": "Soup", "calories": 250, "ingredients": ["salt", " salt", "", "water"],
         "date_published": "2020-01-02T10:00:00", "unknown_field": "ignored"},
        {"recipe_id": 200, "author_id": 30, "name": "Stew", "ingredients": ["beef"]},
        {"recipe_id": 300, "author_id": 77, "name": "Orphan"},
    ]


def sample_reviews():
    return [
        {"review_id": 1000, "recipe_id": 100, "author_id": 20, "rating": 4, "review": "nice", "likes": [10, 20, 30, 99]},
        {"review_id": 1001, "recipe_id": 100, "author_id": 30, "rating": 5, "likes": []},
        {"review_id": 1002, "recipe_id": 100, "author_id": 20, "rating": 9},
        {"review_id": 1003, "recipe_id": 300, "author_id": 20, "rating": 3},
    ]


class ImportServiceTests(TestCase):

    def setUp(self):
        self.service = ImportService()
        self.summary = self.service.import_data(
            reviews=sample_reviews(), users=sample_users(), recipes=sample_recipes()
        )

    def test_summary_counts(self):
        self.assertEqual(
            self.summary,
            {"users": 3, "follows": 2, "recipes": 2, "ingredients": 3, "reviews": 2, "likes": 2},
        )

    def test_credentials_are_hashed(self):
        alice = User.objects.get(id=10)
        self.assertNotEqual(alice.password, "pw")
        self.assertTrue(alice.check_password("pw"))
        self.assertEqual(alice.gender, "female")

    def test_follow_edges_skip_self_unknown_and_deleted(self):
        edges = set(Follower.objects.values_list("follower_id", "followee_id"))
        self.assertEqual(edges, {(10, 20), (20, 10)})

    def test_ingredients_deduplicated(self):
        self.assertEqual(Recipe.objects.get(id=100).ingredient_names, ["salt", "water"])
        self.assertEqual(Ingredient.objects.count(), 3)

    def test_likes_skip_self_likes_and_unknown_users(self):
        self.assertEqual(set(Like.objects.values_list("user_id", flat=True)), {10, 30})

    def test_aggregates_recomputed(self):
        soup = Recipe.objects.get(id=100)
        self.assertEqual(soup.review_count, 2)
        self.assertEqual(soup.aggregated_rating, Decimal("4.50"))
        stew = Recipe.objects.get(id=200)
        self.assertEqual(stew.review_count, 0)
        self.assertIsNone(stew.aggregated_rating)

    def test_sequences_advanced_past_loaded_ids(self):
        for model, floor in ((User, 31), (Recipe, 201), (Review, 1002)):
            self.assertEqual(IdSequence.objects.get(name=model._meta.db_table).next_value, floor)

    def test_generated_ids_do_not_collide(self):
        user = make_user(username="newcomer")
        self.assertEqual(user.id, 31)
        review_id = ReviewService(user).add_review(200, 3)
        self.assertEqual(review_id, 1002)

    def test_reimport_replaces_data(self):
        summary = self.service.import_data(
            reviews=[],
            users=[UserRecord(author_id=5, author_name="solo", gender="male", age=20, password="pw")],
            recipes=[RecipeRecord(recipe_id=7, author_id=5, name="Toast")],
        )
        self.assertEqual(summary["users"], 1)
        self.assertEqual(list(User.objects.values_list("id", flat=True)), [5])
        self.assertEqual(IdSequence.objects.get(name=Review._meta.db_table).next_value, 1)

    def test_missing_inputs_rejected(self):
        with self.assertRaises(ValueError):
            self.service.import_data(reviews=None, users=[], recipes=[])
        self.assertTrue(User.objects.exists())

    def test_clear_empties_everything(self):
        self.service.clear()
        self.assertFalse(User.objects.exists())
        self.assertFalse(Recipe.objects.exists())
        self.assertFalse(IdSequence.objects.exists())
