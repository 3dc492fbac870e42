from django.db import IntegrityError, transaction
from django.test import TestCase

from recipes.models import Like, Review
from recipes.tests.helpers import like, make_recipe, make_review, make_user


class ReviewModelTestCase(TestCase):

    def setUp(self):
        self.author = make_user(username="chef")
        self.critic = make_user(username="critic")
        self.fan = make_user(username="fan")
        self.recipe = make_recipe(author=self.author)
        self.review = make_review(recipe=self.recipe, author=self.critic, rating=4)

    def test_rating_out_of_range_rejected_by_database(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Review.objects.bulk_create([Review(id=999, recipe=self.recipe, author=self.critic, rating=6)])

    def test_like_ids_reads_like_rows(self):
        like(self.review, self.fan)
        like(self.review, self.author)
        self.assertEqual(self.review.like_ids, sorted([self.fan.id, self.author.id]))

    def test_attached_like_ids_skip_the_query(self):
        self.review.like_ids = [3, 1]
        with self.assertNumQueries(0):
            self.assertEqual(self.review.like_ids, [1, 3])

    def test_duplicate_like_rejected(self):
        like(self.review, self.fan)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                like(self.review, self.fan)

    def test_delete_cascades_likes(self):
        like(self.review, self.fan)
        self.review.delete()
        self.assertFalse(Like.objects.exists())

    def test_str(self):
        self.assertEqual(str(self.review), f"Review {self.review.id} by {self.critic.id} on {self.recipe.id}")
