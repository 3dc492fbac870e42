from django.test import TestCase

from recipes.services import AnalyticsService
from recipes.services.analytics import closest_pair
from recipes.tests.helpers import follow, make_recipe, make_user


class ClosestPairTests(TestCase):

    def test_adjacent_scan_finds_smallest_gap(self):
        points = [(100.0, 1), (250.0, 2), (260.0, 3), (500.0, 4)]
        self.assertEqual(
            closest_pair(points),
            {"recipe_a": 2, "recipe_b": 3, "calories_a": 250.0, "calories_b": 260.0, "difference": 10.0},
        )

    def test_tie_goes_to_smallest_id_pair(self):
        points = [(100.0, 7), (110.0, 3), (120.0, 1)]
        result = closest_pair(points)
        self.assertEqual((result["recipe_a"], result["recipe_b"]), (1, 3))
        self.assertEqual((result["calories_a"], result["calories_b"]), (120.0, 110.0))

    def test_fewer_than_two_points(self):
        self.assertIsNone(closest_pair([]))
        self.assertIsNone(closest_pair([(5.0, 1)]))


class AnalyticsServiceTests(TestCase):

    def setUp(self):
        self.service = AnalyticsService()
        self.chef = make_user(username="chef")

    def test_closest_calorie_pair(self):
        recipes = {cal: make_recipe(author=self.chef, name=f"r{cal}", calories=cal) for cal in (500, 100, 260, 250)}
        make_recipe(author=self.chef, name="unknown calories")
        result = self.service.closest_calorie_pair()
        self.assertEqual(
            {result["recipe_a"], result["recipe_b"]},
            {recipes[250].id, recipes[260].id},
        )
        self.assertEqual(result["difference"], 10)

    def test_closest_calorie_pair_needs_two_recipes(self):
        make_recipe(author=self.chef, calories=100)
        self.assertIsNone(self.service.closest_calorie_pair())

    def test_most_complex_recipes(self):
        small = make_recipe(author=self.chef, name="small", ingredients=["a", "b", "c"])
        big1 = make_recipe(author=self.chef, name="big1", ingredients=list("abcde"))
        big2 = make_recipe(author=self.chef, name="big2", ingredients=list("vwxyz"))
        make_recipe(author=self.chef, name="tiny", ingredients=["a"])

        result = self.service.most_complex_recipes()
        self.assertEqual(
            result,
            [
                {"recipe_id": big1.id, "name": "big1", "ingredient_count": 5},
                {"recipe_id": big2.id, "name": "big2", "ingredient_count": 5},
                {"recipe_id": small.id, "name": "small", "ingredient_count": 3},
            ],
        )

    def test_highest_follow_ratio(self):
        alice = make_user(username="alice")
        bob = make_user(username="bob")
        carl = make_user(username="carl")
        follow(alice, bob)
        follow(carl, bob)
        follow(bob, alice)
        self.assertEqual(self.service.highest_follow_ratio(), {"user_id": bob.id, "name": "bob", "ratio": 2.0})

    def test_highest_follow_ratio_tie_goes_to_lowest_id(self):
        alice = make_user(username="alice")
        bob = make_user(username="bob")
        follow(alice, bob)
        follow(bob, alice)
        self.assertEqual(self.service.highest_follow_ratio()["user_id"], alice.id)

    def test_highest_follow_ratio_allows_zero(self):
        alice = make_user(username="alice")
        follow(alice, self.chef)
        follow(self.chef, make_user(username="bob"))
        result = self.service.highest_follow_ratio()
        self.assertEqual(result["user_id"], self.chef.id)
        self.assertEqual(result["ratio"], 1.0)

    def test_highest_follow_ratio_without_edges(self):
        self.assertIsNone(self.service.highest_follow_ratio())
