from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from recipes.models import Recipe
from recipes.tests.helpers import make_recipe, make_review, make_user


class RecipeApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = make_user(username="johndoe")
        self.other_user = make_user(username="other")
        self.client.force_authenticate(user=self.user)
        self.list_url = reverse("recipe_list_api")

    def test_create_requires_authentication(self):
        client = APIClient()
        response = client.post(self.list_url, {"name": "Soup"}, format="json")
        self.assertEqual(response.status_code, 401)

    def test_user_can_create_recipe(self):
        data = {
            "name": "Simple pasta",
            "description": "Quick pasta dish",
            "category": "pasta",
            "cook_time": "PT10M",
            "prep_time": "PT5M",
            "ingredients": ["pasta", "salt"],
        }
        response = self.client.post(self.list_url, data, format="json")
        self.assertEqual(response.status_code, 201)
        recipe = Recipe.objects.get(id=response.json()["recipe_id"])
        self.assertEqual(recipe.author, self.user)
        self.assertEqual(recipe.name, "Simple pasta")
        self.assertEqual(recipe.ingredient_names, ["pasta", "salt"])

    def test_create_without_name_is_bad_request(self):
        response = self.client.post(self.list_url, {"description": "x"}, format="json")
        self.assertEqual(response.status_code, 400)

    def test_search_returns_page_envelope(self):
        for i in range(3):
            make_recipe(author=self.user, name=f"Garlic pasta {i}", category="pasta", ingredients=["garlic"])
        make_recipe(author=self.user, name="Tomato soup", category="soup")

        response = APIClient().get(self.list_url, {"keyword": "pasta", "page": 1, "size": 2})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["total"], 3)
        self.assertEqual((data["page"], data["size"], data["pages"]), (1, 2, 2))
        self.assertEqual(len(data["items"]), 2)
        self.assertEqual(data["items"][0]["ingredients"], ["garlic"])
        self.assertEqual(data["items"][0]["author_name"], "johndoe")

    def test_search_with_bad_paging_is_bad_request(self):
        response = self.client.get(self.list_url, {"page": 0})
        self.assertEqual(response.status_code, 400)

    def test_detail_shows_aggregate(self):
        recipe = make_recipe(author=self.user, name="Soup")
        make_review(recipe=recipe, author=self.other_user, rating=4)
        response = self.client.get(reverse("recipe_detail_api", args=[recipe.id]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["review_count"], 1)
        self.assertEqual(float(response.json()["aggregated_rating"]), 4.0)

    def test_detail_missing_is_not_found(self):
        self.assertEqual(self.client.get(reverse("recipe_detail_api", args=[9999])).status_code, 404)

    def test_owner_can_delete(self):
        recipe = make_recipe(author=self.user)
        response = self.client.delete(reverse("recipe_detail_api", args=[recipe.id]))
        self.assertEqual(response.status_code, 204)
        self.assertFalse(Recipe.objects.filter(id=recipe.id).exists())

    def test_non_owner_cannot_delete(self):
        recipe = make_recipe(author=self.other_user)
        response = self.client.delete(reverse("recipe_detail_api", args=[recipe.id]))
        self.assertEqual(response.status_code, 403)

    def test_update_times(self):
        recipe = make_recipe(author=self.user, cook_time="PT10M", prep_time="PT5M")
        response = self.client.patch(
            reverse("recipe_times_api", args=[recipe.id]), {"prep_time": "PT20M"}, format="json"
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["total_time"], "PT30M")

    def test_update_times_with_bad_duration(self):
        recipe = make_recipe(author=self.user)
        response = self.client.patch(
            reverse("recipe_times_api", args=[recipe.id]), {"cook_time": "later"}, format="json"
        )
        self.assertEqual(response.status_code, 400)
