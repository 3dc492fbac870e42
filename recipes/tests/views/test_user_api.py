from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from recipes.models import Follower, User
from recipes.tests.helpers import follow, make_recipe, make_user


class UserApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.alice = make_user(username="alice", gender=User.GENDER_FEMALE)
        self.bob = make_user(username="bob")
        self.client.force_authenticate(user=self.alice)

    def test_user_detail_has_follow_counts(self):
        follow(self.alice, self.bob)
        response = APIClient().get(reverse("user_detail_api", args=[self.bob.id]))
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["name"], "bob")
        self.assertEqual(data["followers"], 1)
        self.assertEqual(data["following"], 0)
        self.assertEqual(data["follower_users"], [self.alice.id])

    def test_toggle_follow(self):
        url = reverse("follow_api", args=[self.bob.id])
        self.assertEqual(self.client.post(url).json(), {"status": "followed"})
        self.assertEqual(self.client.post(url).json(), {"status": "unfollowed"})
        self.assertFalse(Follower.objects.exists())

    def test_self_follow_is_bad_request(self):
        response = self.client.post(reverse("follow_api", args=[self.alice.id]))
        self.assertEqual(response.status_code, 400)

    def test_follow_lists(self):
        follow(self.alice, self.bob)
        followers = self.client.get(reverse("followers_api", args=[self.bob.id])).json()
        following = self.client.get(reverse("following_api", args=[self.alice.id])).json()
        self.assertEqual(followers, [{"id": self.alice.id, "name": "alice"}])
        self.assertEqual(following, [{"id": self.bob.id, "name": "bob"}])

    def test_update_profile(self):
        response = self.client.patch(reverse("profile_api"), {"age": 45}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["age"], 45)

    def test_delete_own_account(self):
        follow(self.bob, self.alice)
        response = self.client.delete(reverse("user_detail_api", args=[self.alice.id]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"deleted": True})
        self.assertFalse(Follower.objects.exists())
        self.assertEqual(APIClient().get(reverse("user_detail_api", args=[self.alice.id])).status_code, 404)

    def test_cannot_delete_other_account(self):
        response = self.client.delete(reverse("user_detail_api", args=[self.bob.id]))
        self.assertEqual(response.status_code, 403)

    def test_feed(self):
        follow(self.alice, self.bob)
        make_recipe(author=self.bob, name="Bob's pie")
        response = self.client.get(reverse("feed_api"), {"size": 500})
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["size"], 200)
        self.assertEqual([item["name"] for item in data["items"]], ["Bob's pie"])

    def test_feed_requires_authentication(self):
        self.assertEqual(APIClient().get(reverse("feed_api")).status_code, 401)
