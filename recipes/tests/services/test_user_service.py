from datetime import date

from django.test import TestCase
from rest_framework.authtoken.models import Token

from recipes.exceptions import Conflict, Forbidden, InvalidInput, NotFound, Unauthorized
from recipes.models import Follower, Review, User
from recipes.services import UserService
from recipes.services.users import age_from_birthday, parse_gender
from recipes.tests.helpers import follow, make_recipe, make_review, make_user


class UserServiceRegistrationTests(TestCase):

    def setUp(self):
        self.service = UserService()

    def test_register_returns_id(self):
        user_id = self.service.register(name="alice", gender="Female", password="pw", age=29)
        user = User.objects.get(id=user_id)
        self.assertEqual(user.gender, User.GENDER_FEMALE)
        self.assertTrue(user.check_password("pw"))

    def test_register_with_birthday(self):
        user_id = self.service.register(name="bob", gender="male", password="pw", birthday="2000-01-01")
        expected = age_from_birthday("2000-01-01")
        self.assertEqual(User.objects.get(id=user_id).age, expected)

    def test_register_duplicate_name_conflicts(self):
        self.service.register(name="alice", gender="female", password="pw", age=29)
        with self.assertRaises(Conflict):
            self.service.register(name="alice", gender="male", password="pw", age=40)

    def test_register_validates_input(self):
        cases = [
            {"name": "", "gender": "male", "password": "pw", "age": 20},
            {"name": "x", "gender": "robot", "password": "pw", "age": 20},
            {"name": "x", "gender": "male", "password": "", "age": 20},
            {"name": "x", "gender": "male", "password": "pw", "age": 0},
            {"name": "x", "gender": "male", "password": "pw"},
            {"name": "x", "gender": "male", "password": "pw", "birthday": "yesterday"},
        ]
        for kwargs in cases:
            with self.assertRaises(InvalidInput):
                self.service.register(**kwargs)
        self.assertFalse(User.objects.exists())


class UserServiceTests(TestCase):

    def setUp(self):
        self.service = UserService()
        self.alice = make_user(username="alice", gender=User.GENDER_FEMALE)
        self.bob = make_user(username="bob")
        self.carl = make_user(username="carl")
        follow(self.alice, self.bob)
        follow(self.carl, self.bob)
        follow(self.bob, self.alice)

    def test_login_returns_id(self):
        self.assertEqual(self.service.login(self.alice.id, "Password123"), self.alice.id)

    def test_login_rejects_wrong_password_and_deleted_users(self):
        with self.assertRaises(Unauthorized):
            self.service.login(self.alice.id, "nope")
        self.alice.is_deleted = True
        self.alice.save()
        with self.assertRaises(Unauthorized):
            self.service.login(self.alice.id, "Password123")

    def test_issue_token_reuses_token(self):
        key = self.service.issue_token(self.alice.id, "Password123")
        self.assertEqual(self.service.issue_token(self.alice.id, "Password123"), key)
        self.assertEqual(Token.objects.get(user=self.alice).key, key)

    def test_get_user_has_derived_counts(self):
        user = self.service.get_user(self.bob.id)
        self.assertEqual(user.followers_count, 2)
        self.assertEqual(user.following_count, 1)
        self.assertEqual(user.follower_ids, [self.alice.id, self.carl.id])
        self.assertEqual(user.following_ids, [self.alice.id])

    def test_get_user_hides_deleted_and_missing(self):
        with self.assertRaises(NotFound):
            self.service.get_user(9999)
        self.service.delete_account(self.carl, self.carl.id)
        with self.assertRaises(NotFound):
            self.service.get_user(self.carl.id)

    def test_update_profile(self):
        user = self.service.update_profile(self.alice, age=41)
        self.assertEqual(user.age, 41)
        self.assertEqual(user.gender, User.GENDER_FEMALE)
        user = self.service.update_profile(self.alice, gender="male")
        self.assertEqual(User.objects.get(id=self.alice.id).gender, User.GENDER_MALE)

    def test_update_profile_rejects_invalid_values(self):
        with self.assertRaises(InvalidInput):
            self.service.update_profile(self.alice, age=-1)
        with self.assertRaises(InvalidInput):
            self.service.update_profile(self.alice, gender="other")

    def test_delete_account_removes_edges_but_keeps_content(self):
        recipe = make_recipe(author=self.bob)
        make_review(recipe=recipe, author=self.alice, rating=4)
        Token.objects.create(user=self.bob)

        self.assertTrue(self.service.delete_account(self.bob, self.bob.id))

        self.bob.refresh_from_db()
        self.assertTrue(self.bob.is_deleted)
        self.assertFalse(Follower.objects.filter(follower=self.bob).exists())
        self.assertFalse(Follower.objects.filter(followee=self.bob).exists())
        self.assertFalse(Token.objects.filter(user=self.bob).exists())
        self.assertTrue(self.bob.recipes.exists())
        recipe.refresh_from_db()
        self.assertEqual(recipe.review_count, 1)
        self.assertTrue(Review.objects.filter(author=self.alice).exists())

    def test_delete_account_of_someone_else_is_forbidden(self):
        with self.assertRaises(Forbidden):
            self.service.delete_account(self.alice, self.bob.id)

    def test_delete_account_twice(self):
        self.assertTrue(self.service.delete_account(self.alice, self.alice.id))
        self.assertFalse(self.service.delete_account(self.alice, self.alice.id))

    def test_delete_missing_account_is_unauthorized(self):
        with self.assertRaises(Unauthorized):
            self.service.delete_account(9999, 9999)

    def test_list_followers_and_following(self):
        self.assertEqual(
            self.service.list_followers(self.bob.id),
            [{"id": self.alice.id, "name": "alice"}, {"id": self.carl.id, "name": "carl"}],
        )
        self.assertEqual(self.service.list_following(self.alice.id), [{"id": self.bob.id, "name": "bob"}])
        with self.assertRaises(NotFound):
            self.service.list_followers(9999)


class UserHelpersTests(TestCase):

    def test_parse_gender(self):
        self.assertEqual(parse_gender(" MALE "), "male")
        self.assertIsNone(parse_gender("unknown"))
        self.assertIsNone(parse_gender(None))

    def test_age_from_birthday(self):
        today = date(2024, 6, 15)
        self.assertEqual(age_from_birthday("2000-06-15", today=today), 24)
        self.assertEqual(age_from_birthday("2000/06/16", today=today), 23)
