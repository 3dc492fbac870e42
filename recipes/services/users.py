"""Service helpers for registration, login, profiles and account deletion."""

import logging
from datetime import date, datetime

from django.db import IntegrityError, transaction
from rest_framework.authtoken.models import Token

from recipes.exceptions import Conflict, InvalidInput, NotFound, Unauthorized
from recipes.models import User
from recipes.repos.followers_repo import FollowersRepo
from recipes.repos.user_repo import UserRepo
from recipes.services.access import AccessGuard

logger = logging.getLogger(__name__)

BIRTHDAY_FORMATS = ("%Y-%m-%d", "%Y/%m/%d")


def parse_gender(value):
    """Map free-form gender text to a stored choice, or None when unknown."""
    text = (value or "").strip().lower()
    return text if text in (User.GENDER_MALE, User.GENDER_FEMALE) else None


def age_from_birthday(birthday, today=None):
    """Whole years between an ISO (or slash-separated) birthday and today."""
    for fmt in BIRTHDAY_FORMATS:
        try:
            born = datetime.strptime(str(birthday).strip(), fmt).date()
            break
        except ValueError:
            continue
    else:
        raise InvalidInput("birthday must be YYYY-MM-DD or YYYY/MM/DD")
    today = today or date.today()
    return today.year - born.year - ((today.month, today.day) < (born.month, born.day))


class UserService:
    """Encapsulate account lifecycle and profile reads."""

    def __init__(self, *, guard=None, repo=None, followers_repo=None):
        self.guard = guard or AccessGuard()
        self.repo = repo or UserRepo()
        self.followers_repo = followers_repo or FollowersRepo()

    @transaction.atomic
    def register(self, *, name, gender, password, age=None, birthday=None):
        """Create an account and return its id."""
        name = (name or "").strip()
        if not name:
            raise InvalidInput("name is required")
        if not password:
            raise InvalidInput("password is required")
        gender_value = parse_gender(gender)
        if gender_value is None:
            raise InvalidInput("gender must be male or female")
        if age is None and birthday is not None:
            age = age_from_birthday(birthday)
        try:
            age = int(age)
        except (TypeError, ValueError):
            raise InvalidInput("age is required")
        if age <= 0:
            raise InvalidInput("age must be positive")
        if self.repo.name_taken(name):
            raise Conflict("name already taken")

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username=name, password=password, gender=gender_value, age=age
                )
        except IntegrityError:
            raise Conflict("name already taken")
        logger.info("Registered user %s (%s)", user.id, name)
        return user.id

    def login(self, user_id, password):
        """Return the user id for valid credentials of an active account."""
        return self.guard.require_active_user(user_id, password).id

    def issue_token(self, user_id, password):
        """Validate credentials and return a bearer token key for the HTTP surface."""
        user = self.guard.require_active_user(user_id, password)
        token, _ = Token.objects.get_or_create(user=user)
        return token.key

    def get_user(self, user_id):
        """Active user with derived follow counts and follower/following id lists."""
        user = self.repo.with_follow_counts().filter(id=user_id).first()
        if user is None:
            raise NotFound("user not found")
        user.follower_ids = self.followers_repo.follower_ids(user.id)
        user.following_ids = self.followers_repo.following_ids(user.id)
        return user

    @transaction.atomic
    def update_profile(self, actor, *, gender=None, age=None):
        """Update gender and/or age of the caller's own profile."""
        user = self.guard.require_active(actor)
        update_fields = []
        if gender is not None:
            gender_value = parse_gender(gender)
            if gender_value is None:
                raise InvalidInput("gender must be male or female")
            user.gender = gender_value
            update_fields.append("gender")
        if age is not None:
            try:
                age = int(age)
            except (TypeError, ValueError):
                raise InvalidInput("age must be a positive integer")
            if age <= 0:
                raise InvalidInput("age must be a positive integer")
            user.age = age
            update_fields.append("age")
        if update_fields:
            user.save(update_fields=update_fields)
        return user

    @transaction.atomic
    def delete_account(self, actor, user_id):
        """Soft-delete the caller's account and drop its follow edges. Returns False if already deleted."""
        self.guard.require_self(actor, user_id)
        if self.repo.find(user_id) is None:
            raise Unauthorized()
        if not self.repo.mark_deleted(user_id):
            return False
        removed = self.followers_repo.remove_all_for(user_id)
        Token.objects.filter(user_id=user_id).delete()
        logger.info("Deleted account %s (%s follow edges removed)", user_id, removed)
        return True

    def list_followers(self, user_id):
        """{id, name} of users following user_id."""
        self._require_exists(user_id)
        return self.followers_repo.list_followers(followee_id=user_id)

    def list_following(self, user_id):
        """{id, name} of users that user_id follows."""
        self._require_exists(user_id)
        return self.followers_repo.list_following(follower_id=user_id)

    def _require_exists(self, user_id):
        if not self.repo.exists(id=user_id):
            raise NotFound("user not found")
