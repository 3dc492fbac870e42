"""Identity and ownership checks run before every mutating operation."""

import logging

from recipes.exceptions import Forbidden, NotFound, Unauthorized
from recipes.models import Recipe, Review, User

logger = logging.getLogger(__name__)


class AccessGuard:
    """Validate caller identity and ownership before storage is touched."""

    def require_active_user(self, user_id, password):
        """Return the user when the id/credential pair names an active account."""
        user = self._find_user(user_id)
        if user is None or user.is_deleted or not password or not user.check_password(password):
            logger.warning("Rejected credentials for user id %s", user_id)
            raise Unauthorized()
        return user

    def require_active(self, actor):
        """Re-read the caller's row and fail unless it exists and is not deleted."""
        user_id = getattr(actor, "pk", actor)
        user = self._find_user(user_id)
        if user is None or user.is_deleted:
            raise Unauthorized()
        return user

    def require_ownership(self, recipe_id, user_id):
        """Return the recipe when user_id is its author; Forbidden otherwise."""
        recipe = Recipe.objects.filter(id=recipe_id).first()
        if recipe is None or recipe.author_id != user_id:
            raise Forbidden("not the recipe author")
        return recipe

    def require_recipe(self, recipe_id, *, lock=False):
        """Return the recipe or raise NotFound."""
        qs = Recipe.objects.select_for_update() if lock else Recipe.objects
        recipe = qs.filter(id=recipe_id).first()
        if recipe is None:
            raise NotFound("recipe not found")
        return recipe

    def require_review_of_recipe(self, review_id, recipe_id):
        """Return the review when it exists and belongs to recipe_id."""
        review = Review.objects.filter(id=review_id, recipe_id=recipe_id).first()
        if review is None:
            raise NotFound("review not found for this recipe")
        return review

    def require_review_author(self, review, user_id):
        """Fail with Forbidden unless user_id wrote the review."""
        if review.author_id != user_id:
            raise Forbidden("not the review author")
        return review

    def require_self(self, actor, user_id):
        """Fail with Forbidden unless the caller is acting on their own account."""
        if getattr(actor, "pk", actor) != user_id:
            raise Forbidden("cannot act on another user's account")

    def _find_user(self, user_id):
        try:
            return User.objects.filter(id=int(user_id)).first()
        except (TypeError, ValueError):
            return None
