"""Service helpers for creating, editing, deleting and liking reviews."""

import logging

from django.db import transaction
from django.utils import timezone

from recipes.exceptions import Forbidden, InvalidInput, NotFound
from recipes.models import Review
from recipes.pagination import PageResult, validate_page
from recipes.repos.review_repo import ReviewRepo
from recipes.services.access import AccessGuard
from recipes.services.aggregates import AggregateEngine
from recipes.sorting import review_ordering

logger = logging.getLogger(__name__)


def _validate_rating(rating):
    try:
        value = int(rating)
    except (TypeError, ValueError):
        raise InvalidInput("rating must be an integer")
    if isinstance(rating, float) and rating != value:
        raise InvalidInput("rating must be an integer")
    if not Review.RATING_MIN <= value <= Review.RATING_MAX:
        raise InvalidInput("rating must be in [1, 5]")
    return value


class ReviewService:
    """Encapsulate review CRUD and likes. Aggregates follow every write (see recipes.signals)."""

    def __init__(self, actor=None, *, guard=None, repo=None, engine=None):
        self.actor = actor
        self.guard = guard or AccessGuard()
        self.repo = repo or ReviewRepo()
        self.engine = engine or AggregateEngine()

    @transaction.atomic
    def add_review(self, recipe_id, rating, text=""):
        """Create a review by the actor and return its id."""
        user = self.guard.require_active(self.actor)
        rating = _validate_rating(rating)
        self.guard.require_recipe(recipe_id, lock=True)
        now = timezone.now()
        review = Review.objects.create(
            recipe_id=recipe_id,
            author=user,
            rating=rating,
            text=text or "",
            date_submitted=now,
            date_modified=now,
        )
        logger.debug("User %s reviewed recipe %s (review %s)", user.id, recipe_id, review.id)
        return review.id

    @transaction.atomic
    def edit_review(self, recipe_id, review_id, rating, text=""):
        """Change rating/text of the actor's own review."""
        user = self.guard.require_active(self.actor)
        rating = _validate_rating(rating)
        self.guard.require_recipe(recipe_id, lock=True)
        review = self.guard.require_review_of_recipe(review_id, recipe_id)
        self.guard.require_review_author(review, user.id)
        review.rating = rating
        review.text = text or ""
        review.date_modified = timezone.now()
        review.save(update_fields=["rating", "text", "date_modified"])
        return review

    @transaction.atomic
    def delete_review(self, recipe_id, review_id):
        """Delete the actor's own review together with its likes."""
        user = self.guard.require_active(self.actor)
        self.guard.require_recipe(recipe_id, lock=True)
        review = self.guard.require_review_of_recipe(review_id, recipe_id)
        self.guard.require_review_author(review, user.id)
        review.delete()
        logger.debug("User %s deleted review %s", user.id, review_id)

    @transaction.atomic
    def like_review(self, review_id):
        """Like a review (idempotent) and return its like count."""
        user = self.guard.require_active(self.actor)
        review = self._fetch(review_id)
        if review.author_id == user.id:
            raise Forbidden("cannot like your own review")
        self.repo.add_like(review_id=review.id, user_id=user.id)
        return self.repo.like_count(review.id)

    @transaction.atomic
    def unlike_review(self, review_id):
        """Remove the actor's like if present and return the like count."""
        user = self.guard.require_active(self.actor)
        review = self._fetch(review_id)
        self.repo.remove_like(review_id=review.id, user_id=user.id)
        return self.repo.like_count(review.id)

    def list_by_recipe(self, recipe_id, page=1, size=10, sort=None):
        """Page of a recipe's reviews, each carrying its like-id set and like count."""
        page, size = validate_page(page, size)
        self.guard.require_recipe(recipe_id)
        qs = self.repo.for_recipe(recipe_id).select_related("author").order_by(*review_ordering(sort))
        items, total = self.repo.page(qs, page=page, size=size)
        self.repo.attach_likes(items)
        return PageResult(items=items, page=page, size=size, total=total)

    def refresh_recipe_aggregated_rating(self, recipe_id):
        """Recompute and return the recipe's aggregate projection."""
        return self.engine.recompute_recipe_aggregate(recipe_id)

    def _fetch(self, review_id):
        review = Review.objects.filter(id=review_id).first()
        if review is None:
            raise NotFound("review not found")
        return review
