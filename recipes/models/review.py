"""Model for user reviews on recipes."""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone

from .recipe import Recipe
from .sequence import SequencedModel


class Review(SequencedModel):
    """User-authored rating and text on one recipe."""

    RATING_MIN = 1
    RATING_MAX = 5

    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column="recipe_id",
        related_name="reviews",
    )

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        db_column="author_id",
        related_name="reviews",
    )

    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(RATING_MIN), MaxValueValidator(RATING_MAX)]
    )
    text = models.TextField(blank=True, default="")

    date_submitted = models.DateTimeField(default=timezone.now)
    date_modified = models.DateTimeField(default=timezone.now)

    class Meta:
        """Table name, rating range and lookup indexes."""
        db_table = "review"
        constraints = [
            models.CheckConstraint(
                condition=Q(rating__gte=1) & Q(rating__lte=5),
                name="chk_review_rating_range",
            ),
        ]
        indexes = [
            models.Index(fields=["recipe", "date_modified"], name="review_recipe_modified_idx"),
            models.Index(fields=["author"], name="review_author_idx"),
        ]

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"Review {self.id} by {self.author_id} on {self.recipe_id}"

    @property
    def like_ids(self):
        """Ids of users who liked this review; uses a batch-attached list when present."""
        attached = getattr(self, "_like_ids", None)
        if attached is not None:
            return attached
        return sorted(self.likes.values_list("user_id", flat=True))

    @like_ids.setter
    def like_ids(self, ids):
        self._like_ids = sorted(ids)
