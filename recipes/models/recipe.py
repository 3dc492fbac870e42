"""
Recipe model.

A recipe is owned by the user who published it (`author`, never reassigned)
and carries free-text, timing and nutrition fields copied from the source
data set. Timing fields are ISO-8601 duration strings (e.g. "PT1H30M").

`aggregated_rating` and `review_count` are derived from the recipe's reviews.
They are written only by `AggregateEngine` (see recipes/services/aggregates.py)
and are never accepted from callers.
"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .sequence import SequencedModel


class Recipe(SequencedModel):
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="recipes",
        db_column="author_id",
    )

    name = models.CharField(max_length=500)
    description = models.TextField(blank=True, null=True)
    category = models.CharField(max_length=255, blank=True, null=True)

    cook_time = models.CharField(max_length=50, blank=True, null=True)
    prep_time = models.CharField(max_length=50, blank=True, null=True)
    total_time = models.CharField(max_length=50, blank=True, null=True)
    date_published = models.DateTimeField(null=True, blank=True)

    # derived, owned by AggregateEngine
    aggregated_rating = models.DecimalField(
        max_digits=3,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )
    review_count = models.PositiveIntegerField(default=0)

    # nutrition per serving
    calories = models.FloatField(null=True, blank=True)
    fat_content = models.FloatField(null=True, blank=True)
    saturated_fat_content = models.FloatField(null=True, blank=True)
    cholesterol_content = models.FloatField(null=True, blank=True)
    sodium_content = models.FloatField(null=True, blank=True)
    carbohydrate_content = models.FloatField(null=True, blank=True)
    fiber_content = models.FloatField(null=True, blank=True)
    sugar_content = models.FloatField(null=True, blank=True)
    protein_content = models.FloatField(null=True, blank=True)

    servings = models.PositiveIntegerField(null=True, blank=True)
    recipe_yield = models.CharField(max_length=100, blank=True, null=True)

    class Meta:
        db_table = "recipe"
        indexes = [
            models.Index(fields=["author"], name="recipe_author_idx"),
            models.Index(fields=["category"], name="recipe_category_idx"),
            models.Index(fields=["date_published"], name="recipe_date_published_idx"),
            models.Index(fields=["calories"], name="recipe_calories_idx"),
        ]

    def __str__(self):
        return self.name

    @property
    def ingredient_names(self):
        """Ingredient set sorted case-insensitively; uses a batch-attached list when present."""
        attached = getattr(self, "_ingredient_names", None)
        if attached is not None:
            return attached
        names = list(self.ingredients.values_list("name", flat=True))
        return sorted(names, key=str.lower)

    @ingredient_names.setter
    def ingredient_names(self, names):
        self._ingredient_names = sorted(names, key=str.lower)
