"""
Aggregate engine: keeps Recipe.aggregated_rating and Recipe.review_count
equal to what the recipe's reviews say.

`recompute_recipe_aggregate` is the single writer of those two columns.
It locks the recipe row, reads count and sum of ratings in one query and
writes both columns with one UPDATE, so callers running it inside their
own `transaction.atomic` block commit the review change and the aggregate
together or not at all.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

from django.db import transaction
from django.db.models import Count, Sum

from recipes.exceptions import NotFound
from recipes.models import Recipe, Review

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def rounded_average(total, count):
    """Average of integer ratings rounded half-up to 2 places, or None when count is 0."""
    if not count:
        return None
    return (Decimal(total) / Decimal(count)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


class AggregateEngine:
    """Recompute and persist derived recipe aggregates."""

    @transaction.atomic
    def recompute_recipe_aggregate(self, recipe_id):
        """Recompute rating/count for one recipe and return the refreshed row."""
        if not Recipe.objects.select_for_update().filter(id=recipe_id).exists():
            raise NotFound("recipe not found")

        stats = Review.objects.filter(recipe_id=recipe_id).aggregate(
            count=Count("id"), total=Sum("rating")
        )
        count = stats["count"] or 0
        average = rounded_average(stats["total"] or 0, count)
        Recipe.objects.filter(id=recipe_id).update(aggregated_rating=average, review_count=count)
        logger.debug("Recipe %s aggregate -> rating=%s count=%s", recipe_id, average, count)
        return Recipe.objects.select_related("author").get(id=recipe_id)

    @transaction.atomic
    def recompute_all(self):
        """Recompute every recipe's aggregate; used after bulk loads. Returns recipes touched."""
        stats = {
            row["recipe_id"]: (row["count"], row["total"])
            for row in Review.objects.values("recipe_id").annotate(count=Count("id"), total=Sum("rating"))
        }
        recipes = list(Recipe.objects.only("id", "aggregated_rating", "review_count"))
        for recipe in recipes:
            count, total = stats.get(recipe.id, (0, 0))
            recipe.review_count = count
            recipe.aggregated_rating = rounded_average(total, count)
        Recipe.objects.bulk_update(recipes, ["aggregated_rating", "review_count"], batch_size=1000)
        logger.info("Recomputed aggregates for %s recipes", len(recipes))
        return len(recipes)
