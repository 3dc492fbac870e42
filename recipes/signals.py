from django.db.models import QuerySet
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from recipes.models import Recipe, Review
from recipes.services.aggregates import AggregateEngine

aggregate_engine = AggregateEngine()


def _deleting_recipes(origin):
    """True when the delete started from a Recipe instance or Recipe queryset."""
    model = origin.model if isinstance(origin, QuerySet) else type(origin)
    return isinstance(model, type) and issubclass(model, Recipe)


@receiver(post_save, sender=Review)
def refresh_aggregate_on_review_save(sender, instance, raw=False, **kwargs):
    """Recompute the recipe aggregate in the same transaction as the review write."""
    if raw:
        return
    aggregate_engine.recompute_recipe_aggregate(instance.recipe_id)


@receiver(post_delete, sender=Review)
def refresh_aggregate_on_review_delete(sender, instance, origin=None, **kwargs):
    """Recompute after a review is removed, unless its recipe is being deleted with it."""
    if _deleting_recipes(origin):
        return
    aggregate_engine.recompute_recipe_aggregate(instance.recipe_id)
