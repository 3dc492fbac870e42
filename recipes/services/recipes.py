"""Service helpers for recipe lookup, creation, timing updates and deletion."""

import logging

from django.db import transaction
from django.utils import timezone

from recipes.exceptions import InvalidInput, NotFound
from recipes.models import Recipe
from recipes.repos.recipe_repo import RecipeRepo
from recipes.services.access import AccessGuard
from recipes.utils.durations import parse_iso_duration, total_duration

logger = logging.getLogger(__name__)

# Fields a caller may supply on create; derived and ownership fields are excluded.
EDITABLE_FIELDS = (
    "description",
    "category",
    "cook_time",
    "prep_time",
    "calories",
    "fat_content",
    "saturated_fat_content",
    "cholesterol_content",
    "sodium_content",
    "carbohydrate_content",
    "fiber_content",
    "sugar_content",
    "protein_content",
    "servings",
    "recipe_yield",
)


def clean_ingredient_names(parts):
    """Strip, drop blanks and duplicates; order is irrelevant for the stored set."""
    seen = []
    for part in parts or []:
        name = (part or "").strip()
        if name and name not in seen:
            seen.append(name)
    return seen


class RecipeService:
    """Encapsulate recipe lifecycle operations."""

    def __init__(self, actor=None, *, guard=None, repo=None):
        self.actor = actor
        self.guard = guard or AccessGuard()
        self.repo = repo or RecipeRepo()

    def get_recipe(self, recipe_id):
        """Return the recipe with author and ingredient set attached."""
        recipe = self.repo.with_author().filter(id=recipe_id).first()
        if recipe is None:
            raise NotFound("recipe not found")
        self.repo.attach_ingredients([recipe])
        return recipe

    def get_name(self, recipe_id):
        """Return the recipe's name, or None when it does not exist."""
        return self.repo.name_of(recipe_id)

    @transaction.atomic
    def create_recipe(self, data):
        """Create a recipe owned by the actor and return its id."""
        user = self.guard.require_active(self.actor)
        name = (data.get("name") or "").strip()
        if not name:
            raise InvalidInput("recipe name cannot be empty")

        fields = {key: data.get(key) for key in EDITABLE_FIELDS if data.get(key) is not None}
        fields["total_time"] = self._total_time_or(data.get("total_time"), fields)

        recipe = Recipe.objects.create(
            author=user,
            name=name,
            date_published=timezone.now(),
            aggregated_rating=None,
            review_count=0,
            **fields,
        )
        self.repo.add_ingredients(recipe.id, clean_ingredient_names(data.get("ingredients")))
        logger.info("User %s created recipe %s", user.id, recipe.id)
        return recipe.id

    @transaction.atomic
    def delete_recipe(self, recipe_id):
        """Delete an owned recipe with its reviews, likes and ingredients."""
        user = self.guard.require_active(self.actor)
        recipe = self.guard.require_ownership(recipe_id, user.id)
        recipe.delete()
        logger.info("User %s deleted recipe %s", user.id, recipe_id)

    @transaction.atomic
    def update_times(self, recipe_id, cook_time=None, prep_time=None):
        """Update cook/prep durations of an owned recipe and recompute total time."""
        user = self.guard.require_active(self.actor)
        recipe = self.guard.require_ownership(recipe_id, user.id)
        if cook_time is None and prep_time is None:
            return recipe

        new_cook = cook_time if cook_time is not None else recipe.cook_time
        new_prep = prep_time if prep_time is not None else recipe.prep_time
        try:
            total = total_duration(new_cook, new_prep)
        except ValueError as exc:
            raise InvalidInput(str(exc))

        recipe.cook_time = new_cook
        recipe.prep_time = new_prep
        recipe.total_time = total
        recipe.save(update_fields=["cook_time", "prep_time", "total_time"])
        return recipe

    def _total_time_or(self, fallback, fields):
        cook, prep = fields.get("cook_time"), fields.get("prep_time")
        if cook is None or prep is None:
            return fallback
        try:
            if parse_iso_duration(cook) is None or parse_iso_duration(prep) is None:
                return fallback
            return total_duration(cook, prep)
        except ValueError:
            return fallback
