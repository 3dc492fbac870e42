"""Repository helpers for fetching recipes and their ingredient sets."""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from django.db.models import Count, Q, QuerySet

from recipes.db_accessor import DB_Accessor
from recipes.models import Follower, Ingredient, Recipe


class RecipeRepo(DB_Accessor):
    """Repository for Recipe queries (search, feed, ingredients)."""
    def __init__(self) -> None:
        """Initialise with the Recipe model."""
        super().__init__(Recipe)

    def with_author(self) -> QuerySet:
        """Base queryset joining the author row for display names."""
        return Recipe.objects.select_related("author")

    def name_of(self, recipe_id: int) -> Optional[str]:
        """Return the recipe name or None when absent."""
        return Recipe.objects.filter(id=recipe_id).values_list("name", flat=True).first()

    def search_queryset(
        self,
        *,
        keyword: Optional[str] = None,
        category: Optional[str] = None,
        min_rating: Optional[float] = None,
    ) -> QuerySet:
        """Return recipes matching the search predicate (unordered)."""
        qs = self.with_author()
        if keyword:
            qs = qs.filter(Q(name__icontains=keyword) | Q(description__icontains=keyword))
        if category:
            qs = qs.filter(category=category)
        if min_rating is not None:
            qs = qs.filter(aggregated_rating__gte=min_rating)
        return qs

    def feed_queryset(self, follower_id: int, *, category: Optional[str] = None) -> QuerySet:
        """Recipes authored by users that follower_id follows."""
        followee_ids = Follower.objects.filter(follower_id=follower_id).values("followee_id")
        qs = self.with_author().filter(author_id__in=followee_ids)
        if category:
            qs = qs.filter(category=category)
        return qs.order_by("-date_published", "-id")

    def ingredients_for(self, recipe_ids: Iterable[int]) -> Dict[int, List[str]]:
        """Fetch the ingredient sets of many recipes in one query."""
        ids = list(recipe_ids)
        grouped: Dict[int, List[str]] = defaultdict(list)
        if not ids:
            return grouped
        rows = Ingredient.objects.filter(recipe_id__in=ids).values_list("recipe_id", "name")
        for recipe_id, name in rows:
            grouped[recipe_id].append(name)
        return grouped

    def attach_ingredients(self, recipes: Sequence[Recipe]) -> List[Recipe]:
        """Batch-load ingredient sets and attach them to each recipe in place."""
        grouped = self.ingredients_for(r.id for r in recipes)
        for recipe in recipes:
            recipe.ingredient_names = grouped.get(recipe.id, [])
        return list(recipes)

    def add_ingredients(self, recipe_id: int, names: Iterable[str]) -> int:
        """Insert ingredient names for a recipe, skipping duplicates; return rows written."""
        rows = [Ingredient(recipe_id=recipe_id, name=name) for name in names]
        Ingredient.objects.bulk_create(rows, ignore_conflicts=True)
        return len(rows)

    def ingredient_counts(self) -> QuerySet:
        """Recipes annotated with the cardinality of their ingredient set."""
        return Recipe.objects.annotate(ingredient_count=Count("ingredients")).filter(ingredient_count__gt=0)

    def calorie_points(self) -> List[tuple]:
        """(calories, id) for every recipe with calories, sorted ascending."""
        return list(
            Recipe.objects.filter(calories__isnull=False)
            .order_by("calories", "id")
            .values_list("calories", "id")
        )
