"""
Analytic queries over the whole data set.

- closest_calorie_pair: sort (calories, id) and scan neighbours only. The
  smallest gap in a sorted sequence is always between adjacent entries, so
  one linear pass replaces the all-pairs comparison.
- most_complex_recipes: top recipes by ingredient-set size.
- highest_follow_ratio: followers / following for users with at least one
  outgoing edge.
"""

from recipes.models import User
from recipes.repos.followers_repo import FollowersRepo
from recipes.repos.recipe_repo import RecipeRepo

TOP_COMPLEX_LIMIT = 3


class AnalyticsService:
    """Whole-table analytics used by reporting endpoints."""

    def __init__(self, *, recipe_repo=None, followers_repo=None):
        self.recipe_repo = recipe_repo or RecipeRepo()
        self.followers_repo = followers_repo or FollowersRepo()

    def closest_calorie_pair(self):
        """Two recipes with the closest calorie values, or None if fewer than two qualify."""
        return closest_pair(self.recipe_repo.calorie_points())

    def most_complex_recipes(self, limit=TOP_COMPLEX_LIMIT):
        """Recipes with the most ingredients, ties broken by ascending id."""
        rows = (
            self.recipe_repo.ingredient_counts()
            .order_by("-ingredient_count", "id")
            .values("id", "name", "ingredient_count")[:limit]
        )
        return [
            {"recipe_id": row["id"], "name": row["name"], "ingredient_count": row["ingredient_count"]}
            for row in rows
        ]

    def highest_follow_ratio(self):
        """Active user with the largest followers/following ratio, or None."""
        following = self.followers_repo.outgoing_counts()
        if not following:
            return None
        followers = self.followers_repo.incoming_counts()
        active = set(User.active.filter(id__in=following.keys()).values_list("id", flat=True))

        best = None
        for user_id in sorted(active):
            ratio = followers.get(user_id, 0) / following[user_id]
            if best is None or ratio > best[1]:
                best = (user_id, ratio)
        if best is None:
            return None
        name = User.objects.filter(id=best[0]).values_list("username", flat=True).first()
        return {"user_id": best[0], "name": name, "ratio": best[1]}


def closest_pair(points):
    """
    Given (value, id) pairs sorted by (value, id), return the closest pair.

    Ties on the gap go to the lexicographically smallest (lower id, higher id).
    """
    best = None
    for (prev_value, prev_id), (value, rid) in zip(points, points[1:]):
        gap = abs(value - prev_value)
        low, high = sorted((prev_id, rid))
        key = (gap, low, high)
        if best is None or key < best[0]:
            by_id = {prev_id: prev_value, rid: value}
            best = (key, by_id[low], by_id[high])
    if best is None:
        return None
    (gap, low, high), calories_a, calories_b = best
    return {
        "recipe_a": low,
        "recipe_b": high,
        "calories_a": calories_a,
        "calories_b": calories_b,
        "difference": gap,
    }
