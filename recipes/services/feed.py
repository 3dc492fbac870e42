"""Recipe search and follow-feed queries."""

from typing import Optional

from recipes.exceptions import InvalidInput
from recipes.pagination import PageResult, clamp_page, validate_page
from recipes.repos.recipe_repo import RecipeRepo
from recipes.services.access import AccessGuard
from recipes.sorting import recipe_ordering


class FeedService:
    """Build filtered, sorted, paged recipe listings without per-row queries."""

    def __init__(self, *, repo: RecipeRepo | None = None, guard: AccessGuard | None = None) -> None:
        self.repo = repo or RecipeRepo()
        self.guard = guard or AccessGuard()

    # --- search ---------------------------------------------------------
    def search_recipes(
        self,
        keyword: Optional[str] = None,
        category: Optional[str] = None,
        min_rating=None,
        page=1,
        size=10,
        sort: Optional[str] = None,
    ) -> PageResult:
        """
        Keyword/category/rating filtered recipes for one page.

        `total` counts the whole filtered set. Ingredient sets of the page are
        loaded with a single query keyed by the page's recipe ids.
        """
        page, size = validate_page(page, size)
        qs = self.repo.search_queryset(
            keyword=keyword or None,
            category=category or None,
            min_rating=self._parse_rating(min_rating),
        ).order_by(*recipe_ordering(sort))
        items, total = self.repo.page(qs, page=page, size=size)
        self.repo.attach_ingredients(items)
        return PageResult(items=items, page=page, size=size, total=total)

    # --- feed -----------------------------------------------------------
    def feed(self, actor, page=1, size=10, category: Optional[str] = None) -> PageResult:
        """Recipes by authors the actor follows, newest first."""
        user = self.guard.require_active(actor)
        page, size = clamp_page(page, size)
        qs = self.repo.feed_queryset(user.id, category=category or None)
        items, total = self.repo.page(qs, page=page, size=size)
        return PageResult(items=items, page=page, size=size, total=total)

    # --- internal helpers -----------------------------------------------
    def _parse_rating(self, value):
        if value is None or value == "":
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            raise InvalidInput("min_rating must be a number")
