"""Repository helpers for reviews and their like sets."""

from collections import defaultdict
from typing import Dict, Iterable, List

from django.db.models import Count, QuerySet

from recipes.db_accessor import DB_Accessor
from recipes.models import Like, Review


class ReviewRepo(DB_Accessor):
    """Repository for Review and Like queries."""
    def __init__(self) -> None:
        """Initialise with the Review model."""
        super().__init__(Review)

    def for_recipe(self, recipe_id: int) -> QuerySet:
        """Reviews of one recipe annotated with their live like count."""
        return Review.objects.filter(recipe_id=recipe_id).annotate(like_count=Count("likes"))

    def like_ids_for(self, review_ids: Iterable[int]) -> Dict[int, List[int]]:
        """Fetch the like sets of many reviews in one query."""
        ids = list(review_ids)
        grouped: Dict[int, List[int]] = defaultdict(list)
        if not ids:
            return grouped
        for review_id, user_id in Like.objects.filter(review_id__in=ids).values_list("review_id", "user_id"):
            grouped[review_id].append(user_id)
        return grouped

    def attach_likes(self, reviews) -> List[Review]:
        """Batch-load like sets and attach them to each review in place."""
        grouped = self.like_ids_for(r.id for r in reviews)
        for review in reviews:
            review.like_ids = grouped.get(review.id, [])
        return list(reviews)

    def add_like(self, *, review_id: int, user_id: int) -> None:
        """Insert a like, relying on the unique constraint to absorb duplicates."""
        Like.objects.bulk_create([Like(review_id=review_id, user_id=user_id)], ignore_conflicts=True)

    def remove_like(self, *, review_id: int, user_id: int) -> int:
        count, _ = Like.objects.filter(review_id=review_id, user_id=user_id).delete()
        return count

    def like_count(self, review_id: int) -> int:
        return Like.objects.filter(review_id=review_id).count()
