"""Repository helpers for follower relationships."""

from typing import Any, Dict, List

from django.db.models import Count, Q
from recipes.db_accessor import DB_Accessor
from recipes.models.followers import Follower


class FollowersRepo(DB_Accessor):
    """Repository wrapper for follower relationships."""
    def __init__(self) -> None:
        """Initialise with the Follower model."""
        super().__init__(Follower)

    def list_followers(self, *, followee_id: int) -> List[Dict[str, Any]]:
        """Users following followee_id as {id, name} dicts ordered by id."""
        return [
            {"id": uid, "name": name}
            for uid, name in Follower.objects.filter(followee_id=followee_id)
            .order_by("follower_id")
            .values_list("follower_id", "follower__username")
        ]

    def list_following(self, *, follower_id: int) -> List[Dict[str, Any]]:
        """Users followed by follower_id as {id, name} dicts ordered by id."""
        return [
            {"id": uid, "name": name}
            for uid, name in Follower.objects.filter(follower_id=follower_id)
            .order_by("followee_id")
            .values_list("followee_id", "followee__username")
        ]

    def follower_ids(self, followee_id: int) -> List[int]:
        return list(
            Follower.objects.filter(followee_id=followee_id).order_by("follower_id").values_list("follower_id", flat=True)
        )

    def following_ids(self, follower_id: int) -> List[int]:
        return list(
            Follower.objects.filter(follower_id=follower_id).order_by("followee_id").values_list("followee_id", flat=True)
        )

    def remove_all_for(self, user_id: int) -> int:
        """Remove every edge where user_id is follower or followee."""
        count, _ = Follower.objects.filter(Q(follower_id=user_id) | Q(followee_id=user_id)).delete()
        return count

    def outgoing_counts(self) -> Dict[int, int]:
        """Map of user id -> number of users they follow, for users with >= 1 edge."""
        rows = Follower.objects.values("follower_id").annotate(n=Count("id")).values_list("follower_id", "n")
        return dict(rows)

    def incoming_counts(self) -> Dict[int, int]:
        """Map of user id -> number of followers, for users with >= 1 follower."""
        rows = Follower.objects.values("followee_id").annotate(n=Count("id")).values_list("followee_id", "n")
        return dict(rows)
