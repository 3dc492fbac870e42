"""Repository helpers for user lookups."""

from typing import Optional

from django.db.models import Count, QuerySet

from recipes.db_accessor import DB_Accessor
from recipes.models.user import User


class UserRepo(DB_Accessor):
    """Account lookups and follow-count annotations."""
    def __init__(self) -> None:
        super().__init__(User)

    def find(self, user_id) -> Optional[User]:
        """Return a user by id (deleted users included) or None, without raising."""
        try:
            return self.model.objects.filter(id=int(user_id)).first()
        except (TypeError, ValueError):
            return None

    def name_taken(self, username: str) -> bool:
        """Return True if any user (deleted or not) already uses the name."""
        return self.exists(username=username)

    def with_follow_counts(self) -> QuerySet:
        """Active users annotated with edge counts derived from the follow table."""
        return User.active.annotate(
            followers_count=Count("followers", distinct=True),
            following_count=Count("following", distinct=True),
        )

    def mark_deleted(self, user_id: int) -> int:
        """Set the soft-delete flag; return rows changed."""
        return self.update({"id": user_id, "is_deleted": False}, is_deleted=True)
