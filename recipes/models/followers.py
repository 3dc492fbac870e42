"""Directed follow edges of the social graph."""

from django.conf import settings
from django.db import models
from django.db.models import F, Q


class Follower(models.Model):
    """`follower` subscribes to `followee`. Follower/following counts are always derived from these rows."""
    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following",      # user.following -> edges this user created (outbound)
        db_column="follower_id",
    )
    followee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="followers",      # user.followers -> edges pointing at this user (inbound)
        db_column="followee_id",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """One edge per ordered pair, never a self-edge."""
        db_table = "followers"
        constraints = [
            models.UniqueConstraint(fields=["follower", "followee"], name="uniq_followers_pair"),
            models.CheckConstraint(condition=~Q(follower=F("followee")), name="chk_followers_not_self"),
        ]
        indexes = [
            models.Index(fields=["followee", "follower"], name="followers_followee_idx"),
        ]

    def __str__(self) -> str:
        """Readable representation for admin/debugging."""
        return f"{self.follower_id} -> {self.followee_id}"
