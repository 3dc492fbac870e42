import logging

from django.db import transaction

from recipes.exceptions import InvalidOperation
from recipes.models import Follower, User
from recipes.services.access import AccessGuard

logger = logging.getLogger(__name__)


class FollowService:
    def __init__(self, actor, *, guard=None):
        self.actor = actor
        self.guard = guard or AccessGuard()

    def _target(self, followee_id):
        target = User.active.filter(id=followee_id).first()
        if target is None:
            raise InvalidOperation("followee does not exist or has been deleted")
        return target

    @transaction.atomic
    def toggle_follow(self, followee_id):
        user = self.guard.require_active(self.actor)
        if user.id == followee_id:
            raise InvalidOperation("cannot follow yourself")
        target = self._target(followee_id)

        # serialise toggles by the same follower
        user = User.objects.select_for_update().get(id=user.id)

        deleted, _ = Follower.objects.filter(follower=user, followee=target).delete()
        if deleted:
            logger.debug("User %s unfollowed %s", user.id, target.id)
            return {"status": "unfollowed"}

        Follower.objects.bulk_create([Follower(follower=user, followee=target)], ignore_conflicts=True)
        logger.debug("User %s followed %s", user.id, target.id)
        return {"status": "followed"}

