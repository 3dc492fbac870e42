from .access import AccessGuard
from .aggregates import AggregateEngine
from .analytics import AnalyticsService
from .feed import FeedService
from .follow import FollowService
from .importer import ImportService
from .recipes import RecipeService
from .reviews import ReviewService
from .users import UserService

__all__ = [
    "AccessGuard",
    "AggregateEngine",
    "AnalyticsService",
    "FeedService",
    "FollowService",
    "ImportService",
    "RecipeService",
    "ReviewService",
    "UserService",
]
