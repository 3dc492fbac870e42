from .sequence import IdSequence
from .user import User
from .recipe import Recipe
from .ingredient import Ingredient
from .review import Review
from .like import Like
from .followers import Follower

__all__ = [
    "IdSequence",
    "User",
    "Recipe",
    "Ingredient",
    "Review",
    "Like",
    "Follower",
]
