"""External record shapes accepted by the bulk importer."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import List, Optional


def _from_mapping(cls, data):
    """Build a dataclass from a mapping, ignoring unknown keys."""
    names = {f.name for f in fields(cls)}
    return cls(**{key: value for key, value in data.items() if key in names})


@dataclass
class UserRecord:
    author_id: int
    author_name: str
    gender: str
    age: int
    password: str
    is_deleted: bool = False
    following_users: List[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        return _from_mapping(cls, data)


@dataclass
class RecipeRecord:
    recipe_id: int
    author_id: int
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    cook_time: Optional[str] = None
    prep_time: Optional[str] = None
    total_time: Optional[str] = None
    date_published: Optional[datetime | str] = None
    calories: Optional[float] = None
    fat_content: Optional[float] = None
    saturated_fat_content: Optional[float] = None
    cholesterol_content: Optional[float] = None
    sodium_content: Optional[float] = None
    carbohydrate_content: Optional[float] = None
    fiber_content: Optional[float] = None
    sugar_content: Optional[float] = None
    protein_content: Optional[float] = None
    servings: Optional[int] = None
    recipe_yield: Optional[str] = None
    ingredients: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        return _from_mapping(cls, data)


@dataclass
class ReviewRecord:
    review_id: int
    recipe_id: int
    author_id: int
    rating: int
    review: str = ""
    date_submitted: Optional[datetime | str] = None
    date_modified: Optional[datetime | str] = None
    likes: List[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        return _from_mapping(cls, data)
