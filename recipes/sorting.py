"""Closed sort-key enumerations and the ORDER BY tables they map to."""

from django.db import models
from django.db.models import F


class RecipeSort(models.TextChoices):
    DEFAULT = "default", "Newest id first"
    RATING_DESC = "rating_desc", "Highest rated"
    DATE_DESC = "date_desc", "Most recently published"
    CALORIES_ASC = "calories_asc", "Fewest calories"


class ReviewSort(models.TextChoices):
    DATE_DESC = "date_desc", "Most recently modified"
    LIKES_DESC = "likes_desc", "Most liked"


RECIPE_ORDERING = {
    RecipeSort.DEFAULT: (F("id").desc(),),
    RecipeSort.RATING_DESC: (F("aggregated_rating").desc(nulls_last=True), F("id").desc()),
    RecipeSort.DATE_DESC: (F("date_published").desc(nulls_last=True), F("id").desc()),
    RecipeSort.CALORIES_ASC: (F("calories").asc(nulls_last=True), F("id").desc()),
}

# `like_count` is annotated by ReviewRepo.
REVIEW_ORDERING = {
    ReviewSort.DATE_DESC: (F("date_modified").desc(), F("id").asc()),
    ReviewSort.LIKES_DESC: (F("like_count").desc(), F("date_modified").desc(), F("id").asc()),
}


def parse_choice(enum_cls, value, default):
    """Map a free-form sort string onto the enum, falling back to `default`."""
    if not value:
        return default
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return default


def recipe_ordering(sort):
    """ORDER BY expressions for a recipe sort key; unknown keys use the default."""
    return RECIPE_ORDERING[parse_choice(RecipeSort, sort, RecipeSort.DEFAULT)]


def review_ordering(sort):
    """ORDER BY expressions for a review sort key; unknown keys use date_desc."""
    return REVIEW_ORDERING[parse_choice(ReviewSort, sort, ReviewSort.DATE_DESC)]
