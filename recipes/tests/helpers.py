from django.utils import timezone

from recipes.models import Follower, Like, Recipe, Review, User

DEFAULT_PASSWORD = "Password123"


def make_user(**kwargs):
    username = kwargs.pop("username", "johndoe")
    password = kwargs.pop("password", DEFAULT_PASSWORD)

    user = User.objects.create_user(
        username=username,
        password=password,
        gender=kwargs.pop("gender", User.GENDER_MALE),
        age=kwargs.pop("age", 30),
        **kwargs,
    )
    return user


def make_recipe(*, author=None, name="test recipe", ingredients=(), **extra):
    """
    creates and returns a recipe. ingredients are stored as the recipe's set.
    """
    if author is None:
        author = make_user(username=f"author_{User.objects.count() + 1}")

    extra.setdefault("date_published", timezone.now())
    recipe = Recipe.objects.create(author=author, name=name, **extra)
    for ingredient in ingredients:
        recipe.ingredients.create(name=ingredient)
    return recipe


def make_review(*, recipe, author, rating=5, text="tasty", **extra):
    """Create a review through the ORM; the aggregate signal keeps the recipe in step."""
    return Review.objects.create(recipe=recipe, author=author, rating=rating, text=text, **extra)


def follow(follower, followee):
    return Follower.objects.create(follower=follower, followee=followee)


def like(review, user):
    return Like.objects.create(review=review, user=user)
