from rest_framework import serializers

from recipes.models import Recipe, Review, User


class RecipeSerializer(serializers.ModelSerializer):
    """Recipe projection with author name and ingredient set."""
    author_name = serializers.CharField(source="author.display_name", read_only=True)
    ingredients = serializers.ListField(source="ingredient_names", child=serializers.CharField(), read_only=True)
    aggregated_rating = serializers.DecimalField(max_digits=3, decimal_places=2, read_only=True, allow_null=True)

    class Meta:
        model = Recipe
        fields = [
            "id",
            "name",
            "author",
            "author_name",
            "cook_time",
            "prep_time",
            "total_time",
            "date_published",
            "description",
            "category",
            "aggregated_rating",
            "review_count",
            "calories",
            "fat_content",
            "saturated_fat_content",
            "cholesterol_content",
            "sodium_content",
            "carbohydrate_content",
            "fiber_content",
            "sugar_content",
            "protein_content",
            "servings",
            "recipe_yield",
            "ingredients",
        ]
        read_only_fields = fields


class RecipeCreateSerializer(serializers.Serializer):
    """Request body for creating a recipe."""
    name = serializers.CharField(max_length=500)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    category = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)
    cook_time = serializers.CharField(required=False, allow_null=True, max_length=50)
    prep_time = serializers.CharField(required=False, allow_null=True, max_length=50)
    calories = serializers.FloatField(required=False, allow_null=True)
    fat_content = serializers.FloatField(required=False, allow_null=True)
    saturated_fat_content = serializers.FloatField(required=False, allow_null=True)
    cholesterol_content = serializers.FloatField(required=False, allow_null=True)
    sodium_content = serializers.FloatField(required=False, allow_null=True)
    carbohydrate_content = serializers.FloatField(required=False, allow_null=True)
    fiber_content = serializers.FloatField(required=False, allow_null=True)
    sugar_content = serializers.FloatField(required=False, allow_null=True)
    protein_content = serializers.FloatField(required=False, allow_null=True)
    servings = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    recipe_yield = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    ingredients = serializers.ListField(child=serializers.CharField(allow_blank=True), required=False)


class FeedItemSerializer(serializers.ModelSerializer):
    """Compact recipe row used by the follow feed."""
    author_name = serializers.CharField(source="author.display_name", read_only=True)
    aggregated_rating = serializers.DecimalField(max_digits=3, decimal_places=2, read_only=True, allow_null=True)

    class Meta:
        model = Recipe
        fields = ["id", "name", "author", "author_name", "date_published", "aggregated_rating", "review_count"]
        read_only_fields = fields


class ReviewSerializer(serializers.ModelSerializer):
    """Review projection carrying its full like-id set and like count."""
    author_name = serializers.CharField(source="author.display_name", read_only=True)
    likes = serializers.ListField(source="like_ids", child=serializers.IntegerField(), read_only=True)
    like_count = serializers.SerializerMethodField()

    class Meta:
        model = Review
        fields = [
            "id",
            "recipe",
            "author",
            "author_name",
            "rating",
            "text",
            "date_submitted",
            "date_modified",
            "likes",
            "like_count",
        ]
        read_only_fields = fields

    def get_like_count(self, obj):
        """Annotated count when present, else the size of the like set."""
        count = getattr(obj, "like_count", None)
        return count if count is not None else len(obj.like_ids)


class ReviewWriteSerializer(serializers.Serializer):
    """Request body for adding or editing a review; range checks live in ReviewService."""
    rating = serializers.IntegerField()
    text = serializers.CharField(required=False, allow_blank=True, default="")


class UserSerializer(serializers.ModelSerializer):
    """Public user projection with derived follow counts and id lists."""
    name = serializers.CharField(source="display_name", read_only=True)
    followers = serializers.IntegerField(source="followers_count", read_only=True)
    following = serializers.IntegerField(source="following_count", read_only=True)
    follower_users = serializers.ListField(source="follower_ids", child=serializers.IntegerField(), read_only=True)
    following_users = serializers.ListField(source="following_ids", child=serializers.IntegerField(), read_only=True)

    class Meta:
        model = User
        fields = ["id", "name", "gender", "age", "followers", "following", "follower_users", "following_users"]
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    gender = serializers.CharField()
    password = serializers.CharField(write_only=True)
    age = serializers.IntegerField(required=False, allow_null=True)
    birthday = serializers.CharField(required=False, allow_null=True)


class LoginSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    password = serializers.CharField(write_only=True)


class ProfileSerializer(serializers.Serializer):
    gender = serializers.CharField(required=False, allow_null=True)
    age = serializers.IntegerField(required=False, allow_null=True)


class RecipeTimesSerializer(serializers.Serializer):
    cook_time = serializers.CharField(required=False, allow_null=True)
    prep_time = serializers.CharField(required=False, allow_null=True)


def page_payload(result, serializer_class):
    """Serialize a PageResult into the {items, page, size, total, pages} envelope."""
    return {
        "items": serializer_class(result.items, many=True).data,
        "page": result.page,
        "size": result.size,
        "total": result.total,
        "pages": result.pages,
    }
