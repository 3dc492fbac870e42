from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.serializers import ReviewSerializer, ReviewWriteSerializer, page_payload
from recipes.services import ReviewService

from .recipe_views import ReadOnlyOrAuthenticated

__all__ = ["RecipeReviewsApi", "RecipeReviewDetailApi", "ReviewLikeApi", "ReviewUnlikeApi"]


class RecipeReviewsApi(ReadOnlyOrAuthenticated):
    """List a recipe's reviews, or add one as the caller."""

    def get(self, request, recipe_id):
        params = request.query_params
        result = ReviewService().list_by_recipe(
            recipe_id,
            page=params.get("page", 1),
            size=params.get("size", 10),
            sort=params.get("sort"),
        )
        return Response(page_payload(result, ReviewSerializer))

    def post(self, request, recipe_id):
        serializer = ReviewWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        review_id = ReviewService(request.user).add_review(recipe_id, data["rating"], data["text"])
        return Response({"review_id": review_id}, status=status.HTTP_201_CREATED)


class RecipeReviewDetailApi(APIView):
    """Edit or delete the caller's own review."""
    permission_classes = [permissions.IsAuthenticated]

    def put(self, request, recipe_id, review_id):
        serializer = ReviewWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        ReviewService(request.user).edit_review(recipe_id, review_id, data["rating"], data["text"])
        return Response({"review_id": review_id})

    def delete(self, request, recipe_id, review_id):
        ReviewService(request.user).delete_review(recipe_id, review_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ReviewLikeApi(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, review_id):
        count = ReviewService(request.user).like_review(review_id)
        return Response({"review_id": review_id, "like_count": count})


class ReviewUnlikeApi(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, review_id):
        count = ReviewService(request.user).unlike_review(review_id)
        return Response({"review_id": review_id, "like_count": count})
