from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.serializers import RecipeCreateSerializer, RecipeSerializer, RecipeTimesSerializer, page_payload
from recipes.services import FeedService, RecipeService

__all__ = ["RecipeListApi", "RecipeDetailApi", "RecipeTimesApi"]


class ReadOnlyOrAuthenticated(APIView):
    """Anyone may read; writes need an authenticated caller."""

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated()]


class RecipeListApi(ReadOnlyOrAuthenticated):
    """Search recipes, or create one owned by the caller."""

    def get(self, request):
        params = request.query_params
        result = FeedService().search_recipes(
            keyword=params.get("keyword"),
            category=params.get("category"),
            min_rating=params.get("min_rating"),
            page=params.get("page", 1),
            size=params.get("size", 10),
            sort=params.get("sort"),
        )
        return Response(page_payload(result, RecipeSerializer))

    def post(self, request):
        serializer = RecipeCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        recipe_id = RecipeService(request.user).create_recipe(serializer.validated_data)
        return Response({"recipe_id": recipe_id}, status=status.HTTP_201_CREATED)


class RecipeDetailApi(ReadOnlyOrAuthenticated):
    """Retrieve a recipe, or delete one the caller owns."""

    def get(self, request, recipe_id):
        recipe = RecipeService().get_recipe(recipe_id)
        return Response(RecipeSerializer(recipe).data)

    def delete(self, request, recipe_id):
        RecipeService(request.user).delete_recipe(recipe_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class RecipeTimesApi(APIView):
    """Update cook/prep durations of an owned recipe."""
    permission_classes = [permissions.IsAuthenticated]

    def patch(self, request, recipe_id):
        serializer = RecipeTimesSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = RecipeService(request.user)
        service.update_times(recipe_id, **serializer.validated_data)
        return Response(RecipeSerializer(service.get_recipe(recipe_id)).data)
