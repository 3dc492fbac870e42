from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.services import AnalyticsService

__all__ = ["ClosestCaloriePairApi", "ComplexRecipesApi", "FollowRatioApi"]


class ClosestCaloriePairApi(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response(AnalyticsService().closest_calorie_pair())


class ComplexRecipesApi(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response(AnalyticsService().most_complex_recipes())


class FollowRatioApi(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response(AnalyticsService().highest_follow_ratio())
