from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.serializers import FeedItemSerializer, ProfileSerializer, UserSerializer, page_payload
from recipes.services import FeedService, FollowService, UserService

__all__ = ["UserDetailApi", "ProfileApi", "FollowApi", "FollowersListApi", "FollowingListApi", "FeedApi"]


class UserDetailApi(APIView):
    """Read an active user's profile, or delete the caller's own account."""

    def get_permissions(self):
        if self.request.method == "DELETE":
            return [permissions.IsAuthenticated()]
        return [permissions.AllowAny()]

    def get(self, request, user_id):
        user = UserService().get_user(user_id)
        return Response(UserSerializer(user).data)

    def delete(self, request, user_id):
        deleted = UserService().delete_account(request.user, user_id)
        return Response({"deleted": deleted})


class ProfileApi(APIView):
    """Update gender/age of the caller."""
    permission_classes = [permissions.IsAuthenticated]

    def patch(self, request):
        serializer = ProfileSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = UserService()
        user = service.update_profile(request.user, **serializer.validated_data)
        return Response(UserSerializer(service.get_user(user.id)).data)


class FollowApi(APIView):
    """Toggle the caller's follow edge to user_id."""
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, user_id):
        result = FollowService(request.user).toggle_follow(user_id)
        return Response(result, status=status.HTTP_200_OK)


class FollowersListApi(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request, user_id):
        return Response(UserService().list_followers(user_id))


class FollowingListApi(APIView):
    permission_classes = [permissions.AllowAny]

    def get(self, request, user_id):
        return Response(UserService().list_following(user_id))


class FeedApi(APIView):
    """Recipes by authors the caller follows, newest first."""
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        params = request.query_params
        result = FeedService().feed(
            request.user,
            page=params.get("page", 1),
            size=params.get("size", 10),
            category=params.get("category"),
        )
        return Response(page_payload(result, FeedItemSerializer))
