from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.serializers import LoginSerializer, RegisterSerializer
from recipes.services import UserService

__all__ = ["RegisterApi", "LoginApi"]


class RegisterApi(APIView):
    """Create an account; the new user id is returned."""
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user_id = UserService().register(**serializer.validated_data)
        return Response({"user_id": user_id}, status=status.HTTP_201_CREATED)


class LoginApi(APIView):
    """Exchange an id/password pair for a bearer token."""
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        token = UserService().issue_token(data["user_id"], data["password"])
        return Response({"user_id": data["user_id"], "token": token})
