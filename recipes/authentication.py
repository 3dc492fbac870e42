from rest_framework import authentication
from rest_framework import exceptions


class BearerTokenAuthentication(authentication.TokenAuthentication):
    """DRF token authentication using `Authorization: Bearer <key>`; deleted accounts are rejected."""

    keyword = "Bearer"

    def authenticate_credentials(self, key):
        """Resolve the token to (user, token) or raise AuthenticationFailed."""
        user, token = super().authenticate_credentials(key)
        if getattr(user, "is_deleted", False):
            raise exceptions.AuthenticationFailed("Account has been deleted")
        return (user, token)
