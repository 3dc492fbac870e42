"""
Domain errors raised by the recipe services.

Each class derives from the matching DRF exception so a service error
propagates unchanged through an API view and is rendered with the right
HTTP status code.
"""

from rest_framework import exceptions, status


class NotFound(exceptions.NotFound):
    """Referenced recipe, review or user does not exist."""
    default_detail = "Not found."
    default_code = "not_found"


class Forbidden(exceptions.PermissionDenied):
    """Caller is authenticated but does not own the target."""
    default_detail = "You do not own this resource."
    default_code = "forbidden"


class Unauthorized(exceptions.AuthenticationFailed):
    """Missing/bad credential or a deleted account."""
    default_detail = "Invalid credentials or inactive account."
    default_code = "unauthorized"


class InvalidInput(exceptions.APIException):
    """Out-of-range value, empty required field or malformed paging."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input."
    default_code = "invalid_input"


class InvalidOperation(InvalidInput):
    """Well-formed request that the current state does not allow (e.g. self-follow)."""
    default_detail = "Operation not allowed."
    default_code = "invalid_operation"


class Conflict(exceptions.APIException):
    """Duplicate unique value such as a display name."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflicting value."
    default_code = "conflict"
