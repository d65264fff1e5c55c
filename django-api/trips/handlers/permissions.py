"""Access checks against the request's AuthContext.

Denials raise domain errors so they share the API's error mapping.
"""

from rest_framework.permissions import BasePermission

from trips.domain.errors import AuthorizationError, ForbiddenError


class IsSignedIn(BasePermission):
    def has_permission(self, request, view) -> bool:
        if not request.auth_context.is_authenticated:
            raise AuthorizationError("Please sign in to continue.")
        return True


class IsAdministrator(IsSignedIn):
    """Optimistic check on the cached employee snapshot; the API re-checks."""

    def has_permission(self, request, view) -> bool:
        super().has_permission(request, view)
        if not request.auth_context.is_admin:
            raise ForbiddenError()
        return True
