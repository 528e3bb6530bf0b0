"""Capability gate evaluated before any entity handler runs."""

from django.conf import settings
from rest_framework import permissions

from core.exceptions import ACCESS_DENIED_MESSAGE

from .models import Role

# ADMIN implies the read access granted to USER.
CAPABILITY_ROLES = {
    "user": frozenset({Role.USER, Role.ADMIN}),
    "admin": frozenset({Role.ADMIN}),
}


class CapabilityPermission(permissions.BasePermission):
    """Allow the request if the caller holds a role granting the view's capability.

    The view names the capability for its current action through
    ``required_capability()``. Actions without a declared capability are
    refused. If ``settings.ALLOW_SUPERUSER_BYPASS`` is True, authenticated
    superusers pass every check.
    """

    message = ACCESS_DENIED_MESSAGE

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        if not user or not getattr(user, "is_authenticated", False):
            return False

        if self._has_superuser_bypass(user):
            return True

        # Unrouted method: let DRF answer 405 instead of hiding it behind 403.
        if getattr(view, "action", None) is None:
            return True

        capability = view.required_capability()
        allowed_roles = CAPABILITY_ROLES.get(capability)
        if not allowed_roles:
            return False

        return not allowed_roles.isdisjoint(self._role_names(user))

    @staticmethod
    def _role_names(user) -> set[str]:
        return set(getattr(user, "role_names", ()))

    @staticmethod
    def _has_superuser_bypass(user) -> bool:
        return getattr(settings, "ALLOW_SUPERUSER_BYPASS", False) and getattr(user, "is_superuser", False)


__all__ = ["CAPABILITY_ROLES", "CapabilityPermission"]
