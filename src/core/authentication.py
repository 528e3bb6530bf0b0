"""DRF authenticator for the caller resolved by ``JWTAuthMiddleware``.

The middleware has already decoded the bearer token, so DRF only needs to
pick the user off the wrapped Django request. No ``authenticate_header`` is
provided, which makes DRF answer unauthenticated requests with 403.
"""

from typing import Any, Optional, Tuple

from rest_framework.authentication import BaseAuthentication


class MiddlewareUserAuthentication(BaseAuthentication):
    """Return ``(user, None)`` for an active user set by the middleware."""

    def authenticate(self, request) -> Optional[Tuple[Any, None]]:
        user = getattr(getattr(request, "_request", None), "user", None)
        if user is None or not getattr(user, "is_authenticated", False):
            return None
        if not getattr(user, "is_active", False):
            return None
        return user, None


__all__ = ["MiddlewareUserAuthentication"]
