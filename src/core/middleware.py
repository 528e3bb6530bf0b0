"""Middleware to authenticate requests via a bearer JWT."""

import logging
from typing import Optional

from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed

from authentication.models import User
from authentication.services import TokenService

from .exceptions import ACCESS_DENIED_MESSAGE, error_body

logger = logging.getLogger(__name__)


class JWTAuthMiddleware(MiddlewareMixin):
    """Decode the access JWT and attach request.user."""

    def process_request(self, request):  # type: ignore[override]
        """Authenticate request using Bearer access token if present."""
        auth_header = request.META.get("HTTP_AUTHORIZATION", "")
        if not auth_header or not auth_header.startswith("Bearer "):
            request.user = AnonymousUser()
            return None

        token = auth_header.split(" ", 1)[1]

        try:
            payload = TokenService.decode_token(token, expected_type="access")
        except AuthenticationFailed as exc:
            logger.info("Rejected bearer token: %s", exc.detail)
            return _forbidden()

        user = self._get_user(payload.get("sub"))
        if not user or not user.is_active:
            return _forbidden()

        request.user = user
        return None

    @staticmethod
    def _get_user(user_id: Optional[str]) -> Optional[User]:
        if not user_id:
            return None
        try:
            return User.objects.prefetch_related("roles").get(id=user_id)
        except (User.DoesNotExist, DjangoValidationError, ValueError):
            return None


def _forbidden() -> JsonResponse:
    return JsonResponse(
        error_body("AuthenticationFailed", ACCESS_DENIED_MESSAGE),
        status=status.HTTP_403_FORBIDDEN,
    )


__all__ = ["JWTAuthMiddleware"]
