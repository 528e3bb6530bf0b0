"""Shared helpers for tests (users with roles, token clients, direct view calls)."""

from __future__ import annotations

import json
from typing import Any, Optional
from unittest import mock

from django.contrib.auth import get_user_model
from rest_framework.test import APIClient, APIRequestFactory, force_authenticate

from authentication.services import TokenService
from core.stores import ModelStore

User = get_user_model()


def create_user(email: str, *role_names: str, **extra):
    """Create a user holding the given roles (no usable password)."""

    return User.objects.create_user(email, roles=role_names, **extra)


def auth_client(user) -> APIClient:
    """Return an APIClient sending a fresh bearer token for ``user``."""

    token = TokenService.generate_access_token(user)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


def mock_store() -> mock.Mock:
    """Store double that records every call made by a handler."""

    return mock.Mock(spec=ModelStore)


def call_view(
    viewset,
    actions: dict[str, str],
    store,
    method: str,
    path: str,
    user=None,
    data: Any = None,
    format: Optional[str] = None,
):
    """Build the view with ``store`` injected and run one request through it."""

    factory = APIRequestFactory()
    kwargs = {"format": format} if format else {}
    request = getattr(factory, method)(path, data, **kwargs)
    if user is not None:
        force_authenticate(request, user=user)
    view = viewset.as_view(actions, store=store)
    return view(request)


def response_json(response) -> Any:
    """Rendered JSON body of a DRF response."""

    return json.loads(response.render().content)
