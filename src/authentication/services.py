"""Token service for issuing and decoding bearer access tokens."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from django.conf import settings
from rest_framework.exceptions import AuthenticationFailed


class TokenService:
    """Sign and verify HS256 access tokens carrying the caller's roles."""

    ALGORITHM = "HS256"
    TOKEN_TYPE = "access"

    @classmethod
    def access_ttl(cls) -> timedelta:
        return timedelta(minutes=getattr(settings, "ACCESS_TOKEN_TTL_MINUTES", 60))

    @classmethod
    def generate_access_token(cls, user, issued_at: datetime | None = None) -> str:
        """Return a signed access token for ``user``."""

        now = issued_at or datetime.now(timezone.utc)
        payload = cls._build_payload(user, now, cls.access_ttl())
        return jwt.encode(payload, settings.SECRET_KEY, algorithm=cls.ALGORITHM)

    @classmethod
    def _build_payload(cls, user, issued_at: datetime, ttl: timedelta) -> dict[str, Any]:
        exp = issued_at + ttl
        return {
            "sub": str(user.id),
            "jti": str(uuid.uuid4()),
            "exp": int(exp.timestamp()),
            "iat": int(issued_at.timestamp()),
            "roles": sorted(getattr(user, "role_names", ())),
            "type": cls.TOKEN_TYPE,
        }

    @classmethod
    def decode_token(cls, token: str, expected_type: str | None = None) -> dict[str, Any]:
        """Decode and validate a JWT; optionally enforce token type."""

        try:
            payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[cls.ALGORITHM])
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationFailed("Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationFailed("Invalid token") from exc

        if expected_type and payload.get("type") != expected_type:
            raise AuthenticationFailed("Invalid token type")

        return payload


__all__ = ["TokenService"]
