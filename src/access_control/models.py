"""RBAC model: the roles a caller can hold."""

from django.db import models


class Role(models.Model):
    """Named role granted to users, e.g. ``USER`` or ``ADMIN``."""

    USER = "USER"
    ADMIN = "ADMIN"

    name = models.CharField(max_length=50, unique=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.name


__all__ = ["Role"]
