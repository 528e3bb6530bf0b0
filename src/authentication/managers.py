"""Custom user manager creating email-identified users with roles."""

import uuid
from typing import Iterable

from django.contrib.auth.base_user import BaseUserManager


class UserManager(BaseUserManager):
    """Manager to create users and attach their roles by name."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, roles: Iterable[str], **extra_fields):
        if not email:
            raise ValueError("The Email must be set")
        email = self.normalize_email(email)
        user = self.model(id=uuid.uuid4(), email=email, **extra_fields)
        if password is None:
            user.set_unusable_password()
        else:
            user.set_password(password)
        user.save(using=self._db)
        self.grant_roles(user, roles)
        return user

    def create_user(self, email: str, password: str | None = None, roles: Iterable[str] = ("USER",), **extra_fields):
        """Create a regular user, USER role by default."""
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, roles, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields):
        """Create a superuser holding both ADMIN and USER roles."""
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)
        if not extra_fields.get("is_superuser"):
            raise ValueError("Superuser must have is_superuser=True.")
        return self._create_user(email, password, ("ADMIN", "USER"), **extra_fields)

    @staticmethod
    def grant_roles(user, role_names: Iterable[str]) -> None:
        """Attach roles by name, creating any role that does not exist yet."""
        from access_control.models import Role

        for name in role_names:
            role, _ = Role.objects.get_or_create(name=name)
            user.roles.add(role)


__all__ = ["UserManager"]
