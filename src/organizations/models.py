"""Storage table behind the organization store."""

from django.db import models


class UCSBOrganizations(models.Model):
    """Student organization; ``org_code`` is the caller-supplied natural key."""

    org_code = models.CharField(max_length=50, primary_key=True)
    org_translation = models.CharField(max_length=255)
    org_translation_short = models.CharField(max_length=255)
    inactive = models.BooleanField(default=False)

    class Meta:
        db_table = "ucsborganizations"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.org_code


__all__ = ["UCSBOrganizations"]
