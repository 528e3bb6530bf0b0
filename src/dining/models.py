"""Storage table behind the menu item store."""

from django.db import models


class UCSBDiningCommonsMenuItem(models.Model):
    """Menu item served at one station of a dining commons."""

    dining_commons_code = models.CharField(max_length=50)
    name = models.CharField(max_length=255)
    station = models.CharField(max_length=255)

    class Meta:
        db_table = "ucsbdiningcommonsmenuitem"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.dining_commons_code}: {self.name}"


__all__ = ["UCSBDiningCommonsMenuItem"]
