"""Storage table behind the article store."""

from django.db import models


class UCSBArticles(models.Model):
    """Article link with a short explanation and the submitter's email."""

    title = models.CharField(max_length=255)
    url = models.CharField(max_length=2048)
    explanation = models.TextField()
    email = models.CharField(max_length=254)
    date_added = models.DateTimeField()

    class Meta:
        db_table = "ucsbarticles"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title


__all__ = ["UCSBArticles"]
