"""Serializers for articles; ``dateAdded`` is an ISO-8601 timestamp rendered without an offset (UTC)."""

from rest_framework import serializers


class ArticleSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    title = serializers.CharField(max_length=255)
    url = serializers.CharField(max_length=2048)
    explanation = serializers.CharField()
    email = serializers.CharField(max_length=254)
    dateAdded = serializers.DateTimeField(source="date_added", format="%Y-%m-%dT%H:%M:%S")


__all__ = ["ArticleSerializer"]
