"""Serializers for menu items; JSON uses camelCase field names."""

from rest_framework import serializers


class MenuItemSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    diningCommonsCode = serializers.CharField(source="dining_commons_code", max_length=50)
    name = serializers.CharField(max_length=255)
    station = serializers.CharField(max_length=255)


__all__ = ["MenuItemSerializer"]
