"""Serializers for organizations.

``OrganizationSerializer`` renders responses and validates update bodies;
``orgCode`` is read-only there so the key in a body is ignored. Creation
takes the key from the caller through ``OrganizationCreateSerializer``.
"""

from rest_framework import serializers
from rest_framework.fields import empty


class RequiredBooleanField(serializers.BooleanField):
    """BooleanField that stays required for query-string and form input."""

    default_empty_html = empty


class OrganizationSerializer(serializers.Serializer):
    orgCode = serializers.CharField(source="org_code", read_only=True)
    orgTranslation = serializers.CharField(source="org_translation", max_length=255)
    orgTranslationShort = serializers.CharField(source="org_translation_short", max_length=255)
    inactive = RequiredBooleanField()


class OrganizationCreateSerializer(OrganizationSerializer):
    orgCode = serializers.CharField(source="org_code", max_length=50, trim_whitespace=False)


__all__ = ["OrganizationCreateSerializer", "OrganizationSerializer", "RequiredBooleanField"]
