"""Organization endpoints with full CRUD, keyed by ``orgCode``."""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import serializers

from core.mixins import (
    CreateRecordMixin,
    DestroyRecordMixin,
    ListRecordsMixin,
    RetrieveRecordMixin,
    UpdateRecordMixin,
)
from core.views import RecordViewSet
from .records import Organization
from .serializers import OrganizationCreateSerializer, OrganizationSerializer

ORG_CODE = OpenApiParameter("orgCode", OpenApiTypes.STR, OpenApiParameter.QUERY, required=True)


@extend_schema_view(
    list=extend_schema(summary="List all ucsb orgs"),
    retrieve=extend_schema(summary="Get a single org", parameters=[ORG_CODE]),
    create=extend_schema(
        summary="Create a new org",
        parameters=[
            ORG_CODE,
            OpenApiParameter("orgTranslation", OpenApiTypes.STR, OpenApiParameter.QUERY, required=True),
            OpenApiParameter("orgTranslationShort", OpenApiTypes.STR, OpenApiParameter.QUERY, required=True),
            OpenApiParameter("inactive", OpenApiTypes.BOOL, OpenApiParameter.QUERY, required=True),
        ],
        request=None,
    ),
    update=extend_schema(summary="Update a single org", parameters=[ORG_CODE]),
    destroy=extend_schema(summary="Delete a UCSBOrganizations", parameters=[ORG_CODE]),
)
class OrganizationViewSet(
    ListRecordsMixin,
    RetrieveRecordMixin,
    CreateRecordMixin,
    UpdateRecordMixin,
    DestroyRecordMixin,
    RecordViewSet,
):
    entity_name = "UCSBOrganizations"
    record_type = Organization
    key_param = "orgCode"
    key_field_class = serializers.CharField
    key_field_kwargs = {"trim_whitespace": False}
    serializer_class = OrganizationSerializer
    create_serializer_class = OrganizationCreateSerializer
    mutable_fields = ("org_translation", "org_translation_short", "inactive")


__all__ = ["OrganizationViewSet"]
