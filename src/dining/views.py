"""Menu item endpoints: list, get, and create.

Update and delete are not exposed for menu items.
"""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view

from core.mixins import CreateRecordMixin, ListRecordsMixin, RetrieveRecordMixin
from core.views import RecordViewSet
from .records import MenuItem
from .serializers import MenuItemSerializer


def _query(name: str, type_=OpenApiTypes.STR) -> OpenApiParameter:
    return OpenApiParameter(name, type_, OpenApiParameter.QUERY, required=True)


@extend_schema_view(
    list=extend_schema(summary="List all ucsb dining commons menu items"),
    retrieve=extend_schema(summary="Get a single menu item", parameters=[_query("id", OpenApiTypes.INT)]),
    create=extend_schema(
        summary="Create a new menu item",
        parameters=[_query("diningCommonsCode"), _query("name"), _query("station")],
        request=None,
    ),
)
class MenuItemViewSet(ListRecordsMixin, RetrieveRecordMixin, CreateRecordMixin, RecordViewSet):
    entity_name = "UCSBDiningCommonsMenuItem"
    record_type = MenuItem
    serializer_class = MenuItemSerializer


__all__ = ["MenuItemViewSet"]
