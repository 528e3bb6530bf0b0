"""Article endpoints: list, get, and create."""

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view

from core.mixins import CreateRecordMixin, ListRecordsMixin, RetrieveRecordMixin
from core.views import RecordViewSet
from .records import Article
from .serializers import ArticleSerializer


def _query(name: str, type_=OpenApiTypes.STR) -> OpenApiParameter:
    return OpenApiParameter(name, type_, OpenApiParameter.QUERY, required=True)


@extend_schema_view(
    list=extend_schema(summary="List all ucsb articles"),
    retrieve=extend_schema(summary="Get a single article", parameters=[_query("id", OpenApiTypes.INT)]),
    create=extend_schema(
        summary="Create a new article",
        parameters=[
            _query("title"),
            _query("url"),
            _query("explanation"),
            _query("email"),
            _query("dateAdded", OpenApiTypes.DATETIME),
        ],
        request=None,
    ),
)
class ArticleViewSet(ListRecordsMixin, RetrieveRecordMixin, CreateRecordMixin, RecordViewSet):
    entity_name = "UCSBArticles"
    record_type = Article
    serializer_class = ArticleSerializer


__all__ = ["ArticleViewSet"]
