"""Routing for article endpoints."""

from django.urls import include, path

from core.routers import QueryKeyRouter
from core.stores import ModelStore
from .models import UCSBArticles
from .records import Article
from .views import ArticleViewSet

router = QueryKeyRouter()
router.register("ucsbarticles", ArticleViewSet, basename="article", store=ModelStore(UCSBArticles, Article))

urlpatterns = [
    path("", include(router.urls)),
]
