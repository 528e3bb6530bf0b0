"""Router for entity endpoints that take their key from the query string.

Each registered entity gets three URLs under its prefix::

    GET    <prefix>/all     -> list
    POST   <prefix>/post    -> create
    GET    <prefix>?<key>=  -> retrieve
    PUT    <prefix>?<key>=  -> update
    DELETE <prefix>?<key>=  -> destroy

Only methods whose action the viewset implements are routed.
"""

from typing import Any, NamedTuple

from django.urls import path
from rest_framework.routers import BaseRouter


class QueryKeyRoute(NamedTuple):
    url: str
    mapping: dict[str, str]
    name: str


class QueryKeyRouter(BaseRouter):
    """Register ``(prefix, viewset, basename, store)`` and build the URLs."""

    routes = [
        QueryKeyRoute(url="{prefix}/all", mapping={"get": "list"}, name="{basename}-all"),
        QueryKeyRoute(url="{prefix}/post", mapping={"post": "create"}, name="{basename}-post"),
        QueryKeyRoute(
            url="{prefix}",
            mapping={"get": "retrieve", "put": "update", "delete": "destroy"},
            name="{basename}-item",
        ),
    ]

    def __init__(self) -> None:
        super().__init__()
        self._stores: dict[str, Any] = {}

    def register(self, prefix, viewset, basename=None, store=None):  # type: ignore[override]
        if basename is None:
            basename = prefix.lower()
        self._stores[basename] = store
        super().register(prefix, viewset, basename)

    def get_urls(self):
        urls = []
        for prefix, viewset, basename in self.registry:
            for route in self.routes:
                actions = {
                    method: action for method, action in route.mapping.items() if hasattr(viewset, action)
                }
                if not actions:
                    continue
                view = viewset.as_view(actions, basename=basename, store=self._stores[basename])
                urls.append(path(route.url.format(prefix=prefix), view, name=route.name.format(basename=basename)))
        return urls


__all__ = ["QueryKeyRouter"]
