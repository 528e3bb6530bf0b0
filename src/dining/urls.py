"""Routing for menu item endpoints."""

from django.urls import include, path

from core.routers import QueryKeyRouter
from core.stores import ModelStore
from .models import UCSBDiningCommonsMenuItem
from .records import MenuItem
from .views import MenuItemViewSet

router = QueryKeyRouter()
router.register(
    "UCSBDiningCommonsMenuItem",
    MenuItemViewSet,
    basename="menu-item",
    store=ModelStore(UCSBDiningCommonsMenuItem, MenuItem),
)

urlpatterns = [
    path("", include(router.urls)),
]
