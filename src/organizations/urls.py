"""Routing for organization endpoints."""

from django.urls import include, path

from core.routers import QueryKeyRouter
from core.stores import ModelStore
from .models import UCSBOrganizations
from .records import Organization
from .views import OrganizationViewSet

router = QueryKeyRouter()
router.register(
    "ucsborganizations",
    OrganizationViewSet,
    basename="organization",
    store=ModelStore(UCSBOrganizations, Organization),
)

urlpatterns = [
    path("", include(router.urls)),
]
