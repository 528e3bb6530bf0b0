"""Root URL configuration for the Campus Reference API."""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/", include("dining.urls")),
    path("api/", include("organizations.urls")),
    path("api/", include("articles.urls")),
]
