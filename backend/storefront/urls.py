from django.urls import path, re_path, include
from django.conf import settings
from apps.api.exceptions import not_found_view
from apps.common.views import live_health, ready_health
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)

urlpatterns = [
    path("api/", include("apps.api.urls")),
    path("health/live", live_health, name="health-live"),
    path("health/ready", ready_health, name="health-ready"),
]

# Interactive schema and docs are only served while DEBUG is on.
if settings.DEBUG:
    urlpatterns += [
        path("schema/", SpectacularAPIView.as_view(), name="schema"),
        path(
            "docs/swagger/",
            SpectacularSwaggerView.as_view(url_name="schema"),
            name="swagger-ui",
        ),
        path(
            "docs/redoc/",
            SpectacularRedocView.as_view(url_name="schema"),
            name="redoc",
        ),
    ]

# Matched last so unknown URLs get the JSON envelope even while DEBUG is on.
urlpatterns.append(re_path(r"^", not_found_view, name="not-found"))

handler404 = "apps.api.exceptions.not_found_view"
handler500 = "apps.api.exceptions.server_error_view"
