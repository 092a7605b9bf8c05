"""
urls.py — Root URL configuration for the Noticeboard backend

Purpose
===============================================================================
- Wire Django admin, the announcements API and JWT token endpoints.
- Provide interactive API docs:
    * /api/docs/   → Swagger UI
    * /api/schema/ → OpenAPI JSON (machine-readable)

Notes
- Identity is resolved by DRF authentication (SimpleJWT Bearer or session);
  the announcements views only read the resolved request user.
"""

from django.conf import settings
from django.contrib import admin
from django.shortcuts import redirect
from django.urls import path, include
from rest_framework import permissions
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

# ----------------------------------------------------------------------------- #
# API Docs (Swagger/OpenAPI via drf-yasg)                                       #
# ----------------------------------------------------------------------------- #
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

schema_view = get_schema_view(
    openapi.Info(
        title="Noticeboard API",
        default_version="v1",
        description=(
            "Time-windowed announcements with per-user read state. "
            "Auth uses JWT (Bearer) tokens. Click 'Authorize' and paste: Bearer <ACCESS_TOKEN>. "
            "Key endpoints: "
            "- /api/announcements/recent/ "
            "- /api/announcements/current/ "
            "- /api/announcements/mark_as_read/"
        ),
        contact=openapi.Contact(email="support@noticeboard.example"),
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)

# ----------------------------------------------------------------------------- #
# URL Patterns                                                                  #
# ----------------------------------------------------------------------------- #
urlpatterns = [
    path("", lambda r: redirect(settings.FRONTEND_URL), name="root-redirect"),

    path("admin/", admin.site.urls),

    # Auth (JWT)
    path("api/auth/token/",         TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/auth/token/refresh/", TokenRefreshView.as_view(),    name="token_refresh"),

    # Announcements
    path("api/announcements/", include("announcements.urls", namespace="announcements")),

    # API docs
    path("api/docs/",   schema_view.with_ui("swagger", cache_timeout=0), name="api-docs-swagger"),
    path("api/schema/", schema_view.without_ui(cache_timeout=0),         name="openapi-schema"),
]
