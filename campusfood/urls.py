# campusfood/urls.py
"""
CHANGE LOG
----------
2026-10-12
- ADD: /ping liveness probe (plain text "pong") for the hosting health check.
- KEEP: API paths accept both with and without trailing slash.
"""

from django.contrib import admin
from django.http import HttpResponse
from django.urls import path, include, re_path


def ping_view(request):
    """Liveness probe."""
    return HttpResponse("pong", content_type="text/plain")


urlpatterns = [
    path("ping", ping_view, name="ping"),

    # Admin
    path("admin/", admin.site.urls),

    # Auth / Menu / Cart + Orders
    path("api/auth/", include("food_ordering.accounts.urls")),
    re_path(r"^api/menu(?:/|$)", include("food_ordering.menu.urls")),
    path("api/", include("food_ordering.orders.urls")),
]
