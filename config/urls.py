"""
Root URL configuration for the article CMS.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.stripe_demo.admin_views import admin_stripe_config_view

urlpatterns = [
    # Plugin admin page; must precede the admin catch-all
    path(
        "admin/stripe-demo/config/",
        admin_stripe_config_view,
        name="stripe-demo-admin-config",
    ),
    path("admin/", admin.site.urls),

    # OpenAPI schema & Swagger UI
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),

    # Plugin admin API
    path("stripe-demo/", include("apps.stripe_demo.admin_urls")),

    # Content API
    path("api/v1/", include("apps.articles.urls")),
    path("api/v1/stripe-demo/", include("apps.stripe_demo.urls")),
]
