"""
URL configuration for the uniwiseBackend project.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from uniwiseBackend import views

urlpatterns = [
    path("", views.root, name="root"),
    path("django-admin/", admin.site.urls),
    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/schema/swagger-ui/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # Observability
    path("api/health/live/", views.health_live, name="health_live"),
    path("api/health/ready/", views.health_ready, name="health_ready"),
    path("api/metrics/", views.metrics, name="metrics"),
    # API endpoints
    path("api/auth/", include("authentication.api.urls.auth_urls")),
    path("api/users/", include("authentication.api.urls.user_urls")),
    path("api/chat/", include("chat.urls")),
    path("api/payment/", include("payment_system.urls", namespace="payment_system")),
    path("api/admin/", include("backoffice.urls")),
    path("api/", include("marketplace.urls")),
]

# Serve media files during development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
