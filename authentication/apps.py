from django.apps import AppConfig


class AuthenticationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "authentication"

    def ready(self):
        """
        Initialize OpenTelemetry tracing for the whole API process.
        """
        from django.conf import settings

        from infrastructure.observability.tracing import setup_tracing

        setup_tracing(
            service_name=getattr(settings, "OTEL_SERVICE_NAME", "uniwise-marketplace"),
            otlp_endpoint=getattr(settings, "OTEL_EXPORTER_OTLP_ENDPOINT", None),
            enable=getattr(settings, "OTEL_TRACING_ENABLED", True),
        )
