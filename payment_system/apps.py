import logging

from django.apps import AppConfig


logger = logging.getLogger(__name__)


class PaymentSystemConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "payment_system"
    verbose_name = "Payment System"

    def ready(self):
        """Create the gateway, chain verifier and storage clients once per process."""
        from infrastructure.container import container

        container.initialize()
        logger.info("[STARTUP] Payment System ready")
