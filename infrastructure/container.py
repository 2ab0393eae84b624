"""
Dependency Injection Container
================================

Simple service locator for infrastructure dependencies and domain services.
Gateway, chain and storage clients are process-wide singletons: created by
``initialize()`` at app start (or lazily on first use) and released by
``shutdown()``.

Usage:
    from infrastructure.container import container

    payment = container.payment()
    verifier = container.blockchain_verifier()
    storage = container.storage()
"""

import logging
from typing import Optional

from .blockchain import BlockchainFactory, BlockchainVerifierInterface
from .payments import PaymentFactory, PaymentProviderInterface
from .storage import StorageFactory, StorageInterface

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Service container for infrastructure dependencies.

    Implements lazy initialization and caching of service instances.
    Singleton pattern.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._clear()
            self._initialized = True
            logger.info("Service container created")

    def _clear(self):
        self._storage: Optional[StorageInterface] = None
        self._payment: Optional[PaymentProviderInterface] = None
        self._blockchain_verifier: Optional[BlockchainVerifierInterface] = None

        # Domain services
        self._auth_service = None
        self._profile_service = None
        self._catalog_service = None
        self._review_service = None
        self._wishlist_service = None
        self._chat_service = None
        self._sale_service = None
        self._payment_service = None
        self._admin_service = None

    def initialize(self):
        """Create the infrastructure clients up front (called from AppConfig.ready)."""
        self.storage()
        self.payment()
        self.blockchain_verifier()
        logger.info("Service container initialized")

    def shutdown(self):
        """Release clients that hold network resources."""
        verifier = self._blockchain_verifier
        rpc_client = getattr(verifier, "rpc_client", None)
        if rpc_client is not None:
            rpc_client.session.close()
        self._clear()
        logger.info("Service container shut down")

    def storage(self, backend: Optional[str] = None) -> StorageInterface:
        """
        Get storage service instance.

        Args:
            backend: 'local' or 'mock'. If None, uses settings.INFRASTRUCTURE
        """
        if self._storage is None or backend is not None:
            self._storage = StorageFactory.create(backend)
            logger.debug(f"Created storage service: {type(self._storage).__name__}")
        return self._storage

    def payment(self, backend: Optional[str] = None) -> PaymentProviderInterface:
        """
        Get payment provider instance.

        Args:
            backend: 'razorpay' or 'mock'. If None, uses settings.PAYMENT_PROVIDER
        """
        if self._payment is None or backend is not None:
            self._payment = PaymentFactory.create(backend)
            logger.debug(f"Created payment service: {type(self._payment).__name__}")
        return self._payment

    def blockchain_verifier(self, backend: Optional[str] = None) -> BlockchainVerifierInterface:
        """
        Get blockchain verifier instance.

        Args:
            backend: 'stub' or 'mock'. If None, uses settings.INFRASTRUCTURE
        """
        if self._blockchain_verifier is None or backend is not None:
            self._blockchain_verifier = BlockchainFactory.create(backend)
            logger.debug(f"Created blockchain verifier: {type(self._blockchain_verifier).__name__}")
        return self._blockchain_verifier

    def auth_service(self):
        if self._auth_service is None:
            from authentication.domain.services.auth_service import AuthService

            self._auth_service = AuthService()
        return self._auth_service

    def profile_service(self):
        if self._profile_service is None:
            from authentication.domain.services.profile_service import ProfileService

            self._profile_service = ProfileService(storage=self.storage())
        return self._profile_service

    def catalog_service(self):
        """Get CatalogService instance."""
        if self._catalog_service is None:
            from marketplace.catalog.domain.services.catalog_service import CatalogService

            self._catalog_service = CatalogService(storage=self.storage())
            logger.debug("Created CatalogService")
        return self._catalog_service

    def review_service(self):
        """Get ReviewService instance."""
        if self._review_service is None:
            from marketplace.catalog.domain.services.review_service import ReviewService

            self._review_service = ReviewService()
            logger.debug("Created ReviewService")
        return self._review_service

    def wishlist_service(self):
        if self._wishlist_service is None:
            from marketplace.catalog.domain.services.wishlist_service import WishlistService

            self._wishlist_service = WishlistService()
        return self._wishlist_service

    def chat_service(self):
        if self._chat_service is None:
            from chat.domain.services.chat_service import ChatService

            self._chat_service = ChatService()
        return self._chat_service

    def sale_service(self):
        """Get SaleService instance (listing/transaction state machine)."""
        if self._sale_service is None:
            from payment_system.domain.services.sale_service import SaleService

            self._sale_service = SaleService(verifier=self.blockchain_verifier())
            logger.debug("Created SaleService")
        return self._sale_service

    def payment_service(self):
        """Get PaymentService instance."""
        if self._payment_service is None:
            from payment_system.domain.services.payment_service import PaymentService

            self._payment_service = PaymentService(provider=self.payment(), sale_service=self.sale_service())
            logger.debug("Created PaymentService")
        return self._payment_service

    def admin_service(self):
        if self._admin_service is None:
            from backoffice.domain.services.admin_service import AdminService

            self._admin_service = AdminService()
        return self._admin_service

    def reset(self):
        """
        Reset all cached service instances.

        Useful for testing or when switching between environments.
        """
        self._clear()
        logger.info("Service container reset")

    def configure_for_testing(self):
        """
        Configure container with mock infrastructure for testing.

        Sets up in-memory storage, the mock gateway and a passing mock verifier.
        """
        self.reset()
        self._storage = StorageFactory.create("mock")
        self._payment = PaymentFactory.create("mock")
        self._blockchain_verifier = BlockchainFactory.create("mock")
        logger.info("Service container configured for testing")


# Global singleton instance
container = ServiceContainer()
