"""
Service Container Tests
========================

Unit tests for dependency injection container.
"""

from django.test import TestCase, override_settings

from infrastructure.blockchain import MockBlockchainVerifier, StubBlockchainVerifier
from infrastructure.container import ServiceContainer, container
from infrastructure.payments import MockPaymentProvider, RazorpayProvider
from infrastructure.storage import LocalStorageAdapter, MockStorageAdapter


class ServiceContainerTest(TestCase):
    def setUp(self):
        container.reset()

    def test_container_is_singleton(self):
        self.assertIs(ServiceContainer(), ServiceContainer())
        self.assertIs(ServiceContainer(), container)

    @override_settings(PAYMENT_PROVIDER="razorpay", RAZORPAY_KEY_ID="rzp_test_key", RAZORPAY_KEY_SECRET="secret")
    def test_payment_provider_follows_settings_and_is_cached(self):
        payment = container.payment()

        self.assertIsInstance(payment, RazorpayProvider)
        self.assertIs(container.payment(), payment)

    @override_settings(INFRASTRUCTURE={"STORAGE_BACKEND": "local", "BLOCKCHAIN_VERIFIER": "stub"})
    def test_storage_and_verifier_follow_settings(self):
        self.assertIsInstance(container.storage(), LocalStorageAdapter)
        self.assertIsInstance(container.blockchain_verifier(), StubBlockchainVerifier)

    def test_explicit_backend_replaces_cached_instance(self):
        first = container.storage("local")
        second = container.storage("mock")

        self.assertIsInstance(first, LocalStorageAdapter)
        self.assertIsInstance(second, MockStorageAdapter)
        self.assertIs(container.storage(), second)

    def test_configure_for_testing_installs_mocks(self):
        container.configure_for_testing()

        self.assertIsInstance(container.storage(), MockStorageAdapter)
        self.assertIsInstance(container.payment(), MockPaymentProvider)
        self.assertIsInstance(container.blockchain_verifier(), MockBlockchainVerifier)

    def test_domain_services_share_infrastructure(self):
        container.configure_for_testing()

        self.assertIs(container.catalog_service().storage, container.storage())
        self.assertIs(container.payment_service().provider, container.payment())
        self.assertIs(container.payment_service().sale_service, container.sale_service())
        self.assertIs(container.sale_service().verifier, container.blockchain_verifier())

    def test_reset_drops_services(self):
        service = container.review_service()
        container.reset()

        self.assertIsNot(container.review_service(), service)

    def test_unknown_backend_raises(self):
        with self.assertRaises(ValueError):
            container.payment("stripe")
