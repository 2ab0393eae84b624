"""
Payment Infrastructure Tests
==============================

Unit tests for the payment gateway abstraction.
"""

from unittest.mock import MagicMock

import razorpay
import requests
from django.test import TestCase, override_settings

from infrastructure.payments import GatewayOrder, MockPaymentProvider, PaymentException, PaymentProviderInterface
from infrastructure.payments.razorpay_provider import RazorpayProvider


class PaymentInterfaceTest(TestCase):
    def test_interface_is_abstract(self):
        with self.assertRaises(TypeError):
            PaymentProviderInterface()

    def test_major_amount_converts_from_paise(self):
        order = GatewayOrder(order_id="order_1", amount=45050, currency="INR")
        self.assertEqual(order.major_amount, 450.5)


@override_settings(RAZORPAY_KEY_ID="rzp_test_key", RAZORPAY_KEY_SECRET="rzp_test_secret")
class RazorpayProviderTest(TestCase):
    def setUp(self):
        self.client = MagicMock()
        self.provider = RazorpayProvider(client=self.client)

    def test_create_order_success(self):
        self.client.order.create.return_value = {
            "id": "order_Nabc123",
            "amount": 45000,
            "currency": "INR",
            "receipt": "receipt_order_1",
            "status": "created",
            "notes": {"product_id": "p1"},
        }

        order = self.provider.create_order(45000, "INR", "receipt_order_1", {"product_id": "p1"})

        self.assertEqual(order.order_id, "order_Nabc123")
        self.assertEqual(order.amount, 45000)
        self.assertEqual(order.notes, {"product_id": "p1"})
        sent = self.client.order.create.call_args.kwargs["data"]
        self.assertEqual(sent["amount"], 45000)
        self.assertEqual(sent["currency"], "INR")
        self.assertEqual(sent["receipt"], "receipt_order_1")

    def test_create_order_failure_raises_payment_exception(self):
        self.client.order.create.side_effect = razorpay.errors.BadRequestError("Authentication failed")

        with self.assertRaises(PaymentException):
            self.provider.create_order(100, "INR", "receipt", {})

    def test_fetch_order_network_failure_raises_payment_exception(self):
        self.client.order.fetch.side_effect = requests.ConnectionError("Connection refused")

        with self.assertRaises(PaymentException):
            self.provider.fetch_order("order_1")

    def test_gateway_5xx_raises_payment_exception(self):
        self.client.order.fetch.side_effect = razorpay.errors.ServerError("Gateway unavailable")

        with self.assertRaises(PaymentException):
            self.provider.fetch_order("order_1")

    def test_programming_errors_are_not_masked(self):
        self.client.order.fetch.side_effect = KeyError("id")

        with self.assertRaises(KeyError):
            self.provider.fetch_order("order_1")

    def test_fetch_order_with_empty_notes(self):
        self.client.order.fetch.return_value = {"id": "order_1", "amount": 100, "currency": "INR", "notes": []}

        order = self.provider.fetch_order("order_1")

        self.assertEqual(order.notes, {})

    def test_verify_signature(self):
        self.assertTrue(self.provider.verify_payment_signature("order_1", "pay_1", "sig"))
        self.client.utility.verify_payment_signature.assert_called_once_with(
            {"razorpay_order_id": "order_1", "razorpay_payment_id": "pay_1", "razorpay_signature": "sig"}
        )

    def test_verify_signature_mismatch(self):
        self.client.utility.verify_payment_signature.side_effect = razorpay.errors.SignatureVerificationError(
            "Razorpay Signature Verification Failed"
        )

        self.assertFalse(self.provider.verify_payment_signature("order_1", "pay_1", "bad"))


class MockPaymentProviderTest(TestCase):
    def setUp(self):
        self.provider = MockPaymentProvider(secret="test_secret")

    def test_orders_round_trip(self):
        order = self.provider.create_order(1000, "INR", "receipt", {"product_id": "abc"})

        self.assertTrue(order.order_id.startswith("order_"))
        self.assertEqual(self.provider.fetch_order(order.order_id), order)

    def test_signature_matches_only_own_pair(self):
        signature = self.provider.sign("order_1", "pay_1")

        self.assertTrue(self.provider.verify_payment_signature("order_1", "pay_1", signature))
        self.assertFalse(self.provider.verify_payment_signature("order_1", "pay_2", signature))
        self.assertFalse(self.provider.verify_payment_signature("order_1", "pay_1", None))

    def test_fail_next_applies_once(self):
        self.provider.fail_next = True

        with self.assertRaises(PaymentException):
            self.provider.create_order(100, "INR", "receipt", {})
        self.provider.create_order(100, "INR", "receipt", {})

    def test_fetch_unknown_order(self):
        with self.assertRaises(PaymentException):
            self.provider.fetch_order("order_missing")
