from decimal import Decimal
from io import StringIO

from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from infrastructure.container import container
from marketplace.models import Product
from marketplace.tests.factories import (
    ProductFactory,
    SoldProductFactory,
    TransactionFactory,
    UserFactory,
    VerifiedUserFactory,
)
from payment_system.models import Transaction


class RazorpayFlowIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.buyer = UserFactory()
        self.product = ProductFactory(price=Decimal("250.00"))
        self.client.force_authenticate(self.buyer)

    def test_order_then_verify(self):
        response = self.client.post(
            reverse("payment_system:razorpay_order"), {"product_id": str(self.product.id)}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["amount"], 25000)
        self.assertEqual(response.data["notes"]["buyer_id"], str(self.buyer.id))
        order_id = response.data["order_id"]

        response = self.client.post(
            reverse("payment_system:razorpay_verify"),
            {
                "razorpay_order_id": order_id,
                "razorpay_payment_id": "pay_abc",
                "razorpay_signature": container.payment().sign(order_id, "pay_abc"),
                "product_id": str(self.product.id),
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["success"])
        self.assertEqual(response.data["message"], "Payment successful")
        self.assertEqual(response.data["transaction"]["payment_id"], "pay_abc")
        self.assertTrue(Product.objects.get(pk=self.product.pk).is_sold)

    def test_bad_signature(self):
        order_id = container.payment_service().create_razorpay_order(self.buyer, self.product.id).value["order_id"]

        response = self.client.post(
            reverse("payment_system:razorpay_verify"),
            {
                "razorpay_order_id": order_id,
                "razorpay_payment_id": "pay_abc",
                "razorpay_signature": "0" * 64,
                "product_id": str(self.product.id),
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("Invalid signature", response.data["detail"])

    def test_order_for_another_product(self):
        other = ProductFactory(price=Decimal("90.00"))
        order_id = container.payment_service().create_razorpay_order(self.buyer, self.product.id).value["order_id"]

        response = self.client.post(
            reverse("payment_system:razorpay_verify"),
            {
                "razorpay_order_id": order_id,
                "razorpay_payment_id": "pay_swap",
                "razorpay_signature": container.payment().sign(order_id, "pay_swap"),
                "product_id": str(other.id),
            },
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("Order does not belong to this product", response.data["detail"])
        self.assertFalse(Transaction.objects.exists())
        self.assertFalse(Product.objects.get(pk=other.pk).is_sold)
        self.assertFalse(Product.objects.get(pk=self.product.pk).is_sold)

    def test_sold_product_conflict(self):
        sold = SoldProductFactory()

        response = self.client.post(
            reverse("payment_system:razorpay_order"), {"product_id": str(sold.id)}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_gateway_down(self):
        container.payment().fail_next = True

        response = self.client.post(
            reverse("payment_system:razorpay_order"), {"product_id": str(self.product.id)}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    def test_unknown_product(self):
        response = self.client.post(reverse("payment_system:razorpay_order"), {"product_id": "missing"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_blacklisted_buyer(self):
        self.client.force_authenticate(UserFactory(is_blacklisted=True))

        response = self.client.post(
            reverse("payment_system:razorpay_order"), {"product_id": str(self.product.id)}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_anonymous(self):
        self.client.force_authenticate(None)

        response = self.client.post(
            reverse("payment_system:razorpay_order"), {"product_id": str(self.product.id)}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class CryptoPaymentIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("payment_system:crypto_payment")
        self.product = ProductFactory(seller=VerifiedUserFactory())

    def test_verified_buyer_pays(self):
        self.client.force_authenticate(VerifiedUserFactory())

        response = self.client.post(
            self.url, {"product_id": str(self.product.id), "transaction_hash": "0x123"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Crypto payment successful")
        self.assertEqual(response.data["transaction"]["payment_method"], "crypto")

    def test_unverified_buyer_refused(self):
        self.client.force_authenticate(UserFactory())

        response = self.client.post(
            self.url, {"product_id": str(self.product.id), "transaction_hash": "0x123"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_failed_chain_check(self):
        container.blockchain_verifier().result = False
        self.client.force_authenticate(VerifiedUserFactory())

        response = self.client.post(
            self.url, {"product_id": str(self.product.id), "transaction_hash": "0x123"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Product.objects.get(pk=self.product.pk).is_sold)


class TransactionListIntegrationTest(TestCase):
    def test_lists_own_transactions(self):
        client = APIClient()
        product = SoldProductFactory()
        client.force_authenticate(product.seller)

        response = client.get(reverse("payment_system:transactions"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["product"]["id"], str(product.id))
        self.assertEqual(response.data[0]["buyer"]["id"], str(product.buyer_id))


class ReconcileSalesCommandTest(TestCase):
    def test_command_fixes_orphans(self):
        orphan = TransactionFactory()
        out = StringIO()

        call_command("reconcile_sales", stdout=out)

        self.assertIn("Fixed 1 product(s).", out.getvalue())
        self.assertTrue(Product.objects.get(pk=orphan.product_id).is_sold)

    def test_dry_run(self):
        orphan = TransactionFactory()
        out = StringIO()

        call_command("reconcile_sales", "--dry-run", stdout=out)

        self.assertIn("Would fix 1 product(s).", out.getvalue())
        self.assertFalse(Product.objects.get(pk=orphan.product_id).is_sold)
