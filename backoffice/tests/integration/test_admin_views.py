from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import CommandError, call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from chat.models import Chat, Message
from marketplace.models import Product, Review, Wishlist
from marketplace.tests.factories import AdminFactory, SoldProductFactory, UserFactory
from payment_system.models import Transaction


User = get_user_model()


class AdminViewsIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = AdminFactory()
        self.user = UserFactory()
        self.client.force_authenticate(self.admin)

    def test_non_admin_refused(self):
        self.client.force_authenticate(self.user)

        response = self.client.get(reverse("backoffice:users"))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_user_list_and_detail(self):
        response = self.client.get(reverse("backoffice:users"))
        self.assertEqual(len(response.data), 2)

        response = self.client.get(reverse("backoffice:user_detail", kwargs={"user_id": self.user.id}))
        self.assertEqual(response.data["email"], self.user.email)

    def test_blacklist_flow(self):
        url = reverse("backoffice:blacklist", kwargs={"user_id": self.user.id})

        self.assertEqual(self.client.put(url, {}, format="json").status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.put(url, {"reason": "Fake listings"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["is_blacklisted"])

        response = self.client.put(reverse("backoffice:unblacklist", kwargs={"user_id": self.user.id}))
        self.assertFalse(response.data["is_blacklisted"])

    def test_blacklist_admin_refused(self):
        url = reverse("backoffice:blacklist", kwargs={"user_id": AdminFactory().id})

        response = self.client.put(url, {"reason": "x"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_verification_review(self):
        pending = UserFactory(blockchain_verification_status="pending", metamask_id="123456789012345")

        response = self.client.get(reverse("backoffice:pending_verifications"))
        self.assertEqual([row["id"] for row in response.data], [str(pending.id)])

        response = self.client.put(
            reverse("backoffice:reject_blockchain", kwargs={"user_id": pending.id}), {"reason": "Unclear"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Blockchain verification rejected: Unclear")

        response = self.client.put(reverse("backoffice:approve_blockchain", kwargs={"user_id": pending.id}))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_dashboard_and_transactions(self):
        SoldProductFactory()

        response = self.client.get(reverse("backoffice:dashboard"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["stats"]["sold_products"], 1)

        response = self.client.get(reverse("backoffice:transactions"))
        self.assertEqual(len(response.data), 1)


class SeedMarketplaceCommandTest(TestCase):
    def test_requires_admin(self):
        with self.assertRaises(CommandError):
            call_command("seed_marketplace", stdout=StringIO())

    def test_seeds_demo_data(self):
        admin = AdminFactory()
        UserFactory()

        call_command("seed_marketplace", stdout=StringIO())
        # Running twice replaces the data instead of duplicating it
        call_command("seed_marketplace", stdout=StringIO())

        self.assertTrue(User.objects.filter(pk=admin.pk).exists())
        self.assertEqual(User.objects.exclude(pk=admin.pk).count(), 3)
        self.assertEqual(Product.objects.count(), 7)
        self.assertEqual(Product.objects.filter(is_sold=True).count(), 2)
        self.assertEqual(Transaction.objects.count(), 2)
        self.assertEqual(Review.objects.count(), 2)
        self.assertEqual(Chat.objects.count(), 2)
        self.assertEqual(Message.objects.count(), 6)
        self.assertEqual(Wishlist.objects.count(), 2)
        self.assertTrue(Product.objects.get(name="Arduino Kit").accepts_crypto)
        self.assertTrue(User.objects.get(email="michael@pccegoa.edu.in").is_blacklisted)
