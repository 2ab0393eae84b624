from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import CommandError, call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.tests.factories import ProductFactory, ReviewFactory, SoldProductFactory, UserFactory, make_image


User = get_user_model()


class AuthFlowIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()

    def register(self, **overrides):
        data = {
            "name": "Asha Naik",
            "email": "asha@pccegoa.edu.in",
            "password": "secret123",
            "department": "Electronics",
            "year": "Third Year",
            "division": "A",
            "location": "Margao",
        }
        data.update(overrides)
        return self.client.post(reverse("register"), data, format="json")

    def test_register_login_and_me(self):
        response = self.register()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["user"]["email"], "asha@pccegoa.edu.in")
        self.assertFalse(response.data["user"]["is_admin"])
        self.assertNotIn("password", response.data["user"])

        response = self.client.post(
            reverse("login"), {"email": "asha@pccegoa.edu.in", "password": "secret123"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Login successful")

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        response = self.client.get(reverse("me"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Asha Naik")

    def test_register_duplicate(self):
        self.register()

        response = self.register()

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "User already exists")

    def test_register_wrong_domain(self):
        response = self.register(email="asha@gmail.com")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_login_wrong_password(self):
        UserFactory(email="wrong@pccegoa.edu.in")

        response = self.client.post(
            reverse("login"), {"email": "wrong@pccegoa.edu.in", "password": "bad"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_blacklisted(self):
        UserFactory(email="banned@pccegoa.edu.in", is_blacklisted=True)

        response = self.client.post(
            reverse("login"), {"email": "banned@pccegoa.edu.in", "password": "password123"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_login_malformed_fields(self):
        response = self.client.post(reverse("login"), {"email": 123, "password": "x"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("email", response.data)

        response = self.client.post(reverse("login"), {"email": "a@pccegoa.edu.in"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("password", response.data)

    def test_me_requires_token(self):
        response = self.client.get(reverse("me"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_refresh_token(self):
        tokens = self.register().data

        response = self.client.post(reverse("token_refresh"), {"refresh": tokens["refresh"]}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("access", response.data)


class BlockchainVerificationIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.client.force_authenticate(self.user)
        self.url = reverse("blockchain_verification")

    def test_apply(self):
        response = self.client.post(self.url, {"metamask_id": "123456789012345"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["blockchain_verification_status"], "pending")

    def test_bad_wallet(self):
        response = self.client.post(self.url, {"metamask_id": "0x12"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_already_pending(self):
        self.client.post(self.url, {"metamask_id": "123456789012345"}, format="json")

        response = self.client.post(self.url, {"metamask_id": "123456789012345"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)


class ProfileIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = UserFactory()
        self.client.force_authenticate(self.user)

    def test_get_and_update_profile(self):
        response = self.client.put(
            reverse("profile"), {"name": "Renamed", "profile_image": make_image()}, format="multipart"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], "Renamed")
        self.assertTrue(response.data["profile_image"].startswith("profiles/"))

        response = self.client.get(reverse("profile"))
        self.assertEqual(response.data["name"], "Renamed")

    def test_short_password_rejected(self):
        response = self.client.put(reverse("profile"), {"password": "123"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_history_endpoints(self):
        SoldProductFactory(buyer=self.user)
        SoldProductFactory(seller=self.user)
        ProductFactory(seller=self.user)
        ProductFactory(seller=self.user)

        self.assertEqual(len(self.client.get(reverse("purchases")).data), 1)
        self.assertEqual(len(self.client.get(reverse("sales")).data), 1)
        self.assertEqual(len(self.client.get(reverse("listings")).data), 2)

    def test_public_profile_hides_email(self):
        seller = UserFactory()
        ProductFactory(seller=seller)
        ReviewFactory(product=SoldProductFactory(seller=seller))

        response = self.client.get(reverse("public_profile", kwargs={"user_id": seller.id}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertNotIn("email", response.data["user"])
        self.assertEqual(len(response.data["products"]), 1)
        self.assertEqual(len(response.data["reviews"]), 1)


class CreateAdminCommandTest(TestCase):
    def test_creates_admin(self):
        out = StringIO()

        call_command("create_admin", "--password", "adminpass", stdout=out)

        admin = User.objects.get(email="admin@pccegoa.edu.in")
        self.assertTrue(admin.is_admin())
        self.assertTrue(admin.check_password("adminpass"))
        self.assertIn("Admin user created successfully", out.getvalue())

    def test_refuses_existing_email(self):
        call_command("create_admin", stdout=StringIO())

        with self.assertRaises(CommandError):
            call_command("create_admin", stdout=StringIO())

    def test_refuses_other_domain(self):
        with self.assertRaises(CommandError):
            call_command("create_admin", "--email", "root@example.com", stdout=StringIO())
