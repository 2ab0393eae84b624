from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from rest_framework_simplejwt.tokens import AccessToken

from infrastructure.container import container
from marketplace.tests.factories import UserFactory
from utils.service_base import ErrorCodes


User = get_user_model()


def registration(**overrides):
    data = {
        "name": "Test User",
        "email": "Test.User@pccegoa.edu.in",
        "password": "secret123",
        "department": "Computer Science",
        "year": "Second Year",
        "division": "B",
        "location": "Hostel Block C",
    }
    data.update(overrides)
    return data


class RegisterTest(TestCase):
    def setUp(self):
        self.service = container.auth_service()

    def test_register_issues_tokens(self):
        result = self.service.register(registration())

        self.assertTrue(result.ok)
        user = result.value["user"]
        self.assertEqual(user.email, "test.user@pccegoa.edu.in")
        self.assertEqual(user.role, User.ROLE_USER)
        self.assertEqual(user.blockchain_verification_status, User.VERIFICATION_NOT_APPLIED)
        self.assertTrue(user.check_password("secret123"))
        self.assertEqual(AccessToken(result.value["access"])["user_id"], str(user.id))

    def test_duplicate_email(self):
        self.service.register(registration())

        result = self.service.register(registration(email="test.user@pccegoa.edu.in"))

        self.assertEqual(result.error, ErrorCodes.USER_ALREADY_EXISTS)
        self.assertEqual(User.objects.count(), 1)

    def test_other_domain_refused(self):
        result = self.service.register(registration(email="someone@gmail.com"))

        self.assertEqual(result.error, ErrorCodes.VALIDATION_ERROR)
        self.assertIn("@pccegoa.edu.in", result.error_detail)

    @override_settings(COLLEGE_EMAIL_DOMAIN="example.edu")
    def test_domain_is_configurable(self):
        result = self.service.register(registration(email="a@example.edu"))

        self.assertTrue(result.ok)

    def test_missing_field(self):
        result = self.service.register(registration(location=""))

        self.assertEqual(result.error, ErrorCodes.VALIDATION_ERROR)


class LoginTest(TestCase):
    def setUp(self):
        self.service = container.auth_service()
        self.user = UserFactory(email="login@pccegoa.edu.in")

    def test_valid_credentials(self):
        result = self.service.login("LOGIN@pccegoa.edu.in", "password123")

        self.assertTrue(result.ok)
        self.assertEqual(result.value["user"], self.user)
        self.assertIn("refresh", result.value)

    def test_wrong_password(self):
        result = self.service.login(self.user.email, "nope")

        self.assertEqual(result.error, ErrorCodes.INVALID_CREDENTIALS)

    def test_unknown_email_has_same_error(self):
        result = self.service.login("ghost@pccegoa.edu.in", "password123")

        self.assertEqual(result.error, ErrorCodes.INVALID_CREDENTIALS)
        self.assertEqual(result.error_detail, "Invalid email or password")

    def test_non_string_credentials(self):
        result = self.service.login(123, "password123")

        self.assertEqual(result.error, ErrorCodes.INVALID_CREDENTIALS)

    def test_blacklisted_user_refused(self):
        self.user.is_blacklisted = True
        self.user.save()

        result = self.service.login(self.user.email, "password123")

        self.assertEqual(result.error, ErrorCodes.USER_BLACKLISTED)


class BlockchainApplicationTest(TestCase):
    def setUp(self):
        self.service = container.auth_service()
        self.user = UserFactory()

    def test_apply_moves_to_pending(self):
        result = self.service.apply_blockchain_verification(self.user, "123456789012345")

        self.assertTrue(result.ok)
        self.user.refresh_from_db()
        self.assertEqual(self.user.blockchain_verification_status, User.VERIFICATION_PENDING)
        self.assertEqual(self.user.metamask_id, "123456789012345")
        self.assertFalse(self.user.is_blockchain_verified)

    def test_invalid_wallet_id(self):
        for wallet in ("12345", "12345678901234a", "123456789012345\n", None):
            result = self.service.apply_blockchain_verification(self.user, wallet)
            self.assertEqual(result.error, ErrorCodes.VALIDATION_ERROR, wallet)

    def test_cannot_apply_twice(self):
        self.service.apply_blockchain_verification(self.user, "123456789012345")

        result = self.service.apply_blockchain_verification(self.user, "123456789012345")

        self.assertEqual(result.error, ErrorCodes.VERIFICATION_ALREADY_APPLIED)
        self.assertIn("pending", result.error_detail)

    def test_reapply_after_rejection(self):
        self.user.blockchain_verification_status = User.VERIFICATION_REJECTED
        self.user.save()

        result = self.service.apply_blockchain_verification(self.user, "999999999999999")

        self.assertTrue(result.ok)
        self.assertEqual(result.value.blockchain_verification_status, User.VERIFICATION_PENDING)
