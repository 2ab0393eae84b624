from django.test import RequestFactory, TestCase

from authentication.permissions import AdminRequired, BlockchainVerifiedRequired, IsNotBlacklisted
from marketplace.tests.factories import AdminFactory, UserFactory, VerifiedUserFactory


class PermissionRecheckTest(TestCase):
    """Permissions re-read the user row, so a stale request user cannot keep access."""

    def setUp(self):
        self.factory = RequestFactory()

    def request(self, user, method="post"):
        request = getattr(self.factory, method)("/")
        request.user = user
        return request

    def test_admin_required(self):
        admin = AdminFactory()

        self.assertTrue(AdminRequired().has_permission(self.request(admin), None))
        self.assertFalse(AdminRequired().has_permission(self.request(UserFactory()), None))

    def test_demoted_admin_refused(self):
        admin = AdminFactory()
        type(admin).objects.filter(pk=admin.pk).update(role="user", is_superuser=False)

        self.assertEqual(admin.role, "admin")
        self.assertFalse(AdminRequired().has_permission(self.request(admin), None))

    def test_blacklisted_user_keeps_read_access(self):
        user = UserFactory()
        type(user).objects.filter(pk=user.pk).update(is_blacklisted=True)

        self.assertFalse(IsNotBlacklisted().has_permission(self.request(user), None))
        self.assertTrue(IsNotBlacklisted().has_permission(self.request(user, "get"), None))

    def test_blockchain_verified_required(self):
        self.assertTrue(BlockchainVerifiedRequired().has_permission(self.request(VerifiedUserFactory()), None))
        self.assertFalse(BlockchainVerifiedRequired().has_permission(self.request(UserFactory()), None))
