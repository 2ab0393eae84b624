from django.test import TestCase

from infrastructure.container import container
from marketplace.tests.factories import ProductFactory, ReviewFactory, SoldProductFactory, UserFactory, make_image
from utils.service_base import ErrorCodes


class UpdateProfileTest(TestCase):
    def setUp(self):
        self.service = container.profile_service()
        self.storage = container.storage()
        self.user = UserFactory(name="Old Name", location="Block A")

    def test_empty_values_keep_current(self):
        result = self.service.update_profile(self.user, {"name": "New Name", "location": ""})

        self.assertTrue(result.ok)
        self.assertEqual(result.value.name, "New Name")
        self.assertEqual(result.value.location, "Block A")

    def test_password_change(self):
        self.service.update_profile(self.user, {"password": "another1"})

        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("another1"))

    def test_profile_image_upload(self):
        result = self.service.update_profile(self.user, {}, profile_image=make_image("me.png"))

        key = result.value.profile_image
        self.assertTrue(key.startswith(f"profiles/{self.user.id}/"))
        self.assertTrue(key.endswith(".png"))
        self.assertIn(key, self.storage.files)

    def test_upload_failure(self):
        self.storage.fail_uploads = True

        result = self.service.update_profile(self.user, {"name": "x"}, profile_image=make_image())

        self.assertEqual(result.error, ErrorCodes.STORAGE_ERROR)
        self.user.refresh_from_db()
        self.assertEqual(self.user.name, "Old Name")


class HistoryTest(TestCase):
    def setUp(self):
        self.service = container.profile_service()
        self.user = UserFactory()

    def test_purchases_sales_and_listings(self):
        bought = SoldProductFactory(buyer=self.user)
        sold = SoldProductFactory(seller=self.user)
        listed = ProductFactory(seller=self.user)

        self.assertEqual(list(self.service.get_purchases(self.user)), [bought])
        self.assertEqual(list(self.service.get_sales(self.user)), [sold])
        self.assertEqual(list(self.service.get_listings(self.user)), [listed])

    def test_public_profile(self):
        ProductFactory(seller=self.user)
        SoldProductFactory(seller=self.user)
        review = ReviewFactory(product=SoldProductFactory(seller=self.user))

        result = self.service.get_public_profile(self.user.id)

        self.assertEqual(result.value["user"], self.user)
        self.assertEqual(len(result.value["products"]), 1)
        self.assertEqual(result.value["reviews"], [review])

    def test_public_profile_unknown_user(self):
        result = self.service.get_public_profile("not-a-uuid")

        self.assertEqual(result.error, ErrorCodes.USER_NOT_FOUND)
