from django.test import TestCase

from marketplace.catalog.domain.services import WishlistService
from marketplace.models import Wishlist
from marketplace.tests.factories import ProductFactory, SoldProductFactory, UserFactory
from utils.service_base import ErrorCodes


class WishlistServiceTest(TestCase):
    def setUp(self):
        self.service = WishlistService()
        self.user = UserFactory()
        self.product = ProductFactory()

    def test_add_creates_wishlist(self):
        result = self.service.add_product(self.user, self.product.id)

        self.assertTrue(result.ok)
        self.assertTrue(Wishlist.objects.get(user=self.user).products.filter(pk=self.product.pk).exists())
        self.assertTrue(self.service.contains(self.user, self.product.id))

    def test_add_twice_conflicts(self):
        self.service.add_product(self.user, self.product.id)

        result = self.service.add_product(self.user, self.product.id)

        self.assertEqual(result.error, ErrorCodes.ALREADY_IN_WISHLIST)
        self.assertEqual(Wishlist.objects.get(user=self.user).products.count(), 1)

    def test_cannot_add_own_product(self):
        result = self.service.add_product(self.product.seller, self.product.id)

        self.assertEqual(result.error, ErrorCodes.OWN_PRODUCT)

    def test_missing_product_id(self):
        self.assertEqual(self.service.add_product(self.user, None).error, ErrorCodes.VALIDATION_ERROR)

    def test_unknown_product(self):
        result = self.service.add_product(self.user, "2f1c8a55-1111-4aaa-8bbb-1234567890ab")

        self.assertEqual(result.error, ErrorCodes.PRODUCT_NOT_FOUND)

    def test_remove(self):
        self.service.add_product(self.user, self.product.id)

        result = self.service.remove_product(self.user, self.product.id)

        self.assertTrue(result.ok)
        self.assertFalse(self.service.contains(self.user, self.product.id))

    def test_remove_without_wishlist(self):
        self.assertEqual(self.service.remove_product(self.user, self.product.id).error, ErrorCodes.WISHLIST_NOT_FOUND)

    def test_remove_absent_product(self):
        self.service.add_product(self.user, self.product.id)

        result = self.service.remove_product(self.user, ProductFactory().id)

        self.assertEqual(result.error, ErrorCodes.NOT_IN_WISHLIST)

    def test_sold_products_are_not_returned(self):
        sold = SoldProductFactory()
        self.service.add_product(self.user, self.product.id)
        Wishlist.objects.get(user=self.user).products.add(sold)

        products = self.service.get_products(self.user)

        self.assertEqual([p.id for p in products], [self.product.id])

    def test_empty_without_wishlist(self):
        self.assertEqual(self.service.get_products(self.user), [])
