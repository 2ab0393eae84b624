from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.tests.factories import ProductFactory, ReviewFactory, SoldProductFactory, UserFactory


class ReviewViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.buyer = UserFactory()
        self.product = SoldProductFactory(buyer=self.buyer)
        self.create_url = reverse("marketplace:review-list")

    def test_buyer_creates_review(self):
        self.client.force_authenticate(self.buyer)

        response = self.client.post(
            self.create_url, {"product_id": str(self.product.id), "rating": 5, "comment": "Great!"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["rating"], 5)
        self.assertEqual(response.data["product_name"], self.product.name)

    def test_duplicate_review_conflicts(self):
        ReviewFactory(product=self.product)
        self.client.force_authenticate(self.buyer)

        response = self.client.post(
            self.create_url, {"product_id": str(self.product.id), "rating": 3, "comment": "Again"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_non_buyer_forbidden(self):
        self.client.force_authenticate(UserFactory())

        response = self.client.post(
            self.create_url, {"product_id": str(self.product.id), "rating": 3, "comment": "Hmm"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_unsold_product_rejected(self):
        self.client.force_authenticate(self.buyer)

        response = self.client.post(
            self.create_url, {"product_id": str(ProductFactory().id), "rating": 3, "comment": "Hmm"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "You can only review purchased products")

    def test_seller_reviews_are_public(self):
        ReviewFactory(product=self.product, rating=4)

        response = self.client.get(
            reverse("marketplace:review-seller", kwargs={"seller_id": str(self.product.seller_id)})
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["num_reviews"], 1)
        self.assertEqual(response.data["avg_rating"], 4.0)

    def test_product_and_own_reviews(self):
        ReviewFactory(product=self.product)

        product_reviews = self.client.get(
            reverse("marketplace:review-product", kwargs={"product_id": str(self.product.id)})
        )
        self.client.force_authenticate(self.buyer)
        own_reviews = self.client.get(reverse("marketplace:review-user"))

        self.assertEqual(len(product_reviews.data), 1)
        self.assertEqual(len(own_reviews.data), 1)
