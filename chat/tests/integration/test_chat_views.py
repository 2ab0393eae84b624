from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.tests.factories import ProductFactory, UserFactory


class ChatViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.buyer = UserFactory()
        self.seller = UserFactory()
        self.product = ProductFactory(seller=self.seller, name="Arduino Kit")
        self.client.force_authenticate(self.buyer)

    def open_chat(self):
        return self.client.post(
            reverse("chat:chat-list"),
            {"user_id": str(self.seller.id), "product_id": str(self.product.id)},
            format="json",
        )

    def test_access_chat_created_then_found(self):
        first = self.open_chat()
        second = self.open_chat()

        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        self.assertEqual(second.status_code, status.HTTP_200_OK)
        self.assertEqual(first.data["id"], second.data["id"])
        self.assertEqual(first.data["product"]["name"], "Arduino Kit")
        self.assertEqual({p["id"] for p in first.data["participants"]}, {str(self.buyer.id), str(self.seller.id)})

    def test_access_chat_missing_user(self):
        response = self.client.post(reverse("chat:chat-list"), {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "user_id param not sent with request")

    def test_message_flow_and_unread_count(self):
        chat_id = self.open_chat().data["id"]

        sent = self.client.post(
            reverse("chat:chat-message"), {"chat_id": chat_id, "content": "Is it available?"}, format="json"
        )
        self.assertEqual(sent.status_code, status.HTTP_201_CREATED)

        self.client.force_authenticate(self.seller)
        chats = self.client.get(reverse("chat:chat-list"))
        self.assertEqual(chats.data[0]["unread_count"], 1)
        self.assertEqual(chats.data[0]["last_message"]["content"], "Is it available?")

        messages = self.client.get(reverse("chat:chat-messages", kwargs={"pk": chat_id}))
        self.assertEqual(messages.status_code, status.HTTP_200_OK)
        self.assertEqual(len(messages.data), 1)

        chats = self.client.get(reverse("chat:chat-list"))
        self.assertEqual(chats.data[0]["unread_count"], 0)

    def test_outsider_cannot_read_or_send(self):
        chat_id = self.open_chat().data["id"]
        self.client.force_authenticate(UserFactory())

        read = self.client.get(reverse("chat:chat-messages", kwargs={"pk": chat_id}))
        send = self.client.post(reverse("chat:chat-message"), {"chat_id": chat_id, "content": "hi"}, format="json")

        self.assertEqual(read.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(send.status_code, status.HTTP_403_FORBIDDEN)
