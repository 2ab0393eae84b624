from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient


class ServiceEndpointsTest(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_root_banner(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content.decode(), "Uniwise Market Place API is running")

    def test_health(self):
        self.assertEqual(self.client.get(reverse("health_live")).json(), {"status": "ok"})
        self.assertEqual(self.client.get(reverse("health_ready")).status_code, 200)

    def test_metrics_exposition(self):
        response = self.client.get(reverse("metrics"))

        self.assertEqual(response.status_code, 200)
        self.assertIn(b"python_info", response.content)
