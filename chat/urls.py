from django.urls import include, path
from rest_framework.routers import SimpleRouter

from chat.api.views.conversation_views import ChatViewSet

router = SimpleRouter()
router.register(r"", ChatViewSet, basename="chat")

app_name = "chat"

urlpatterns = [
    path("", include(router.urls)),
]
