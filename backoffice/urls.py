from django.urls import path

from backoffice.api.views import admin_views


app_name = "backoffice"

urlpatterns = [
    path("users/", admin_views.UserListAPIView.as_view(), name="users"),
    path("users/<uuid:user_id>/", admin_views.UserDetailAPIView.as_view(), name="user_detail"),
    path("users/<uuid:user_id>/blacklist/", admin_views.BlacklistAPIView.as_view(), name="blacklist"),
    path("users/<uuid:user_id>/unblacklist/", admin_views.UnblacklistAPIView.as_view(), name="unblacklist"),
    path(
        "users/<uuid:user_id>/approve-blockchain/",
        admin_views.ApproveVerificationAPIView.as_view(),
        name="approve_blockchain",
    ),
    path(
        "users/<uuid:user_id>/reject-blockchain/",
        admin_views.RejectVerificationAPIView.as_view(),
        name="reject_blockchain",
    ),
    path(
        "blockchain-verifications/",
        admin_views.PendingVerificationsAPIView.as_view(),
        name="pending_verifications",
    ),
    path("transactions/", admin_views.TransactionListAPIView.as_view(), name="transactions"),
    path("dashboard/", admin_views.DashboardAPIView.as_view(), name="dashboard"),
]
