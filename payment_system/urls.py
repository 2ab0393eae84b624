from django.urls import path

from payment_system.api.views import payment_views


app_name = "payment_system"

urlpatterns = [
    path("razorpay/", payment_views.create_razorpay_order, name="razorpay_order"),
    path("razorpay/verify/", payment_views.verify_razorpay_payment, name="razorpay_verify"),
    path("crypto/", payment_views.process_crypto_payment, name="crypto_payment"),
    path("transactions/", payment_views.user_transactions, name="transactions"),
]
