from django.contrib import admin

from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ("id", "product", "buyer", "seller", "amount", "payment_method", "status", "created_at")
    list_filter = ("payment_method", "status", "created_at")
    search_fields = ("payment_id", "crypto_transaction_hash", "buyer__email", "seller__email", "product__name")
    readonly_fields = (
        "id",
        "buyer",
        "seller",
        "product",
        "amount",
        "payment_method",
        "payment_id",
        "crypto_transaction_hash",
        "created_at",
        "updated_at",
    )
