from django.contrib import admin

from .models import Product, Review, Wishlist


class ReviewInline(admin.TabularInline):
    model = Review
    extra = 0
    fields = ("user", "rating", "comment", "created_at")
    readonly_fields = ("user", "rating", "comment", "created_at")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "seller", "category", "condition", "price", "accepts_crypto", "is_sold", "created_at")
    list_filter = ("category", "condition", "is_sold", "accepts_crypto")
    search_fields = ("name", "description", "seller__email", "seller__name")
    readonly_fields = ("id", "accepts_crypto", "is_sold", "buyer", "transaction", "created_at", "updated_at")
    inlines = [ReviewInline]


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("product", "user", "seller", "rating", "created_at")
    list_filter = ("rating",)
    search_fields = ("comment", "user__email", "seller__email")


@admin.register(Wishlist)
class WishlistAdmin(admin.ModelAdmin):
    list_display = ("user", "updated_at")
    filter_horizontal = ("products",)
