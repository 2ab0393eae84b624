from prometheus_client import Counter, Gauge, Histogram


# Listing Metrics
products_listed_total = Counter("marketplace_products_listed_total", "Products listed", ["accepts_crypto"])
products_removed_total = Counter("marketplace_products_removed_total", "Products deleted", ["by"])
product_price = Histogram(
    "marketplace_product_price",
    "Listing price distribution (INR)",
    buckets=[50, 100, 250, 500, 1000, 2500, 5000, 10000, float("inf")],
)
active_listings = Gauge("marketplace_active_listings", "Unsold products at last listing query")

# Engagement Metrics
wishlist_operations_total = Counter("marketplace_wishlist_operations_total", "Wishlist operations", ["operation"])
reviews_created_total = Counter("marketplace_reviews_created_total", "Reviews created", ["rating"])
