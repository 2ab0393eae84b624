from prometheus_client import Counter


# Gateway orders
payment_orders_created_total = Counter("payment_orders_created_total", "Gateway orders created", ["status"])

# Sale completion
sales_completed_total = Counter("sales_completed_total", "Completed sales", ["payment_method"])
sale_completion_failures_total = Counter(
    "sale_completion_failures_total", "Rejected sale completions", ["payment_method", "reason"]
)
payment_volume_total = Counter("payment_volume_total", "Total payment volume processed", ["currency", "payment_method"])

# Crypto rail
blockchain_verification_total = Counter("blockchain_verification_total", "Blockchain verifier results", ["result"])
