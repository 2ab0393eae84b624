"""Helpers for keeping emails, wallet ids, hashes and gateway signatures out of logs."""

from typing import Dict, Iterable

# Request keys that are logged (masked) when a payment call arrives
PAYMENT_LOG_KEYS = (
    "product_id",
    "razorpay_order_id",
    "razorpay_payment_id",
    "razorpay_signature",
    "transaction_hash",
)


def mask_value(value: str) -> str:
    if not isinstance(value, str):
        return value
    if "@" in value:  # email
        name, _, domain = value.partition("@")
        return (name[:2] + "***@" + domain) if name else "***@" + domain
    if value.isdigit() and len(value) == 15:  # wallet id
        return "*" * 11 + value[-4:]
    if len(value) > 12:
        return value[:4] + "..." + value[-4:]
    return "***"


def sanitize_payload(payload: Dict, allowed_keys: Iterable[str] = PAYMENT_LOG_KEYS) -> Dict:
    """Return a filtered copy of payload with only allowed keys and masked values."""
    result = {}
    for key in allowed_keys:
        if key in payload:
            result[key] = mask_value(payload[key])
    return result
