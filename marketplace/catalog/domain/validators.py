"""
Listing validators, run by CatalogService before a product is written.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from django.core.exceptions import ValidationError
from django.core.validators import DecimalValidator

from marketplace.catalog.domain.models import Product
from utils.validation import ValidationResult

VALID_CATEGORIES = {value for value, _ in Product.CATEGORY_CHOICES}
VALID_CONDITIONS = {value for value, _ in Product.CONDITION_CHOICES}

REQUIRED_PRODUCT_FIELDS = ("name", "description", "category", "condition", "price", "location")

PRICE_FIELD = Product._meta.get_field("price")
price_precision = DecimalValidator(PRICE_FIELD.max_digits, PRICE_FIELD.decimal_places)


def validate_price(price: Any) -> ValidationResult:
    try:
        value = Decimal(str(price))
    except (InvalidOperation, ValueError):
        return ValidationResult.invalid("price", "Price must be a number")
    if not value.is_finite() or value < 0:
        return ValidationResult.invalid("price", "Price cannot be negative")
    try:
        price_precision(value.normalize())
    except ValidationError:
        whole_digits = PRICE_FIELD.max_digits - PRICE_FIELD.decimal_places
        return ValidationResult.invalid(
            "price",
            f"Price can have at most {whole_digits} digits before and {PRICE_FIELD.decimal_places} after the decimal point",
        )
    return ValidationResult.valid()


def validate_category(category: Any) -> ValidationResult:
    if category not in VALID_CATEGORIES:
        return ValidationResult.invalid(
            "category", f"Invalid category. Choose one of: {', '.join(sorted(VALID_CATEGORIES))}"
        )
    return ValidationResult.valid()


def validate_condition(condition: Any) -> ValidationResult:
    if condition not in VALID_CONDITIONS:
        return ValidationResult.invalid(
            "condition", f"Invalid condition. Choose one of: {', '.join(sorted(VALID_CONDITIONS))}"
        )
    return ValidationResult.valid()


def validate_product_data(data: Dict[str, Any], partial: bool = False) -> ValidationResult:
    """
    Validate listing fields.

    With ``partial`` only the fields present (and non-empty) are checked,
    matching update semantics where empty values keep the current value.
    """
    if not partial:
        for field in REQUIRED_PRODUCT_FIELDS:
            if data.get(field) in (None, ""):
                return ValidationResult.invalid(field, f"Please add a {field}")

    checks = (("price", validate_price), ("category", validate_category), ("condition", validate_condition))
    for field, check in checks:
        if data.get(field) in (None, ""):
            continue
        result = check(data[field])
        if not result.ok:
            return result
    return ValidationResult.valid()
