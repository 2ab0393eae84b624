"""
Field validators for user data.

Each ``validate_*`` function returns a ValidationResult and is called by the
services before anything is persisted. The ``*_validator`` wrappers adapt
them to Django model field validators.
"""

import re
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.exceptions import ValidationError

from utils.validation import ValidationResult

WALLET_ID_PATTERN = re.compile(r"[0-9]{15}")

REQUIRED_REGISTRATION_FIELDS = ("name", "email", "password", "department", "year", "location")


def college_domain() -> str:
    return getattr(settings, "COLLEGE_EMAIL_DOMAIN", "pccegoa.edu.in")


def validate_college_email(email: Optional[str]) -> ValidationResult:
    if not email:
        return ValidationResult.invalid("email", "Please add an email")
    domain = college_domain()
    if not email.lower().endswith(f"@{domain}"):
        return ValidationResult.invalid("email", f"Email must end with @{domain}")
    return ValidationResult.valid()


def validate_wallet_id(wallet_id: Optional[str]) -> ValidationResult:
    if not wallet_id or not WALLET_ID_PATTERN.fullmatch(str(wallet_id)):
        return ValidationResult.invalid("metamask_id", "Invalid Metamask ID format. Must be 15 digits.")
    return ValidationResult.valid()


def validate_registration(data: Dict[str, Any]) -> ValidationResult:
    """Check required registration fields, then the college email domain."""
    for field in REQUIRED_REGISTRATION_FIELDS:
        if not str(data.get(field) or "").strip():
            return ValidationResult.invalid(field, f"Please add your {field}")
    return validate_college_email(data.get("email"))


def college_email_validator(value: str):
    result = validate_college_email(value)
    if not result.ok:
        raise ValidationError(result.message, code="invalid_domain")


def wallet_id_validator(value: str):
    result = validate_wallet_id(value)
    if not result.ok:
        raise ValidationError(f"{value} is not a valid Metamask ID! Must be 15 digits.", code="invalid_wallet")
