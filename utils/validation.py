"""Typed result returned by the field validators that run before persistence."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a field validation: ok, or the invalid field with a message."""

    ok: bool
    field: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def invalid(cls, field: str, message: str) -> "ValidationResult":
        return cls(ok=False, field=field, message=message)
