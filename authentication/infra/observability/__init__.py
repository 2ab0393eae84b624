"""
Observability Infrastructure

Prometheus metrics for authentication flows.
"""

from .metrics import (
    login_duration,
    login_failed,
    login_total,
    registration_failed,
    registration_total,
    verification_applications_total,
)

__all__ = [
    "login_total",
    "login_failed",
    "login_duration",
    "registration_total",
    "registration_failed",
    "verification_applications_total",
]
