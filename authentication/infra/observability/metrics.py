"""
Prometheus Metrics

Authentication metrics, exposed with the rest of the registry at /api/metrics/.
"""

from prometheus_client import Counter, Histogram

# ===== Login Metrics =====

login_total = Counter("auth_login_total", "Total login attempts", ["status"])
"""
Labels: status (success/failed)

Example:
    login_total.labels(status='success').inc()
"""

login_failed = Counter("auth_login_failed", "Failed login attempts", ["reason"])
"""
Labels: reason (invalid_credentials, blacklisted, missing_fields)
"""

login_duration = Histogram(
    "auth_login_duration_seconds", "Login request duration in seconds", buckets=[0.1, 0.5, 1.0, 2.0, 5.0]
)


# ===== Registration Metrics =====

registration_total = Counter("auth_registration_total", "Total registration attempts", ["status"])

registration_failed = Counter("auth_registration_failed", "Failed registration attempts", ["reason"])
"""
Labels: reason (email_exists, validation_error)
"""


# ===== Blockchain Verification Metrics =====

verification_applications_total = Counter(
    "auth_blockchain_verification_applications_total", "Blockchain verification applications", ["status"]
)
"""
Labels: status (submitted/rejected_input/not_eligible/approved/rejected)
"""
