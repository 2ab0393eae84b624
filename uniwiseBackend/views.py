"""
Root, health and metrics endpoints.

Health checks follow the liveness / readiness split used by container
orchestrators; readiness fails with 503 when the database is unreachable.
"""

import logging

from django.db import DatabaseError, connection
from django.http import HttpResponse, JsonResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

logger = logging.getLogger(__name__)


def root(request):
    return HttpResponse("Uniwise Market Place API is running", content_type="text/plain")


def health_live(request):
    """
    Liveness check: always 200 while the process serves requests.
    """
    return JsonResponse({"status": "ok"}, status=200)


def health_ready(request):
    """
    Readiness check: 200 when the database answers, 503 otherwise.
    """
    checks = {"database": check_database()}

    all_ok = all(checks.values())
    status_code = 200 if all_ok else 503

    return JsonResponse({"status": "ready" if all_ok else "not_ready", "checks": checks}, status=status_code)


def check_database() -> bool:
    try:
        connection.ensure_connection()
        return True
    except DatabaseError as e:
        logger.error(f"Database health check failed: {e}")
        return False


def metrics(request):
    """
    Prometheus metrics endpoint.

    Has no authentication; restrict access at the network level in production.
    """
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
