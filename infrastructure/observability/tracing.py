"""
OpenTelemetry Tracing

Configures OpenTelemetry for the marketplace API. Spans are exported over
OTLP/HTTP when an endpoint is configured.
"""

import logging
from functools import wraps
from typing import Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.django import DjangoInstrumentor
from opentelemetry.instrumentation.requests import RequestsInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

logger = logging.getLogger(__name__)

_initialized = False


def setup_tracing(
    service_name: str = "uniwise-marketplace",
    otlp_endpoint: Optional[str] = None,
    enable: bool = True,
) -> None:
    """
    Initialize OpenTelemetry tracing.

    Args:
        service_name: Name of the service for tracing
        otlp_endpoint: OTLP/HTTP traces endpoint (e.g. http://collector:4318/v1/traces)
        enable: Enable/disable tracing
    """
    global _initialized

    if _initialized:
        logger.debug("Tracing already initialized. Skipping.")
        return

    if not enable:
        logger.info("Tracing disabled via configuration")
        return

    resource = Resource(attributes={SERVICE_NAME: service_name})
    tracer_provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(tracer_provider)

    if otlp_endpoint:
        tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
        logger.info(f"OTLP span exporter configured: {otlp_endpoint}")
    else:
        logger.warning("OTEL exporter endpoint not configured. Traces will not be exported.")

    # Incoming HTTP requests and outgoing chain RPC calls
    DjangoInstrumentor().instrument()
    RequestsInstrumentor().instrument()

    _initialized = True
    logger.info(f"OpenTelemetry tracing initialized for service: {service_name}")


def get_tracer(name: str = __name__) -> trace.Tracer:
    return trace.get_tracer(name)


def trace_function(operation_name: Optional[str] = None):
    """
    Decorator to trace a function execution.

    Example:
        @trace_function("sale.complete")
        def complete_sale(...):
            ...
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            span_name = operation_name or f"{func.__module__}.{func.__name__}"
            with get_tracer(func.__module__).start_as_current_span(span_name):
                return func(*args, **kwargs)

        return wrapper

    return decorator
