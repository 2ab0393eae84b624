"""
Infrastructure Package
======================

Provides abstraction layers for external dependencies following the Dependency Inversion Principle.

Modules:
    - payments: Payment gateway abstraction (Razorpay, mock)
    - blockchain: Chain RPC client and crypto payment verification (stub, mock)
    - storage: File storage abstraction (Django default storage, in-memory mock)
    - observability: OpenTelemetry tracing setup

This package enables:
    - Easy testing with mock implementations
    - Switching between providers without code changes
"""
