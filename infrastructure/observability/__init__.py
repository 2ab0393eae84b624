"""Tracing for the marketplace API."""
