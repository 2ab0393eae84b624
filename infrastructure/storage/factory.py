"""
Storage Factory
===============

Factory pattern for creating storage instances.
Backend comes from settings.INFRASTRUCTURE["STORAGE_BACKEND"] ('local' or 'mock').
"""

import logging
from typing import Literal

from django.conf import settings

from .interface import StorageInterface
from .local_adapter import LocalStorageAdapter
from .mock_adapter import MockStorageAdapter

logger = logging.getLogger(__name__)

StorageBackend = Literal["local", "mock"]


class StorageFactory:
    """
    Usage:
        storage = StorageFactory.create()
    """

    @staticmethod
    def create(backend: StorageBackend | None = None) -> StorageInterface:
        """
        Raises:
            ValueError: If backend type is invalid
        """
        infrastructure = getattr(settings, "INFRASTRUCTURE", {})
        backend_type = backend or infrastructure.get("STORAGE_BACKEND", "local")

        logger.info(f"Creating storage backend: {backend_type}")

        if backend_type == "local":
            return LocalStorageAdapter()
        if backend_type == "mock":
            return MockStorageAdapter()
        raise ValueError(f"Invalid storage backend: {backend_type}. Must be 'local' or 'mock'")
