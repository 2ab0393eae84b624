"""
Storage Abstraction Layer
==========================

Provides a unified interface for file storage operations (product images, profile images).
"""

from .factory import StorageFactory
from .interface import StorageException, StorageFile, StorageInterface
from .local_adapter import LocalStorageAdapter
from .mock_adapter import MockStorageAdapter

__all__ = [
    "StorageInterface",
    "StorageFile",
    "StorageException",
    "LocalStorageAdapter",
    "MockStorageAdapter",
    "StorageFactory",
]
