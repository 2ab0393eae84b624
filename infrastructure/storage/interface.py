"""
Storage Interface
=================

Abstract base class defining the contract for file storage operations.
Models only keep the returned key (path); storage mechanics stay here.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO


@dataclass
class StorageFile:
    """
    Represents a stored file with its metadata.

    Attributes:
        key: Path of the file inside the storage backend
        url: URL to access the file
        size: File size in bytes
        content_type: MIME type of the file
    """

    key: str
    url: str
    size: int
    content_type: str


class StorageInterface(ABC):
    """
    Abstract interface for file storage operations.

    Concrete implementations:
        - LocalStorageAdapter: Django default storage (MEDIA_ROOT)
        - MockStorageAdapter: In-memory storage for testing
    """

    @abstractmethod
    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        """
        Upload a file to storage.

        Args:
            file: Binary file object to upload
            path: Destination path/key in storage
            content_type: MIME type of the file

        Returns:
            StorageFile object with metadata (the key may differ from path
            when the backend de-duplicates names)

        Raises:
            StorageException: If upload fails
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a file. Returns False when it did not exist."""
        pass

    @abstractmethod
    def get_url(self, key: str) -> str:
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        pass


class StorageException(Exception):
    """Base exception for storage operations."""

    pass
