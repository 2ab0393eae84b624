"""
Local Storage Adapter
=====================

Stores uploads through Django's default storage (MEDIA_ROOT on disk by default).
"""

import logging
from typing import BinaryIO

from django.core.files.base import File
from django.core.files.storage import default_storage

from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class LocalStorageAdapter(StorageInterface):
    def __init__(self, storage=None):
        self.storage = storage or default_storage

    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        try:
            key = self.storage.save(path, File(file))
            size = self.storage.size(key)
        except OSError as e:
            logger.error(f"Local storage upload failed for {path}: {e}")
            raise StorageException(f"Failed to store {path}: {e}") from e

        logger.info(f"Local storage: saved {key} ({size} bytes)")
        return StorageFile(key=key, url=self.storage.url(key), size=size, content_type=content_type)

    def delete(self, key: str) -> bool:
        if not self.storage.exists(key):
            return False
        try:
            self.storage.delete(key)
        except OSError as e:
            raise StorageException(f"Failed to delete {key}: {e}") from e
        logger.info(f"Local storage: deleted {key}")
        return True

    def get_url(self, key: str) -> str:
        return self.storage.url(key)

    def exists(self, key: str) -> bool:
        return self.storage.exists(key)
