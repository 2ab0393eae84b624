"""
Mock Storage Adapter
====================

Stores file metadata in memory for test assertions. Does not write to disk.
"""

import logging
from typing import Any, BinaryIO, Dict, List

from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class MockStorageAdapter(StorageInterface):
    def __init__(self):
        self.files: Dict[str, Dict[str, Any]] = {}
        self.upload_attempts: List[str] = []
        self.fail_uploads = False

    def upload(self, file: BinaryIO, path: str, content_type: str) -> StorageFile:
        self.upload_attempts.append(path)
        if self.fail_uploads:
            raise StorageException(f"Mock storage refused {path}")

        content = file.read()
        self.files[path] = {"size": len(content), "content_type": content_type}
        logger.info(f"Mock storage: uploaded {path}")
        return StorageFile(key=path, url=self.get_url(path), size=len(content), content_type=content_type)

    def delete(self, key: str) -> bool:
        return self.files.pop(key, None) is not None

    def get_url(self, key: str) -> str:
        return f"/media/{key}"

    def exists(self, key: str) -> bool:
        return key in self.files

    def clear(self):
        self.files.clear()
        self.upload_attempts.clear()
        self.fail_uploads = False
