"""
Storage Infrastructure Tests
=============================

Unit tests for the storage abstraction layer.
"""

import shutil
import tempfile
from io import BytesIO

from django.core.files.storage import FileSystemStorage
from django.test import TestCase

from infrastructure.storage import (
    LocalStorageAdapter,
    MockStorageAdapter,
    StorageException,
    StorageFactory,
    StorageFile,
    StorageInterface,
)


class StorageInterfaceTest(TestCase):
    def test_interface_is_abstract(self):
        with self.assertRaises(TypeError):
            StorageInterface()


class LocalStorageAdapterTest(TestCase):
    def setUp(self):
        self.media_root = tempfile.mkdtemp()
        self.adapter = LocalStorageAdapter(FileSystemStorage(location=self.media_root, base_url="/media/"))

    def tearDown(self):
        shutil.rmtree(self.media_root, ignore_errors=True)

    def test_upload_and_delete(self):
        result = self.adapter.upload(BytesIO(b"image bytes"), "products/abc/photo.jpg", "image/jpeg")

        self.assertIsInstance(result, StorageFile)
        self.assertEqual(result.key, "products/abc/photo.jpg")
        self.assertEqual(result.size, len(b"image bytes"))
        self.assertEqual(result.url, "/media/products/abc/photo.jpg")
        self.assertTrue(self.adapter.exists(result.key))

        self.assertTrue(self.adapter.delete(result.key))
        self.assertFalse(self.adapter.exists(result.key))

    def test_delete_missing_file(self):
        self.assertFalse(self.adapter.delete("products/none.jpg"))


class MockStorageAdapterTest(TestCase):
    def setUp(self):
        self.adapter = MockStorageAdapter()

    def test_upload_records_file(self):
        result = self.adapter.upload(BytesIO(b"abc"), "profiles/u/avatar.png", "image/png")

        self.assertEqual(result.size, 3)
        self.assertTrue(self.adapter.exists("profiles/u/avatar.png"))
        self.assertEqual(self.adapter.get_url("profiles/u/avatar.png"), "/media/profiles/u/avatar.png")

    def test_failing_uploads(self):
        self.adapter.fail_uploads = True

        with self.assertRaises(StorageException):
            self.adapter.upload(BytesIO(b"abc"), "x.png", "image/png")
        self.assertEqual(self.adapter.upload_attempts, ["x.png"])


class StorageFactoryTest(TestCase):
    def test_create_backends(self):
        self.assertIsInstance(StorageFactory.create("local"), LocalStorageAdapter)
        self.assertIsInstance(StorageFactory.create("mock"), MockStorageAdapter)

    def test_invalid_backend(self):
        with self.assertRaises(ValueError):
            StorageFactory.create("s3")
