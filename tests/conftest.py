"""
Pytest configuration and common fixtures for storage service tests.

This module provides shared fixtures for testing the S3 storage service,
its health indicator and its wiring. All fixtures follow camelCase naming convention.
"""

import pytest

from internal.services.storage.manager import StorageManager
from internal.services.storage.s3 import S3StorageService
from tests.fixtures import InMemoryS3Client, createMockConfigManager, createMockS3Client

# ============================================================================
# Storage Fixtures
# ============================================================================


@pytest.fixture
def bucket() -> str:
    """Name of the bucket used across storage tests."""
    return "test-bucket"


@pytest.fixture
def mockS3Client():
    """
    Create a mock boto3 S3 client.

    Returns:
        Mock: S3 client whose calls succeed with empty responses
    """
    return createMockS3Client()


@pytest.fixture
def inMemoryS3Client(bucket):
    """
    Create an in-memory S3 client holding a single bucket.

    Returns:
        InMemoryS3Client: Behaves like a real bucket for put/get/list
    """
    return InMemoryS3Client(bucket=bucket)


@pytest.fixture
def s3Service(mockS3Client, bucket):
    """S3StorageService over the mock S3 client."""
    return S3StorageService(mockS3Client, bucket)


@pytest.fixture
def inMemoryS3Service(inMemoryS3Client, bucket):
    """S3StorageService over the in-memory S3 client."""
    return S3StorageService(inMemoryS3Client, bucket)


@pytest.fixture
def mockConfigManager():
    """
    Create a mock ConfigManager with a valid storage section.

    Example:
        def testWiring(mockConfigManager):
            mockConfigManager.getStorageConfig.return_value = {"bucket": "other"}
    """
    return createMockConfigManager()


@pytest.fixture
def resetStorageManagerSingleton():
    """Reset StorageManager singleton before and after a test, dood!"""
    StorageManager._instance = None
    yield
    StorageManager._instance = None
