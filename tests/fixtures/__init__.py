"""
Test fixtures package for storage service tests.

This package provides mock collaborators of the storage service:
- service_mocks: Mock ConfigManager, mock boto3 S3 clients and an in-memory S3 client

All fixtures are also available through the main conftest.py file.
"""

from tests.fixtures.service_mocks import (
    InMemoryS3Client,
    createClientError,
    createMockConfigManager,
    createMockS3Client,
)

__all__ = [
    "InMemoryS3Client",
    "createClientError",
    "createMockConfigManager",
    "createMockS3Client",
]
