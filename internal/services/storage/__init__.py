"""
Storage service package

This package provides an object storage abstraction (store, get, visit, contains)
backed by AWS S3, addressed by canonical object URLs, with a health indicator
for the bucket.
"""

from .exceptions import StorageConfigError, StorageError, StorageKeyError
from .health import HealthResult, HealthStatus, S3HealthIndicator
from .manager import StorageManager
from .s3 import S3StorageService
from .service import StorageService, StorageVisitor

__all__ = [
    "HealthResult",
    "HealthStatus",
    "S3HealthIndicator",
    "S3StorageService",
    "StorageConfigError",
    "StorageError",
    "StorageKeyError",
    "StorageManager",
    "StorageService",
    "StorageVisitor",
]
