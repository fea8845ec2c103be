"""
Storage service exceptions

This module defines the exception hierarchy for the storage service.
All storage-related errors inherit from StorageError base class.
"""


class StorageError(Exception):
    """
    Base exception for all storage service errors.

    Raised whenever a backend call fails during store, get or visit. Carries the
    bucket and path the operation was working on, and the original backend error.
    Catch this to handle any storage service error generically.

    Args:
        message: Description of the failure, including bucket and path
        bucket: Bucket the operation targeted (optional)
        path: Object path or listing prefix the operation targeted (optional)
        originalError: The original exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        bucket: str | None = None,
        path: str | None = None,
        originalError: Exception | None = None,
    ):
        super().__init__(message)
        self.bucket = bucket
        self.path = path
        self.originalError = originalError


class StorageKeyError(StorageError):
    """
    Exception raised when an object path is invalid.

    This exception is raised before any backend call when a path:
    - Is empty or only whitespace
    - Starts with a slash
    - Contains control characters
    - Exceeds the maximum S3 key length
    """

    pass


class StorageConfigError(StorageError):
    """
    Exception raised when storage configuration is invalid.

    This exception is raised while wiring the storage service when:
    - The storage section is missing
    - Required parameters (bucket) are missing
    - The S3 client cannot be created
    - The service is used before being configured
    """

    pass
