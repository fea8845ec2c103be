"""
Storage manager: Singleton wiring of the S3 storage service

This module provides a singleton that builds the S3 storage service and its
health indicator from the storage section of the configuration.
"""

import logging
import threading
from typing import TYPE_CHECKING, Any, Union

import boto3

from .exceptions import StorageConfigError
from .health import S3HealthIndicator
from .s3 import S3StorageService
from .utils import DEFAULT_URL_BASE

if TYPE_CHECKING:
    from internal.config.manager import ConfigManager

logger = logging.getLogger(__name__)


def createS3Client(config: dict[str, Any]) -> Any:
    """
    Create a boto3 S3 client from the storage configuration.

    Endpoint, region and credentials are optional: when absent, boto3 falls back
    to its default resolution (environment, shared config, instance profile).

    Args:
        config: Storage configuration section

    Returns:
        boto3 S3 client
    """
    clientParams: dict[str, Any] = {}
    if config.get("endpoint"):
        clientParams["endpoint_url"] = config["endpoint"]
    if config.get("region"):
        clientParams["region_name"] = config["region"]
    if config.get("key-id") and config.get("key-secret"):
        clientParams["aws_access_key_id"] = config["key-id"]
        clientParams["aws_secret_access_key"] = config["key-secret"]

    return boto3.client("s3", **clientParams)


class StorageManager:
    """
    Singleton holder of the configured storage service and health indicator.

    Usage:
        manager = StorageManager.getInstance()
        manager.injectConfig(configManager)

        storage = manager.getService()
        url = storage.store("a/file.txt", io.BytesIO(b"data"), contentType="text/plain")

        health = manager.getHealthIndicator().health()

    Thread Safety:
        The singleton instance creation is thread-safe using RLock.
        Service operations are as thread-safe as the underlying boto3 client.
    """

    _instance: Union["StorageManager", None] = None
    _lock = threading.RLock()

    def __new__(cls) -> "StorageManager":
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
            return cls._instance

    def __init__(self):
        """
        Initialize storage manager.

        Only runs once due to singleton pattern.
        """
        if not hasattr(self, "initialized"):
            self.service: S3StorageService | None = None
            self.healthIndicator: S3HealthIndicator | None = None
            self.initialized = False
            logger.info("StorageManager created, awaiting configuration, dood!")

    @classmethod
    def getInstance(cls) -> "StorageManager":
        """Get singleton instance."""
        return cls()

    def injectConfig(self, configManager: "ConfigManager") -> None:
        """
        Initialize the storage service from ConfigManager.

        Args:
            configManager: The configuration manager containing storage settings

        Raises:
            StorageConfigError: If configuration is invalid or the S3 client cannot be created

        Configuration format:
            {
                "bucket": "my-bucket",
                "region": "us-east-1",
                "endpoint": "https://s3.amazonaws.com",
                "key-id": "...",
                "key-secret": "...",
                "url-base": "https://s3.amazonaws.com"
            }
        """
        config = configManager.getStorageConfig()
        if not config:
            raise StorageConfigError("Storage configuration is missing")

        bucket = config.get("bucket")
        if not bucket:
            raise StorageConfigError("Storage bucket is not specified in configuration")

        try:
            client = createS3Client(config)
        except Exception as e:
            raise StorageConfigError(f"Failed to initialize S3 client: {e}", bucket=bucket, originalError=e) from e

        urlBase = config.get("url-base") or DEFAULT_URL_BASE
        self.service = S3StorageService(client, bucket, urlBase=urlBase)
        self.healthIndicator = S3HealthIndicator(client, bucket)
        self.initialized = True
        logger.info(f"StorageManager initialized with bucket: {bucket}, url prefix: {self.service.urlPrefix}, dood!")

    def _ensureInitialized(self) -> None:
        if not self.initialized or self.service is None or self.healthIndicator is None:
            raise StorageConfigError("StorageManager is not initialized. Call injectConfig() first, dood!")

    def getService(self) -> S3StorageService:
        """
        Get the configured storage service.

        Raises:
            StorageConfigError: If the manager is not initialized
        """
        self._ensureInitialized()
        assert self.service is not None  # For type checker
        return self.service

    def getHealthIndicator(self) -> S3HealthIndicator:
        """
        Get the configured health indicator.

        Raises:
            StorageConfigError: If the manager is not initialized
        """
        self._ensureInitialized()
        assert self.healthIndicator is not None  # For type checker
        return self.healthIndicator
