"""
Mock service instances for testing.

This module provides factory functions to create mock collaborators of the
storage service: the ConfigManager, boto3 S3 clients, and an in-memory S3 client
that behaves like a real bucket for round-trip tests.
"""

import io
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

from botocore.exceptions import ClientError


def createMockConfigManager(
    storageConfig: Optional[Dict[str, Any]] = None,
) -> Mock:
    """
    Create a mock ConfigManager.

    Args:
        storageConfig: Storage configuration (default: bucket "test-bucket" in us-east-1)

    Returns:
        Mock: Mocked ConfigManager instance

    Example:
        config = createMockConfigManager(storageConfig={"bucket": "photos"})
        assert config.getStorageConfig()["bucket"] == "photos"
    """
    from internal.config.manager import ConfigManager

    mock = Mock(spec=ConfigManager)
    mock.getStorageConfig.return_value = (
        storageConfig if storageConfig is not None else {"bucket": "test-bucket", "region": "us-east-1"}
    )
    return mock


def createMockS3Client() -> Mock:
    """
    Create a mock boto3 S3 client with empty successful responses.

    Returns:
        Mock: Mocked S3 client; get_object returns an empty body
    """
    client = Mock()
    client.put_object = Mock(return_value={})
    client.get_object = Mock(return_value={"Body": io.BytesIO(b"")})
    client.list_objects_v2 = Mock(return_value={})
    client.get_bucket_location = Mock(return_value={"LocationConstraint": "eu-west-1"})
    return client


def createClientError(code: str, operation: str, message: str = "") -> ClientError:
    """Create a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": message or code}}, operation)


class InMemoryS3Client:
    """
    Minimal in-memory stand-in for a boto3 S3 client.

    Supports put_object, get_object, list_objects_v2 (with continuation tokens)
    and get_bucket_location on a single bucket. Listings return keys in
    lexicographic order, like S3.

    Args:
        bucket: Name of the only existing bucket
        location: Location constraint returned by get_bucket_location
        pageSize: Maximum number of keys per listing page
    """

    def __init__(self, bucket: str = "test-bucket", location: Optional[str] = "eu-west-1", pageSize: int = 1000):
        self.bucket = bucket
        self.location = location
        self.pageSize = pageSize
        self.objects: Dict[str, Dict[str, Any]] = {}
        self.listCalls: List[Dict[str, Any]] = []

    def _checkBucket(self, bucket: str, operation: str) -> None:
        if bucket != self.bucket:
            raise createClientError("NoSuchBucket", operation, f"The specified bucket does not exist: {bucket}")

    def put_object(self, Bucket: str, Key: str, Body: Any, **kwargs) -> Dict[str, Any]:
        self._checkBucket(Bucket, "PutObject")
        data = Body.read() if hasattr(Body, "read") else bytes(Body)
        self.objects[Key] = {"Body": data, **kwargs}
        return {}

    def get_object(self, Bucket: str, Key: str) -> Dict[str, Any]:
        self._checkBucket(Bucket, "GetObject")
        if Key not in self.objects:
            raise createClientError("NoSuchKey", "GetObject", "The specified key does not exist.")
        stored = self.objects[Key]
        response = {k: v for k, v in stored.items() if k != "Body"}
        response["Body"] = io.BytesIO(stored["Body"])
        return response

    def list_objects_v2(self, Bucket: str, Prefix: str = "", ContinuationToken: Optional[str] = None):
        self._checkBucket(Bucket, "ListObjectsV2")
        self.listCalls.append({"Prefix": Prefix, "ContinuationToken": ContinuationToken})

        keys = sorted(key for key in self.objects if key.startswith(Prefix))
        start = int(ContinuationToken) if ContinuationToken else 0
        end = start + self.pageSize
        response: Dict[str, Any] = {"IsTruncated": end < len(keys), "KeyCount": len(keys[start:end])}
        if keys[start:end]:
            response["Contents"] = [{"Key": key, "Size": len(self.objects[key]["Body"])} for key in keys[start:end]]
        if response["IsTruncated"]:
            response["NextContinuationToken"] = str(end)
        return response

    def get_bucket_location(self, Bucket: str) -> Dict[str, Any]:
        self._checkBucket(Bucket, "GetBucketLocation")
        return {"LocationConstraint": self.location}
