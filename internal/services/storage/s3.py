"""
S3 storage service implementation

This module provides the storage service for AWS S3 and S3-compatible storage
services. Uses a boto3 S3 client for all I/O and wraps every failure into
StorageError.
"""

import logging
import shutil
from contextlib import closing
from typing import Any, BinaryIO, Iterator

from .exceptions import StorageError
from .service import StorageService
from .utils import DEFAULT_URL_BASE, buildUrlPrefix, pathFromUrl, toUrl, validatePath

logger = logging.getLogger(__name__)


class S3StorageService(StorageService):
    """
    S3-based storage service using a boto3 client.

    Objects are stored in one pre-existing bucket under their path, and are
    addressed externally by canonical URLs "<urlBase>/<bucket>/<path>".

    Features:
    - Content-Type, Cache-Control and Content-Encoding set only when provided
    - Response streams are always closed after get
    - Listing follows continuation tokens until all matching keys are seen
    - Every backend failure is wrapped into StorageError with bucket and path

    Args:
        client: boto3 S3 client (or any object with the same methods)
        bucket: S3 bucket name
        urlBase: Scheme and host of canonical URLs (default: "https://s3.amazonaws.com")

    Example:
        >>> service = S3StorageService(boto3.client("s3"), "my-bucket")
        >>> service.store("a/file.txt", io.BytesIO(b"data"), contentType="text/plain")
        'https://s3.amazonaws.com/my-bucket/a/file.txt'
    """

    def __init__(self, client: Any, bucket: str, urlBase: str = DEFAULT_URL_BASE):
        self.client = client
        self.bucket = bucket
        self.urlPrefix = buildUrlPrefix(bucket, urlBase)

    def contains(self, url: str) -> bool:
        return str(url).startswith(self.urlPrefix)

    def store(
        self,
        path: str,
        content: BinaryIO | bytes,
        contentType: str | None = None,
        ttlSeconds: int | None = None,
        contentEncoding: str | None = None,
    ) -> str:
        """
        Upload content to S3 with a single put_object call.

        Args:
            path: Object path within the bucket
            content: Binary stream (or bytes) to upload
            contentType: Content type to set, if any
            ttlSeconds: If given, Cache-Control is set to "max-age=<ttlSeconds>, must-revalidate"
            contentEncoding: Content encoding to set, if any

        Returns:
            The canonical URL of the stored object

        Raises:
            StorageKeyError: If the path is invalid
            StorageError: If the upload fails
        """
        validatePath(path)

        putParams: dict[str, Any] = {
            "Bucket": self.bucket,
            "Key": path,
            "Body": content,
        }
        if contentType is not None:
            putParams["ContentType"] = contentType
        if ttlSeconds is not None:
            putParams["CacheControl"] = f"max-age={ttlSeconds}, must-revalidate"
        if contentEncoding is not None:
            putParams["ContentEncoding"] = contentEncoding

        try:
            self.client.put_object(**putParams)
        except Exception as e:
            logger.error(f"Failed to store s3://{self.bucket}/{path}: {e}")
            raise StorageError(
                f"Unable to store to s3://{self.bucket}/{path}",
                bucket=self.bucket,
                path=path,
                originalError=e,
            ) from e

        logger.debug(f"Stored object s3://{self.bucket}/{path}, dood!")
        return toUrl(self.urlPrefix, path)

    def get(self, url: str, sink: BinaryIO) -> None:
        """
        Download an object from S3 into sink.

        The object path is the URL with its bucket URL prefix and the following "/" cut off.

        Args:
            url: Canonical URL of the object
            sink: Writable binary stream

        Raises:
            StorageError: If the download fails, including when the object does not exist
        """
        path = pathFromUrl(url, self.bucket, self.urlPrefix)

        try:
            response = self.client.get_object(Bucket=self.bucket, Key=path)
            with closing(response["Body"]) as body:
                shutil.copyfileobj(body, sink)
        except Exception as e:
            logger.error(f"Failed to get s3://{self.bucket}/{path}: {e}")
            raise StorageError(
                f"Unable to get from s3://{self.bucket}/{path}",
                bucket=self.bucket,
                path=path,
                originalError=e,
            ) from e

        logger.debug(f"Retrieved object s3://{self.bucket}/{path}, dood!")

    def iterate(self, pathPrefix: str) -> Iterator[str]:
        """
        List objects in S3 matching the prefix, following continuation tokens.

        Args:
            pathPrefix: Path prefix to filter keys

        Yields:
            Canonical URL of each matching object, in the order S3 returns them

        Raises:
            StorageError: If a list_objects_v2 call fails, or a truncated page carries no continuation token
        """
        listParams: dict[str, Any] = {
            "Bucket": self.bucket,
            "Prefix": pathPrefix,
        }

        count = 0
        while True:
            try:
                response = self.client.list_objects_v2(**listParams)
            except Exception as e:
                logger.error(f"Failed to list s3://{self.bucket}/{pathPrefix}: {e}")
                raise StorageError(
                    f"Unable to list s3://{self.bucket}/{pathPrefix}",
                    bucket=self.bucket,
                    path=pathPrefix,
                    originalError=e,
                ) from e

            for obj in response.get("Contents", []):
                count += 1
                yield toUrl(self.urlPrefix, obj["Key"])

            if not response.get("IsTruncated"):
                break

            continuationToken = response.get("NextContinuationToken")
            if not continuationToken:
                logger.error(f"Truncated listing of s3://{self.bucket}/{pathPrefix} has no continuation token")
                raise StorageError(
                    f"Unable to list s3://{self.bucket}/{pathPrefix}: truncated listing without continuation token",
                    bucket=self.bucket,
                    path=pathPrefix,
                )
            listParams["ContinuationToken"] = continuationToken

        logger.debug(f"Listed {count} objects with prefix: '{pathPrefix}', dood!")
