"""
Storage health indicator

This module checks the S3 bucket with one lightweight call (get bucket location)
and reports whether the backend is reachable and how long the call took.
"""

import logging
import time
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)

# S3 reports buckets of the default region with an empty location constraint
DEFAULT_REGION = "us-east-1"


class HealthStatus(StrEnum):
    """Backend liveness status"""

    UP = "UP"
    DOWN = "DOWN"


@dataclass
class HealthResult:
    """Outcome of a single health check"""

    status: HealthStatus
    bucket: str
    latencyMillis: int
    location: str | None = None
    error: str | None = None

    @property
    def isUp(self) -> bool:
        return self.status == HealthStatus.UP

    def toDict(self) -> dict[str, Any]:
        """
        Render the result in the shape monitoring endpoints expect.

        Returns:
            Dict like {"status": "UP", "details": {"bucket": ..., "location": ..., "latency": ...}}.
            Absent location or error are omitted from details.
        """
        details: dict[str, Any] = {"bucket": self.bucket}
        if self.location is not None:
            details["location"] = self.location
        details["latency"] = self.latencyMillis
        if self.error is not None:
            details["error"] = self.error

        return {"status": self.status.value, "details": details}


class S3HealthIndicator:
    """
    Health indicator for an S3 bucket.

    Never raises: any failure of the check is captured into a DOWN result.

    Args:
        client: boto3 S3 client
        bucket: S3 bucket name

    Example:
        >>> indicator = S3HealthIndicator(boto3.client("s3"), "my-bucket")
        >>> indicator.health().toDict()
        {'status': 'UP', 'details': {'bucket': 'my-bucket', 'location': 'eu-west-1', 'latency': 42}}
    """

    def __init__(self, client: Any, bucket: str):
        self.client = client
        self.bucket = bucket

    def health(self) -> HealthResult:
        """
        Check the bucket once, synchronously, without retry.

        Returns:
            UP result with bucket location and latency if the check succeeds,
            DOWN result with error detail and latency otherwise
        """
        start = time.monotonic()
        try:
            response = self.client.get_bucket_location(Bucket=self.bucket)
            location = response.get("LocationConstraint") or DEFAULT_REGION
            return HealthResult(
                status=HealthStatus.UP,
                bucket=self.bucket,
                latencyMillis=self._elapsedMillis(start),
                location=location,
            )
        except Exception as e:
            logger.warning(f"Storage health check failed for bucket {self.bucket}: {e}")
            return HealthResult(
                status=HealthStatus.DOWN,
                bucket=self.bucket,
                latencyMillis=self._elapsedMillis(start),
                error=f"{type(e).__name__}: {e}",
            )

    @staticmethod
    def _elapsedMillis(start: float) -> int:
        return max(0, int((time.monotonic() - start) * 1000))
