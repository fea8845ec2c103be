"""
Storage service utility functions

This module provides helpers to build canonical object URLs, derive object
paths back from URLs, and validate object paths before they reach the backend.
"""

from urllib.parse import urlparse

from .exceptions import StorageKeyError

# Default public base for canonical object URLs
DEFAULT_URL_BASE = "https://s3.amazonaws.com"

# Maximum S3 object key length, in UTF-8 bytes
MAX_KEY_LENGTH = 1024


def buildUrlPrefix(bucket: str, urlBase: str = DEFAULT_URL_BASE) -> str:
    """
    Build the URL prefix shared by every object of a bucket.

    Args:
        bucket: Bucket name
        urlBase: Scheme and host, without trailing slash (default: https://s3.amazonaws.com)

    Returns:
        The prefix "<urlBase>/<bucket>"

    Examples:
        >>> buildUrlPrefix("my-bucket")
        'https://s3.amazonaws.com/my-bucket'
    """
    return f"{urlBase.rstrip('/')}/{bucket}"


def toUrl(urlPrefix: str, path: str) -> str:
    """Build the canonical URL of an object from its bucket URL prefix and path."""
    return f"{urlPrefix}/{path}"


def pathFromUrl(url: str, bucket: str, urlPrefix: str) -> str:
    """
    Derive the object path from a canonical URL.

    URLs starting with "<urlPrefix>/" are cut textually after the prefix, so the
    path comes back verbatim whatever the url base and whatever characters
    ("?", "#") the path holds. Other URLs fall back to their URL path, read as
    "/<bucket>/<path>", with the bucket segment stripped exactly once.

    Args:
        url: Canonical object URL
        bucket: Bucket name
        urlPrefix: Bucket URL prefix, as built by buildUrlPrefix

    Returns:
        The object path (key) within the bucket

    Examples:
        >>> pathFromUrl("https://minio.local/s3/b/100/doc/toto.txt", "b", "https://minio.local/s3/b")
        '100/doc/toto.txt'
        >>> pathFromUrl("http://cdn.example.com/b/100/doc/toto.txt", "b", "https://s3.amazonaws.com/b")
        '100/doc/toto.txt'
    """
    url = str(url)
    if url.startswith(urlPrefix + "/"):
        return url[len(urlPrefix) + 1 :]
    return urlparse(url).path[len(bucket) + 2 :]


def validatePath(path: str) -> str:
    """
    Validate an object path before storing.

    Unlike keys of a flat namespace, paths are hierarchical: slashes are kept
    as-is, but the path must not start with one.

    Args:
        path: The object path to validate

    Returns:
        The path, unchanged

    Raises:
        StorageKeyError: If the path is empty, starts with "/", contains control
            characters, or exceeds 1024 bytes once UTF-8 encoded
    """
    if not path or not path.strip():
        raise StorageKeyError("Object path cannot be empty or only whitespace", path=path)

    if path.startswith("/"):
        raise StorageKeyError(f"Object path must not start with '/': '{path}'", path=path)

    if any(ord(char) < 32 or ord(char) == 127 for char in path):
        raise StorageKeyError(f"Object path contains control characters: {path!r}", path=path)

    encodedLength = len(path.encode("utf-8"))
    if encodedLength > MAX_KEY_LENGTH:
        raise StorageKeyError(
            f"Object path exceeds maximum length of {MAX_KEY_LENGTH} bytes. Length: {encodedLength}",
            path=path,
        )

    return path
