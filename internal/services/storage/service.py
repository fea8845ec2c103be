"""
Abstract storage service interface

This module defines the abstract base class for object storage services.
Objects live in one fixed bucket, are addressed by hierarchical paths, and are
exposed to callers only through canonical URLs.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Callable, Iterator

StorageVisitor = Callable[[str], None]
"""Callback invoked with the canonical URL of each visited object."""


class StorageService(ABC):
    """
    Abstract base class for object storage services.

    Implementations must translate every backend failure raised by store, get or
    visit into StorageError, carrying the bucket and path of the operation.
    """

    @abstractmethod
    def contains(self, url: str) -> bool:
        """
        Check whether a URL belongs to this service's bucket.

        This is a pure string test: it never touches the backend and does not
        check that the object actually exists.

        Args:
            url: The URL to check

        Returns:
            True if the URL starts with the bucket URL prefix, False otherwise
        """
        pass

    @abstractmethod
    def store(
        self,
        path: str,
        content: BinaryIO | bytes,
        contentType: str | None = None,
        ttlSeconds: int | None = None,
        contentEncoding: str | None = None,
    ) -> str:
        """
        Store content under the specified path, overwriting any existing object.

        Args:
            path: Object path within the bucket (no leading slash)
            content: Binary stream (or bytes) to upload in full
            contentType: Content type to set, if any
            ttlSeconds: Cache lifetime hint; sets a cache-control header if given
            contentEncoding: Content encoding to set, if any

        Returns:
            The canonical URL of the stored object

        Raises:
            StorageKeyError: If the path is invalid
            StorageError: If the upload fails
        """
        pass

    @abstractmethod
    def get(self, url: str, sink: BinaryIO) -> None:
        """
        Copy the content of the object addressed by url into sink.

        Args:
            url: Canonical URL of the object
            sink: Writable binary stream receiving the whole object content

        Raises:
            StorageError: If the object cannot be retrieved (including not found)
        """
        pass

    @abstractmethod
    def iterate(self, pathPrefix: str) -> Iterator[str]:
        """
        Lazily yield the canonical URL of every object whose path starts with pathPrefix.

        Args:
            pathPrefix: Path prefix to filter objects

        Yields:
            Canonical object URLs, in backend order

        Raises:
            StorageError: If the listing fails
        """
        pass

    def visit(self, pathPrefix: str, visitor: StorageVisitor) -> None:
        """
        Invoke visitor once per object whose path starts with pathPrefix.

        Args:
            pathPrefix: Path prefix to filter objects
            visitor: Callback receiving each canonical object URL

        Raises:
            StorageError: If the listing fails
        """
        for url in self.iterate(pathPrefix):
            visitor(url)
