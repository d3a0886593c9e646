"""
Image Store Protocol — Interface for recipe image blobs.

Cookbook defines this protocol and only ever persists the reference string
an implementation returns. Size limits and content-type rules belong to the
implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Protocol, runtime_checkable


@dataclass(frozen=True)
class ImageMetadata:
    """What the uploader told us about the file."""

    filename: str
    content_type: str | None
    size: int


@runtime_checkable
class ImageStore(Protocol):
    """
    Protocol for storing uploaded images.

    Implementations must either store the file and return a reference
    (URL or key), or raise CookbookError('INVALID_INPUT') without storing
    anything.
    """

    def store(self, file: IO[bytes], metadata: ImageMetadata) -> str:
        """
        Store an image.

        Args:
            file: Readable binary file object
            metadata: Original name, declared content type and size

        Returns:
            Reference string to save on the recipe
        """
        ...
