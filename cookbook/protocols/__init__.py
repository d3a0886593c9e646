"""
Cookbook Protocols.

Defines interfaces for external integrations.
"""

from cookbook.protocols.images import ImageMetadata, ImageStore

__all__ = [
    # Image Protocol
    "ImageStore",
    "ImageMetadata",
]
