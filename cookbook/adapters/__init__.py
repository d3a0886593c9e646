"""
Cookbook Adapters.

Implementations of protocols for external systems.
"""

from cookbook.adapters.storage import StorageImageStore

__all__ = [
    "StorageImageStore",
]
