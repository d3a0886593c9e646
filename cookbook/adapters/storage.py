"""
Cookbook Storage Adapter — Recipe images via Django's storage API.

Writes uploads to the default storage backend (filesystem, S3, in-memory...)
under IMAGE_UPLOAD_DIR and returns the public URL of the stored file.

Settings:
    COOKBOOK = {
        "IMAGE_STORE": "cookbook.adapters.storage.StorageImageStore",
        "IMAGE_MAX_BYTES": 5 * 1024 * 1024,
        "IMAGE_UPLOAD_DIR": "recipes",
    }
"""

from __future__ import annotations

import logging
import posixpath
import time
from typing import IO

from django.core.files import File
from django.core.files.storage import Storage, default_storage
from django.utils.text import get_valid_filename

from cookbook.conf import get_setting
from cookbook.exceptions import CookbookError
from cookbook.protocols.images import ImageMetadata

logger = logging.getLogger(__name__)


class StorageImageStore:
    """
    ImageStore implementation backed by a Django Storage.

    Rejects files over IMAGE_MAX_BYTES and anything not declared as image/*.
    """

    def __init__(self, storage: Storage | None = None) -> None:
        self.storage = default_storage if storage is None else storage

    def store(self, file: IO[bytes], metadata: ImageMetadata) -> str:
        max_bytes = get_setting("IMAGE_MAX_BYTES")
        if metadata.size > max_bytes:
            raise CookbookError(
                "INVALID_INPUT",
                message=f"Image exceeds {max_bytes} bytes",
                size=metadata.size,
            )

        content_type = metadata.content_type or ""
        if not content_type.startswith("image/"):
            raise CookbookError(
                "INVALID_INPUT",
                message="Only image files are allowed",
                content_type=content_type,
            )

        name = posixpath.join(
            get_setting("IMAGE_UPLOAD_DIR"),
            f"{int(time.time() * 1000)}-{self._clean_name(metadata.filename)}",
        )
        saved = self.storage.save(name, File(file, name=name))

        logger.info(
            f"Stored recipe image {saved}",
            extra={"image": saved, "size": metadata.size},
        )

        return self.storage.url(saved)

    @staticmethod
    def _clean_name(filename: str) -> str:
        base = posixpath.basename((filename or "").replace("\\", "/"))
        base = "-".join(base.split())
        if base.strip(".") == "":
            return "image"
        return get_valid_filename(base)
