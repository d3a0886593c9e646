"""
Cookbook Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    COOKBOOK = {
        "IMAGE_MAX_BYTES": 2 * 1024 * 1024,
        "DASHBOARD_PREVIEW_SIZE": 5,
    }

    # Option 2: Flat
    COOKBOOK_IMAGE_MAX_BYTES = 2 * 1024 * 1024
    COOKBOOK_DASHBOARD_PREVIEW_SIZE = 5

Every setting has a default, so none is required.
"""

import threading

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


# ── Defaults ──

DEFAULTS = {
    "IMAGE_STORE": "cookbook.adapters.storage.StorageImageStore",
    "IMAGE_MAX_BYTES": 5 * 1024 * 1024,
    "IMAGE_UPLOAD_DIR": "recipes",
    "DASHBOARD_PREVIEW_SIZE": 3,
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a cookbook setting.

    Looks up in order:
    1. COOKBOOK dict (e.g. COOKBOOK = {"IMAGE_MAX_BYTES": ...})
    2. Flat setting (e.g. COOKBOOK_IMAGE_MAX_BYTES = ...)
    3. DEFAULTS
    """
    cookbook_dict = getattr(settings, "COOKBOOK", {})
    if name in cookbook_dict:
        return cookbook_dict[name]

    flat_value = getattr(settings, f"COOKBOOK_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


_image_store_lock = threading.Lock()
_image_store_instance = None


def get_image_store():
    """
    Return the configured image store instance.

    The image store persists uploaded recipe images and hands back the
    reference string saved on the recipe.
    """
    global _image_store_instance

    if _image_store_instance is None:
        with _image_store_lock:
            if _image_store_instance is None:  # double-checked
                from django.utils.module_loading import import_string

                path = get_setting("IMAGE_STORE")
                try:
                    _image_store_instance = import_string(path)()
                except ImportError as e:
                    raise ImproperlyConfigured(
                        f"Failed to import image store '{path}': {e}"
                    ) from e

    return _image_store_instance


def reset_image_store() -> None:
    """Reset singleton (for tests)."""
    global _image_store_instance
    _image_store_instance = None
