"""
Configuration loading for xgokit.
"""

from xgokit.config.settings import (
    DEFAULT_CONFIG_NAME,
    DEFAULT_IMAGE_PREFIX,
    DEFAULT_MOUNT_POINT,
    FLAG_DEFAULTS,
    Settings,
    load_settings,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_IMAGE_PREFIX",
    "DEFAULT_MOUNT_POINT",
    "FLAG_DEFAULTS",
    "Settings",
    "load_settings",
]
