"""
Launcher configuration.

Settings come from an optional YAML file (``xgo.yaml`` in the working
directory by default). Command-line flags override the file, and the file
overrides the built-in defaults.

Example ``xgo.yaml``::

    runtime: podman
    image_prefix: karalabe/xgo-
    defaults:
      go: "1.4.2"
      targets: linux64,darwin64
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml

from xgokit.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "xgo.yaml"
DEFAULT_IMAGE_PREFIX = "karalabe/xgo-"
DEFAULT_MOUNT_POINT = "/build"

# Flag defaults, keyed by flag name without the leading dash
FLAG_DEFAULTS: Dict[str, Any] = {
    "go": "latest",
    "pkg": "",
    "out": "",
    "remote": "",
    "branch": "",
    "deps": "",
    "targets": "all",
    "v": False,
    "race": False,
}


@dataclass(frozen=True)
class Settings:
    """
    Resolved launcher settings.

    Attributes:
        runtime: Container runtime binary
        image_prefix: Prefix joined with the Go release to form the image name
        mount_point: Path the working directory is mounted at in the container
        defaults: Read-only flag defaults after applying the configuration file
    """

    runtime: str = "docker"
    image_prefix: str = DEFAULT_IMAGE_PREFIX
    mount_point: str = DEFAULT_MOUNT_POINT
    defaults: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType(dict(FLAG_DEFAULTS))
    )

    def image_for(self, go_version: str) -> str:
        """Return the toolchain image name for a Go release."""
        return self.image_prefix + go_version


def _read_yaml(config_file: Path) -> Dict[str, Any]:
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_file}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration in {config_file} must be a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def _merge_defaults(overrides: Any, config_file: Path) -> Dict[str, Any]:
    if overrides is None:
        return dict(FLAG_DEFAULTS)
    if not isinstance(overrides, dict):
        raise ConfigurationError(f"'defaults' in {config_file} must be a mapping")

    merged = dict(FLAG_DEFAULTS)
    for key, value in overrides.items():
        if key not in FLAG_DEFAULTS:
            logger.debug(f"Ignoring unknown default '{key}' in {config_file}")
            continue
        if isinstance(FLAG_DEFAULTS[key], bool):
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"Default '{key}' in {config_file} must be true or false"
                )
            merged[key] = value
        elif value is None:
            merged[key] = ""
        elif isinstance(value, str):
            merged[key] = value
        else:
            # Unquoted go: 1.10 loads as the float 1.1
            raise ConfigurationError(
                f"Default '{key}' in {config_file} must be a string, got "
                f"{type(value).__name__} {value!r}; quote the value, "
                f"e.g. go: \"1.10\""
            )
    return merged


def load_settings(
    config_file: Optional[Path] = None, required: bool = False
) -> Settings:
    """
    Load settings from a YAML configuration file.

    Args:
        config_file: Path to the configuration file (default: ./xgo.yaml)
        required: If True, a missing file is an error

    Returns:
        Settings with file values applied over the built-in defaults

    Raises:
        ConfigurationError: If the file is required but missing, or invalid
    """
    if config_file is None:
        config_file = Path.cwd() / DEFAULT_CONFIG_NAME

    if not config_file.exists():
        if required:
            raise ConfigurationError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return Settings()

    logger.debug(f"Loading configuration from {config_file}")
    data = _read_yaml(config_file)

    known = {"runtime", "image_prefix", "mount_point", "defaults"}
    for key in data:
        if key not in known:
            logger.debug(f"Ignoring unknown configuration key '{key}'")

    return Settings(
        runtime=str(data.get("runtime") or "docker"),
        image_prefix=str(data.get("image_prefix") or DEFAULT_IMAGE_PREFIX),
        mount_point=str(data.get("mount_point") or DEFAULT_MOUNT_POINT),
        defaults=MappingProxyType(
            _merge_defaults(data.get("defaults"), config_file)
        ),
    )
