#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file handling and token resolution for notion2md.

The configuration lives in a YAML file, ``~/.config/notion2md.yaml`` by
default (the ``NOTION2MD_CONFIG`` environment variable points elsewhere)::

    token: secret_...
    images:
      save_path: ./images
      ignore_images: false
      overwrite_existing: false

The integration token is resolved in order of precedence: a token passed
explicitly, the ``NOTION_TOKEN`` environment variable, the config file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from notion2md.constants import (
    CONFIG_PATH_ENV_VAR,
    DEFAULT_CONFIG_DIRNAME,
    DEFAULT_CONFIG_FILENAME,
    NOTION_TOKEN_ENV_VAR,
)
from notion2md.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class ImageConfig:
    """Image settings stored in the config file; unset values fall back to defaults."""

    save_path: Optional[str] = None
    ignore_images: bool = False
    overwrite_existing: bool = False


@dataclass
class Notion2MdConfig:
    """Contents of the notion2md config file."""

    token: str = ""
    images: ImageConfig = field(default_factory=ImageConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Notion2MdConfig:
        images = data.get("images") or {}
        if not isinstance(images, dict):
            raise ValueError(f"'images' must be a mapping, got {type(images).__name__}")
        return cls(
            token=str(data.get("token") or ""),
            images=ImageConfig(
                save_path=images.get("save_path") or None,
                ignore_images=bool(images.get("ignore_images", False)),
                overwrite_existing=bool(images.get("overwrite_existing", False)),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        if data["images"]["save_path"] is None:
            del data["images"]["save_path"]
        return data


def get_config_path() -> Path:
    """Return the location of the config file.

    Returns
    -------
    Path
        ``$NOTION2MD_CONFIG`` when set, otherwise ``~/.config/notion2md.yaml``

    Raises
    ------
    ConfigurationError
        If the home directory cannot be determined

    """
    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    try:
        home = Path.home()
    except RuntimeError as e:
        raise ConfigurationError(f"Failed resolving home directory: {e}", original_error=e) from e
    return home / DEFAULT_CONFIG_DIRNAME / DEFAULT_CONFIG_FILENAME


def load_config(path: Optional[Path] = None, missing_ok: bool = False) -> Notion2MdConfig:
    """Load the config file.

    Parameters
    ----------
    path : Path, optional
        Config file to read. Defaults to :func:`get_config_path`.
    missing_ok : bool, default False
        Return an empty configuration instead of failing when the file does
        not exist

    Returns
    -------
    Notion2MdConfig
        The parsed configuration

    Raises
    ------
    ConfigurationError
        If the file is missing (and ``missing_ok`` is false), unreadable or
        not a valid config document

    """
    config_path = path or get_config_path()
    if not config_path.exists():
        if missing_ok:
            logger.debug("No config file at %s", config_path)
            return Notion2MdConfig()
        raise ConfigurationError(f"Configuration file not found: {config_path}", config_path=str(config_path))

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed loading configuration file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {config_path} must contain a mapping, got {type(data).__name__}",
            config_path=str(config_path),
        )
    try:
        config = Notion2MdConfig.from_dict(data)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid configuration in {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    logger.debug("Loaded configuration from %s", config_path)
    return config


def save_config(config: Notion2MdConfig, path: Optional[Path] = None) -> Path:
    """Write the config file, creating its directory if needed.

    Returns
    -------
    Path
        Where the configuration was written

    Raises
    ------
    ConfigurationError
        If the file cannot be written

    """
    config_path = path or get_config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigurationError(
            f"Failed to write config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    logger.debug("Saved configuration to %s", config_path)
    return config_path


def resolve_token(explicit: Optional[str] = None, config_path: Optional[Path] = None) -> str:
    """Find the Notion integration token.

    Parameters
    ----------
    explicit : str, optional
        Token supplied by the caller; wins when non-empty
    config_path : Path, optional
        Config file to fall back to. Defaults to :func:`get_config_path`.

    Returns
    -------
    str
        The token

    Raises
    ------
    ConfigurationError
        If no source provides a non-empty token

    """
    if explicit:
        return explicit

    env_token = os.environ.get(NOTION_TOKEN_ENV_VAR)
    if env_token:
        logger.debug("Using token from %s", NOTION_TOKEN_ENV_VAR)
        return env_token

    config = load_config(config_path, missing_ok=True)
    if not config.token:
        raise ConfigurationError(
            f"No Notion token found. Pass one explicitly, set {NOTION_TOKEN_ENV_VAR}, "
            "or store one with 'notion2md login <token>'.",
            config_path=str(config_path or get_config_path()),
        )
    logger.debug("Using token from configuration file")
    return config.token
