"""Resolve the effective configuration.

Precedence, highest first: CLI arguments, MEDIA_INSPECT_* environment
variables, the TOML config file, dataclass defaults.

Environment variables:
- MEDIA_INSPECT_MEDIAINFO_PATH: path or name of the mediainfo binary
- MEDIA_INSPECT_TIMEOUT: seconds allowed for one mediainfo run
- MEDIA_INSPECT_LOG_LEVEL, MEDIA_INSPECT_LOG_FORMAT, MEDIA_INSPECT_LOG_FILE
- MEDIA_INSPECT_LOG_INCLUDE_STDERR, MEDIA_INSPECT_LOG_MAX_BYTES,
  MEDIA_INSPECT_LOG_BACKUP_COUNT
- MEDIA_INSPECT_CONFIG_PATH: config file location
"""

from __future__ import annotations

import logging
from pathlib import Path

from media_inspect.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from media_inspect.config.env import EnvReader
from media_inspect.config.models import AppConfig
from media_inspect.config.toml_parser import load_toml_file

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".media-inspect"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

ENV_CONFIG_PATH = "CONFIG_PATH"


def get_default_config_path(env_reader: EnvReader | None = None) -> Path:
    """Config file location, honoring MEDIA_INSPECT_CONFIG_PATH."""
    reader = env_reader or EnvReader()
    return reader.get_path(ENV_CONFIG_PATH) or DEFAULT_CONFIG_FILE


def get_config(
    config_path: Path | None = None,
    mediainfo_path: str | None = None,
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> AppConfig:
    """Load the file, environment and CLI layers and merge them.

    Args:
        config_path: Config file to read instead of the default location.
        mediainfo_path: CLI override for the mediainfo binary.
        env_reader: Environment to read (os.environ when None).
        strict: Raise instead of warning when the config file is unreadable
            or not valid TOML.

    Raises:
        TomlParseError: With strict=True, if the config file cannot be loaded.
        ValueError: If a merged value is invalid.
    """
    reader = env_reader or EnvReader()
    path = config_path or get_default_config_path(reader)

    config = (
        ConfigBuilder()
        .apply(source_from_file(load_toml_file(path, strict=strict)))
        .apply(source_from_env(reader))
        .apply(ConfigSource.from_cli(mediainfo_path))
        .build()
    )

    logger.debug(
        "Resolved config from %s: mediainfo=%s timeout=%s",
        path,
        config.inspector.mediainfo_path,
        config.inspector.timeout_seconds,
    )
    return config
