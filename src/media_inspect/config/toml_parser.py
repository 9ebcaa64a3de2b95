"""TOML file loading for configuration files."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class TomlParseError(Exception):
    """Raised when a config file exists but is not valid TOML."""

    pass


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML content into a dictionary.

    Raises:
        TomlParseError: If the content is not valid TOML.
    """
    try:
        return tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise TomlParseError(str(e)) from e


def load_toml_file(path: Path, *, strict: bool = False) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path: Path to the TOML file.
        strict: If True, raise on read or parse failures instead of
            returning an empty dict.

    Returns:
        Parsed dictionary. Empty dict if the file doesn't exist (or, when
        not strict, cannot be read or parsed).

    Raises:
        TomlParseError: When strict=True and the file cannot be loaded.
    """
    if not path.exists():
        logger.debug("TOML file not found: %s", path)
        return {}

    try:
        config = parse_toml(path.read_text(encoding="utf-8"))
    except OSError as e:
        if strict:
            raise TomlParseError(f"Cannot read {path}: {e}") from e
        logger.warning("Failed to read TOML file %s: %s", path, e)
        return {}
    except TomlParseError as e:
        if strict:
            raise TomlParseError(f"Invalid TOML in {path}: {e}") from e
        logger.warning("Failed to parse TOML file %s: %s", path, e)
        return {}

    logger.debug("Loaded TOML config from %s", path)
    return config
