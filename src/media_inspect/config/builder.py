"""Layered configuration assembly.

Each source (config file, environment, CLI flags) is turned into a
ConfigSource holding only the settings it actually specifies. ConfigBuilder
stacks sources in increasing precedence and builds an AppConfig, falling
back to the dataclass defaults for anything no source set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from media_inspect.config.env import EnvReader
from media_inspect.config.models import AppConfig, InspectorConfig, LoggingConfig

# Environment variable names without the MEDIA_INSPECT_ prefix
ENV_MEDIAINFO_PATH = "MEDIAINFO_PATH"
ENV_TIMEOUT = "TIMEOUT"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_LOG_FORMAT = "LOG_FORMAT"
ENV_LOG_FILE = "LOG_FILE"
ENV_LOG_INCLUDE_STDERR = "LOG_INCLUDE_STDERR"
ENV_LOG_MAX_BYTES = "LOG_MAX_BYTES"
ENV_LOG_BACKUP_COUNT = "LOG_BACKUP_COUNT"


def _present(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@dataclass
class ConfigSource:
    """Settings from one source, keyed by InspectorConfig/LoggingConfig field.

    None values are dropped on construction, so a source never masks a
    lower-precedence value it did not specify.
    """

    inspector: dict[str, Any] = field(default_factory=dict)
    logging: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.inspector = _present(self.inspector)
        self.logging = _present(self.logging)

    @classmethod
    def from_cli(cls, mediainfo_path: str | None = None) -> ConfigSource:
        return cls(inspector={"mediainfo_path": mediainfo_path})


class ConfigBuilder:
    """Merge ConfigSources; later sources take precedence.

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(load_toml_file(path)))
        builder.apply(source_from_env(EnvReader()))
        builder.apply(ConfigSource.from_cli(mediainfo_path="/opt/mediainfo"))
        config = builder.build()
    """

    def __init__(self) -> None:
        self._inspector: dict[str, Any] = {}
        self._logging: dict[str, Any] = {}

    def apply(self, source: ConfigSource) -> ConfigBuilder:
        self._inspector.update(source.inspector)
        self._logging.update(source.logging)
        return self

    def build(self) -> AppConfig:
        """Build the merged AppConfig.

        Raises:
            ValueError: If a merged value fails validation.
        """
        return AppConfig(
            inspector=InspectorConfig(**self._inspector),
            logging=LoggingConfig(**self._logging),
        )


def _table(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    table = file_config.get(name, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{name}] must be a table, got {type(table).__name__}")
    return table


def _value(
    table: dict[str, Any],
    table_name: str,
    key: str,
    expected: type | tuple[type, ...],
) -> Any:
    value = table.get(key)
    # bool is an int subclass; only accept it where bool is expected
    wrong_bool = isinstance(value, bool) and expected is not bool
    if value is not None and (wrong_bool or not isinstance(value, expected)):
        raise ValueError(
            f"[{table_name}] {key} has the wrong type: {type(value).__name__}"
        )
    return value


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Build a source from a parsed config.toml.

    Reads ``[tools] mediainfo`` and ``timeout_seconds``, and the
    ``[logging]`` table (level, file, format, include_stderr, max_bytes,
    backup_count). Unknown keys are ignored.

    Raises:
        ValueError: If a table or a recognized key has the wrong TOML type.
    """
    tools = _table(file_config, "tools")
    log_table = _table(file_config, "logging")

    mediainfo = _value(tools, "tools", "mediainfo", str)
    timeout = _value(tools, "tools", "timeout_seconds", (int, float))
    log_file = _value(log_table, "logging", "file", str)

    return ConfigSource(
        inspector={
            "mediainfo_path": mediainfo or None,
            "timeout_seconds": float(timeout) if timeout is not None else None,
        },
        logging={
            "level": _value(log_table, "logging", "level", str),
            "file": Path(log_file).expanduser() if log_file else None,
            "format": _value(log_table, "logging", "format", str),
            "include_stderr": _value(log_table, "logging", "include_stderr", bool),
            "max_bytes": _value(log_table, "logging", "max_bytes", int),
            "backup_count": _value(log_table, "logging", "backup_count", int),
        },
    )


def source_from_env(reader: EnvReader) -> ConfigSource:
    """Build a source from MEDIA_INSPECT_* environment variables.

    An empty MEDIA_INSPECT_MEDIAINFO_PATH counts as unset.
    """
    return ConfigSource(
        inspector={
            "mediainfo_path": reader.get_str(ENV_MEDIAINFO_PATH) or None,
            "timeout_seconds": reader.get_float(ENV_TIMEOUT),
        },
        logging={
            "level": reader.get_str(ENV_LOG_LEVEL),
            "file": reader.get_path(ENV_LOG_FILE),
            "format": reader.get_str(ENV_LOG_FORMAT),
            "include_stderr": reader.get_bool(ENV_LOG_INCLUDE_STDERR),
            "max_bytes": reader.get_int(ENV_LOG_MAX_BYTES),
            "backup_count": reader.get_int(ENV_LOG_BACKUP_COUNT),
        },
    )
