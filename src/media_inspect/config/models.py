"""Configuration data models.

InspectorConfig is what the introspector runs with; LoggingConfig drives
configure_logging(); AppConfig bundles both for the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

DEFAULT_MEDIAINFO_BINARY = "mediainfo"

LOG_LEVELS = ("debug", "info", "warning", "error")
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class InspectorConfig:
    """Settings for running the mediainfo tool.

    Frozen so one instance can be shared by concurrent callers.
    """

    mediainfo_path: str = DEFAULT_MEDIAINFO_BINARY
    """Path or bare name of the mediainfo binary (bare names use PATH)."""

    timeout_seconds: float | None = None
    """Limit for one mediainfo run. None blocks until the tool exits."""

    def __post_init__(self) -> None:
        if not self.mediainfo_path or not self.mediainfo_path.strip():
            raise ValueError("mediainfo_path must not be empty")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got {self.timeout_seconds}"
            )


@dataclass(frozen=True)
class LoggingConfig:
    """Where and how media_inspect logs."""

    level: str = "warning"
    file: Path | None = None  # None logs to stderr only
    format: str = "text"
    include_stderr: bool = False  # also log to stderr when file is set
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5

    def __post_init__(self) -> None:
        if self.level.lower() not in LOG_LEVELS:
            raise ValueError(
                f"log level must be one of {', '.join(LOG_LEVELS)}, "
                f"got {self.level!r}"
            )
        if self.format.lower() not in LOG_FORMATS:
            raise ValueError(
                f"log format must be one of {', '.join(LOG_FORMATS)}, "
                f"got {self.format!r}"
            )
        if self.max_bytes < 0:
            raise ValueError(f"max_bytes must not be negative, got {self.max_bytes}")
        if self.backup_count < 0:
            raise ValueError(
                f"backup_count must not be negative, got {self.backup_count}"
            )

    def with_overrides(self, **overrides: Any) -> LoggingConfig:
        """Return a copy with every non-None override applied.

        Raises:
            ValueError: If an override fails validation.
        """
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


@dataclass
class AppConfig:
    """Complete media_inspect configuration."""

    inspector: InspectorConfig = field(default_factory=InspectorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
