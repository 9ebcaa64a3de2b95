"""Result types for mediainfo availability checks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class SpawnFailureKind(Enum):
    """Outcome of a failed attempt to run an external tool."""

    NOT_FOUND = "not_found"
    NON_ZERO_EXIT = "non_zero_exit"
    OTHER = "other"


class ToolStatus(Enum):
    """What detect_mediainfo() found."""

    AVAILABLE = "available"
    MISSING = "missing"
    ERROR = "error"  # on PATH, but `--Version` failed


@dataclass
class MediaInfoToolInfo:
    """A located mediainfo binary and its MediaInfoLib version."""

    name: str = "mediainfo"
    path: Path | None = None
    version: str | None = None
    version_tuple: tuple[int, ...] | None = None
    status: ToolStatus = ToolStatus.MISSING
    status_message: str | None = None
    detected_at: datetime | None = None

    def is_available(self) -> bool:
        return self.status is ToolStatus.AVAILABLE
