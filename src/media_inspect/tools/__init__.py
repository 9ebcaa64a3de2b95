"""External tool detection.

This module provides the availability probe and version detection for the
mediainfo command line tool.
"""

from media_inspect.tools.detection import (
    MEDIAINFO_NO_ARGS_EXIT_CODE,
    NOT_FOUND_ERROR_PATTERNS,
    classify_spawn_failure,
    detect_mediainfo,
    is_tool_installed,
    parse_version_string,
    probe_tool,
)
from media_inspect.tools.models import MediaInfoToolInfo, SpawnFailureKind, ToolStatus

__all__ = [
    # Detection
    "MEDIAINFO_NO_ARGS_EXIT_CODE",
    "NOT_FOUND_ERROR_PATTERNS",
    "classify_spawn_failure",
    "detect_mediainfo",
    "is_tool_installed",
    "parse_version_string",
    "probe_tool",
    # Models
    "MediaInfoToolInfo",
    "SpawnFailureKind",
    "ToolStatus",
]
