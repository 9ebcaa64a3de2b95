"""Introspector module for media_inspect.

This module provides media introspection backed by the mediainfo tool:

- MediaIntrospector: Protocol defining the introspection interface
- MediaInfoIntrospector: Production implementation using mediainfo
- Track / MediaInfo: Parsed report and its General/Video/Audio grouping
- MediaInspectError and subclasses: Typed failure conditions
"""

from media_inspect.introspector.formatters import (
    format_human,
    format_json,
    format_track_line,
    media_info_to_dict,
    track_to_dict,
)
from media_inspect.introspector.interface import (
    InvalidMediaError,
    InvocationFailedError,
    InvocationTimeoutError,
    MalformedOutputError,
    MediaInspectError,
    MediaIntrospector,
    ToolNotInstalledError,
)
from media_inspect.introspector.mediainfo import (
    MediaInfoIntrospector,
    get_media_info,
    is_installed,
    run_mediainfo,
)
from media_inspect.introspector.models import MediaInfo, Track, TrackExtra
from media_inspect.introspector.parsers import classify_tracks, parse_mediainfo_output

__all__ = [
    "MediaIntrospector",
    "MediaInfoIntrospector",
    "get_media_info",
    "is_installed",
    "run_mediainfo",
    # Models
    "MediaInfo",
    "Track",
    "TrackExtra",
    # Parsing
    "classify_tracks",
    "parse_mediainfo_output",
    # Errors
    "MediaInspectError",
    "ToolNotInstalledError",
    "InvocationFailedError",
    "InvocationTimeoutError",
    "MalformedOutputError",
    "InvalidMediaError",
    # Formatters
    "format_human",
    "format_json",
    "format_track_line",
    "media_info_to_dict",
    "track_to_dict",
]
