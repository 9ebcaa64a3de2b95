"""media_inspect: typed media metadata from the mediainfo tool."""

from media_inspect.config.models import InspectorConfig
from media_inspect.introspector import (
    InvalidMediaError,
    InvocationFailedError,
    InvocationTimeoutError,
    MalformedOutputError,
    MediaInfo,
    MediaInfoIntrospector,
    MediaInspectError,
    ToolNotInstalledError,
    Track,
    get_media_info,
    is_installed,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "InspectorConfig",
    "MediaInfoIntrospector",
    "MediaInfo",
    "Track",
    "get_media_info",
    "is_installed",
    "MediaInspectError",
    "ToolNotInstalledError",
    "InvocationFailedError",
    "InvocationTimeoutError",
    "MalformedOutputError",
    "InvalidMediaError",
]
