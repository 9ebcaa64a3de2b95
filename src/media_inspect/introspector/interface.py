"""MediaIntrospector interface and error hierarchy for media inspection."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from media_inspect.introspector.models import MediaInfo


class MediaInspectError(Exception):
    """Base class for all media inspection failures."""

    pass


class ToolNotInstalledError(MediaInspectError):
    """Raised when the mediainfo binary cannot be found on this host."""

    pass


class InvocationFailedError(MediaInspectError):
    """Raised when running mediainfo against a file fails.

    Attributes:
        cause: The underlying execution error (spawn failure or
            non-zero exit), also available as ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvocationTimeoutError(InvocationFailedError):
    """Raised when mediainfo does not finish within the configured timeout."""

    pass


class MalformedOutputError(MediaInspectError):
    """Raised when mediainfo output is not the expected JSON report."""

    pass


class InvalidMediaError(MediaInspectError):
    """Raised when a parsed report does not describe audio+video media.

    Attributes:
        media_info: The classified (partial) result, kept for diagnostics.
    """

    def __init__(self, message: str, media_info: MediaInfo) -> None:
        super().__init__(message)
        self.media_info = media_info


class MediaIntrospector(Protocol):
    """Protocol for media introspection implementations."""

    def is_installed(self) -> bool:
        """Report whether the analysis tool can be executed on this host."""
        ...

    def get_media_info(self, path: Path) -> MediaInfo:
        """Analyze a media file.

        Args:
            path: Path to the candidate media file.

        Returns:
            MediaInfo with General, Video and Audio tracks.

        Raises:
            MediaInspectError: If the file cannot be introspected.
        """
        ...
