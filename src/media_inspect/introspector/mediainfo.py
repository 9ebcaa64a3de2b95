"""mediainfo-based implementation of the MediaIntrospector protocol."""

import logging
import subprocess  # nosec B404 - subprocess is required for mediainfo invocation
from pathlib import Path

from media_inspect.config.models import InspectorConfig
from media_inspect.introspector.interface import (
    InvalidMediaError,
    InvocationFailedError,
    InvocationTimeoutError,
    ToolNotInstalledError,
)
from media_inspect.introspector.models import MediaInfo
from media_inspect.introspector.parsers import classify_tracks, parse_mediainfo_output
from media_inspect.tools.detection import is_tool_installed

logger = logging.getLogger(__name__)

# Arguments selecting mediainfo's full JSON report
MEDIAINFO_JSON_ARGS = ("--Output=JSON", "-f")


def run_mediainfo(
    binary: str,
    path: Path | str,
    timeout: float | None = None,
) -> bytes:
    """Run mediainfo on a file and return its raw JSON report.

    The file is not checked for existence; mediainfo reports on whatever
    it is given. Output is returned verbatim and is not size-limited.

    Args:
        binary: Path or bare name of the mediainfo executable.
        path: File to analyze.
        timeout: Optional timeout in seconds. None waits indefinitely.

    Returns:
        Captured standard output.

    Raises:
        InvocationTimeoutError: If the timeout expires.
        InvocationFailedError: If mediainfo cannot be spawned or exits non-zero.
    """
    args = [binary, *MEDIAINFO_JSON_ARGS, str(path)]
    logger.debug("Running %s", " ".join(args))
    try:
        result = subprocess.run(  # nosec B603 - binary comes from configuration
            args,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise InvocationTimeoutError(
            f"mediainfo timed out for {path} after {e.timeout}s", cause=e
        ) from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
        raise InvocationFailedError(
            f"mediainfo failed for {path}: {stderr or e}", cause=e
        ) from e
    except OSError as e:
        raise InvocationFailedError(
            f"Could not run mediainfo for {path}: {e}", cause=e
        ) from e

    return result.stdout


class MediaInfoIntrospector:
    """mediainfo-based implementation of MediaIntrospector protocol.

    Probes for the tool, runs it with JSON output, and classifies the
    report into General, Video and Audio tracks. The binary location is
    taken from an immutable InspectorConfig supplied at construction.
    """

    def __init__(self, config: InspectorConfig | None = None) -> None:
        """Initialize the introspector.

        Args:
            config: Tool settings. Defaults to ``mediainfo`` from PATH with
                no timeout.
        """
        self._config = config or InspectorConfig()

    @property
    def config(self) -> InspectorConfig:
        """Tool settings this introspector runs with."""
        return self._config

    def is_installed(self) -> bool:
        """Check whether the configured mediainfo binary can be run.

        Never raises.
        """
        return is_tool_installed(
            self._config.mediainfo_path, self._config.timeout_seconds
        )

    def get_media_info(self, path: Path | str) -> MediaInfo:
        """Analyze a media file.

        Args:
            path: Path to the candidate media file.

        Returns:
            MediaInfo with General, Video and Audio tracks.

        Raises:
            ToolNotInstalledError: If mediainfo cannot be found.
            InvocationFailedError: If running mediainfo fails.
            MalformedOutputError: If mediainfo output cannot be parsed.
            InvalidMediaError: If the file lacks a video or audio track with
                a duration. The partial result is attached as ``media_info``.
        """
        binary = self._config.mediainfo_path
        if not self.is_installed():
            raise ToolNotInstalledError(
                f"mediainfo is not installed or not in PATH ({binary}). "
                "Install mediainfo or set MEDIA_INSPECT_MEDIAINFO_PATH."
            )

        raw = run_mediainfo(binary, path, self._config.timeout_seconds)
        info = classify_tracks(parse_mediainfo_output(raw))

        if not info.is_media():
            raise InvalidMediaError(
                f"The media file is invalid: no duration ({path})", info
            )

        logger.debug(
            "Analyzed %s: %d general, %d video, %d audio tracks",
            path,
            len(info.general),
            len(info.video),
            len(info.audio),
        )
        return info


def is_installed(config: InspectorConfig | None = None) -> bool:
    """Check whether mediainfo can be run with the given settings."""
    return MediaInfoIntrospector(config).is_installed()


def get_media_info(
    path: Path | str, config: InspectorConfig | None = None
) -> MediaInfo:
    """Analyze a media file with a one-off MediaInfoIntrospector.

    See MediaInfoIntrospector.get_media_info for errors raised.
    """
    return MediaInfoIntrospector(config).get_media_info(path)
