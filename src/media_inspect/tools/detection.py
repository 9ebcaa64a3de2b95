"""External tool detection and version parsing.

This module answers "can mediainfo be run on this host?" and, for
diagnostics, which version is installed. Classification of spawn failures
is confined to classify_spawn_failure() so the availability policy can be
tested without depending on host-specific error text.
"""

import logging
import re
import shutil
import subprocess  # nosec B404 - subprocess is required for tool detection
from datetime import datetime, timezone
from pathlib import Path

from media_inspect.tools.models import MediaInfoToolInfo, SpawnFailureKind, ToolStatus

logger = logging.getLogger(__name__)

# Seconds allowed for `mediainfo --Version`
DETECTION_TIMEOUT = 10

# Exit status mediainfo uses when run without arguments (prints usage)
MEDIAINFO_NO_ARGS_EXIT_CODE = 255

# Lowercased fragments of "binary not found" messages across platforms
NOT_FOUND_ERROR_PATTERNS = (
    "no such file or directory",
    "executable file not found in %path%",
    "executable file not found in $path",
    "the system cannot find the file specified",
    "is not recognized as an internal or external command",
    "command not found",
)

_VERSION_LINE = re.compile(r"MediaInfoLib - v(?P<version>\S+)")
_NUMERIC_VERSION = re.compile(r"\d+(?:\.\d+)*")


def classify_spawn_failure(
    error: BaseException | None = None,
    returncode: int | None = None,
) -> SpawnFailureKind | None:
    """Classify the outcome of running an external tool.

    Args:
        error: Exception raised while spawning or waiting on the process.
        returncode: Exit status, when the process ran to completion.

    Returns:
        The failure kind, or None if the tool ran and exited 0.
    """
    if error is not None:
        if isinstance(error, FileNotFoundError):
            return SpawnFailureKind.NOT_FOUND
        if isinstance(error, subprocess.CalledProcessError):
            return SpawnFailureKind.NON_ZERO_EXIT
        message = str(error).lower()
        if any(pattern in message for pattern in NOT_FOUND_ERROR_PATTERNS):
            return SpawnFailureKind.NOT_FOUND
        return SpawnFailureKind.OTHER

    if returncode:
        return SpawnFailureKind.NON_ZERO_EXIT
    return None


def probe_tool(binary: str, timeout: float | None = None) -> SpawnFailureKind | None:
    """Run a tool with no arguments and classify the outcome.

    Args:
        binary: Tool name (looked up in PATH) or path to the executable.
        timeout: Optional timeout in seconds. None waits indefinitely.

    Returns:
        The failure kind, or None if the tool exited 0.
    """
    try:
        result = subprocess.run(  # nosec B603 - binary comes from configuration
            [binary],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        kind = classify_spawn_failure(error=e)
        logger.debug("Probe of %s failed (%s): %s", binary, kind.value, e)
        return kind

    kind = classify_spawn_failure(returncode=result.returncode)
    if kind is not None and result.returncode != MEDIAINFO_NO_ARGS_EXIT_CODE:
        logger.debug(
            "Probe of %s exited with unexpected status %d",
            binary,
            result.returncode,
        )
    return kind


def is_tool_installed(binary: str, timeout: float | None = None) -> bool:
    """Check whether a tool is present on this host.

    Only a "not found" failure means the tool is missing. A non-zero exit
    (mediainfo exits 255 without arguments) or any other failure still
    means the binary is there.

    Args:
        binary: Tool name (looked up in PATH) or path to the executable.
        timeout: Optional timeout in seconds for the probe.

    Returns:
        True unless the binary could not be found.
    """
    return probe_tool(binary, timeout) is not SpawnFailureKind.NOT_FOUND


def parse_version_string(version_str: str) -> tuple[int, ...] | None:
    """Turn a version string into a comparable tuple.

    ``"23.04"`` gives ``(23, 4)``; an optional ``v`` prefix and any
    non-numeric suffix are ignored, so ``"v24.01.1-rc"`` gives
    ``(24, 1, 1)``. Returns None if the string does not start with a number.
    """
    match = _NUMERIC_VERSION.match(version_str.removeprefix("v"))
    if match is None:
        return None
    return tuple(int(part) for part in match.group().split("."))


def _describe_failure(error: Exception) -> str:
    if isinstance(error, subprocess.CalledProcessError):
        return (error.stderr or "").strip() or f"exit status {error.returncode}"
    if isinstance(error, subprocess.TimeoutExpired):
        return f"timed out after {error.timeout}s"
    return str(error)


def detect_mediainfo(
    binary: str = "mediainfo", timeout: float = DETECTION_TIMEOUT
) -> MediaInfoToolInfo:
    """Locate mediainfo and read its library version.

    Args:
        binary: Tool name (looked up in PATH) or path to the executable.
        timeout: Seconds allowed for ``mediainfo --Version``.

    Returns:
        MediaInfoToolInfo with MISSING status if the binary is not on PATH,
        ERROR if ``--Version`` fails, AVAILABLE otherwise. The version is
        left unset when the output has no MediaInfoLib line.
    """
    detected_at = datetime.now(timezone.utc)

    resolved = shutil.which(binary)
    if resolved is None:
        return MediaInfoToolInfo(
            status=ToolStatus.MISSING,
            status_message=f"{binary} not found in PATH",
            detected_at=detected_at,
        )

    info = MediaInfoToolInfo(path=Path(resolved), detected_at=detected_at)
    try:
        result = subprocess.run(  # nosec B603 - resolved path and a fixed flag
            [resolved, "--Version"],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            errors="replace",
            check=True,
            timeout=timeout,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning("Could not query mediainfo version at %s: %s", resolved, e)
        info.status = ToolStatus.ERROR
        info.status_message = f"Failed to get mediainfo version: {_describe_failure(e)}"
        return info

    info.status = ToolStatus.AVAILABLE
    match = _VERSION_LINE.search(result.stdout)
    if match is None:
        logger.debug("No MediaInfoLib version in output: %r", result.stdout)
        return info

    info.version = match.group("version")
    info.version_tuple = parse_version_string(info.version)
    if info.version_tuple is None:
        logger.warning("Unrecognized mediainfo version %r", info.version)
    return info
