"""Process exit statuses of the media-inspect CLI.

Each error class from the library maps to its own status so scripts can
tell a missing tool from a file that simply is not media.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """media-inspect exit statuses, grouped by tens."""

    SUCCESS = 0
    GENERAL_ERROR = 1

    CONFIG_ERROR = 11

    TARGET_NOT_FOUND = 20

    TOOL_NOT_AVAILABLE = 30  # ToolNotInstalledError
    INVOCATION_FAILED = 40  # InvocationFailedError, including timeouts

    PARSE_ERROR = 51  # MalformedOutputError
    INVALID_MEDIA = 52  # InvalidMediaError
