"""Unit tests for mediainfo availability probing and version detection."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from media_inspect.tools.detection import (
    MEDIAINFO_NO_ARGS_EXIT_CODE,
    classify_spawn_failure,
    detect_mediainfo,
    is_tool_installed,
    parse_version_string,
    probe_tool,
)
from media_inspect.tools.models import SpawnFailureKind, ToolStatus

posix_only = pytest.mark.skipif(
    sys.platform == "win32", reason="fake mediainfo binaries are shell scripts"
)


# =============================================================================
# Spawn Failure Classification Tests
# =============================================================================


class TestClassifySpawnFailure:
    """Tests for classify_spawn_failure()."""

    def test_success(self) -> None:
        """Exit status 0 is not a failure."""
        assert classify_spawn_failure(returncode=0) is None

    def test_file_not_found_error(self) -> None:
        """FileNotFoundError means the binary is absent."""
        error = FileNotFoundError(2, "No such file or directory", "mediainfo")
        assert classify_spawn_failure(error=error) is SpawnFailureKind.NOT_FOUND

    @pytest.mark.parametrize(
        "message",
        [
            'exec: "mediainfo": executable file not found in $PATH',
            'exec: "mediainfo": executable file not found in %PATH%',
            "fork/exec /opt/bin/mediainfo: no such file or directory",
            "[WinError 2] The system cannot find the file specified",
            "'mediainfo' is not recognized as an internal or external command",
        ],
    )
    def test_not_found_messages(self, message: str) -> None:
        """Platform-specific "not found" phrasings are recognized."""
        error = OSError(message)
        assert classify_spawn_failure(error=error) is SpawnFailureKind.NOT_FOUND

    def test_nonzero_returncode(self) -> None:
        """A completed process with a non-zero status is NON_ZERO_EXIT."""
        assert (
            classify_spawn_failure(returncode=MEDIAINFO_NO_ARGS_EXIT_CODE)
            is SpawnFailureKind.NON_ZERO_EXIT
        )
        assert classify_spawn_failure(returncode=1) is SpawnFailureKind.NON_ZERO_EXIT

    def test_called_process_error(self) -> None:
        """CalledProcessError is NON_ZERO_EXIT."""
        error = subprocess.CalledProcessError(255, ["mediainfo"])
        assert classify_spawn_failure(error=error) is SpawnFailureKind.NON_ZERO_EXIT

    def test_permission_error(self) -> None:
        """A permission failure is neither not-found nor a clean exit."""
        error = PermissionError(13, "Permission denied")
        assert classify_spawn_failure(error=error) is SpawnFailureKind.OTHER

    def test_timeout(self) -> None:
        """A probe timeout is OTHER."""
        error = subprocess.TimeoutExpired(cmd=["mediainfo"], timeout=1)
        assert classify_spawn_failure(error=error) is SpawnFailureKind.OTHER


# =============================================================================
# Probe Tests
# =============================================================================


class TestProbeTool:
    """Tests for probe_tool() and is_tool_installed() with subprocess mocked."""

    def _completed(self, returncode: int) -> subprocess.CompletedProcess:
        return subprocess.CompletedProcess(
            args=["mediainfo"], returncode=returncode, stdout=b"", stderr=b""
        )

    def test_runs_without_arguments(self) -> None:
        """The probe runs the binary with no arguments."""
        with patch("subprocess.run", return_value=self._completed(255)) as mock_run:
            probe_tool("/usr/bin/mediainfo")

        assert mock_run.call_args.args[0] == ["/usr/bin/mediainfo"]

    def test_exit_255_is_installed(self) -> None:
        """mediainfo's no-argument exit status counts as installed."""
        with patch("subprocess.run", return_value=self._completed(255)):
            assert probe_tool("mediainfo") is SpawnFailureKind.NON_ZERO_EXIT
            assert is_tool_installed("mediainfo") is True

    def test_exit_0_is_installed(self) -> None:
        """A clean exit counts as installed."""
        with patch("subprocess.run", return_value=self._completed(0)):
            assert probe_tool("mediainfo") is None
            assert is_tool_installed("mediainfo") is True

    def test_not_found_is_not_installed(self) -> None:
        """FileNotFoundError from spawn means not installed."""
        with patch("subprocess.run", side_effect=FileNotFoundError(2, "nope")):
            assert probe_tool("mediainfo") is SpawnFailureKind.NOT_FOUND
            assert is_tool_installed("mediainfo") is False

    def test_permission_error_is_installed(self) -> None:
        """Only a not-found failure reports the tool as missing."""
        with patch("subprocess.run", side_effect=PermissionError(13, "denied")):
            assert probe_tool("mediainfo") is SpawnFailureKind.OTHER
            assert is_tool_installed("mediainfo") is True

    def test_timeout_is_passed_through(self) -> None:
        """The probe honors the configured timeout."""
        with patch("subprocess.run", return_value=self._completed(0)) as mock_run:
            is_tool_installed("mediainfo", timeout=2.5)

        assert mock_run.call_args.kwargs["timeout"] == 2.5


@posix_only
class TestProbeWithRealProcesses:
    """Probe tests that spawn real processes."""

    def test_nonexistent_path(self, tmp_path: Path) -> None:
        """A path that does not exist is not installed."""
        assert is_tool_installed(str(tmp_path / "mediainfo")) is False

    def test_fake_binary_exit_255(self, fake_mediainfo) -> None:
        """A present stand-in exiting 255 is installed."""
        binary = fake_mediainfo(no_args_exit=255)
        assert probe_tool(str(binary)) is SpawnFailureKind.NON_ZERO_EXIT
        assert is_tool_installed(str(binary)) is True

    def test_fake_binary_exit_0(self, fake_mediainfo) -> None:
        """A present stand-in exiting 0 is installed."""
        binary = fake_mediainfo(no_args_exit=0)
        assert probe_tool(str(binary)) is None
        assert is_tool_installed(str(binary)) is True


# =============================================================================
# Version Parsing Tests
# =============================================================================


class TestParseVersionString:
    """Tests for version string parsing."""

    def test_two_part_version(self) -> None:
        """MediaInfoLib year.month versions parse correctly."""
        assert parse_version_string("23.04") == (23, 4)
        assert parse_version_string("21.09") == (21, 9)

    def test_three_part_version(self) -> None:
        """Older three-part versions parse correctly."""
        assert parse_version_string("0.7.99") == (0, 7, 99)

    def test_v_prefix(self) -> None:
        """Version 'v' prefix should be stripped."""
        assert parse_version_string("v24.01") == (24, 1)

    def test_version_with_suffix(self) -> None:
        """Version with suffix should extract numeric part."""
        assert parse_version_string("24.01.1-rc") == (24, 1, 1)

    def test_empty_string(self) -> None:
        """Empty string should return None."""
        assert parse_version_string("") is None

    def test_non_version_string(self) -> None:
        """Non-version string should return None."""
        assert parse_version_string("not-a-version") is None

    def test_version_comparison(self) -> None:
        """Parsed versions should be comparable."""
        assert parse_version_string("21.09") < parse_version_string("23.04")


# =============================================================================
# Version Detection Tests
# =============================================================================


class TestDetectMediainfo:
    """Tests for detect_mediainfo()."""

    def _version_output(self, stdout: str) -> subprocess.CompletedProcess:
        return subprocess.CompletedProcess(
            args=["/usr/bin/mediainfo", "--Version"],
            returncode=0,
            stdout=stdout,
            stderr="",
        )

    def test_not_in_path(self) -> None:
        """Missing binary reports MISSING status."""
        with patch("shutil.which", return_value=None):
            info = detect_mediainfo("mediainfo")

        assert info.status == ToolStatus.MISSING
        assert info.path is None
        assert info.detected_at is not None
        assert not info.is_available()

    def test_version_detected(self) -> None:
        """Version is parsed from the MediaInfoLib line."""
        output = "MediaInfo Command line, \nMediaInfoLib - v23.04\n"
        with (
            patch("shutil.which", return_value="/usr/bin/mediainfo"),
            patch(
                "subprocess.run", return_value=self._version_output(output)
            ) as mock_run,
        ):
            info = detect_mediainfo("mediainfo")

        assert mock_run.call_args.args[0] == ["/usr/bin/mediainfo", "--Version"]
        assert mock_run.call_args.kwargs["timeout"] == 10
        assert info.status == ToolStatus.AVAILABLE
        assert info.path == Path("/usr/bin/mediainfo")
        assert info.version == "23.04"
        assert info.version_tuple == (23, 4)
        assert info.is_available()

    def test_version_command_fails(self) -> None:
        """A failing --Version run reports ERROR status with its stderr."""
        error = subprocess.CalledProcessError(
            1, ["/usr/bin/mediainfo", "--Version"], output="", stderr="boom\n"
        )
        with (
            patch("shutil.which", return_value="/usr/bin/mediainfo"),
            patch("subprocess.run", side_effect=error),
        ):
            info = detect_mediainfo("mediainfo")

        assert info.status == ToolStatus.ERROR
        assert not info.is_available()
        assert info.status_message == "Failed to get mediainfo version: boom"

    def test_version_command_times_out(self) -> None:
        error = subprocess.TimeoutExpired(cmd=["mediainfo", "--Version"], timeout=10)
        with (
            patch("shutil.which", return_value="/usr/bin/mediainfo"),
            patch("subprocess.run", side_effect=error),
        ):
            info = detect_mediainfo("mediainfo")

        assert info.status == ToolStatus.ERROR
        assert "timed out after 10s" in info.status_message

    def test_unrecognized_version_output(self) -> None:
        """Unknown output still reports the tool available without a version."""
        with (
            patch("shutil.which", return_value="/usr/bin/mediainfo"),
            patch("subprocess.run", return_value=self._version_output("hello")),
        ):
            info = detect_mediainfo("mediainfo")

        assert info.status == ToolStatus.AVAILABLE
        assert info.version is None
