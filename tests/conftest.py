"""Shared test fixtures for media_inspect."""

import logging
import stat
from collections.abc import Callable
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "mediainfo"


def load_mediainfo_fixture(name: str) -> bytes:
    """Load a mediainfo JSON fixture by name (without .json extension)."""
    return (FIXTURES_DIR / f"{name}.json").read_bytes()


@pytest.fixture
def video_audio_report() -> bytes:
    """Report for a file with one video and one audio track."""
    return load_mediainfo_fixture("video_audio")


@pytest.fixture
def text_file_report() -> bytes:
    """Report mediainfo produces for a plain text file."""
    return load_mediainfo_fixture("text_file")


@pytest.fixture
def multi_track_report() -> bytes:
    """Report with video, two audio, text and menu tracks."""
    return load_mediainfo_fixture("multi_track")


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def fake_mediainfo(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an executable stand-in for mediainfo.

    The script records each invocation's arguments in ``calls.log`` next to
    it, exits ``no_args_exit`` when run without arguments, and otherwise
    prints ``report`` (if any) and exits ``exit_code``.
    """

    def _make(
        report: bytes | None = None,
        *,
        no_args_exit: int = 255,
        exit_code: int = 0,
        stderr: str = "",
        name: str = "mediainfo",
    ) -> Path:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        report_path = bin_dir / f"{name}.out"
        report_path.write_bytes(report or b"")
        calls_log = bin_dir / "calls.log"

        script = bin_dir / name
        script.write_text(
            "#!/bin/sh\n"
            f"echo \"$*\" >> '{calls_log}'\n"
            'if [ "$#" -eq 0 ]; then\n'
            "  echo 'Usage: \"MediaInfo [-Options...] FileName1 [Filename2...]\"'\n"
            f"  exit {no_args_exit}\n"
            "fi\n"
            + (f"echo '{stderr}' >&2\n" if stderr else "")
            + f"cat '{report_path}'\n"
            f"exit {exit_code}\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


@pytest.fixture
def read_calls() -> Callable[[Path], list[str]]:
    """Return a reader for the argument lines a fake_mediainfo script recorded."""

    def _read(script: Path) -> list[str]:
        calls_log = script.parent / "calls.log"
        if not calls_log.exists():
            return []
        return calls_log.read_text().splitlines()

    return _read
