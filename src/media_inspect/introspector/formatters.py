"""Formatters for MediaInfo results.

This module renders a MediaInfo as human-readable text or JSON for the
CLI. Track values are shown exactly as mediainfo reported them.
"""

import json
from pathlib import Path
from typing import Any

from media_inspect.introspector.models import MediaInfo, Track

# mediainfo transfer_characteristics values for PQ and HLG
HDR_TRANSFERS = frozenset({"pq", "hlg"})


def format_human(info: MediaInfo, path: Path | str | None = None) -> str:
    """Format a MediaInfo for terminal output.

    Args:
        info: The classified tracks to format.
        path: Analyzed file, shown as a header when given.

    Returns:
        Formatted string for terminal output.
    """
    lines: list[str] = []

    if path is not None:
        lines.append(f"File: {path}")
    if info.general:
        general = info.general[0]
        if general.format:
            lines.append(f"Container: {general.format}")
        if general.duration:
            lines.append(f"Duration: {general.duration}s")
    if lines:
        lines.append("")

    lines.append("Tracks:")

    if info.video:
        lines.append("  Video:")
        for track in info.video:
            lines.append(f"    {format_track_line(track)}")

    if info.audio:
        lines.append("  Audio:")
        for track in info.audio:
            lines.append(f"    {format_track_line(track)}")

    if not info.video and not info.audio:
        lines.append("  (no video or audio tracks found)")

    return "\n".join(lines)


def format_track_line(track: Track) -> str:
    """Format a single Video or Audio track for human output."""
    parts = [f"#{track.id or '?'}"]

    if track.format:
        parts.append(track.format)
        if track.format_profile:
            parts[-1] += f" ({track.format_profile})"

    if track.type == "Video":
        if track.width and track.height:
            parts.append(f"{track.width}x{track.height}")
        if track.frame_rate:
            parts.append(f"@ {track.frame_rate}fps")
        if (
            track.transfer_characteristics
            and track.transfer_characteristics.casefold() in HDR_TRANSFERS
        ):
            parts.append("[HDR]")

    if track.type == "Audio":
        if track.channels:
            parts.append(f"{track.channels}ch")
        if track.sampling_rate:
            parts.append(f"{track.sampling_rate}Hz")

    if track.language:
        parts.append(track.language)

    if track.duration:
        parts.append(f"{track.duration}s")

    return " ".join(parts)


def track_to_dict(track: Track) -> dict[str, Any]:
    """Convert a Track to a dict keyed by mediainfo's field names.

    Unreported fields are omitted.
    """
    return track.model_dump(by_alias=True, exclude_none=True)


def media_info_to_dict(info: MediaInfo) -> dict[str, Any]:
    """Convert a MediaInfo to a JSON-serializable dict."""
    return {
        "general": [track_to_dict(t) for t in info.general],
        "video": [track_to_dict(t) for t in info.video],
        "audio": [track_to_dict(t) for t in info.audio],
    }


def format_json(info: MediaInfo, path: Path | str | None = None) -> str:
    """Format a MediaInfo as JSON.

    Args:
        info: The classified tracks to format.
        path: Analyzed file, included as ``file`` when given.

    Returns:
        JSON string.
    """
    data: dict[str, Any] = {}
    if path is not None:
        data["file"] = str(path)
    data["is_media"] = info.is_media()
    data.update(media_info_to_dict(info))
    return json.dumps(data, indent=2)
