"""Pure parsing functions for mediainfo JSON output.

These functions transform mediainfo's ``--Output=JSON`` report into
media_inspect domain objects. All functions are pure (no I/O, no side
effects) for easy testing.
"""

import logging
from collections.abc import Iterable

from pydantic import ValidationError

from media_inspect.introspector.interface import MalformedOutputError
from media_inspect.introspector.models import (
    TRACK_TYPE_AUDIO,
    TRACK_TYPE_GENERAL,
    TRACK_TYPE_VIDEO,
    MediaInfo,
    MediaInfoReport,
    Track,
)

logger = logging.getLogger(__name__)


def parse_mediainfo_output(raw: bytes | str) -> list[Track]:
    """Parse mediainfo JSON output into a list of tracks.

    No semantic validation is done here: unknown keys are ignored and
    missing keys are left unset.

    Args:
        raw: Captured stdout of ``mediainfo --Output=JSON``.

    Returns:
        Tracks in the order mediainfo reported them. Empty if the report
        has no ``media`` object or no ``track`` list.

    Raises:
        MalformedOutputError: If the output is not a JSON report object.
    """
    try:
        report = MediaInfoReport.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedOutputError(f"Invalid mediainfo output: {e}") from e

    if report.media is None or report.media.track is None:
        logger.debug("mediainfo report contains no tracks")
        return []

    return list(report.media.track)


def classify_tracks(tracks: Iterable[Track]) -> MediaInfo:
    """Group tracks into General, Video and Audio, keeping source order.

    Tracks with any other type (Text, Menu, Image, Other or none) are
    dropped.

    Args:
        tracks: Parsed tracks.

    Returns:
        MediaInfo with one tuple per recognized track type.
    """
    general: list[Track] = []
    video: list[Track] = []
    audio: list[Track] = []
    buckets = {
        TRACK_TYPE_GENERAL: general,
        TRACK_TYPE_VIDEO: video,
        TRACK_TYPE_AUDIO: audio,
    }

    for track in tracks:
        bucket = buckets.get(track.type or "")
        if bucket is None:
            logger.debug("Skipping track of type %r", track.type)
            continue
        bucket.append(track)

    return MediaInfo(general=tuple(general), video=tuple(video), audio=tuple(audio))
