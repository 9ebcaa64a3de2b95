"""Data models for mediainfo JSON reports.

Track mirrors one entry of ``mediainfo --Output=JSON``'s ``media.track``
list. All values are kept as the opaque strings mediainfo reports; callers
own any numeric or unit conversion.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

# Track discriminator values the classifier recognizes
TRACK_TYPE_GENERAL = "General"
TRACK_TYPE_VIDEO = "Video"
TRACK_TYPE_AUDIO = "Audio"


class _ReportModel(BaseModel):
    """Base for report models: tolerant of unknown keys, immutable."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class TrackExtra(_ReportModel):
    """The ``extra`` block mediainfo attaches to some tracks."""

    overall_bit_rate_precision_min: str | None = Field(
        default=None, alias="OverallBitRate_Precision_Min"
    )
    overall_bit_rate_precision_max: str | None = Field(
        default=None, alias="OverallBitRate_Precision_Max"
    )


class Track(_ReportModel):
    """A single General, Video, Audio (or other) track record.

    Any field may be None: absence means "not reported" for this track
    type or codec, not an error.
    """

    # Identification
    type: str | None = Field(default=None, alias="@type")
    id: str | None = Field(default=None, alias="ID")
    stream_order: str | None = Field(default=None, alias="StreamOrder")
    menu_id: str | None = Field(default=None, alias="MenuID")
    video_count: str | None = Field(default=None, alias="VideoCount")
    audio_count: str | None = Field(default=None, alias="AudioCount")
    file_extension: str | None = Field(default=None, alias="FileExtension")
    language: str | None = Field(default=None, alias="Language")

    # Timing
    duration: str | None = Field(default=None, alias="Duration")
    frame_rate: str | None = Field(default=None, alias="FrameRate")
    frame_count: str | None = Field(default=None, alias="FrameCount")
    delay: str | None = Field(default=None, alias="Delay")
    delay_source: str | None = Field(default=None, alias="Delay_Source")

    # Sizing
    file_size: str | None = Field(default=None, alias="FileSize")
    width: str | None = Field(default=None, alias="Width")
    height: str | None = Field(default=None, alias="Height")
    stored_height: str | None = Field(default=None, alias="Stored_Height")
    sampled_width: str | None = Field(default=None, alias="Sampled_Width")
    sampled_height: str | None = Field(default=None, alias="Sampled_Height")
    pixel_aspect_ratio: str | None = Field(default=None, alias="PixelAspectRatio")
    display_aspect_ratio: str | None = Field(
        default=None, alias="DisplayAspectRatio"
    )
    bit_depth: str | None = Field(default=None, alias="BitDepth")

    # Encoding
    format: str | None = Field(default=None, alias="Format")
    format_profile: str | None = Field(default=None, alias="Format_Profile")
    format_level: str | None = Field(default=None, alias="Format_Level")
    format_settings_cabac: str | None = Field(
        default=None, alias="Format_Settings_CABAC"
    )
    format_settings_ref_frames: str | None = Field(
        default=None, alias="Format_Settings_RefFrames"
    )
    format_version: str | None = Field(default=None, alias="Format_Version")
    format_additional_features: str | None = Field(
        default=None, alias="Format_AdditionalFeatures"
    )
    codec_id: str | None = Field(default=None, alias="CodecID")
    bit_rate_mode: str | None = Field(default=None, alias="BitRate_Mode")
    bit_rate_nominal: str | None = Field(default=None, alias="BitRate_Nominal")
    bit_rate_maximum: str | None = Field(default=None, alias="BitRate_Maximum")
    overall_bit_rate_mode: str | None = Field(
        default=None, alias="OverallBitRate_Mode"
    )
    overall_bit_rate: str | None = Field(default=None, alias="OverallBitRate")
    compression_mode: str | None = Field(default=None, alias="Compression_Mode")
    muxing_mode: str | None = Field(default=None, alias="MuxingMode")
    scan_type: str | None = Field(default=None, alias="ScanType")
    buffer_size: str | None = Field(default=None, alias="BufferSize")
    encoded_library: str | None = Field(default=None, alias="Encoded_Library")
    encoded_library_name: str | None = Field(
        default=None, alias="Encoded_Library_Name"
    )
    encoded_library_version: str | None = Field(
        default=None, alias="Encoded_Library_Version"
    )
    encoded_library_settings: str | None = Field(
        default=None, alias="Encoded_Library_Settings"
    )

    # File dates
    file_modified_date: str | None = Field(default=None, alias="File_Modified_Date")
    file_modified_date_local: str | None = Field(
        default=None, alias="File_Modified_Date_Local"
    )

    # Color
    color_space: str | None = Field(default=None, alias="ColorSpace")
    chroma_subsampling: str | None = Field(default=None, alias="ChromaSubsampling")
    colour_description_present: str | None = Field(
        default=None, alias="colour_description_present"
    )
    colour_description_present_source: str | None = Field(
        default=None, alias="colour_description_present_Source"
    )
    colour_range: str | None = Field(default=None, alias="colour_range")
    colour_range_source: str | None = Field(default=None, alias="colour_range_Source")
    colour_primaries: str | None = Field(default=None, alias="colour_primaries")
    colour_primaries_source: str | None = Field(
        default=None, alias="colour_primaries_Source"
    )
    transfer_characteristics: str | None = Field(
        default=None, alias="transfer_characteristics"
    )
    transfer_characteristics_source: str | None = Field(
        default=None, alias="transfer_characteristics_Source"
    )
    matrix_coefficients: str | None = Field(
        default=None, alias="matrix_coefficients"
    )
    matrix_coefficients_source: str | None = Field(
        default=None, alias="matrix_coefficients_Source"
    )

    # Audio
    channels: str | None = Field(default=None, alias="Channels")
    channel_positions: str | None = Field(default=None, alias="ChannelPositions")
    channel_layout: str | None = Field(default=None, alias="ChannelLayout")
    samples_per_frame: str | None = Field(default=None, alias="SamplesPerFrame")
    sampling_rate: str | None = Field(default=None, alias="SamplingRate")
    sampling_count: str | None = Field(default=None, alias="SamplingCount")

    extra: TrackExtra | None = None

    def has_duration(self) -> bool:
        """True if mediainfo reported a non-empty duration for this track."""
        return bool(self.duration)


class MediaReport(_ReportModel):
    """The ``media`` object of a mediainfo JSON report."""

    ref: str | None = Field(default=None, alias="@ref")
    track: list[Track] | None = None


class MediaInfoReport(_ReportModel):
    """Top-level mediainfo JSON report.

    ``media`` is null when mediainfo could not open the file at all.
    """

    media: MediaReport | None = None


@dataclass(frozen=True)
class MediaInfo:
    """Tracks of one analyzed file, grouped by type in source order."""

    general: tuple[Track, ...] = ()
    video: tuple[Track, ...] = ()
    audio: tuple[Track, ...] = ()

    def is_media(self) -> bool:
        """Check that the file holds both video and audio with durations.

        Empty video or audio sequences are rejected before the first
        element of either is inspected.
        """
        if not self.video or not self.audio:
            return False
        return self.video[0].has_duration() and self.audio[0].has_duration()
