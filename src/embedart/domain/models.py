"""Domain models for embedart.

These models are read-only snapshots of a library item and the streams
inside its container. They are supplied per request and never mutated by
the image providers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from embedart.domain.enums import (
    VIDEO_KINDS,
    ImageFormat,
    IsoType,
    MediaKind,
    MediaProtocol,
    VideoType,
)


@dataclass(frozen=True)
class AttachmentInfo:
    """A file bundled inside a container (e.g. a Matroska attachment)."""

    index: int  # Stream index within the container
    file_name: str | None = None
    mime_type: str | None = None
    codec: str | None = None


@dataclass(frozen=True)
class TrackInfo:
    """A stream within a video container."""

    index: int
    # "video", "audio", "subtitle", "attachment", "embedded_image", "data", "other"
    track_type: str
    codec: str | None = None
    language: str | None = None
    title: str | None = None
    # Only identifying text of an embedded image stream
    comment: str | None = None
    is_default: bool = False
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True)
class MediaSource:
    """One playable version of an item and the attachments it carries."""

    path: str
    id: str | None = None
    attachments: tuple[AttachmentInfo, ...] = ()


@dataclass(frozen=True)
class MediaItem:
    """A library item evaluated by the image providers."""

    path: str
    kind: MediaKind
    container: str | None = None
    video_type: VideoType = VideoType.VIDEO_FILE
    iso_type: IsoType | None = None
    path_protocol: MediaProtocol | None = None
    is_placeholder: bool = False
    is_shortcut: bool = False
    is_complete_media: bool = True
    default_video_stream_index: int | None = None
    tracks: tuple[TrackInfo, ...] = ()
    media_sources: tuple[MediaSource, ...] = ()

    @property
    def is_video(self) -> bool:
        """Return True if the item is one of the video kinds."""
        return self.kind in VIDEO_KINDS

    @property
    def is_episode(self) -> bool:
        return self.kind is MediaKind.EPISODE

    @property
    def is_file_protocol(self) -> bool:
        """Return True if the item's path is reachable on the local filesystem."""
        return self.path_protocol in (None, MediaProtocol.FILE)


@dataclass(frozen=True)
class MediaSourceDescriptor:
    """Minimal description of a source handed to the image extractor."""

    video_type: VideoType
    iso_type: IsoType | None = None
    protocol: MediaProtocol = MediaProtocol.FILE


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of an image fetch.

    When has_image is False every other field is None.
    """

    has_image: bool
    format: ImageFormat | None = None
    path: Path | None = None
    protocol: MediaProtocol | None = None

    @classmethod
    def empty(cls) -> ExtractionResult:
        """Return the "no image" result."""
        return cls(has_image=False)


@dataclass
class IntrospectionResult:
    """Result of media file introspection."""

    file_path: Path
    container_format: str | None
    tracks: list[TrackInfo]
    attachments: list[AttachmentInfo] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def video_tracks(self) -> list[TrackInfo]:
        """Return the real video tracks (embedded images excluded)."""
        return [t for t in self.tracks if t.track_type == "video"]

    @property
    def default_video_stream_index(self) -> int | None:
        """Return the index of the default video track.

        Prefers the track flagged as default, then the first video track.
        Returns None if the file has no real video tracks.
        """
        videos = self.video_tracks
        if not videos:
            return None
        default = next((t for t in videos if t.is_default), videos[0])
        return default.index
