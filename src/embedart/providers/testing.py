"""Testing utilities for image providers.

Provides a recording fake extractor and factories for domain objects.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from embedart.domain import (
    AttachmentInfo,
    MediaItem,
    MediaKind,
    MediaSource,
    MediaSourceDescriptor,
    TrackInfo,
)


@dataclass
class ExtractionCall:
    """Arguments of one extract_video_image call."""

    input_path: str
    container: str | None
    media_source: MediaSourceDescriptor
    image_stream: TrackInfo | None
    image_stream_index: int
    output_extension: str
    cancel_event: threading.Event | None


@dataclass
class RecordingExtractor:
    """ImageExtractor fake that records calls instead of running ffmpeg.

    Each call returns a fresh path under output_dir. If error is set it is
    raised instead.
    """

    output_dir: Path = Path("/tmp/embedart-test")
    error: Exception | None = None
    calls: list[ExtractionCall] = field(default_factory=list)

    def extract_video_image(
        self,
        input_path: str,
        container: str | None,
        media_source: MediaSourceDescriptor,
        image_stream: TrackInfo | None,
        image_stream_index: int,
        output_extension: str,
        cancel_event: threading.Event | None = None,
    ) -> Path:
        self.calls.append(
            ExtractionCall(
                input_path=input_path,
                container=container,
                media_source=media_source,
                image_stream=image_stream,
                image_stream_index=image_stream_index,
                output_extension=output_extension,
                cancel_event=cancel_event,
            )
        )
        if self.error is not None:
            raise self.error
        return self.output_dir / f"extract-{len(self.calls)}.{output_extension}"


def make_attachment(
    index: int,
    file_name: str | None,
    mime_type: str | None = None,
) -> AttachmentInfo:
    """Create an AttachmentInfo for testing."""
    return AttachmentInfo(index=index, file_name=file_name, mime_type=mime_type)


def make_image_stream(index: int, comment: str | None = None) -> TrackInfo:
    """Create an embedded image TrackInfo for testing."""
    return TrackInfo(
        index=index, track_type="embedded_image", codec="mjpeg", comment=comment
    )


def make_video_item(
    *,
    attachments: list[AttachmentInfo] | None = None,
    image_streams: list[TrackInfo] | None = None,
    **kwargs: Any,
) -> MediaItem:
    """Create a video MediaItem with one video stream for testing.

    Args:
        attachments: Attachments placed in a single media source.
        image_streams: Embedded image streams appended after the video stream.
        **kwargs: Overrides for MediaItem fields.

    Returns:
        MediaItem instance.
    """
    path = kwargs.pop("path", "/media/movies/Movie (2020)/movie.mkv")
    tracks = (TrackInfo(index=0, track_type="video", codec="h264", is_default=True),)
    tracks += tuple(image_streams or ())
    defaults: dict[str, Any] = {
        "path": path,
        "kind": MediaKind.MOVIE,
        "container": "matroska",
        "default_video_stream_index": 0,
        "tracks": tracks,
        "media_sources": (
            MediaSource(path=path, attachments=tuple(attachments or ())),
        ),
    }
    defaults.update(kwargs)
    return MediaItem(**defaults)
