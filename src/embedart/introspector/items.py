"""Build MediaItem snapshots from introspection results."""

from __future__ import annotations

from embedart.domain import (
    IntrospectionResult,
    IsoType,
    MediaItem,
    MediaKind,
    MediaProtocol,
    MediaSource,
    VideoType,
)

_URL_PROTOCOLS: dict[str, MediaProtocol] = {
    "http": MediaProtocol.HTTP,
    "https": MediaProtocol.HTTP,
    "rtmp": MediaProtocol.RTMP,
    "rtsp": MediaProtocol.RTSP,
    "udp": MediaProtocol.UDP,
    "rtp": MediaProtocol.RTP,
    "ftp": MediaProtocol.FTP,
}


def infer_protocol(path: str) -> MediaProtocol:
    """Infer the protocol of a path from its URL scheme, defaulting to FILE."""
    scheme, sep, _ = path.partition("://")
    if not sep:
        return MediaProtocol.FILE
    return _URL_PROTOCOLS.get(scheme.casefold(), MediaProtocol.FILE)


def infer_video_type(path: str) -> VideoType:
    """Infer the video type from the path's extension."""
    if path.casefold().endswith(".iso"):
        return VideoType.ISO
    return VideoType.VIDEO_FILE


def build_media_item(
    result: IntrospectionResult,
    kind: MediaKind = MediaKind.MOVIE,
    *,
    iso_type: IsoType | None = None,
    is_placeholder: bool = False,
    is_shortcut: bool = False,
    is_complete_media: bool = True,
) -> MediaItem:
    """Build a MediaItem for the image providers from probed streams.

    All attachments go into a single media source for the probed file.

    Args:
        result: Introspection result of the item's file.
        kind: Library item variant.
        iso_type: Disc layout, for ISO images.
        is_placeholder: Item is a placeholder without real media.
        is_shortcut: Item is a shortcut (.strm) to another location.
        is_complete_media: Item is complete (not a partial or missing file).

    Returns:
        MediaItem snapshot.
    """
    path = str(result.file_path)
    return MediaItem(
        path=path,
        kind=kind,
        container=result.container_format,
        video_type=infer_video_type(path),
        iso_type=iso_type,
        path_protocol=infer_protocol(path),
        is_placeholder=is_placeholder,
        is_shortcut=is_shortcut,
        is_complete_media=is_complete_media,
        default_video_stream_index=result.default_video_stream_index,
        tracks=tuple(result.tracks),
        media_sources=(
            MediaSource(path=path, attachments=tuple(result.attachments)),
        ),
    )
