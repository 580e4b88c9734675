"""Pure parsing functions for ffprobe JSON output.

These functions transform ffprobe JSON data into embedart domain objects.
All functions are pure (no I/O, no side effects) for easy testing.
"""

from pathlib import Path

from embedart.domain import AttachmentInfo, IntrospectionResult, TrackInfo

# Track type mapping from ffprobe codec_type to embedart track type
FFPROBE_TRACK_TYPES: dict[str, str] = {
    "video": "video",
    "audio": "audio",
    "subtitle": "subtitle",
    "attachment": "attachment",
    "data": "data",
}


def sanitize_string(value: str | None) -> str | None:
    """Sanitize a string by replacing invalid UTF-8 characters.

    Args:
        value: String value to sanitize.

    Returns:
        Sanitized string or None if input was None.
    """
    if value is None:
        return None
    return value.encode("utf-8", errors="replace").decode("utf-8")


def map_track_type(codec_type: str, disposition: dict | None = None) -> str:
    """Map ffprobe codec_type and disposition to an embedart track type.

    Video streams flagged attached_pic are cover images, not video.

    Returns:
        "video", "audio", "subtitle", "attachment", "data",
        "embedded_image" or "other".
    """
    if codec_type == "video" and (disposition or {}).get("attached_pic", 0) == 1:
        return "embedded_image"
    return FFPROBE_TRACK_TYPES.get(codec_type, "other")


def _non_negative_int(value: object) -> int | None:
    if isinstance(value, int) and value >= 0:
        return value
    return None


def parse_stream(stream: dict) -> TrackInfo:
    """Parse a single ffprobe stream dict into a TrackInfo.

    Embedded images take their label from the "comment" tag, falling back
    to "filename" and then "title".
    """
    disposition = stream.get("disposition", {})
    track_type = map_track_type(stream.get("codec_type", ""), disposition)
    tags = stream.get("tags", {})
    title = sanitize_string(tags.get("title"))

    comment = None
    if track_type == "embedded_image":
        comment = sanitize_string(
            tags.get("comment") or tags.get("filename") or tags.get("title")
        )

    return TrackInfo(
        index=stream.get("index", 0),
        track_type=track_type,
        codec=stream.get("codec_name"),
        language=tags.get("language"),
        title=title,
        comment=comment,
        is_default=disposition.get("default", 0) == 1,
        width=_non_negative_int(stream.get("width")),
        height=_non_negative_int(stream.get("height")),
    )


def parse_attachment(stream: dict) -> AttachmentInfo:
    """Parse an ffprobe attachment stream into an AttachmentInfo."""
    tags = stream.get("tags", {})
    return AttachmentInfo(
        index=stream.get("index", 0),
        file_name=sanitize_string(tags.get("filename")),
        mime_type=tags.get("mimetype"),
        codec=stream.get("codec_name"),
    )


def parse_streams(
    streams: list[dict],
) -> tuple[list[TrackInfo], list[AttachmentInfo], list[str]]:
    """Parse stream data into tracks and attachments.

    Args:
        streams: List of stream dictionaries from ffprobe.

    Returns:
        Tuple of (tracks list, attachments list, warnings list). Attachments
        also appear in the tracks list.
    """
    tracks: list[TrackInfo] = []
    attachments: list[AttachmentInfo] = []
    warnings: list[str] = []
    seen_indices: set[int] = set()

    for stream in streams:
        index = stream.get("index", 0)

        if index in seen_indices:
            warnings.append(f"Duplicate stream index {index}, skipping")
            continue
        seen_indices.add(index)

        track = parse_stream(stream)
        tracks.append(track)
        if track.track_type == "attachment":
            attachments.append(parse_attachment(stream))

    return tracks, attachments, warnings


def parse_ffprobe_output(path: Path, data: dict) -> IntrospectionResult:
    """Parse ffprobe JSON output into IntrospectionResult.

    Args:
        path: Path to the video file.
        data: Parsed ffprobe JSON output.

    Returns:
        IntrospectionResult with tracks, attachments and warnings.
    """
    format_info = data.get("format", {})
    container_format = format_info.get("format_name")

    tracks, attachments, warnings = parse_streams(data.get("streams", []))

    if not tracks:
        warnings.append("No streams found in file")

    return IntrospectionResult(
        file_path=path,
        container_format=container_format,
        tracks=tracks,
        attachments=attachments,
        warnings=warnings,
    )
