"""Output formatting for CLI commands.

Human-readable and JSON renderings of candidate selections and
extraction results.
"""

from __future__ import annotations

from typing import Any

from embedart.domain import (
    AttachmentInfo,
    ExtractionResult,
    ImageRole,
    MediaItem,
    TrackInfo,
)
from embedart.providers import (
    ImageCandidate,
    collect_attachments,
    collect_embedded_images,
)


def describe_candidate(candidate: ImageCandidate | None) -> str:
    """Return a one-line description of a selected candidate."""
    if candidate is None:
        return "(none)"
    if isinstance(candidate, AttachmentInfo):
        return f'attachment #{candidate.index} "{candidate.file_name}"'
    label = f' "{candidate.comment}"' if candidate.comment else ""
    return f"image stream #{candidate.index}{label}"


def _attachment_line(attachment: AttachmentInfo) -> str:
    parts = [f"#{attachment.index}", f'"{attachment.file_name or ""}"']
    if attachment.mime_type:
        parts.append(attachment.mime_type)
    return " ".join(parts)


def _image_stream_line(stream: TrackInfo) -> str:
    parts = [f"#{stream.index}"]
    if stream.codec:
        parts.append(stream.codec)
    if stream.width and stream.height:
        parts.append(f"{stream.width}x{stream.height}")
    if stream.comment:
        parts.append(f'"{stream.comment}"')
    return " ".join(parts)


def format_inspection_human(
    item: MediaItem,
    selections: dict[ImageRole, ImageCandidate | None],
    eligible: bool,
) -> str:
    """Format the candidate pools and per-role selections of an item.

    Args:
        item: Inspected item.
        selections: Selected candidate per supported role.
        eligible: Whether the item passes the extraction pre-check.

    Returns:
        Formatted string for terminal output.
    """
    lines: list[str] = [f"File: {item.path}"]
    if item.container:
        lines.append(f"Container: {item.container.split(',')[0].title()}")
    default_index = item.default_video_stream_index
    lines.append(
        "Default video stream: "
        + (f"#{default_index}" if default_index is not None else "(none)")
    )
    lines.append("")

    attachments = collect_attachments(item)
    lines.append("Attachments:")
    if attachments:
        lines.extend(f"  {_attachment_line(a)}" for a in attachments)
    else:
        lines.append("  (none)")

    streams = collect_embedded_images(item)
    lines.append("Embedded images:")
    if streams:
        lines.extend(f"  {_image_stream_line(s)}" for s in streams)
    else:
        lines.append("  (none)")

    lines.append("")
    if not eligible:
        lines.append("Image extraction is not possible for this item.")
        return "\n".join(lines)

    lines.append("Selection:")
    for role in ImageRole:
        if role in selections:
            lines.append(f"  {role.value}: {describe_candidate(selections[role])}")

    return "\n".join(lines)


def _candidate_to_dict(candidate: ImageCandidate | None) -> dict[str, Any] | None:
    if candidate is None:
        return None
    if isinstance(candidate, AttachmentInfo):
        return {
            "type": "attachment",
            "index": candidate.index,
            "file_name": candidate.file_name,
            "mime_type": candidate.mime_type,
        }
    return {
        "type": "embedded_image",
        "index": candidate.index,
        "comment": candidate.comment,
    }


def inspection_to_dict(
    item: MediaItem,
    selections: dict[ImageRole, ImageCandidate | None],
    eligible: bool,
) -> dict[str, Any]:
    """Convert an inspection to a JSON-serializable dictionary."""
    return {
        "file": item.path,
        "container": item.container,
        "default_video_stream_index": item.default_video_stream_index,
        "attachments": [
            _candidate_to_dict(a) for a in collect_attachments(item)
        ],
        "embedded_images": [
            _candidate_to_dict(s) for s in collect_embedded_images(item)
        ],
        "eligible": eligible,
        "selection": {
            role.value: _candidate_to_dict(candidate)
            for role, candidate in selections.items()
        },
    }


def result_to_dict(
    file: str,
    role: ImageRole,
    result: ExtractionResult,
) -> dict[str, Any]:
    """Convert an extraction result to a JSON-serializable dictionary."""
    return {
        "file": file,
        "role": role.value,
        "has_image": result.has_image,
        "format": result.format.value if result.format else None,
        "path": str(result.path) if result.path else None,
        "protocol": result.protocol.value if result.protocol else None,
    }
