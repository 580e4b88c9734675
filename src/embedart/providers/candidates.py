"""Candidate pools gathered from an item's metadata."""

from __future__ import annotations

from embedart.domain import AttachmentInfo, MediaItem, TrackInfo

EMBEDDED_IMAGE_TRACK_TYPE = "embedded_image"


def collect_attachments(item: MediaItem) -> list[AttachmentInfo]:
    """Flatten the attachments of every media source.

    Order is source order, then attachment order within each source.
    """
    return [
        attachment
        for source in item.media_sources
        for attachment in source.attachments
    ]


def collect_embedded_images(item: MediaItem) -> list[TrackInfo]:
    """Return the item's embedded image streams in container order."""
    return [t for t in item.tracks if t.track_type == EMBEDDED_IMAGE_TRACK_TYPE]
