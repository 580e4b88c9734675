"""Eligibility checks for embedded image extraction."""

from __future__ import annotations

import logging

from embedart.domain import ImageRole, MediaItem, VideoType

logger = logging.getLogger(__name__)

_ALL_ROLES: frozenset[ImageRole] = frozenset(
    {ImageRole.PRIMARY, ImageRole.BACKDROP, ImageRole.LOGO}
)
_EPISODE_ROLES: frozenset[ImageRole] = frozenset({ImageRole.PRIMARY})


def supports(item: MediaItem) -> bool:
    """Check whether an item can be handled at all.

    Shortcuts and items not on the local filesystem are rejected first;
    otherwise the item must be a complete, non-placeholder video.
    """
    if item.is_shortcut:
        return False

    if not item.is_file_protocol:
        return False

    return item.is_video and not item.is_placeholder and item.is_complete_media


def supported_roles(item: MediaItem) -> frozenset[ImageRole]:
    """Return the image roles an item advertises as obtainable.

    Episodes only get a primary image; other videos get every role and
    non-video items get none.
    """
    if not item.is_video:
        return frozenset()

    if item.is_episode:
        return _EPISODE_ROLES

    return _ALL_ROLES


def can_attempt_extraction(item: MediaItem) -> bool:
    """Pre-check run before any candidate selection.

    Returns False for placeholders, DVD folder structures and items
    without a default video stream.
    """
    if item.is_placeholder or item.video_type is VideoType.DVD:
        return False

    # No video streams were found in the file
    if item.default_video_stream_index is None:
        logger.info(
            "Skipping image extraction due to missing default video stream "
            "index for %s",
            item.path or "",
        )
        return False

    return True
