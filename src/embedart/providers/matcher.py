"""Selection of the stream that best represents an image role.

The scan is a plain ordered walk with early exit:

1. Attachments with a file name, in source order. The first whose name
   contains any role token wins outright.
2. Embedded image streams with a comment, in container order. The first
   whose comment contains any role token wins.
3. For the primary role only, the first embedded image stream, whatever
   its comment says.

The outer loop runs over candidates, not tokens, so a stream matching a
later token can beat one matching an earlier token if it comes first.
"""

from __future__ import annotations

import logging
from typing import TypeAlias

from embedart.domain import AttachmentInfo, ImageRole, MediaItem, TrackInfo
from embedart.providers.candidates import (
    collect_attachments,
    collect_embedded_images,
)
from embedart.providers.vocabulary import contains_any_name, get_image_names

logger = logging.getLogger(__name__)

# An attachment or an embedded image stream
ImageCandidate: TypeAlias = AttachmentInfo | TrackInfo


def match_attachment(
    attachments: list[AttachmentInfo],
    names: tuple[str, ...],
) -> AttachmentInfo | None:
    """Return the first named attachment whose file name contains a token."""
    return next(
        (
            attachment
            for attachment in attachments
            if attachment.file_name
            and contains_any_name(attachment.file_name, names)
        ),
        None,
    )


def match_embedded_image(
    streams: list[TrackInfo],
    names: tuple[str, ...],
) -> TrackInfo | None:
    """Return the first commented stream whose comment contains a token."""
    return next(
        (
            stream
            for stream in streams
            if stream.comment and contains_any_name(stream.comment, names)
        ),
        None,
    )


def select_candidate(item: MediaItem, role: ImageRole) -> ImageCandidate | None:
    """Pick the attachment or embedded stream to extract for a role.

    Args:
        item: Item whose attachments and streams are scanned.
        role: Requested image role.

    Returns:
        The chosen AttachmentInfo or TrackInfo, or None when nothing fits.
    """
    names = get_image_names(role)

    attachment = match_attachment(collect_attachments(item), names)
    if attachment is not None:
        logger.debug(
            "Selected attachment %d (%s) for %s image of %s",
            attachment.index,
            attachment.file_name,
            role.value,
            item.path,
        )
        return attachment

    streams = collect_embedded_images(item)
    if not streams:
        return None

    stream = match_embedded_image(streams, names)
    if stream is not None:
        return stream

    if role is ImageRole.PRIMARY:
        # Index 0 of the unfiltered list, even if its comment is empty
        logger.debug(
            "No labelled image stream in %s, using first embedded image %d",
            item.path,
            streams[0].index,
        )
        return streams[0]

    return None
