"""Image provider that extracts artwork embedded in video containers.

Used when no external artwork is available. Attachments named like artwork
(e.g. "cover.jpg" in a Matroska file) are preferred over embedded image
streams; see embedart.providers.matcher for the selection rules.
"""

from __future__ import annotations

import logging
import threading

from embedart.core.mime import file_name_extension, mime_to_extension
from embedart.domain import (
    AttachmentInfo,
    ExtractionResult,
    ImageFormat,
    ImageRole,
    MediaItem,
    MediaProtocol,
    MediaSourceDescriptor,
    TrackInfo,
)
from embedart.providers import eligibility
from embedart.providers.interface import ImageExtractor
from embedart.providers.matcher import select_candidate

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_EXTENSION = "jpg"

_EXTENSION_FORMATS: dict[str, ImageFormat] = {
    "bmp": ImageFormat.BMP,
    "gif": ImageFormat.GIF,
    "jpg": ImageFormat.JPG,
    "png": ImageFormat.PNG,
    "webp": ImageFormat.WEBP,
}


def build_source_descriptor(item: MediaItem) -> MediaSourceDescriptor:
    """Build the source description handed to the extractor."""
    return MediaSourceDescriptor(
        video_type=item.video_type,
        iso_type=item.iso_type,
        protocol=item.path_protocol or MediaProtocol.FILE,
    )


def resolve_attachment_extension(attachment: AttachmentInfo) -> str:
    """Pick the output extension for an attachment.

    The MIME type wins; then the file name's extension; then "jpg".
    """
    return (
        mime_to_extension(attachment.mime_type)
        or file_name_extension(attachment.file_name)
        or DEFAULT_IMAGE_EXTENSION
    )


def extension_to_format(extension: str) -> ImageFormat:
    """Map an extension to an image format, defaulting to JPG."""
    return _EXTENSION_FORMATS.get(extension.casefold(), ImageFormat.JPG)


class EmbeddedImageProvider:
    """Extracts embedded images with an ImageExtractor (normally ffmpeg).

    Runs after internet image providers but before screen grabbers.
    Extraction failures propagate to the caller; nothing is retried.
    """

    name = "Embedded Image Extractor"
    priority = 99

    def __init__(self, extractor: ImageExtractor) -> None:
        self._extractor = extractor

    def supported_roles(self, item: MediaItem) -> frozenset[ImageRole]:
        return eligibility.supported_roles(item)

    def supports(self, item: MediaItem) -> bool:
        return eligibility.supports(item)

    def fetch(
        self,
        item: MediaItem,
        role: ImageRole,
        cancel_event: threading.Event | None = None,
    ) -> ExtractionResult:
        """Extract the embedded image best matching a role.

        Args:
            item: Video item to extract from.
            role: Requested image role.
            cancel_event: Passed through to the extractor.

        Returns:
            ExtractionResult; empty when the item is ineligible or no
            candidate matches.

        Raises:
            ImageExtractionError: If the extractor fails or is cancelled.
        """
        if not eligibility.can_attempt_extraction(item):
            return ExtractionResult.empty()

        candidate = select_candidate(item, role)
        if candidate is None:
            return ExtractionResult.empty()

        source = build_source_descriptor(item)
        if isinstance(candidate, AttachmentInfo):
            return self._extract_attachment(item, source, candidate, cancel_event)
        return self._extract_image_stream(item, source, candidate, cancel_event)

    def _extract_attachment(
        self,
        item: MediaItem,
        source: MediaSourceDescriptor,
        attachment: AttachmentInfo,
        cancel_event: threading.Event | None,
    ) -> ExtractionResult:
        extension = resolve_attachment_extension(attachment)
        path = self._extractor.extract_video_image(
            item.path,
            item.container,
            source,
            None,
            attachment.index,
            extension,
            cancel_event,
        )
        logger.debug(
            "Extracted attachment %d of %s to %s", attachment.index, item.path, path
        )
        return ExtractionResult(
            has_image=True,
            format=extension_to_format(extension),
            path=path,
            protocol=MediaProtocol.FILE,
        )

    def _extract_image_stream(
        self,
        item: MediaItem,
        source: MediaSourceDescriptor,
        stream: TrackInfo,
        cancel_event: threading.Event | None,
    ) -> ExtractionResult:
        path = self._extractor.extract_video_image(
            item.path,
            item.container,
            source,
            stream,
            stream.index,
            DEFAULT_IMAGE_EXTENSION,
            cancel_event,
        )
        logger.debug(
            "Extracted image stream %d of %s to %s", stream.index, item.path, path
        )
        return ExtractionResult(
            has_image=True,
            format=ImageFormat.JPG,
            path=path,
            protocol=MediaProtocol.FILE,
        )
