"""Image provider and extractor protocols.

These are the contracts between the embedded image provider, the
image-acquisition pipeline that calls it, and the tool that materializes a
stream as a file.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Protocol, runtime_checkable

from embedart.domain import (
    ExtractionResult,
    ImageRole,
    MediaItem,
    MediaSourceDescriptor,
    TrackInfo,
)


class ImageExtractor(Protocol):
    """Protocol for tools that write an in-container image to a file."""

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
        """Extract one stream or attachment to a standalone image file.

        Args:
            input_path: Path or URL of the container.
            container: Container format name (e.g. "matroska").
            media_source: Video type, ISO type and protocol of the source.
            image_stream: Embedded image stream, or None for an attachment.
            image_stream_index: Stream index within the container.
            output_extension: Extension of the file to produce, without dot.
            cancel_event: Set to abort the extraction.

        Returns:
            Path of the extracted image, chosen by the extractor.

        Raises:
            ImageExtractionError: If extraction fails or is cancelled.
        """
        ...


@runtime_checkable
class ImageProvider(Protocol):
    """Protocol for image providers consumed by the acquisition pipeline.

    Required attributes:
        name: str - Static provider identifier
        priority: int - Ordering hint relative to sibling providers
    """

    name: str
    priority: int

    def supported_roles(self, item: MediaItem) -> frozenset[ImageRole]:
        """Return the roles this provider can produce for an item."""
        ...

    def supports(self, item: MediaItem) -> bool:
        """Return True if the provider can handle the item."""
        ...

    def fetch(
        self,
        item: MediaItem,
        role: ImageRole,
        cancel_event: threading.Event | None = None,
    ) -> ExtractionResult:
        """Produce an image for the role, or an empty result."""
        ...
