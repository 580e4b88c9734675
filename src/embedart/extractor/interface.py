"""Exceptions raised by image extractors."""

from embedart.exceptions import EmbedartError


class ImageExtractionError(EmbedartError):
    """Raised when an image cannot be extracted from a container."""

    pass


class ExtractionCancelledError(ImageExtractionError):
    """Raised when an extraction is aborted through its cancel event."""

    pass
