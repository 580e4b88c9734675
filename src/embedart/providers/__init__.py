"""Image providers for embedart.

- EmbeddedImageProvider: extracts artwork embedded in video containers
- ImageProvider / ImageExtractor: provider and extractor protocols
- select_candidate: role-based choice of attachment or image stream
- supports / supported_roles / can_attempt_extraction: eligibility checks
"""

from embedart.providers.candidates import (
    collect_attachments,
    collect_embedded_images,
)
from embedart.providers.eligibility import (
    can_attempt_extraction,
    supported_roles,
    supports,
)
from embedart.providers.embedded import (
    EmbeddedImageProvider,
    build_source_descriptor,
    extension_to_format,
    resolve_attachment_extension,
)
from embedart.providers.interface import ImageExtractor, ImageProvider
from embedart.providers.matcher import ImageCandidate, select_candidate
from embedart.providers.vocabulary import ROLE_IMAGE_NAMES, get_image_names

__all__ = [
    "EmbeddedImageProvider",
    "ImageCandidate",
    "ImageExtractor",
    "ImageProvider",
    "ROLE_IMAGE_NAMES",
    "build_source_descriptor",
    "can_attempt_extraction",
    "collect_attachments",
    "collect_embedded_images",
    "extension_to_format",
    "get_image_names",
    "resolve_attachment_extension",
    "select_candidate",
    "supported_roles",
    "supports",
]
