"""Core utilities package.

Pure helper functions with no external dependencies, shared across
the providers, extractor and introspector packages.
"""

from embedart.core.mime import (
    IMAGE_MIME_EXTENSIONS,
    file_name_extension,
    mime_to_extension,
)

__all__ = [
    "IMAGE_MIME_EXTENSIONS",
    "file_name_extension",
    "mime_to_extension",
]
