"""Image MIME type and file extension helpers."""

from __future__ import annotations

from pathlib import PurePath

# Lowercase MIME type -> extension (without leading dot)
IMAGE_MIME_EXTENSIONS: dict[str, str] = {
    "image/bmp": "bmp",
    "image/x-bmp": "bmp",
    "image/x-ms-bmp": "bmp",
    "image/gif": "gif",
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/pjpeg": "jpg",
    "image/png": "png",
    "image/x-png": "png",
    "image/webp": "webp",
    "image/tiff": "tiff",
    "image/svg+xml": "svg",
    "image/x-icon": "ico",
    "image/vnd.microsoft.icon": "ico",
    "image/avif": "avif",
}


def mime_to_extension(mime_type: str | None) -> str | None:
    """Map an image MIME type to a file extension.

    Parameters after ";" (e.g. "image/png; charset=binary") are ignored.

    Returns:
        Extension without a leading dot, or None if the type is unknown.
    """
    if not mime_type:
        return None
    base = mime_type.split(";", 1)[0].strip().casefold()
    return IMAGE_MIME_EXTENSIONS.get(base)


def file_name_extension(file_name: str | None) -> str | None:
    """Return the lowercase extension of a file name without the dot.

    Returns None if the name has no extension.
    """
    if not file_name:
        return None
    suffix = PurePath(file_name).suffix
    if not suffix or suffix == ".":
        return None
    return suffix[1:].casefold()
