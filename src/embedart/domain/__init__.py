"""Domain models and enums for embedart.

This package contains the core domain types shared across embedart modules:

- Domain models: MediaItem, MediaSource, TrackInfo, AttachmentInfo,
  MediaSourceDescriptor, ExtractionResult, IntrospectionResult
- Domain enums: ImageRole, ImageFormat, VideoType, IsoType, MediaProtocol,
  MediaKind

Usage:
    from embedart.domain import MediaItem, ImageRole
"""

from .enums import (
    VIDEO_KINDS,
    ImageFormat,
    ImageRole,
    IsoType,
    MediaKind,
    MediaProtocol,
    VideoType,
)
from .models import (
    AttachmentInfo,
    ExtractionResult,
    IntrospectionResult,
    MediaItem,
    MediaSource,
    MediaSourceDescriptor,
    TrackInfo,
)

__all__ = [
    # Models
    "AttachmentInfo",
    "ExtractionResult",
    "IntrospectionResult",
    "MediaItem",
    "MediaSource",
    "MediaSourceDescriptor",
    "TrackInfo",
    # Enums
    "ImageFormat",
    "ImageRole",
    "IsoType",
    "MediaKind",
    "MediaProtocol",
    "VideoType",
    "VIDEO_KINDS",
]
