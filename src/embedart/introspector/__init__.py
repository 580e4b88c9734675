"""Introspector module for embedart.

This module lists the streams and attachments of video files:

- MediaIntrospector: Protocol defining the introspection interface
- FFprobeIntrospector: Production implementation using ffprobe
- MediaIntrospectionError: Exception for introspection failures
- build_media_item: Build a MediaItem snapshot from an IntrospectionResult
"""

from embedart.introspector.ffprobe import FFprobeIntrospector
from embedart.introspector.interface import (
    MediaIntrospectionError,
    MediaIntrospector,
)
from embedart.introspector.items import (
    build_media_item,
    infer_protocol,
    infer_video_type,
)
from embedart.introspector.parsers import parse_ffprobe_output

__all__ = [
    "FFprobeIntrospector",
    "MediaIntrospectionError",
    "MediaIntrospector",
    "build_media_item",
    "infer_protocol",
    "infer_video_type",
    "parse_ffprobe_output",
]
