"""Image extraction from video containers.

- FFmpegImageExtractor: Production ImageExtractor using ffmpeg
- ImageExtractionError: Exception for extraction failures
- ExtractionCancelledError: Extraction aborted by its cancel event
"""

from embedart.extractor.ffmpeg import (
    FFmpegImageExtractor,
    build_extract_command,
    build_input_argument,
)
from embedart.extractor.interface import (
    ExtractionCancelledError,
    ImageExtractionError,
)

__all__ = [
    "ExtractionCancelledError",
    "FFmpegImageExtractor",
    "ImageExtractionError",
    "build_extract_command",
    "build_input_argument",
]
