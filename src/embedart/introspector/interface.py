"""MediaIntrospector interface for container stream inventory."""

from pathlib import Path
from typing import Protocol

from embedart.domain import IntrospectionResult
from embedart.exceptions import EmbedartError


class MediaIntrospectionError(EmbedartError):
    """Raised when media introspection fails."""

    pass


class MediaIntrospector(Protocol):
    """Protocol for media introspection implementations.

    Implementations list the streams and attachments of a container so a
    MediaItem can be built for the image providers.
    """

    def get_file_info(self, path: Path) -> IntrospectionResult:
        """Extract stream metadata from a video file.

        Args:
            path: Path to the video file.

        Returns:
            IntrospectionResult containing tracks and attachments.

        Raises:
            MediaIntrospectionError: If the file cannot be introspected.
        """
        ...
