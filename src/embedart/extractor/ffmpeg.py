"""ffmpeg-based implementation of the ImageExtractor protocol.

Attachments are written out with -dump_attachment; embedded image streams
are decoded and encoded as a single image frame. The output goes to a
uniquely named file in the configured temp directory.
"""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - subprocess is required for ffmpeg invocation
import tempfile
import threading
import time
import uuid
from pathlib import Path

from embedart.domain import IsoType, MediaSourceDescriptor, TrackInfo, VideoType
from embedart.exceptions import ToolNotFoundError
from embedart.extractor.interface import (
    ExtractionCancelledError,
    ImageExtractionError,
)
from embedart.tools import require_tool

logger = logging.getLogger(__name__)

# Lines of stderr kept for error messages
_STDERR_TAIL_LINES = 5


def build_input_argument(input_path: str, media_source: MediaSourceDescriptor) -> str:
    """Build the ffmpeg input argument for a source.

    Blu-ray folder structures and Blu-ray ISOs are opened through the
    bluray protocol; everything else (files and URLs) is passed as-is.
    """
    is_bluray = media_source.video_type is VideoType.BLURAY or (
        media_source.video_type is VideoType.ISO
        and media_source.iso_type is IsoType.BLURAY
    )
    if is_bluray:
        return f"bluray:{input_path}"
    return input_path


def build_extract_command(
    ffmpeg_path: Path,
    input_argument: str,
    output_path: Path,
    image_stream: TrackInfo | None,
    image_stream_index: int,
) -> list[str]:
    """Build the ffmpeg command extracting one image.

    Args:
        ffmpeg_path: Path to ffmpeg.
        input_argument: Input from build_input_argument().
        output_path: File to create.
        image_stream: Embedded image stream, or None for an attachment.
        image_stream_index: Stream index within the container.

    Returns:
        Command argument list.
    """
    cmd = [str(ffmpeg_path), "-nostdin", "-hide_banner", "-loglevel", "error", "-y"]

    if image_stream is None:
        # Attachments are dumped while opening the input; no real output needed
        cmd += [
            f"-dump_attachment:{image_stream_index}",
            str(output_path),
            "-i",
            input_argument,
            "-t",
            "0",
            "-f",
            "null",
            "-",
        ]
        return cmd

    cmd += [
        "-i",
        input_argument,
        "-map",
        f"0:{image_stream_index}",
        "-an",
        "-sn",
        "-frames:v",
        "1",
        "-f",
        "image2",
        str(output_path),
    ]
    return cmd


class FFmpegImageExtractor:
    """Extracts attachments and embedded image streams with ffmpeg.

    Supports configured ffmpeg paths via embedart configuration. Each call
    blocks until ffmpeg exits, the timeout expires or the cancel event is
    set; the last two kill the ffmpeg process.
    """

    DEFAULT_TIMEOUT: int = 60
    POLL_INTERVAL: float = 0.25

    def __init__(
        self,
        ffmpeg_path: Path | None = None,
        temp_dir: Path | None = None,
        timeout: int | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            ffmpeg_path: Optional explicit path to ffmpeg. If not provided,
                uses the configured path or system PATH on first use.
            temp_dir: Directory for extracted images. None uses the system
                temp directory.
            timeout: Seconds before ffmpeg is killed. None uses DEFAULT_TIMEOUT.
        """
        self._tool_path = ffmpeg_path
        self._temp_dir = temp_dir
        self._timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT

    @property
    def tool_path(self) -> Path:
        """Get path to ffmpeg, verifying availability.

        Raises:
            ImageExtractionError: If ffmpeg is not available.
        """
        if self._tool_path is None:
            try:
                self._tool_path = require_tool("ffmpeg")
            except ToolNotFoundError as e:
                raise ImageExtractionError(str(e)) from e
        return self._tool_path

    def create_output_path(self, extension: str) -> Path:
        """Return a unique, not yet existing output path."""
        directory = self._temp_dir or Path(tempfile.gettempdir())
        directory.mkdir(parents=True, exist_ok=True)
        return directory / f"{uuid.uuid4().hex}.{extension}"

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
        """Extract one attachment or embedded image stream to a file.

        Args:
            input_path: Path or URL of the container.
            container: Container format name, used for logging only.
            media_source: Video type, ISO type and protocol of the source.
            image_stream: Embedded image stream, or None for an attachment.
            image_stream_index: Stream index within the container.
            output_extension: Extension of the file to produce.
            cancel_event: Set to abort the extraction.

        Returns:
            Path of the extracted image.

        Raises:
            ExtractionCancelledError: If cancel_event was set.
            ImageExtractionError: If ffmpeg fails, times out, or produces
                no output.
        """
        if cancel_event is not None and cancel_event.is_set():
            raise ExtractionCancelledError(
                f"Extraction from {input_path} cancelled before start"
            )

        output_path = self.create_output_path(output_extension)
        cmd = build_extract_command(
            self.tool_path,
            build_input_argument(input_path, media_source),
            output_path,
            image_stream,
            image_stream_index,
        )
        kind = "attachment" if image_stream is None else "image stream"
        description = f"{kind} {image_stream_index} of {input_path}"
        logger.debug(
            "Extracting %s (container=%s)",
            description,
            container,
            extra={"command": "ffmpeg", "output": str(output_path)},
        )

        try:
            self._run(cmd, description, cancel_event)
            if not output_path.exists() or output_path.stat().st_size == 0:
                raise ImageExtractionError(
                    f"ffmpeg produced no image for {description}"
                )
        except BaseException:
            output_path.unlink(missing_ok=True)
            raise

        return output_path

    def _run(
        self,
        cmd: list[str],
        description: str,
        cancel_event: threading.Event | None,
    ) -> None:
        """Run ffmpeg, polling for cancellation and timeout.

        Raises:
            ExtractionCancelledError: If cancel_event is set while running.
            ImageExtractionError: On timeout, launch failure or non-zero exit.
        """
        try:
            process = subprocess.Popen(  # nosec B603 - ffmpeg path is validated
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise ImageExtractionError(f"Could not start ffmpeg: {e}") from e

        start_time = time.monotonic()
        while True:
            try:
                _, stderr = process.communicate(timeout=self.POLL_INTERVAL)
                break
            except subprocess.TimeoutExpired:
                if cancel_event is not None and cancel_event.is_set():
                    self._kill(process)
                    logger.info("Extraction of %s cancelled", description)
                    raise ExtractionCancelledError(
                        f"Extraction of {description} cancelled"
                    ) from None
                if time.monotonic() - start_time >= self._timeout:
                    self._kill(process)
                    logger.warning(
                        "Extraction of %s timed out after %s seconds",
                        description,
                        self._timeout,
                    )
                    raise ImageExtractionError(
                        f"ffmpeg timed out after {self._timeout}s extracting "
                        f"{description}"
                    ) from None

        if process.returncode != 0:
            tail = (stderr or "").strip().splitlines()[-_STDERR_TAIL_LINES:]
            raise ImageExtractionError(
                f"ffmpeg failed extracting {description} "
                f"(exit {process.returncode}): {' '.join(tail)}"
            )

    @staticmethod
    def _kill(process: subprocess.Popen) -> None:
        """Kill ffmpeg and reap it."""
        process.kill()
        process.communicate()
