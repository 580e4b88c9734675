"""Stream inventory of video files via ffprobe."""

import json
import logging
import subprocess  # nosec B404 - subprocess is required for ffprobe invocation
from pathlib import Path

from embedart.domain import IntrospectionResult
from embedart.introspector.interface import MediaIntrospectionError
from embedart.introspector.parsers import parse_ffprobe_output
from embedart.tools import find_tool, get_configured_tool_path, is_tool_available

logger = logging.getLogger(__name__)

# Only the fields the parsers read; keeps output small for files with
# many attachments (fonts in anime releases)
PROBE_ENTRIES = ":".join(
    [
        "stream=index,codec_type,codec_name,width,height",
        "stream_disposition=default,attached_pic",
        "stream_tags=language,title,comment,filename,mimetype",
        "format=format_name",
    ]
)


def build_ffprobe_command(ffprobe_path: Path, path: Path) -> list[str]:
    """Build the ffprobe command listing a file's streams as JSON."""
    return [
        str(ffprobe_path),
        "-v",
        "error",
        "-print_format",
        "json",
        "-show_entries",
        PROBE_ENTRIES,
        str(path),
    ]


class FFprobeIntrospector:
    """MediaIntrospector backed by ffprobe.

    Lists the streams, embedded images and attachments of a container.
    """

    DEFAULT_TIMEOUT: int = 60

    def __init__(self, ffprobe_path: Path | None = None, timeout: int | None = None):
        """Initialize the introspector.

        Args:
            ffprobe_path: Explicit ffprobe location. Defaults to the
                configured path, then the system PATH.
            timeout: Seconds before ffprobe is abandoned.

        Raises:
            MediaIntrospectionError: If ffprobe cannot be found.
        """
        self._ffprobe_path = ffprobe_path or find_tool(
            "ffprobe", get_configured_tool_path("ffprobe")
        )
        self._timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT

        if self._ffprobe_path is None:
            raise MediaIntrospectionError(
                "ffprobe is not installed or not in PATH. Install ffmpeg, or "
                "set EMBEDART_FFPROBE_PATH or [tools] ffprobe in "
                "~/.embedart/config.toml"
            )

    @staticmethod
    def is_available(ffprobe_path: Path | None = None) -> bool:
        if ffprobe_path is not None:
            return find_tool("ffprobe", ffprobe_path) is not None
        return is_tool_available("ffprobe")

    def get_file_info(self, path: Path) -> IntrospectionResult:
        """Probe a video file.

        Raises:
            MediaIntrospectionError: If the file is missing, ffprobe fails or
                its output cannot be understood.
        """
        if not path.exists():
            raise MediaIntrospectionError(f"File not found: {path}")

        logger.debug("Probing %s", path)
        try:
            data = self._probe(path)
        except subprocess.TimeoutExpired as e:
            raise MediaIntrospectionError(
                f"ffprobe timed out after {e.timeout}s probing {path}"
            ) from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit code {e.returncode}"
            raise MediaIntrospectionError(
                f"ffprobe could not read {path}: {detail}"
            ) from e
        except json.JSONDecodeError as e:
            raise MediaIntrospectionError(
                f"Invalid ffprobe output for {path}: {e}"
            ) from e

        if not isinstance(data, dict) or "streams" not in data:
            raise MediaIntrospectionError(
                f"Missing 'streams' in ffprobe output for {path}; "
                "the file may be corrupted or not a media file"
            )

        result = parse_ffprobe_output(path, data)
        for warning in result.warnings:
            logger.warning("%s: %s", path, warning)
        return result

    def _probe(self, path: Path):
        completed = subprocess.run(  # nosec B603 - ffprobe path is validated
            build_ffprobe_command(self._ffprobe_path, path),
            capture_output=True,
            text=True,
            errors="replace",
            check=True,
            timeout=self._timeout,
        )
        return json.loads(completed.stdout)
