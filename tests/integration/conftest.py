"""Integration test fixtures generating real media with ffmpeg.

Tests using these fixtures are skipped when ffmpeg or ffprobe is not on
PATH.
"""

from __future__ import annotations

import shutil
import subprocess  # nosec B404 - test media is generated with ffmpeg
from pathlib import Path

import pytest


def _tool_available(name: str) -> bool:
    """Check if an external tool is available in PATH."""
    return shutil.which(name) is not None


def _ffmpeg(*args: str) -> None:
    subprocess.run(  # nosec B603 - fixed test command
        ["ffmpeg", "-nostdin", "-hide_banner", "-loglevel", "error", "-y", *args],
        check=True,
        capture_output=True,
        timeout=60,
    )


@pytest.fixture(scope="session")
def tools_available() -> bool:
    """Check if both ffmpeg and ffprobe are available."""
    return _tool_available("ffmpeg") and _tool_available("ffprobe")


@pytest.fixture
def skip_without_tools(tools_available: bool) -> None:
    """Skip test if ffmpeg or ffprobe is not available."""
    if not tools_available:
        pytest.skip("ffmpeg/ffprobe not available")


@pytest.fixture
def cover_png(skip_without_tools: None, tmp_path: Path) -> Path:
    """Generate a small solid-color PNG."""
    path = tmp_path / "cover.png"
    _ffmpeg("-f", "lavfi", "-i", "color=c=red:s=64x96", "-frames:v", "1", str(path))
    return path


@pytest.fixture
def font_file(tmp_path: Path) -> Path:
    """Create a fake font file to attach."""
    path = tmp_path / "poster-font.ttf"
    path.write_bytes(b"\x00\x01\x00\x00fake font data")
    return path


def _generate_mkv(output: Path, attachment: Path, mime_type: str) -> Path:
    _ffmpeg(
        "-f",
        "lavfi",
        "-i",
        "testsrc=size=160x120:rate=5",
        "-t",
        "1",
        "-c:v",
        "mpeg4",
        "-attach",
        str(attachment),
        "-metadata:s:t:0",
        f"mimetype={mime_type}",
        "-metadata:s:t:0",
        f"filename={attachment.name}",
        str(output),
    )
    return output


@pytest.fixture
def mkv_with_cover(cover_png: Path, tmp_path: Path) -> Path:
    """Generate a Matroska file with a cover.png attachment."""
    return _generate_mkv(tmp_path / "movie.mkv", cover_png, "image/png")


@pytest.fixture
def mkv_with_font(skip_without_tools: None, font_file: Path, tmp_path: Path) -> Path:
    """Generate a Matroska file with a non-image attachment."""
    return _generate_mkv(
        tmp_path / "movie.mkv", font_file, "application/x-truetype-font"
    )
