"""Fixtures for CLI command tests."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from embedart.introspector.parsers import parse_ffprobe_output


@pytest.fixture
def video_file(temp_dir: Path) -> Path:
    path = temp_dir / "movie.mkv"
    path.write_bytes(b"\x1a\x45\xdf\xa3")
    return path


@pytest.fixture
def probe(video_file: Path, ffprobe_fixture):
    """Patch ffprobe for CLI commands.

    Yields a function selecting which ffprobe fixture the probed file
    reports. Defaults to the Matroska file with cover attachments.
    """
    with patch("embedart.cli.media.FFprobeIntrospector") as mock_cls:
        mock_cls.is_available.return_value = True

        def use(name: str) -> MagicMock:
            result = parse_ffprobe_output(video_file, ffprobe_fixture(name))
            mock_cls.return_value.get_file_info.return_value = result
            return mock_cls

        use("mkv_with_attachments")
        yield use
