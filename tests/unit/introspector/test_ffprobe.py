"""Unit tests for FFprobeIntrospector."""

import json
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from embedart.introspector import FFprobeIntrospector, MediaIntrospectionError
from embedart.introspector.ffprobe import PROBE_ENTRIES, build_ffprobe_command


@pytest.fixture
def video_file(temp_dir: Path) -> Path:
    path = temp_dir / "movie.mkv"
    path.write_bytes(b"\x1a\x45\xdf\xa3")
    return path


@pytest.fixture
def introspector() -> FFprobeIntrospector:
    return FFprobeIntrospector(ffprobe_path=Path("/usr/bin/ffprobe"))


def _completed(stdout: str) -> MagicMock:
    result = MagicMock()
    result.stdout = stdout
    return result


class TestFFprobeIntrospectorInit:
    """Tests for FFprobeIntrospector construction."""

    def test_missing_ffprobe_raises(self) -> None:
        with patch("embedart.introspector.ffprobe.find_tool", return_value=None):
            with pytest.raises(MediaIntrospectionError, match="ffprobe"):
                FFprobeIntrospector()

    def test_uses_found_tool(self) -> None:
        with patch(
            "embedart.introspector.ffprobe.find_tool",
            return_value=Path("/opt/ffprobe"),
        ):
            introspector = FFprobeIntrospector()

        assert introspector._ffprobe_path == Path("/opt/ffprobe")

    def test_default_timeout(self) -> None:
        introspector = FFprobeIntrospector(ffprobe_path=Path("/usr/bin/ffprobe"))
        assert introspector._timeout == FFprobeIntrospector.DEFAULT_TIMEOUT

    def test_explicit_zero_timeout_kept(self) -> None:
        introspector = FFprobeIntrospector(
            ffprobe_path=Path("/usr/bin/ffprobe"), timeout=0
        )
        assert introspector._timeout == 0

    def test_is_available_with_explicit_path(self, temp_dir: Path) -> None:
        ffprobe = temp_dir / "ffprobe"
        ffprobe.write_text("")

        with patch("embedart.introspector.ffprobe.is_tool_available") as fallback:
            assert FFprobeIntrospector.is_available(ffprobe) is True

        fallback.assert_not_called()

    def test_is_available_uses_configuration(self) -> None:
        with patch(
            "embedart.introspector.ffprobe.is_tool_available", return_value=False
        ):
            assert FFprobeIntrospector.is_available() is False


class TestGetFileInfo:
    """Tests for FFprobeIntrospector.get_file_info()."""

    def test_parses_output(
        self,
        introspector: FFprobeIntrospector,
        video_file: Path,
        mkv_with_attachments_fixture: dict,
    ) -> None:
        with patch(
            "embedart.introspector.ffprobe.subprocess.run",
            return_value=_completed(json.dumps(mkv_with_attachments_fixture)),
        ) as mock_run:
            result = introspector.get_file_info(video_file)

        cmd = mock_run.call_args.args[0]
        assert cmd[0] == "/usr/bin/ffprobe"
        assert cmd[cmd.index("-show_entries") + 1] == PROBE_ENTRIES
        assert cmd[-1] == str(video_file)
        assert result.file_path == video_file
        assert len(result.attachments) == 4

    def test_missing_file(self, introspector: FFprobeIntrospector) -> None:
        with pytest.raises(MediaIntrospectionError, match="File not found"):
            introspector.get_file_info(Path("/nonexistent/movie.mkv"))

    def test_ffprobe_failure(
        self, introspector: FFprobeIntrospector, video_file: Path
    ) -> None:
        error = subprocess.CalledProcessError(1, "ffprobe", stderr="Invalid data")
        with patch("embedart.introspector.ffprobe.subprocess.run", side_effect=error):
            with pytest.raises(MediaIntrospectionError, match="Invalid data"):
                introspector.get_file_info(video_file)

    def test_timeout(
        self, introspector: FFprobeIntrospector, video_file: Path
    ) -> None:
        error = subprocess.TimeoutExpired("ffprobe", 60)
        with patch("embedart.introspector.ffprobe.subprocess.run", side_effect=error):
            with pytest.raises(MediaIntrospectionError, match="timed out"):
                introspector.get_file_info(video_file)

    def test_invalid_json(
        self, introspector: FFprobeIntrospector, video_file: Path
    ) -> None:
        with patch(
            "embedart.introspector.ffprobe.subprocess.run",
            return_value=_completed("not json"),
        ):
            with pytest.raises(MediaIntrospectionError, match="Invalid ffprobe"):
                introspector.get_file_info(video_file)

    def test_missing_streams_key(
        self, introspector: FFprobeIntrospector, video_file: Path
    ) -> None:
        with patch(
            "embedart.introspector.ffprobe.subprocess.run",
            return_value=_completed('{"format": {}}'),
        ):
            with pytest.raises(MediaIntrospectionError, match="Missing 'streams'"):
                introspector.get_file_info(video_file)

    def test_nonzero_exit_without_stderr(
        self, introspector: FFprobeIntrospector, video_file: Path
    ) -> None:
        error = subprocess.CalledProcessError(1, "ffprobe", stderr="")
        with patch("embedart.introspector.ffprobe.subprocess.run", side_effect=error):
            with pytest.raises(MediaIntrospectionError, match="exit code 1"):
                introspector.get_file_info(video_file)


class TestBuildFfprobeCommand:
    """Tests for build_ffprobe_command()."""

    def test_requests_fields_used_by_parsers(self) -> None:
        cmd = build_ffprobe_command(Path("/usr/bin/ffprobe"), Path("/m/movie.mkv"))

        assert cmd[0] == "/usr/bin/ffprobe"
        assert cmd[cmd.index("-print_format") + 1] == "json"
        assert cmd[-1] == "/m/movie.mkv"
        for field in ("attached_pic", "filename", "mimetype", "comment"):
            assert field in PROBE_ENTRIES
