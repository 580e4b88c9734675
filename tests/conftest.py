"""Shared test fixtures for embedart."""

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from embedart.config import clear_config_cache


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click test runner."""
    return CliRunner()


@pytest.fixture
def ffprobe_fixtures_dir() -> Path:
    """Return the path to the ffprobe fixtures directory."""
    return Path(__file__).parent / "fixtures" / "ffprobe"


def load_ffprobe_fixture(name: str) -> dict:
    """Load an ffprobe JSON fixture by name.

    Args:
        name: Name of the fixture file (without .json extension).

    Returns:
        Parsed JSON data from the fixture.
    """
    fixture_path = Path(__file__).parent / "fixtures" / "ffprobe" / f"{name}.json"
    return json.loads(fixture_path.read_text())


@pytest.fixture
def ffprobe_fixture():
    """Return the ffprobe fixture loader."""
    return load_ffprobe_fixture


@pytest.fixture
def mkv_with_attachments_fixture() -> dict:
    """Load the Matroska file with cover attachments."""
    return load_ffprobe_fixture("mkv_with_attachments")


@pytest.fixture
def mp4_cover_art_fixture() -> dict:
    """Load the MP4 file with attached_pic cover streams."""
    return load_ffprobe_fixture("mp4_cover_art")


@pytest.fixture
def audio_only_fixture() -> dict:
    """Load the audio-only file without video streams."""
    return load_ffprobe_fixture("audio_only")


@pytest.fixture(autouse=True)
def embedart_isolated(temp_dir: Path):
    """Isolate every test from the user's embedart configuration.

    Points EMBEDART_DATA_DIR and EMBEDART_CONFIG_PATH at a temporary
    directory with a minimal config.toml, clears the config file cache,
    and restores the root logger afterwards (the CLI reconfigures it).
    """
    data_dir = temp_dir / ".embedart"
    data_dir.mkdir(parents=True, exist_ok=True)
    config_path = data_dir / "config.toml"
    config_path.write_text('[logging]\nlevel = "info"\n')

    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    env = {
        "EMBEDART_DATA_DIR": str(data_dir),
        "EMBEDART_CONFIG_PATH": str(config_path),
    }
    removed = [
        "EMBEDART_FFMPEG_PATH",
        "EMBEDART_FFPROBE_PATH",
        "EMBEDART_TEMP_DIR",
        "EMBEDART_EXTRACTION_TIMEOUT",
        "EMBEDART_LOG_LEVEL",
        "EMBEDART_LOG_FILE",
        "EMBEDART_LOG_FORMAT",
    ]
    clear_config_cache()
    with patch.dict(os.environ, env):
        for var in removed:
            os.environ.pop(var, None)
        yield data_dir

    clear_config_cache()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
