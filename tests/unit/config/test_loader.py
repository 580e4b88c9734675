"""Tests for configuration loading and precedence."""

import os
from pathlib import Path

import pytest

from embedart.config import (
    EnvReader,
    TomlParseError,
    clear_config_cache,
    get_config,
    get_data_dir,
    get_default_config_path,
    load_config_file,
)


@pytest.fixture
def config_file(temp_dir: Path) -> Path:
    path = temp_dir / "config.toml"
    path.write_text(
        """\
[tools]
ffmpeg = "/opt/ffmpeg/bin/ffmpeg"

[extraction]
temp_directory = "/var/tmp/embedart"
timeout_seconds = 45

[logging]
level = "warning"
format = "json"
backup_count = 2
"""
    )
    return path


class TestPaths:
    """Tests for data dir and config path resolution."""

    def test_data_dir_from_env(self, embedart_isolated: Path) -> None:
        assert get_data_dir() == embedart_isolated

    def test_config_path_from_env(self, embedart_isolated: Path) -> None:
        assert get_default_config_path() == embedart_isolated / "config.toml"

    def test_config_path_under_data_dir(
        self, embedart_isolated: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("EMBEDART_CONFIG_PATH")
        assert get_default_config_path() == embedart_isolated / "config.toml"


class TestLoadConfigFile:
    """Tests for load_config_file()."""

    def test_missing_file(self, temp_dir: Path) -> None:
        assert load_config_file(temp_dir / "missing.toml") == {}

    def test_loads_sections(self, config_file: Path) -> None:
        data = load_config_file(config_file)
        assert data["extraction"]["timeout_seconds"] == 45

    def test_reloads_after_modification(self, config_file: Path) -> None:
        load_config_file(config_file)
        config_file.write_text("[extraction]\ntimeout_seconds = 10\n")
        stat = config_file.stat()
        os.utime(config_file, (stat.st_atime, stat.st_mtime + 10))

        assert load_config_file(config_file)["extraction"]["timeout_seconds"] == 10

    def test_invalid_toml_lenient(self, temp_dir: Path) -> None:
        path = temp_dir / "bad.toml"
        path.write_text("[logging\nlevel = ")

        assert load_config_file(path) == {}

    def test_invalid_toml_strict(self, temp_dir: Path) -> None:
        path = temp_dir / "bad.toml"
        path.write_text("[logging\nlevel = ")
        clear_config_cache()

        with pytest.raises(TomlParseError, match="bad.toml"):
            load_config_file(path, strict=True)


class TestGetConfig:
    """Tests for get_config() precedence."""

    def test_defaults(self, temp_dir: Path) -> None:
        config = get_config(
            config_path=temp_dir / "missing.toml", env_reader=EnvReader(env={})
        )

        assert config.tools.ffmpeg is None
        assert config.tools.ffprobe is None
        assert config.extraction.temp_directory is None
        assert config.extraction.timeout_seconds == 60
        assert config.logging.level == "info"
        assert config.logging.format == "text"

    def test_file_values(self, config_file: Path) -> None:
        config = get_config(config_path=config_file, env_reader=EnvReader(env={}))

        assert config.tools.ffmpeg == Path("/opt/ffmpeg/bin/ffmpeg")
        assert config.extraction.temp_directory == Path("/var/tmp/embedart")
        assert config.extraction.timeout_seconds == 45
        assert config.logging.level == "warning"
        assert config.logging.format == "json"
        assert config.logging.backup_count == 2

    def test_env_overrides_file(self, config_file: Path, temp_dir: Path) -> None:
        reader = EnvReader(
            env={
                "EMBEDART_EXTRACTION_TIMEOUT": "5",
                "EMBEDART_TEMP_DIR": str(temp_dir / "images"),
                "EMBEDART_LOG_LEVEL": "debug",
            }
        )

        config = get_config(config_path=config_file, env_reader=reader)

        assert config.extraction.timeout_seconds == 5
        assert config.extraction.temp_directory == temp_dir / "images"
        assert config.logging.level == "debug"

    def test_cli_overrides_env(self, config_file: Path, temp_dir: Path) -> None:
        env_ffmpeg = temp_dir / "env-ffmpeg"
        env_ffmpeg.touch()
        reader = EnvReader(env={"EMBEDART_FFMPEG_PATH": str(env_ffmpeg)})

        config = get_config(
            config_path=config_file,
            ffmpeg_path=Path("/cli/ffmpeg"),
            env_reader=reader,
        )
        assert config.tools.ffmpeg == Path("/cli/ffmpeg")

        config = get_config(config_path=config_file, env_reader=reader)
        assert config.tools.ffmpeg == env_ffmpeg

    def test_invalid_timeout_rejected(self, temp_dir: Path) -> None:
        reader = EnvReader(env={"EMBEDART_EXTRACTION_TIMEOUT": "0"})

        with pytest.raises(ValueError, match="timeout_seconds"):
            get_config(config_path=temp_dir / "missing.toml", env_reader=reader)

    def test_invalid_log_level_rejected(self, temp_dir: Path) -> None:
        reader = EnvReader(env={"EMBEDART_LOG_LEVEL": "verbose"})

        with pytest.raises(ValueError, match="level must be one of"):
            get_config(config_path=temp_dir / "missing.toml", env_reader=reader)

    @pytest.mark.parametrize(
        ("toml_text", "field_name"),
        [
            ('[extraction]\ntimeout_seconds = "60"\n', "timeout_seconds"),
            ("[extraction]\ntimeout_seconds = true\n", "timeout_seconds"),
            ("[extraction]\ntemp_directory = 5\n", "temp_directory"),
            ("[logging]\nlevel = 10\n", "level"),
            ("[logging]\nformat = []\n", "format"),
            ('[logging]\ninclude_stderr = "yes"\n', "include_stderr"),
            ('[logging]\nmax_bytes = "10MB"\n', "max_bytes"),
            ("[logging]\nbackup_count = -1\n", "backup_count"),
            ("[tools]\nffmpeg = 1\n", "ffmpeg"),
            ('tools = "/usr/bin"\n', r"\[tools\]"),
        ],
    )
    def test_wrongly_typed_file_value_rejected(
        self, temp_dir: Path, toml_text: str, field_name: str
    ) -> None:
        config_file = temp_dir / "typed.toml"
        config_file.write_text(toml_text)

        with pytest.raises(ValueError, match=field_name):
            get_config(config_path=config_file, env_reader=EnvReader(env={}))

    def test_reads_environment_by_default(
        self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("EMBEDART_EXTRACTION_TIMEOUT", "90")

        config = get_config(config_path=temp_dir / "missing.toml")

        assert config.extraction.timeout_seconds == 90
