"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to functions)
2. Environment variables (EMBEDART_*)
3. Config file (~/.embedart/config.toml)
4. Default values

Environment variables:
- EMBEDART_FFMPEG_PATH: Path to ffmpeg executable
- EMBEDART_FFPROBE_PATH: Path to ffprobe executable
- EMBEDART_TEMP_DIR: Directory for extracted images
- EMBEDART_EXTRACTION_TIMEOUT: Seconds before ffmpeg is killed (default 60)
- EMBEDART_LOG_LEVEL: debug, info, warning or error
- EMBEDART_LOG_FILE: Path to log file
- EMBEDART_LOG_FORMAT: text or json
- EMBEDART_CONFIG_PATH: Path to config file (overrides default location)
- EMBEDART_DATA_DIR: Path to data directory (overrides ~/.embedart/)
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

from embedart.config.env import EnvReader
from embedart.config.models import (
    EmbedartConfig,
    ExtractionConfig,
    LoggingConfig,
    ToolPathsConfig,
)
from embedart.config.toml_parser import load_toml_file

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".embedart"
CONFIG_FILE_NAME = "config.toml"

# Cache for loaded config files (path -> (parsed dict, mtime))
_config_cache: dict[Path, tuple[dict, float]] = {}
_config_cache_lock = threading.Lock()


def get_data_dir() -> Path:
    """Get the embedart data directory.

    Can be overridden by EMBEDART_DATA_DIR environment variable.
    Supports tilde expansion (e.g., ~/custom/embedart).

    Returns:
        Path to the data directory (~/.embedart/ by default).
    """
    return EnvReader().get_path("DATA_DIR", must_exist=False) or DEFAULT_CONFIG_DIR


def get_default_config_path() -> Path:
    """Get the default config file path.

    Can be overridden by EMBEDART_CONFIG_PATH environment variable.
    """
    configured = EnvReader().get_path("CONFIG_PATH", must_exist=False)
    return configured or get_data_dir() / CONFIG_FILE_NAME


def load_config_file(path: Path | None = None, *, strict: bool = False) -> dict:
    """Load configuration from TOML file.

    Results are cached with mtime-based invalidation. The cache automatically
    reloads the file if it has been modified since the last read.

    Thread-safe: uses a lock to protect concurrent access to the cache.

    Args:
        path: Path to config file. If None, uses default location.
        strict: If True, raise TomlParseError on parse failures.
                If False (default), return empty dict on errors.

    Returns:
        Parsed configuration dict. Empty dict if file doesn't exist.

    Raises:
        TomlParseError: When strict=True and the file cannot be parsed.
    """
    if path is None:
        path = get_default_config_path()

    try:
        current_mtime = path.stat().st_mtime
    except FileNotFoundError:
        current_mtime = 0.0

    with _config_cache_lock:
        if path in _config_cache:
            cached_config, cached_mtime = _config_cache[path]
            if current_mtime == cached_mtime:
                return cached_config

        result = load_toml_file(path, strict=strict)
        _config_cache[path] = (result, current_mtime)
        return result


def clear_config_cache() -> None:
    """Clear the config file cache.

    Primarily useful for testing.
    """
    with _config_cache_lock:
        _config_cache.clear()


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    section = file_config.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table, got {section!r}")
    return section


def _file_path(section: dict[str, Any], key: str) -> Path | None:
    value = section.get(key)
    if not value:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a path string, got {value!r}")
    return Path(value).expanduser()


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    ffmpeg_path: Path | None = None,
    ffprobe_path: Path | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> EmbedartConfig:
    """Get embedart configuration with full precedence handling.

    Precedence (highest to lowest):
    1. CLI arguments passed to this function
    2. Environment variables (EMBEDART_*)
    3. Config file
    4. Default values

    Args:
        config_path: Path to config file (overrides EMBEDART_CONFIG_PATH).
        ffmpeg_path: CLI override for ffmpeg path.
        ffprobe_path: CLI override for ffprobe path.
        env_reader: Optional EnvReader for testing (uses os.environ if None).
        strict: If True, raise TomlParseError on config file parse failures.

    Returns:
        EmbedartConfig with merged configuration.

    Raises:
        TomlParseError: When strict=True and the config file cannot be parsed.
        ValueError: If a configured value fails validation.
    """
    reader = env_reader or EnvReader()
    file_config = load_config_file(config_path, strict=strict)

    tools_file = _section(file_config, "tools")
    tools = ToolPathsConfig(
        ffmpeg=(
            ffmpeg_path
            or reader.get_path("FFMPEG_PATH")
            or _file_path(tools_file, "ffmpeg")
        ),
        ffprobe=(
            ffprobe_path
            or reader.get_path("FFPROBE_PATH")
            or _file_path(tools_file, "ffprobe")
        ),
    )

    extraction_file = _section(file_config, "extraction")
    extraction = ExtractionConfig(
        temp_directory=(
            reader.get_path("TEMP_DIR", must_exist=False)
            or _file_path(extraction_file, "temp_directory")
        ),
        timeout_seconds=reader.get_int(
            "EXTRACTION_TIMEOUT",
            extraction_file.get("timeout_seconds", 60),
        ),
    )

    logging_file = _section(file_config, "logging")
    logging_config = LoggingConfig(
        level=reader.get_str("LOG_LEVEL", logging_file.get("level", "info")),
        file=(
            reader.get_path("LOG_FILE", must_exist=False)
            or _file_path(logging_file, "file")
        ),
        format=reader.get_str(
            "LOG_FORMAT", logging_file.get("format", "text")
        ),
        include_stderr=logging_file.get("include_stderr", False),
        max_bytes=logging_file.get("max_bytes", 10_485_760),
        backup_count=logging_file.get("backup_count", 5),
    )

    return EmbedartConfig(tools=tools, extraction=extraction, logging=logging_config)
