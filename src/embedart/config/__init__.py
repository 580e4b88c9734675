"""Layered settings for embedart.

Values are resolved from, in order of precedence: command-line flags,
EMBEDART_* environment variables, the TOML file at
~/.embedart/config.toml, and the dataclass defaults.
"""

from embedart.config.env import EnvReader
from embedart.config.loader import (
    clear_config_cache,
    get_config,
    get_data_dir,
    get_default_config_path,
    load_config_file,
)
from embedart.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
)
from embedart.config.models import (
    EmbedartConfig,
    ExtractionConfig,
    LoggingConfig,
    ToolPathsConfig,
)
from embedart.config.toml_parser import TomlParseError, load_toml_file, parse_toml

__all__ = [
    "EmbedartConfig",
    "EnvReader",
    "ExtractionConfig",
    "LoggingConfig",
    "TomlParseError",
    "ToolPathsConfig",
    "build_logging_config",
    "clear_config_cache",
    "configure_logging_from_cli",
    "get_config",
    "get_data_dir",
    "get_default_config_path",
    "load_config_file",
    "parse_toml",
    "load_toml_file",
]
