"""Settings dataclasses populated by the configuration loader.

TOML values arrive untyped, so each section checks its own field types and
raises ValueError naming the offending field.
"""

from dataclasses import dataclass, field
from pathlib import Path

LOG_LEVELS = ("debug", "info", "warning", "error")
LOG_FORMATS = ("text", "json")


def _require_int(name: str, value: object, minimum: int) -> None:
    # bool is an int subclass; "true" is not a timeout
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")


def _require_choice(name: str, value: object, choices: tuple[str, ...]) -> None:
    if not isinstance(value, str) or value.casefold() not in choices:
        raise ValueError(
            f"{name} must be one of {', '.join(choices)}; got {value!r}"
        )


@dataclass
class ToolPathsConfig:
    """Explicit ffmpeg/ffprobe locations; None means search PATH."""

    ffmpeg: Path | None = None
    ffprobe: Path | None = None


@dataclass
class ExtractionConfig:
    """Where extracted images go and how long ffmpeg may run."""

    temp_directory: Path | None = None  # None = tempfile.gettempdir()
    timeout_seconds: int = 60

    def __post_init__(self) -> None:
        _require_int("timeout_seconds", self.timeout_seconds, 1)


@dataclass
class LoggingConfig:
    """Log level, destination and line format.

    ``file`` enables a size-rotated log file; stderr is used when it is
    unset, or alongside it when ``include_stderr`` is true.
    """

    level: str = "info"
    file: Path | None = None
    format: str = "text"
    include_stderr: bool = False
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5

    def __post_init__(self) -> None:
        _require_choice("level", self.level, LOG_LEVELS)
        _require_choice("format", self.format, LOG_FORMATS)
        if not isinstance(self.include_stderr, bool):
            raise ValueError(
                f"include_stderr must be true or false, got {self.include_stderr!r}"
            )
        _require_int("max_bytes", self.max_bytes, 0)
        _require_int("backup_count", self.backup_count, 0)


@dataclass
class EmbedartConfig:
    """Top-level settings, one section per TOML table."""

    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
