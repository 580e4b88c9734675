"""Merge CLI logging flags into the configured LoggingConfig."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from embedart.config.models import LoggingConfig


def build_logging_config(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Return a copy of base with every non-None override applied.

    Raises:
        ValueError: If an override fails LoggingConfig validation.
    """
    overrides = {
        "level": level,
        "file": file,
        "format": format,
        "include_stderr": include_stderr,
    }
    return replace(
        base, **{key: value for key, value in overrides.items() if value is not None}
    )


def configure_logging_from_cli(
    *,
    config_path: Path | None = None,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> None:
    """Load configuration, apply the CLI flags and install log handlers.

    Raises:
        ValueError: If a configured or overridden value is invalid.
    """
    from embedart.config.loader import get_config
    from embedart.logging import configure_logging

    config = get_config(config_path=config_path)
    configure_logging(
        build_logging_config(
            config.logging,
            level=level,
            file=file,
            format=format,
            include_stderr=include_stderr,
        )
    )
