"""Command-line entry point: ``embedart inspect`` and ``embedart extract``."""

import logging
import sys
from pathlib import Path

import click

from embedart.cli.exit_codes import ExitCode
from embedart.config import TomlParseError, configure_logging_from_cli
from embedart.config.models import LOG_LEVELS

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="embedart")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Read settings from this TOML file instead of ~/.embedart/config.toml.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Minimum level written to the log.",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the log to this rotating file instead of stderr.",
)
@click.option("--log-json", is_flag=True, help="Emit log records as JSON lines.")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """embedart - pull cover art, backdrops and logos out of video files."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    try:
        configure_logging_from_cli(
            config_path=config_path,
            level=log_level,
            file=log_file,
            format="json" if log_json else None,
        )
    except (TomlParseError, ValueError) as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)


def _register_commands() -> None:
    # Subcommand modules import from this package
    from embedart.cli.extract import extract_command
    from embedart.cli.inspect import inspect_command

    main.add_command(extract_command)
    main.add_command(inspect_command)


_register_commands()
