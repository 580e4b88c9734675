"""CLI inspect command for embedart."""

import json
import logging
from pathlib import Path

import click

from embedart.cli.formatting import format_inspection_human, inspection_to_dict
from embedart.cli.media import ISO_TYPE_CHOICES, KIND_CHOICES, load_media_item
from embedart.config import get_config
from embedart.domain import ImageRole
from embedart.providers import (
    ImageCandidate,
    can_attempt_extraction,
    select_candidate,
    supported_roles,
)

logger = logging.getLogger(__name__)


@click.command("inspect")
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--kind",
    type=click.Choice(KIND_CHOICES),
    default="movie",
    show_default=True,
    help="Library item kind of the file.",
)
@click.option(
    "--iso-type",
    type=click.Choice(ISO_TYPE_CHOICES),
    default=None,
    help="Disc layout inside an ISO image.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.pass_context
def inspect_command(
    ctx: click.Context,
    file: Path,
    kind: str,
    iso_type: str | None,
    output_format: str,
) -> None:
    """Show the embedded images of a video and which one each role selects.

    FILE is the path to the video file to inspect. Nothing is extracted.
    """
    config = get_config(config_path=(ctx.obj or {}).get("config_path"))
    item = load_media_item(file, kind, iso_type, ffprobe_path=config.tools.ffprobe)
    eligible = can_attempt_extraction(item)

    selections: dict[ImageRole, ImageCandidate | None] = {}
    if eligible:
        for role in ImageRole:
            if role in supported_roles(item):
                selections[role] = select_candidate(item, role)

    if output_format == "json":
        click.echo(json.dumps(inspection_to_dict(item, selections, eligible), indent=2))
    else:
        click.echo(format_inspection_human(item, selections, eligible))
