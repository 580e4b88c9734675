"""CLI extract command for embedart."""

import json
import logging
import shutil
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import click

from embedart.cli.exit_codes import ExitCode
from embedart.cli.formatting import result_to_dict
from embedart.cli.media import ISO_TYPE_CHOICES, KIND_CHOICES, load_media_item
from embedart.config import get_config
from embedart.domain import ExtractionResult, ImageRole, MediaItem
from embedart.extractor import FFmpegImageExtractor, ImageExtractionError
from embedart.providers import EmbeddedImageProvider
from embedart.tools import find_tool

logger = logging.getLogger(__name__)


def _run_fetch(
    provider: EmbeddedImageProvider,
    item: MediaItem,
    role: ImageRole,
) -> ExtractionResult:
    """Run the provider in a worker thread so Ctrl+C can cancel ffmpeg.

    Raises:
        KeyboardInterrupt: After the extraction has been cancelled.
    """
    cancel_event = threading.Event()
    with ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(provider.fetch, item, role, cancel_event)
        try:
            return future.result()
        except KeyboardInterrupt:
            cancel_event.set()
            logger.info("Interrupted, cancelling extraction of %s", item.path)
            raise


def _emit(
    output_format: str, file: Path, role: ImageRole, result: ExtractionResult
) -> None:
    if output_format == "json":
        click.echo(json.dumps(result_to_dict(str(file), role, result), indent=2))
    elif result.has_image:
        click.echo(
            f"Extracted {role.value} image ({result.format.value}) to {result.path}"
        )
    else:
        click.echo(f"No {role.value} image found in {file}")


@click.command("extract")
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--role",
    "-r",
    type=click.Choice([role.value for role in ImageRole]),
    default=ImageRole.PRIMARY.value,
    show_default=True,
    help="Image role to extract.",
)
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
    "--output",
    "-o",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Move the extracted image to this path.",
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
def extract_command(
    ctx: click.Context,
    file: Path,
    role: str,
    kind: str,
    iso_type: str | None,
    output: Path | None,
    output_format: str,
) -> None:
    """Extract the embedded image of a video that best fits a role.

    FILE is the path to the video file. Attachments named like artwork
    (poster, cover, fanart, logo, ...) are preferred over embedded image
    streams. Exits with code 22 when no suitable image exists.
    """
    image_role = ImageRole(role)
    config = get_config(config_path=(ctx.obj or {}).get("config_path"))
    item = load_media_item(file, kind, iso_type, ffprobe_path=config.tools.ffprobe)

    ffmpeg_path = find_tool("ffmpeg", config.tools.ffmpeg)
    provider = EmbeddedImageProvider(
        FFmpegImageExtractor(
            ffmpeg_path=ffmpeg_path,
            temp_dir=config.extraction.temp_directory,
            timeout=config.extraction.timeout_seconds,
        )
    )

    if not provider.supports(item) or image_role not in provider.supported_roles(item):
        logger.info("%s does not support %s images", file, image_role.value)
        _emit(output_format, file, image_role, ExtractionResult.empty())
        sys.exit(ExitCode.NO_IMAGE_FOUND)

    if ffmpeg_path is None:
        click.echo(
            "Error: ffmpeg is not installed or not in PATH.\n"
            "Install ffmpeg or configure EMBEDART_FFMPEG_PATH.",
            err=True,
        )
        sys.exit(ExitCode.TOOL_NOT_AVAILABLE)

    try:
        result = _run_fetch(provider, item, image_role)
    except KeyboardInterrupt:
        click.echo("Interrupted.", err=True)
        sys.exit(ExitCode.INTERRUPTED)
    except ImageExtractionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.OPERATION_FAILED)

    if result.has_image and output is not None and result.path is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(result.path, output)
        result = ExtractionResult(
            has_image=True,
            format=result.format,
            path=output,
            protocol=result.protocol,
        )

    _emit(output_format, file, image_role, result)
    if not result.has_image:
        sys.exit(ExitCode.NO_IMAGE_FOUND)
