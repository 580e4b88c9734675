"""Shared helpers for CLI commands that operate on a media file."""

import sys
from pathlib import Path

import click

from embedart.cli.exit_codes import ExitCode
from embedart.domain import IsoType, MediaItem, MediaKind
from embedart.introspector import (
    FFprobeIntrospector,
    MediaIntrospectionError,
    build_media_item,
)
from embedart.tools import find_tool

KIND_CHOICES = [kind.value for kind in MediaKind]
ISO_TYPE_CHOICES = [iso_type.value for iso_type in IsoType]


def load_media_item(
    file_path: Path,
    kind: str,
    iso_type: str | None = None,
    ffprobe_path: Path | None = None,
) -> MediaItem:
    """Probe a file and build its MediaItem, exiting on failure.

    Exit codes: TARGET_NOT_FOUND if the file is missing, FFPROBE_NOT_FOUND
    if ffprobe is unavailable, PARSE_ERROR if probing fails.
    """
    if not file_path.exists():
        click.echo(f"Error: File not found: {file_path}", err=True)
        sys.exit(ExitCode.TARGET_NOT_FOUND)

    if not FFprobeIntrospector.is_available(ffprobe_path):
        click.echo(
            "Error: ffprobe is not installed or not in PATH.\n"
            "Install ffmpeg to use media introspection features.",
            err=True,
        )
        sys.exit(ExitCode.FFPROBE_NOT_FOUND)

    try:
        if ffprobe_path is not None:
            ffprobe_path = find_tool("ffprobe", ffprobe_path)
        introspector = FFprobeIntrospector(ffprobe_path=ffprobe_path)
        result = introspector.get_file_info(file_path)
    except MediaIntrospectionError as e:
        click.echo(f"Error: Could not parse file: {file_path}", err=True)
        click.echo(f"Reason: {e}", err=True)
        sys.exit(ExitCode.PARSE_ERROR)

    return build_media_item(
        result,
        MediaKind(kind),
        iso_type=IsoType(iso_type) if iso_type else None,
    )
