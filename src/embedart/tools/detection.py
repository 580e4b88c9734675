"""External tool lookup.

Tools are resolved from an explicitly configured path first, then from
the system PATH.
"""

import logging
import shutil
from pathlib import Path

from embedart.exceptions import ToolNotFoundError

logger = logging.getLogger(__name__)


def find_tool(name: str, configured_path: Path | None = None) -> Path | None:
    """Find a tool executable.

    Args:
        name: Tool name (e.g., "ffmpeg").
        configured_path: Optional configured path override.

    Returns:
        Path to tool executable, or None if not found.
    """
    # Try configured path first
    if configured_path:
        if configured_path.is_file():
            return configured_path
        logger.warning(
            "Configured path for %s is not a file: %s", name, configured_path
        )

    # Fall back to PATH lookup
    which_result = shutil.which(name)
    if which_result:
        return Path(which_result)

    return None


def get_configured_tool_path(name: str) -> Path | None:
    """Return the tool path from embedart configuration, if any."""
    from embedart.config import get_config

    return getattr(get_config().tools, name, None)


def require_tool(name: str, configured_path: Path | None = None) -> Path:
    """Get path to a required tool, raising an error if not available.

    Args:
        name: Name of the tool to find.
        configured_path: Explicit path; if None, configuration is consulted.

    Returns:
        Path to the tool executable.

    Raises:
        ToolNotFoundError: If the tool is not available.
    """
    path = find_tool(name, configured_path or get_configured_tool_path(name))
    if path is None:
        raise ToolNotFoundError(name)
    return path


def is_tool_available(name: str) -> bool:
    """Check if a tool can be found with the current configuration."""
    return find_tool(name, get_configured_tool_path(name)) is not None
