"""External tool discovery for embedart."""

from embedart.tools.detection import (
    find_tool,
    get_configured_tool_path,
    is_tool_available,
    require_tool,
)

__all__ = [
    "find_tool",
    "get_configured_tool_path",
    "is_tool_available",
    "require_tool",
]
