"""Base exception hierarchy for embedart."""


class EmbedartError(Exception):
    """Base exception for all embedart errors."""


class ToolNotFoundError(EmbedartError):
    """Raised when a required external tool cannot be located."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(
            f"{tool_name} is not installed or not in PATH. "
            f"Install ffmpeg or configure EMBEDART_{tool_name.upper()}_PATH."
        )
