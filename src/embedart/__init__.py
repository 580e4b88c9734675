"""embedart - Extract embedded cover art from video containers."""

__version__ = "0.1.0"
