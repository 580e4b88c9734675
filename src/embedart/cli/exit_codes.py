"""Process exit statuses returned by the embedart commands.

Codes are grouped in blocks of ten so scripts can test a range:
the 10s for bad configuration, the 20s for problems with the input
file, the 30s for missing external tools, the 40s for failed
extractions and the 50s for unreadable probe output.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit statuses of ``embedart inspect`` and ``embedart extract``."""

    SUCCESS = 0
    # SIGINT, or a cancelled extraction
    INTERRUPTED = 2

    CONFIG_ERROR = 11

    TARGET_NOT_FOUND = 20
    # No candidate stream for the requested role
    NO_IMAGE_FOUND = 22

    TOOL_NOT_AVAILABLE = 30
    FFPROBE_NOT_FOUND = 32

    OPERATION_FAILED = 40

    PARSE_ERROR = 51
