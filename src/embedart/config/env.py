"""Typed access to EMBEDART_* environment variables.

EnvReader accepts an optional mapping in place of os.environ so the
configuration loader can be tested without touching the process
environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_PREFIX = "EMBEDART_"


class EnvReader:
    """Reads prefixed environment variables with type conversion.

    Names passed to the getters omit the prefix:

        reader = EnvReader(env={"EMBEDART_EXTRACTION_TIMEOUT": "30"})
        reader.get_int("EXTRACTION_TIMEOUT", 60)  # 30

    Values that cannot be converted are logged and replaced by the default.
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        prefix: str = ENV_PREFIX,
    ) -> None:
        """Initialize the reader.

        Args:
            env: Mapping to read instead of os.environ.
            prefix: Prefix prepended to every variable name.
        """
        self._env: Mapping[str, str] = env if env is not None else os.environ
        self._prefix = prefix

    def variable(self, name: str) -> str:
        """Return the full environment variable name for a short name."""
        return f"{self._prefix}{name}"

    def _raw(self, name: str) -> str | None:
        value = self._env.get(self.variable(name))
        # Empty values count as unset
        return value if value else None

    def get_str(self, name: str, default: str | None = None) -> str | None:
        value = self._raw(name)
        return default if value is None else value

    def get_int(self, name: str, default: int | None = None) -> int | None:
        """Return an integer, or default when unset or not a number."""
        value = self._raw(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning(
                "Ignoring %s=%r: not an integer", self.variable(name), value
            )
            return default

    def get_path(
        self,
        name: str,
        must_exist: bool = True,
        default: Path | None = None,
    ) -> Path | None:
        """Return a path with ~ expanded.

        Args:
            name: Variable name without the prefix.
            must_exist: Ignore (with a warning) paths that do not exist.
            default: Returned when unset or rejected.
        """
        value = self._raw(name)
        if value is None:
            return default

        path = Path(value).expanduser()
        if must_exist and not path.exists():
            logger.warning(
                "Ignoring %s: path does not exist: %s", self.variable(name), path
            )
            return default
        return path
