"""Runtime settings for Source Mirror.

There is no configuration file: the endpoint comes from the command line,
the watched folder is the working directory, and the remaining knobs are
defaults that environment variables may override.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

ENV_PREFIX = "SOURCE_MIRROR_"

DEFAULT_CONFIG: dict[str, Any] = {
    "debounce_ms": 100,  # fixed delay before each re-scan
    "log_level": "INFO",
    # ---- optional rotating log file ----
    "log_file": "",  # blank = stderr only
    "max_log_size_mb": 10,
    "log_backup_count": 3,
}

_INT_KEYS = ("debounce_ms", "max_log_size_mb", "log_backup_count")


class Config:
    """Settings for one run: defaults merged with environment overrides."""

    def __init__(
        self,
        api_url: str,
        directory: str | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """Build settings for *api_url*, watching *directory* (default: cwd)."""
        self.api_url = api_url
        self.directory = directory or os.getcwd()
        self._data: dict[str, Any] = dict(DEFAULT_CONFIG)
        self.load_environment(os.environ if environ is None else environ)

    def load_environment(self, environ: Mapping[str, str]) -> None:
        """Apply ``SOURCE_MIRROR_*`` overrides from *environ*."""
        for key, default in DEFAULT_CONFIG.items():
            raw = environ.get(ENV_PREFIX + key.upper())
            if raw is None:
                continue
            if key in _INT_KEYS:
                try:
                    self._data[key] = int(raw)
                except ValueError:
                    logger.warning(
                        "Ignoring %s%s=%r (not an integer); using %s.",
                        ENV_PREFIX, key.upper(), raw, default,
                    )
                    self._data[key] = default
            else:
                self._data[key] = raw.strip()

    # ---- accessors ----

    @property
    def debounce_ms(self) -> int:
        """Return the per-event debounce delay in milliseconds."""
        return max(0, int(self._data["debounce_ms"]))

    @debounce_ms.setter
    def debounce_ms(self, value: int) -> None:
        self._data["debounce_ms"] = max(0, int(value))

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    @property
    def log_level(self) -> str:
        """Return the logging level name."""
        return self._data.get("log_level") or "INFO"

    @log_level.setter
    def log_level(self, value: str) -> None:
        self._data["log_level"] = value

    @property
    def log_file(self) -> str:
        """Return the rotating log file path, or '' when disabled."""
        return self._data.get("log_file", "")

    @log_file.setter
    def log_file(self, value: str) -> None:
        self._data["log_file"] = value.strip()

    @property
    def max_log_size_mb(self) -> int:
        """Return the maximum log file size in MB before rotation."""
        return max(1, int(self._data.get("max_log_size_mb", 10)))

    @property
    def log_backup_count(self) -> int:
        """Return the number of rotated log backups to keep."""
        return max(0, int(self._data.get("log_backup_count", 3)))
