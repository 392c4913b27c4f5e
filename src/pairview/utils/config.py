from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from .logger import log


class ConfigError(Exception):
    """Configuration validation error."""

    pass


@dataclass
class LaunchConfig:
    """Startup inputs: the file to preload and the directory to browse first."""

    filepath: str | None = None
    start_dir: str = ""

    @classmethod
    def from_args(cls, args) -> LaunchConfig:
        """Create LaunchConfig from parsed command line arguments."""
        return cls(filepath=args.path, start_dir=args.dir or "")

    def merge_with_env(self) -> LaunchConfig:
        """Merge with environment variables, keeping existing values if they exist."""
        return LaunchConfig(
            filepath=self.filepath or os.environ.get('PAIRVIEW_FILE'),
            start_dir=self.start_dir or os.environ.get('PAIRVIEW_DIR', ''),
        )


class Config:
    """pairview configuration with environment variable support and validation."""

    _DEFAULT_MAX_RENDER_LINES: Final[int] = 5000
    _DEFAULT_MAX_PATH_LENGTH: Final[int] = 4096

    _MIN_RENDER_LINES: Final[int] = 100
    _MAX_RENDER_LINES: Final[int] = 100000
    _MIN_MAX_PATH_LENGTH: Final[int] = 1024
    _MAX_MAX_PATH_LENGTH: Final[int] = 65536

    def __init__(self):
        """Initialize configuration with environment variable overrides."""
        self.max_render_lines = self._get_int_env("PAIRVIEW_MAX_RENDER_LINES", self._DEFAULT_MAX_RENDER_LINES)
        self.max_path_length = self._get_int_env("PAIRVIEW_MAX_PATH_LENGTH", self._DEFAULT_MAX_PATH_LENGTH)

        self._validate_all()

    def _get_int_env(self, key: str, default: int) -> int:
        """Get integer environment variable with fallback to default."""
        value = os.environ.get(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError as e:
            log.warning(f"Invalid integer value for {key}='{value}', using default {default}: {e}")
            return default

    def _validate_all(self) -> None:
        """Validate all configuration values."""
        self._validate_int("max_render_lines", self.max_render_lines, self._MIN_RENDER_LINES, self._MAX_RENDER_LINES)
        self._validate_int(
            "max_path_length", self.max_path_length, self._MIN_MAX_PATH_LENGTH, self._MAX_MAX_PATH_LENGTH
        )

    def _validate_int(self, name: str, value: int, min_val: int, max_val: int) -> None:
        """Validate integer configuration value."""
        if not isinstance(value, int):
            raise ConfigError(f"{name} must be an integer, got {type(value).__name__}")
        if not (min_val <= value <= max_val):
            raise ConfigError(f"{name} must be between {min_val} and {max_val}, got {value}")

    def __repr__(self) -> str:
        return f"Config(max_render_lines={self.max_render_lines}, max_path_length={self.max_path_length})"


# Global configuration instance
config = Config()
