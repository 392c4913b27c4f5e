"""Validation of paths given on the command line or in the environment."""

from __future__ import annotations

import os
from pathlib import Path

from .config import config


class ValidationError(Exception):
    """Raised when input validation fails."""

    pass


def _normalize(path: str, name: str) -> Path:
    if not path or not path.strip():
        raise ValidationError(f"{name} cannot be empty")

    if '\x00' in path:
        raise ValidationError(f"{name} contains invalid characters")

    try:
        resolved_path = Path(path.strip()).resolve()
    except (OSError, ValueError, RuntimeError) as e:
        raise ValidationError(f"{name} is not a valid path: {e}") from e

    if len(str(resolved_path)) > config.max_path_length:
        raise ValidationError(f"{name} is too long (max {config.max_path_length} characters)")

    return resolved_path


def validate_directory_path(path: str, name: str = "Directory") -> str:
    """Validate an existing, readable directory and return its absolute path.

    Raises:
        ValidationError: If validation fails
    """
    resolved_path = _normalize(path, name)
    abs_path = str(resolved_path)

    if not resolved_path.exists():
        raise ValidationError(f"{name} does not exist: {abs_path}")
    if not resolved_path.is_dir():
        raise ValidationError(f"{name} is not a directory: {abs_path}")
    if not os.access(abs_path, os.R_OK):
        raise ValidationError(f"{name} is not readable: {abs_path}")

    return abs_path
