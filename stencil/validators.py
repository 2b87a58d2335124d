"""Validation of user-supplied names and paths."""

from __future__ import annotations

import os
import re
from pathlib import Path

from stencil.errors import InvalidInputError

MAX_NAME_LENGTH = 100

_VALID_NAME = re.compile(r"^[a-zA-Z0-9\s\-_]+$")
_WORD_CHAR = re.compile(r"[a-zA-Z0-9]")

RESERVED_NAMES = frozenset(
    ["con", "prn", "aux", "nul"]
    + [f"com{i}" for i in range(1, 10)]
    + [f"lpt{i}" for i in range(1, 10)]
)


def validate_path(value: str) -> None:
    """Reject paths that could escape the directory they are joined to.

    Raises :class:`InvalidInputError` for empty paths, ``..`` segments,
    absolute or home-relative paths and embedded NUL bytes.
    """
    if not value:
        raise InvalidInputError("Invalid path: path cannot be empty")
    if "\0" in value:
        raise InvalidInputError(f'Invalid path: "{value}" contains null bytes')

    normalized = os.path.normpath(value)
    parts = re.split(r"[\\/]", normalized)
    if (
        ".." in parts
        or os.path.isabs(normalized)
        or normalized.startswith(("/", "\\", "~"))
    ):
        raise InvalidInputError(
            f'Invalid path: "{value}" contains directory traversal characters'
        )


def is_path_within_directory(path: str | Path, directory: str | Path) -> bool:
    """Return True when ``path`` resolves to ``directory`` or somewhere below it."""
    resolved = Path(path).resolve()
    root = Path(directory).resolve()
    return resolved.is_relative_to(root)


def validate_target_name(name: str) -> str:
    """Check a name to generate from and return it trimmed."""
    trimmed = name.strip()

    if not trimmed:
        raise InvalidInputError("Name cannot be empty")

    if len(trimmed) > MAX_NAME_LENGTH:
        raise InvalidInputError(f"Name cannot exceed {MAX_NAME_LENGTH} characters")

    if not _VALID_NAME.match(trimmed):
        raise InvalidInputError(
            "Name can only contain letters, numbers, spaces, hyphens, and underscores"
        )

    if not _WORD_CHAR.search(trimmed):
        raise InvalidInputError("Name must contain at least one letter or number")

    if trimmed.lower() in RESERVED_NAMES:
        raise InvalidInputError(f'"{trimmed}" is a reserved system name')

    return trimmed


def validate_output_directory(name: str, path: str, description: str | None = None) -> None:
    """Check one configured output directory entry."""
    if not name or not name.strip():
        raise InvalidInputError("Output directory must have a valid name")
    if not path or not path.strip():
        raise InvalidInputError("Output directory must have a valid path")
    validate_path(path)
    if description is not None and not isinstance(description, str):
        raise InvalidInputError("Output directory description must be a string")
