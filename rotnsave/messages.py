"""Application-level messages and helpers for follow-up message lists."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rotnsave.models import SaveGame


@dataclass(frozen=True)
class Init:
    """Sent once when the application starts."""


@dataclass(frozen=True)
class Loaded:
    """A save file was read and parsed successfully."""

    save_game: SaveGame
    path: Path


@dataclass(frozen=True)
class OpenNumericEditor:
    """Open the numeric field editor modal."""

    init: Any


@dataclass(frozen=True)
class CloseModal:
    """Close the modal currently shown, if any."""


def batch(*args: Any) -> list[Any]:
    """Flatten messages, message lists and ``None`` into one list of messages."""
    result: list[Any] = []
    for item in args:
        if item is None:
            continue
        if isinstance(item, (list, tuple)):
            result.extend(batch(*item))
        else:
            result.append(item)
    return result