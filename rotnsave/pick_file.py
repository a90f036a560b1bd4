"""State of the screen where the user chooses a save file to open."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from rotnsave.messages import Loaded
from rotnsave.models import SaveGame, SaveGameError


@dataclass(frozen=True)
class OpenDialog:
    """Ask the user for a file with a dialog."""


@dataclass(frozen=True)
class UserChangedPath:
    """The path text changed."""

    path: str


@dataclass(frozen=True)
class Submit:
    """Load the file at the current path."""


def _ask_for_file() -> str | None:
    from tkinter import Tk, filedialog

    root = Tk()
    root.withdraw()
    try:
        name = filedialog.askopenfilename()
    finally:
        root.destroy()
    return name or None


@dataclass
class PickFileState:
    """Path being entered, whether it names a file, and the last load error."""

    path: str = ""
    valid: bool = False
    error: str | None = None
    pick_file: Callable[[], str | None] = field(
        default=_ask_for_file, repr=False, compare=False
    )

    def update(self, message: Any) -> list[Any]:
        """Apply a message and return the follow-up messages."""
        if isinstance(message, OpenDialog):
            chosen = self.pick_file()
            if not chosen:
                return []
            return [UserChangedPath(str(chosen))]
        if isinstance(message, UserChangedPath):
            self.path = message.path
            self.valid = bool(self.path) and Path(self.path).is_file()
            return []
        if isinstance(message, Submit):
            return self._submit()
        raise TypeError(f"unexpected message: {message!r}")

    def _submit(self) -> list[Any]:
        path = Path(self.path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as err:
            self.error = str(err)
            return []
        try:
            data = SaveGame.from_json(content)
        except SaveGameError as err:
            self.error = f"Error parsing json: {err}"
            return []
        return [Loaded(data, path)]