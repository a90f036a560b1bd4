"""Modal state for editing a single unsigned integer field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from rotnsave.messages import CloseModal
from rotnsave.models import U64_MAX

_DIGITS = frozenset("0123456789")


def parse_u64(text: str) -> int:
    """Parse an unsigned 64-bit integer, accepting an optional leading '+'."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > U64_MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass
class NumericFieldEditorInit:
    """What is needed to open the editor for one field."""

    name: str
    value: int
    original: int
    on_save: Callable[[int], Any]


@dataclass(frozen=True)
class EditInput:
    """The text in the input box changed."""

    text: str


@dataclass(frozen=True)
class SaveValue:
    """Commit the edited value."""


@dataclass
class NumericFieldEditorState:
    """State of the open numeric field editor."""

    name: str
    value: int
    original: int
    on_save: Callable[[int], Any]
    input: str
    error: str | None = None

    @classmethod
    def from_init(cls, init: NumericFieldEditorInit) -> NumericFieldEditorState:
        """Open the editor with the input showing the current value."""
        return cls(
            name=init.name,
            value=init.value,
            original=init.original,
            on_save=init.on_save,
            input=str(init.value),
        )

    def update(self, message: EditInput | SaveValue) -> list[Any]:
        """Apply a message and return the follow-up messages."""
        if isinstance(message, EditInput):
            try:
                self.value = parse_u64(message.text)
            except ValueError as err:
                self.error = f"Invalid number: {err}"
            else:
                self.error = None
            self.input = message.text
            return []
        if isinstance(message, SaveValue):
            if self.error is not None:
                return []
            return [self.on_save(self.value), CloseModal()]
        raise TypeError(f"unexpected message: {message!r}")