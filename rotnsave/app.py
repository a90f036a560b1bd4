"""The application: current screen, open modal, message routing and a terminal front end."""

from __future__ import annotations

import argparse
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable

from rotnsave.buildinfo import collect_build_info
from rotnsave.editor import EditField, EditorState, LevelEdit, MarkAllFullCombo, Save
from rotnsave.messages import CloseModal, Init, Loaded, OpenNumericEditor, batch
from rotnsave.numeric_editor import EditInput, NumericFieldEditorState, SaveValue
from rotnsave.pick_file import OpenDialog, PickFileState, Submit, UserChangedPath
from rotnsave.views import (
    BoolField,
    Heading,
    NumberField,
    Section,
    TextField,
    editor_view,
    numeric_editor_view,
    pick_file_view,
)

TITLE = "Rift Of The Necrodancer | Save Editor"

_log = logging.getLogger(__name__)

_PICK_FILE_MESSAGES = (OpenDialog, UserChangedPath, Submit)
_EDITOR_MESSAGES = (Save, MarkAllFullCombo, EditField, LevelEdit)
_MODAL_MESSAGES = (EditInput, SaveValue)


@dataclass
class Application:
    """The screen being shown and the modal on top of it, if any."""

    screen: PickFileState | EditorState = field(default_factory=PickFileState)
    modal: NumericFieldEditorState | None = None

    def update(self, message: Any) -> list[Any]:
        """Route one message and return its follow-up messages."""
        if message is None or isinstance(message, Init):
            return []
        if isinstance(message, _PICK_FILE_MESSAGES):
            if not isinstance(self.screen, PickFileState):
                raise RuntimeError(f"{message!r} sent while not picking a file")
            return self.screen.update(message)
        if isinstance(message, _EDITOR_MESSAGES):
            if not isinstance(self.screen, EditorState):
                raise RuntimeError(f"{message!r} sent while no save is open")
            return self.screen.update(message)
        if isinstance(message, Loaded):
            self.screen = EditorState(message.save_game, message.path)
            return []
        if isinstance(message, _MODAL_MESSAGES):
            if self.modal is None:
                raise RuntimeError(f"{message!r} sent while no editor is open")
            return self.modal.update(message)
        if isinstance(message, OpenNumericEditor):
            self.modal = NumericFieldEditorState.from_init(message.init)
            return []
        if isinstance(message, CloseModal):
            self.modal = None
            return []
        raise TypeError(f"unexpected message: {message!r}")

    def dispatch(self, message: Any) -> int:
        """Process a message and all follow-ups in order; return how many were handled."""
        queue = deque([message])
        handled = 0
        while queue:
            queue.extend(self.update(queue.popleft()))
            handled += 1
        return handled

    def view(self) -> list[Section]:
        """The layers to show, bottom first: the screen, then the modal if open."""
        if isinstance(self.screen, EditorState):
            layers = [editor_view(self.screen)]
        else:
            layers = [pick_file_view(self.screen)]
        if self.modal is not None:
            layers.append(numeric_editor_view(self.modal))
        return layers


Handler = Callable[[str], list]


def _text_handler(element: TextField) -> Handler:
    return lambda text: batch(element.on_change(text), element.on_submit)


def _constant_handler(message: Any) -> Handler:
    return lambda _text: [message]


def _render(element: Any) -> tuple[list[str], list[Handler]]:
    lines: list[str] = []
    handlers: list[Handler] = []

    def add(handler: Handler) -> int:
        handlers.append(handler)
        return len(handlers)

    def walk(item: Any, depth: int) -> None:
        pad = "  " * depth
        if isinstance(item, Heading):
            lines.append(pad + item.text)
        elif isinstance(item, TextField):
            number = add(_text_handler(item))
            label = f"{item.label}: " if item.label else ""
            shown = item.value if item.value else f"<{item.placeholder}>"
            lines.append(f"{pad}[{number}] {label}{shown}")
        elif isinstance(item, NumberField):
            number = add(_constant_handler(item.on_press))
            lines.append(f"{pad}[{number}] {item.label}: {item.value} (was {item.original})")
        elif isinstance(item, BoolField):
            number = add(_constant_handler(item.on_toggle(not item.value)))
            mark = "[x]" if item.value else "[ ]"
            was = "[x]" if item.original else "[ ]"
            lines.append(f"{pad}[{number}] {item.label}: {mark} (was {was})")
        elif isinstance(item, Section):
            inner = depth
            if item.title is not None:
                lines.append(pad + item.title)
                inner += 1
            inner_pad = "  " * inner
            for child in item.children:
                walk(child, inner)
            for label, message in item.actions:
                if message is None:
                    lines.append(f"{inner_pad}    ({label})")
                else:
                    number = add(_constant_handler(message))
                    lines.append(f"{inner_pad}[{number}] ({label})")
            if item.note:
                lines.append(inner_pad + item.note)

    walk(element, 0)
    return lines, handlers


def _run(app: Application) -> None:
    print(TITLE)
    while True:
        lines, handlers = _render(app.view()[-1])
        print("\n".join(lines))
        try:
            line = input("> ")
        except EOFError:
            return
        command, _, argument = line.strip().partition(" ")
        if command in ("q", "quit"):
            return
        try:
            position = int(command)
            if position < 1:
                raise IndexError(position)
            handler = handlers[position - 1]
        except (ValueError, IndexError):
            print(f"Unknown command: {command}")
            continue
        for message in handler(argument):
            app.dispatch(message)


def main(argv: list[str] | None = None) -> int:
    """Start the editor in the terminal, optionally opening a save file right away."""
    parser = argparse.ArgumentParser(prog="rotnsave", description=TITLE)
    parser.add_argument("path", nargs="?", help="save file to open")
    args = parser.parse_args(argv)

    print(collect_build_info().banner())
    logging.basicConfig(level=logging.INFO)
    _log.info("Starting")

    app = Application()
    app.dispatch(Init())
    if args.path is not None:
        app.dispatch(UserChangedPath(args.path))
        app.dispatch(Submit())
    try:
        _run(app)
    except OSError as err:
        _log.error("Error running application: %s", err)
        return 1
    return 0