"""Editor state for a loaded save file: field edits, bulk actions and saving."""

from __future__ import annotations

import copy
import shutil
import time
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from rotnsave.models import U64_MAX, DifficultyData, SaveGame

EDITABLE_FIELDS = (
    "save_name",
    "player_id",
    "selected_language",
    "should_display_dialogue_debug",
    "should_unlock_all_levels",
    "has_input_dragon_dance",
    "is_remix_mode_active",
    "should_play_all_story_content_in_order",
    "game_data_version",
    "save_data_version",
    "times_booted",
    "save_id",
    "framerate_limit",
    "selected_story_difficulty",
    "selected_arcade_difficulty",
    "total_rhythm_rifts_cleared",
    "total_diamonds",
    "total_vibe_power_uses",
    "max_enemies_killed_while_vibing",
    "bb_total_attacks",
    "bb_total_dodges",
    "bb_total_blocked_hits",
)

LEVEL_FIELDS = (
    "level_id",
    "stage_type",
    "was_completed_in_story_mode",
    "was_attempted_in_story_mode",
    "was_skipped_in_story_mode",
    "awarded_diamonds",
    "awarded_diamonds_remix",
)

HIGH_SCORE_FIELDS = tuple(f.name for f in fields(DifficultyData))


@dataclass(frozen=True)
class Save:
    """Write the edited data back to the save file."""


@dataclass(frozen=True)
class MarkAllFullCombo:
    """Mark every level and difficulty as cleared with a full combo."""


@dataclass(frozen=True)
class EditField:
    """Set one top-level field of the save game."""

    name: str
    value: Any


@dataclass(frozen=True)
class LevelFieldEdit:
    """Set one field of a level."""

    name: str
    value: Any


@dataclass(frozen=True)
class HighScoreEdit:
    """Set one field of a level's difficulty high-score record."""

    index: int
    name: str
    value: Any


@dataclass(frozen=True)
class LevelEdit:
    """Apply an edit to the level at ``index``."""

    index: int
    message: LevelFieldEdit | HighScoreEdit


def backup_path(path: Path | str, millis: int) -> Path:
    """Return the path a backup taken at ``millis`` since the epoch is written to."""
    return Path(f"{path}.editor.{millis}.bak")


def _assign(target: Any, allowed: tuple[str, ...], name: str, value: Any) -> None:
    if name not in allowed:
        raise ValueError(f"field `{name}` cannot be edited")
    current = getattr(target, name)
    if isinstance(current, bool):
        if not isinstance(value, bool):
            raise TypeError(f"field `{name}` expects a boolean, got {value!r}")
    elif isinstance(current, int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"field `{name}` expects an integer, got {value!r}")
        if not 0 <= value <= U64_MAX:
            raise ValueError(f"field `{name}`: {value} does not fit in u64")
    elif isinstance(current, str):
        if not isinstance(value, str):
            raise TypeError(f"field `{name}` expects a string, got {value!r}")
    setattr(target, name, value)


def _at(items: list, index: int) -> Any:
    if 0 <= index < len(items):
        return items[index]
    return None


class EditorState:
    """A save game being edited, next to the version last loaded or saved."""

    def __init__(self, save_game: SaveGame, path: Path | str) -> None:
        self.data = copy.deepcopy(save_game)
        self.original = save_game
        self.path = Path(path)

    def update(self, message: Any) -> list[Any]:
        """Apply a message and return the follow-up messages."""
        if isinstance(message, EditField):
            _assign(self.data, EDITABLE_FIELDS, message.name, message.value)
        elif isinstance(message, LevelEdit):
            self._edit_level(message)
        elif isinstance(message, Save):
            self.save()
        elif isinstance(message, MarkAllFullCombo):
            self.mark_all_full_combo()
        else:
            raise TypeError(f"unexpected message: {message!r}")
        return []

    def _edit_level(self, message: LevelEdit) -> None:
        level = _at(self.data.level_data, message.index)
        if level is None:
            return
        edit = message.message
        if isinstance(edit, LevelFieldEdit):
            _assign(level, LEVEL_FIELDS, edit.name, edit.value)
        elif isinstance(edit, HighScoreEdit):
            record = _at(level.difficulty_data, edit.index)
            if record is None:
                return
            _assign(record, HIGH_SCORE_FIELDS, edit.name, edit.value)
        else:
            raise TypeError(f"unexpected level edit: {edit!r}")

    def save(self) -> Path:
        """Back up the current file, then write the edited data over it.

        A failed backup is ignored; a failed write raises ``OSError``.
        Returns the backup path that was attempted.
        """
        target = backup_path(self.path, time.time_ns() // 1_000_000)
        try:
            shutil.copy(self.path, target)
        except OSError:
            pass
        content = self.data.to_json()
        self.original = copy.deepcopy(self.data)
        self.path.write_text(content, encoding="utf-8")
        return target

    def mark_all_full_combo(self) -> None:
        """Mark all levels completed and every difficulty as a perfect full combo."""
        for level in self.data.level_data:
            level.was_attempted_in_story_mode = True
            level.was_completed_in_story_mode = True
            for record in level.difficulty_data:
                record.num_attempts = min(record.num_attempts, 1)
                record.num_retries = min(record.num_retries, 1)
                record.has_all_perfects = True
                record.has_full_combo_rhythm_rift = True