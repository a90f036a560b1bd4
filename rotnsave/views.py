"""Declarative descriptions of what each screen and modal shows."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable

from rotnsave.editor import (
    EditField,
    EditorState,
    HighScoreEdit,
    LevelEdit,
    LevelFieldEdit,
    MarkAllFullCombo,
    Save,
)
from rotnsave.messages import CloseModal, OpenNumericEditor
from rotnsave.models import DifficultyData, LevelData
from rotnsave.numeric_editor import (
    EditInput,
    NumericFieldEditorInit,
    NumericFieldEditorState,
    SaveValue,
)
from rotnsave.pick_file import OpenDialog, PickFileState, Submit, UserChangedPath

HEADING_SIZE = 22.0
TEXT_SIZE = 16.0


@dataclass(frozen=True)
class Heading:
    """A line of text, larger for section headings."""

    text: str
    size: float = TEXT_SIZE


@dataclass(frozen=True)
class TextField:
    """A text input; ``on_change`` turns new text into a message."""

    label: str
    value: str
    placeholder: str
    on_change: Callable[[str], Any] = field(repr=False, compare=False)
    on_submit: Any = None


@dataclass(frozen=True)
class NumberField:
    """A number with its original value; pressing it opens the numeric editor."""

    label: str
    value: int
    original: int
    on_press: OpenNumericEditor = field(repr=False, compare=False)


@dataclass(frozen=True)
class BoolField:
    """A checkbox with its original state; ``on_toggle`` turns a new state into a message."""

    label: str
    value: bool
    original: bool
    on_toggle: Callable[[bool], Any] = field(repr=False, compare=False)


@dataclass(frozen=True)
class Section:
    """A group of elements with optional title, buttons and note.

    Each action is a ``(label, message)`` pair; a ``None`` message is a disabled button.
    """

    children: tuple[Any, ...] = ()
    title: str | None = None
    actions: tuple[tuple[str, Any], ...] = ()
    note: str | None = None


_GENERAL = (
    ("SaveName", "save_name"),
    ("PlayerID", "player_id"),
    ("Selected Language", "selected_language"),
    ("Should Display Dialogue Debug", "should_display_dialogue_debug"),
    ("Should Unlock All Levels", "should_unlock_all_levels"),
    ("Has Input Dragon Dance", "has_input_dragon_dance"),
    ("Is Remix Mode Active", "is_remix_mode_active"),
    ("Should Play All Story Content In Order", "should_play_all_story_content_in_order"),
    ("Game Data Version", "game_data_version"),
    ("Save Data Version", "save_data_version"),
    ("Times Booted", "times_booted"),
    ("Save ID", "save_id"),
    ("Framerate Limit", "framerate_limit"),
    ("Selected Story Difficulty", "selected_story_difficulty"),
    ("Selected Arcade Difficulty", "selected_arcade_difficulty"),
    ("Total Rythm Rifts Cleared", "total_rhythm_rifts_cleared"),
    ("Total Diamonds", "total_diamonds"),
    ("Total Vibe Power Uses", "total_vibe_power_uses"),
    ("Max Enemies Killed While Vibing", "max_enemies_killed_while_vibing"),
    ("BB Total Attacks", "bb_total_attacks"),
    ("BB Total Dodges", "bb_total_dodges"),
    ("BB Total Blocked Hits", "bb_total_blocked_hits"),
)

_LEVEL = (
    ("Level Id", "level_id"),
    ("Stage Type", "stage_type"),
    ("Was Completed In Story Mode", "was_completed_in_story_mode"),
    ("Was Attempted In Story Mode", "was_attempted_in_story_mode"),
    ("Was Skipped In Story Mode", "was_skipped_in_story_mode"),
    ("Awarded Diamonds", "awarded_diamonds"),
    ("Awarded Diamonds Remix", "awarded_diamonds_remix"),
)

_HIGH_SCORE = (
    ("Difficulty", "difficulty"),
    ("High Score", "high_score"),
    ("Letter Grade", "letter_grade"),
    ("Max Combo Count", "max_combo_count"),
    ("Attempts", "num_attempts"),
    ("Clears", "num_clears"),
    ("Retries", "num_retries"),
    ("Game Overs", "num_game_overs"),
    ("Has All Perfects", "has_all_perfects"),
    ("Has Full Combo Rhythm Shift", "has_full_combo_rhythm_rift"),
)


def _field(label: str, value: Any, original: Any, change: Callable[[Any], Any]) -> Any:
    if isinstance(value, bool):
        return BoolField(label, value, original, change)
    if isinstance(value, int):
        init = NumericFieldEditorInit(label, value, original, change)
        return NumberField(label, value, original, OpenNumericEditor(init))
    return TextField(label, value, original, change)


def _level_field(index: int, name: str, value: Any) -> LevelEdit:
    return LevelEdit(index, LevelFieldEdit(name, value))


def _high_score_field(level_index: int, index: int, name: str, value: Any) -> LevelEdit:
    return LevelEdit(level_index, HighScoreEdit(index, name, value))


def general_fields(state: EditorState) -> list[Any]:
    """Fields for the top-level values of the save game."""
    return [
        _field(label, getattr(state.data, name), getattr(state.original, name),
               partial(EditField, name))
        for label, name in _GENERAL
    ]


def high_score_section(
    level_index: int, index: int, data: DifficultyData, original: DifficultyData
) -> Section:
    """Fields for one difficulty record of a level."""
    return Section(
        children=tuple(
            _field(label, getattr(data, name), getattr(original, name),
                   partial(_high_score_field, level_index, index, name))
            for label, name in _HIGH_SCORE
        )
    )


def level_section(index: int, level: LevelData, original: LevelData) -> Section:
    """Fields for one level, followed by its high-score records."""
    fields_ = [
        _field(label, getattr(level, name), getattr(original, name),
               partial(_level_field, index, name))
        for label, name in _LEVEL
    ]
    records = [
        high_score_section(index, position, record, original.difficulty_data[position])
        for position, record in enumerate(level.difficulty_data)
    ]
    return Section(children=(*fields_, Heading("High Score Data"), *records))


def editor_view(state: EditorState) -> Section:
    """The editor screen: all fields on one side, actions on the other."""
    levels = [
        level_section(position, level, state.original.level_data[position])
        for position, level in enumerate(state.data.level_data)
    ]
    content = Section(
        children=(
            Heading("General", HEADING_SIZE),
            *general_fields(state),
            Heading("Levels", HEADING_SIZE),
            *levels,
        )
    )
    actions = Section(
        title="Actions",
        actions=(("Mark all as Full Combo", MarkAllFullCombo()), ("Save", Save())),
        note=f"Saving in {state.path}",
    )
    return Section(children=(content, actions))


def pick_file_view(state: PickFileState) -> Section:
    """The screen for choosing which save file to open."""
    return Section(
        title="Pick SaveGame file location",
        children=(TextField("", state.path, "Path", UserChangedPath, Submit()),),
        actions=(("Pick", OpenDialog()), ("Open", Submit() if state.valid else None)),
        note=state.error,
    )


def numeric_editor_view(state: NumericFieldEditorState) -> Section:
    """The modal for editing one number."""
    return Section(
        title=f"Edit {state.name}",
        children=(TextField("", state.input, str(state.original), EditInput),),
        actions=(
            ("Cancel", CloseModal()),
            ("Save", SaveValue() if state.error is None else None),
        ),
        note=state.error,
    )