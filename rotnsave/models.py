"""Save-game data model and its JSON representation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any, Callable

U64_MAX = 2**64 - 1


class SaveGameError(ValueError):
    """Raised when save-game data does not match the expected layout."""


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _u64(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SaveGameError(f"invalid type for `{key}`: expected u64, got {_describe(value)}")
    if not 0 <= value <= U64_MAX:
        raise SaveGameError(f"invalid value for `{key}`: {value} does not fit in u64")
    return value


def _str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise SaveGameError(f"invalid type for `{key}`: expected string, got {_describe(value)}")
    return value


def _bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise SaveGameError(f"invalid type for `{key}`: expected boolean, got {_describe(value)}")
    return value


def _list_of(record: type) -> Callable[[Any, str], list]:
    def convert(value: Any, key: str) -> list:
        if not isinstance(value, list):
            raise SaveGameError(f"invalid type for `{key}`: expected array, got {_describe(value)}")
        items = []
        for position, item in enumerate(value):
            try:
                items.append(record.from_dict(item))
            except SaveGameError as err:
                raise SaveGameError(f"in `{key}`[{position}]: {err}") from err
        return items

    return convert


def _field(convert: Callable[[Any, str], Any], key: str | None = None) -> Any:
    return field(metadata={"convert": convert, "key": key})


def _json_key(f) -> str:
    return f.metadata["key"] or "".join(part.capitalize() for part in f.name.split("_"))


def _record_from_dict(cls: type, data: Any):
    if not isinstance(data, dict):
        raise SaveGameError(f"invalid type: expected {cls.__name__} object, got {_describe(data)}")
    values = {}
    for f in fields(cls):
        key = _json_key(f)
        if key not in data:
            raise SaveGameError(f"missing field `{key}`")
        values[f.name] = f.metadata["convert"](data[key], key)
    return cls(**values)


def _record_to_dict(record: Any) -> dict[str, Any]:
    result = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if isinstance(value, list):
            value = [item.to_dict() for item in value]
        result[_json_key(f)] = value
    return result


@dataclass
class DifficultyData:
    """High-score record for one difficulty of a level."""

    difficulty: int = _field(_u64)
    high_score: int = _field(_u64)
    letter_grade: str = _field(_str)
    max_combo_count: int = _field(_u64)
    num_attempts: int = _field(_u64)
    num_clears: int = _field(_u64)
    num_retries: int = _field(_u64)
    num_game_overs: int = _field(_u64)
    has_all_perfects: bool = _field(_bool)
    has_full_combo_rhythm_rift: bool = _field(_bool)

    @classmethod
    def from_dict(cls, data: Any) -> DifficultyData:
        """Build from a decoded JSON object; unknown keys are ignored."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, keys in declaration order."""
        return _record_to_dict(self)


@dataclass
class LevelData:
    """Progress record for one level."""

    level_id: str = _field(_str)
    stage_type: int = _field(_u64)
    was_completed_in_story_mode: bool = _field(_bool)
    was_attempted_in_story_mode: bool = _field(_bool)
    was_skipped_in_story_mode: bool = _field(_bool)
    awarded_diamonds: int = _field(_u64)
    awarded_diamonds_remix: int = _field(_u64)
    difficulty_data: list[DifficultyData] = _field(
        _list_of(DifficultyData), "DifficultyHighScoreDatas"
    )
    remix_difficulty_data: list[DifficultyData] = _field(
        _list_of(DifficultyData), "RemixDifficultyHighScoreDatas"
    )

    @classmethod
    def from_dict(cls, data: Any) -> LevelData:
        """Build from a decoded JSON object; unknown keys are ignored."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, keys in declaration order."""
        return _record_to_dict(self)


@dataclass
class StoryBeatData:
    """How often a story beat was played."""

    level_id: str = _field(_str)
    times_played: int = _field(_u64)

    @classmethod
    def from_dict(cls, data: Any) -> StoryBeatData:
        """Build from a decoded JSON object; unknown keys are ignored."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, keys in declaration order."""
        return _record_to_dict(self)


@dataclass
class StorylineData:
    """Unlock and completion state of one storyline."""

    storyline_characters: int = _field(_u64, "storylineCharacters")
    has_unlocked_storyline: bool = _field(_bool)
    has_completed_storyline: bool = _field(_bool)
    story_beat_data: list[StoryBeatData] = _field(_list_of(StoryBeatData), "StoryBeatDatas")

    @classmethod
    def from_dict(cls, data: Any) -> StorylineData:
        """Build from a decoded JSON object; unknown keys are ignored."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, keys in declaration order."""
        return _record_to_dict(self)


@dataclass
class EnemyKillCount:
    """Kill and death counters for one enemy type."""

    enemy_id: int = _field(_u64)
    number_of_kills: int = _field(_u64)
    number_of_deaths: int = _field(_u64)

    @classmethod
    def from_dict(cls, data: Any) -> EnemyKillCount:
        """Build from a decoded JSON object; unknown keys are ignored."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, keys in declaration order."""
        return _record_to_dict(self)


@dataclass
class SaveGame:
    """A complete save file."""

    save_name: str = _field(_str)
    game_data_version: int = _field(_u64)
    save_data_version: int = _field(_u64)
    times_booted: int = _field(_u64)
    save_id: int = _field(_u64, "SaveID")
    player_id: str = _field(_str, "PlayerID")
    selected_language: str = _field(_str)
    framerate_limit: int = _field(_u64)
    level_data: list[LevelData] = _field(_list_of(LevelData), "LevelDatas")
    storyline_data: list[StorylineData] = _field(_list_of(StorylineData), "StorylineDatas")
    active_cosmetic_pin: str = _field(_str)
    active_gameplay_pin: str = _field(_str)
    should_display_dialogue_debug: bool = _field(_bool)
    should_unlock_all_levels: bool = _field(_bool)
    has_input_dragon_dance: bool = _field(_bool)
    selected_story_difficulty: int = _field(_u64)
    selected_arcade_difficulty: int = _field(_u64)
    selected_track_sorting_order: int = _field(_u64)
    selected_custom_music_sorting_order: int = _field(_u64)
    is_remix_mode_active: bool = _field(_bool)
    should_play_all_story_content_in_order: bool = _field(_bool)
    enemy_kill_counts_by_id: list[EnemyKillCount] = _field(_list_of(EnemyKillCount))
    total_rhythm_rifts_cleared: int = _field(_u64)
    has_seen_splash_screens: bool = _field(_bool)
    has_opened_story_mode: bool = _field(_bool)
    has_agreed_to_no_streaming: bool = _field(_bool)
    total_diamonds: int = _field(_u64)
    total_vibe_power_uses: int = _field(_u64)
    max_enemies_killed_while_vibing: int = _field(_u64)
    bb_total_attacks: int = _field(_u64, "BBTotalAttacks")
    bb_total_dodges: int = _field(_u64, "BBTotalDodges")
    bb_total_blocked_hits: int = _field(_u64, "BBTotalBlockedHits")

    @classmethod
    def from_dict(cls, data: Any) -> SaveGame:
        """Build from a decoded JSON object; unknown keys are ignored."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, keys in declaration order."""
        return _record_to_dict(self)

    @classmethod
    def from_json(cls, text: str) -> SaveGame:
        """Parse a save file's JSON text."""
        try:
            data = json.loads(text, object_pairs_hook=_reject_duplicates)
        except json.JSONDecodeError as err:
            raise SaveGameError(str(err)) from err
        return cls.from_dict(data)

    def to_json(self) -> str:
        """Serialise to compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise SaveGameError(f"duplicate field `{key}`")
        result[key] = value
    return result