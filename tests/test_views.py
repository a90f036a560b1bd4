from pathlib import Path

import pytest

from rotnsave.editor import (
    EDITABLE_FIELDS,
    EditField,
    EditorState,
    HighScoreEdit,
    LevelEdit,
    LevelFieldEdit,
    MarkAllFullCombo,
    Save,
)
from rotnsave.messages import CloseModal, OpenNumericEditor
from rotnsave.models import SaveGame
from rotnsave.numeric_editor import (
    EditInput,
    NumericFieldEditorInit,
    NumericFieldEditorState,
    SaveValue,
)
from rotnsave.pick_file import OpenDialog, PickFileState, Submit, UserChangedPath
from rotnsave.views import (
    BoolField,
    Heading,
    NumberField,
    Section,
    TextField,
    editor_view,
    general_fields,
    high_score_section,
    level_section,
    numeric_editor_view,
    pick_file_view,
)

DIFFICULTY = {
    "Difficulty": 1,
    "HighScore": 100,
    "LetterGrade": "B",
    "MaxComboCount": 20,
    "NumAttempts": 3,
    "NumClears": 1,
    "NumRetries": 2,
    "NumGameOvers": 0,
    "HasAllPerfects": False,
    "HasFullComboRhythmRift": False,
}

LEVEL = {
    "LevelId": "L1",
    "StageType": 0,
    "WasCompletedInStoryMode": False,
    "WasAttemptedInStoryMode": False,
    "WasSkippedInStoryMode": False,
    "AwardedDiamonds": 0,
    "AwardedDiamondsRemix": 0,
    "DifficultyHighScoreDatas": [DIFFICULTY],
    "RemixDifficultyHighScoreDatas": [],
}

SAVE = {
    "SaveName": "slot",
    "GameDataVersion": 3,
    "SaveDataVersion": 2,
    "TimesBooted": 5,
    "SaveID": 1,
    "PlayerID": "player-1",
    "SelectedLanguage": "en",
    "FramerateLimit": 60,
    "LevelDatas": [LEVEL],
    "StorylineDatas": [],
    "ActiveCosmeticPin": "",
    "ActiveGameplayPin": "",
    "ShouldDisplayDialogueDebug": False,
    "ShouldUnlockAllLevels": False,
    "HasInputDragonDance": False,
    "SelectedStoryDifficulty": 0,
    "SelectedArcadeDifficulty": 1,
    "SelectedTrackSortingOrder": 0,
    "SelectedCustomMusicSortingOrder": 0,
    "IsRemixModeActive": False,
    "ShouldPlayAllStoryContentInOrder": False,
    "EnemyKillCountsById": [],
    "TotalRhythmRiftsCleared": 4,
    "HasSeenSplashScreens": True,
    "HasOpenedStoryMode": True,
    "HasAgreedToNoStreaming": True,
    "TotalDiamonds": 10,
    "TotalVibePowerUses": 7,
    "MaxEnemiesKilledWhileVibing": 3,
    "BBTotalAttacks": 1,
    "BBTotalDodges": 2,
    "BBTotalBlockedHits": 3,
}


@pytest.fixture
def state():
    return EditorState(SaveGame.from_dict(SAVE), Path("save.json"))


def _elements(element):
    yield element
    if isinstance(element, Section):
        for child in element.children:
            yield from _elements(child)


def _find(element, label):
    for item in _elements(element):
        if getattr(item, "label", None) == label:
            return item
    raise LookupError(label)


def test_general_fields_cover_every_editable_field(state):
    fields_ = general_fields(state)
    assert len(fields_) == len(EDITABLE_FIELDS)
    assert [f.label for f in fields_][:3] == ["SaveName", "PlayerID", "Selected Language"]


def test_general_field_kinds_follow_value_types(state):
    section = Section(children=tuple(general_fields(state)))
    name = _find(section, "SaveName")
    assert isinstance(name, TextField)
    assert name.value == "slot"
    remix = _find(section, "Is Remix Mode Active")
    assert isinstance(remix, BoolField)
    assert remix.value is False
    rifts = _find(section, "Total Rythm Rifts Cleared")
    assert isinstance(rifts, NumberField)
    assert rifts.value == 4
    assert rifts.original == 4


def test_text_field_change_edits_state(state):
    field_ = _find(Section(children=tuple(general_fields(state))), "SaveName")
    assert field_.value == "slot"
    assert field_.placeholder == "slot"
    message = field_.on_change("renamed")
    assert message == EditField("save_name", "renamed")
    state.update(message)
    assert state.data.save_name == "renamed"


def test_number_field_opens_editor_that_saves_field(state):
    field_ = _find(Section(children=tuple(general_fields(state))), "Total Diamonds")
    assert isinstance(field_.on_press, OpenNumericEditor)
    init = field_.on_press.init
    assert (init.name, init.value, init.original) == ("Total Diamonds", 10, 10)
    assert init.on_save(42) == EditField("total_diamonds", 42)


def test_bool_field_toggle(state):
    field_ = _find(Section(children=tuple(general_fields(state))), "Should Unlock All Levels")
    assert field_.value is False
    assert field_.on_toggle(True) == EditField("should_unlock_all_levels", True)


def test_level_section_messages(state):
    level = state.data.level_data[0]
    section = level_section(0, level, state.original.level_data[0])
    stage = _find(section, "Stage Type")
    assert stage.on_press.init.on_save(5) == LevelEdit(0, LevelFieldEdit("stage_type", 5))
    grade = _find(section, "Letter Grade")
    assert grade.on_change("S") == LevelEdit(0, HighScoreEdit(0, "letter_grade", "S"))
    assert Heading("High Score Data") in section.children


def test_high_score_section_uses_indices(state):
    record = state.data.level_data[0].difficulty_data[0]
    section = high_score_section(3, 0, record, record)
    retries = _find(section, "Retries")
    assert retries.value == record.num_retries
    assert retries.on_press.init.on_save(9) == LevelEdit(3, HighScoreEdit(0, "num_retries", 9))
    assert _find(section, "Has Full Combo Rhythm Shift").on_toggle(True) == LevelEdit(
        3, HighScoreEdit(0, "has_full_combo_rhythm_rift", True)
    )


def test_level_section_without_original_record_fails(state):
    level = state.data.level_data[0]
    original = SaveGame.from_dict({**SAVE, "LevelDatas": [{**LEVEL, "DifficultyHighScoreDatas": []}]})
    with pytest.raises(IndexError):
        level_section(0, level, original.level_data[0])


def test_editor_view_shows_edits_next_to_original(state):
    state.update(EditField("times_booted", 99))
    view = editor_view(state)
    booted = _find(view, "Times Booted")
    assert booted.value == 99
    assert booted.original == SAVE["TimesBooted"]


def test_editor_view_actions(state):
    view = editor_view(state)
    actions = view.children[1]
    assert actions.title == "Actions"
    assert actions.actions == (("Mark all as Full Combo", MarkAllFullCombo()), ("Save", Save()))
    assert actions.note == f"Saving in {Path('save.json')}"


def test_pick_file_view_disables_open_until_valid(tmp_path):
    picker = PickFileState()
    view = pick_file_view(picker)
    assert view.title == "Pick SaveGame file location"
    assert dict(view.actions) == {"Pick": OpenDialog(), "Open": None}
    target = tmp_path / "save.json"
    target.write_text("{}", encoding="utf-8")
    picker.update(UserChangedPath(str(target)))
    view = pick_file_view(picker)
    assert dict(view.actions)["Open"] == Submit()
    path_field = view.children[0]
    assert path_field.value == str(target)
    assert path_field.on_change("x") == UserChangedPath("x")
    assert path_field.on_submit == Submit()


def test_pick_file_view_shows_error(tmp_path):
    picker = PickFileState(path=str(tmp_path / "missing.json"))
    picker.update(Submit())
    assert pick_file_view(picker).note == picker.error


def test_numeric_editor_view_states():
    editor = NumericFieldEditorState.from_init(
        NumericFieldEditorInit("Total Diamonds", 10, 7, lambda value: value)
    )
    view = numeric_editor_view(editor)
    assert view.title == "Edit Total Diamonds"
    assert view.children[0].placeholder == "7"
    assert dict(view.actions) == {"Cancel": CloseModal(), "Save": SaveValue()}
    assert view.children[0].on_change("12") == EditInput("12")
    editor.update(EditInput("abc"))
    view = numeric_editor_view(editor)
    assert dict(view.actions)["Save"] is None
    assert view.note.startswith("Invalid number")