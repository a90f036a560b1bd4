# rotnsave

A small terminal editor for Rift Of The Necrodancer save game files. It loads
the game's JSON save, lets you change the general settings, per-level progress
and per-difficulty high score records, and writes the file back after copying
the previous version to a timestamped backup next to it.

It needs nothing beyond the Python standard library.

## Installing

```
pip install .
```

## Running

```
rotnsave [PATH]
```

On start the editor prints build information (`HASH`, `BUILD_DATE`,
`TARGET_OS`, `PYTHON_VERSION`, `PROFILE`; the hash comes from
`git rev-parse --short HEAD` in the current directory). If `PATH` is given the
file is opened straight away; otherwise the file-picking screen is shown.

Every screen is printed as a list of numbered entries. At the `>` prompt type
the number of an entry, optionally followed by a space and some text:

- a text field: `<number> <text>` sets the field to that text (on the
  file-picking screen this also tries to open the file);
- a number field: `<number>` opens a small editor for that value; there,
  `<number> <digits>` changes the input, and the *Save* entry commits it
  (disabled while the input is not a valid unsigned 64-bit integer) while
  *Cancel* closes the editor without changes;
- a checkbox: `<number>` toggles it;
- an action such as *Pick*, *Open*, *Mark all as Full Combo* or *Save*:
  `<number>` runs it.

`q`, `quit` or end of input leaves the program. *Pick* opens a file dialog
through `tkinter`, which must be available for that entry to work.

Each field shows its current value next to the value it had when the file was
loaded or last saved.

- **Mark all as Full Combo** marks every level as attempted and completed in
  story mode, caps attempts and retries at one, and sets the all-perfects and
  full-combo flags for every difficulty.
- **Save** copies the current file to `<file>.editor.<milliseconds>.bak`
  (a failed copy is ignored), then writes the edited save in its place as
  compact JSON.

## Using it as a library

The save format is available as plain dataclasses in `rotnsave.models`:
`SaveGame`, `LevelData`, `DifficultyData`, `StorylineData`, `StoryBeatData`
and `EnemyKillCount`, each with `from_dict` and `to_dict`.

```python
from rotnsave.models import SaveGame

with open("SaveGame.json", encoding="utf-8") as fh:
    save = SaveGame.from_json(fh.read())

save.total_diamonds = 999
text = save.to_json()
```

`SaveGame.from_json` raises `SaveGameError` (a `ValueError`) when the text is
not valid JSON, a field is missing or has the wrong type, a number does not fit
in an unsigned 64-bit integer, or a key appears twice. Field names in the JSON
(for example `SaveID`, `LevelDatas`, `BBTotalAttacks`) are kept exactly as the
game writes them.

Editing is done with `rotnsave.editor.EditorState`:

```python
from rotnsave.editor import EditField, EditorState, LevelEdit, LevelFieldEdit

state = EditorState(save, "SaveGame.json")
state.update(EditField("total_diamonds", 999))
state.update(LevelEdit(0, LevelFieldEdit("awarded_diamonds", 3)))
state.mark_all_full_combo()
backup = state.save()
```

`HighScoreEdit(index, name, value)` inside a `LevelEdit` changes one
difficulty record of a level. Edits to a level or record index that does not
exist are ignored; unknown field names raise `ValueError` and values of the
wrong type raise `TypeError`.

## Limitations

- There is no graphical window; the editor runs in the terminal only.
- Storyline data, enemy kill counts, remix high-score records, the active pins,
  the sorting orders and the splash/story/streaming flags are loaded and
  written back unchanged, but cannot be edited.
- Keys in the save file that the data model does not know are ignored on
  loading and are therefore not written back when saving.

## Tests

```
pip install .[test]
pytest
```