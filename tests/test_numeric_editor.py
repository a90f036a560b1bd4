import pytest

from rotnsave.messages import CloseModal
from rotnsave.numeric_editor import (
    EditInput,
    NumericFieldEditorInit,
    NumericFieldEditorState,
    SaveValue,
    parse_u64,
)


def _state(value=5, original=3):
    saved = []

    def on_save(v):
        saved.append(v)
        return ("saved", v)

    init = NumericFieldEditorInit(name="Total Diamonds", value=value, original=original, on_save=on_save)
    return NumericFieldEditorState.from_init(init), saved


@pytest.mark.parametrize("text, expected", [("42", 42), ("+7", 7), ("007", 7), ("0", 0)])
def test_parse_u64_valid(text, expected):
    assert parse_u64(text) == expected


def test_parse_u64_max():
    assert parse_u64(str(2**64 - 1)) == 2**64 - 1


@pytest.mark.parametrize("text", ["", "+", "-1", " 1", "1_000", "1.0", "abc", "١٢", str(2**64)])
def test_parse_u64_invalid(text):
    with pytest.raises(ValueError):
        parse_u64(text)


def test_parse_u64_empty_message():
    with pytest.raises(ValueError, match="empty string"):
        parse_u64("")


def test_from_init_shows_current_value():
    state, _ = _state(value=5, original=3)
    assert state.input == "5"
    assert state.error is None
    assert (state.name, state.value, state.original) == ("Total Diamonds", 5, 3)


def test_valid_input_updates_value():
    state, _ = _state()
    assert state.update(EditInput("12")) == []
    assert state.value == 12
    assert state.input == "12"
    assert state.error is None


def test_invalid_input_sets_error_keeps_value():
    state, _ = _state(value=5)
    state.update(EditInput("x1"))
    assert state.value == 5
    assert state.input == "x1"
    assert state.error.startswith("Invalid number: ")


def test_valid_input_clears_error():
    state, _ = _state()
    state.update(EditInput("bad"))
    state.update(EditInput("9"))
    assert state.error is None
    assert state.value == 9


def test_save_emits_callback_message_then_close():
    state, saved = _state()
    state.update(EditInput("21"))
    assert state.update(SaveValue()) == [("saved", 21), CloseModal()]
    assert saved == [21]


def test_save_with_error_does_nothing():
    state, saved = _state()
    state.update(EditInput(""))
    assert state.update(SaveValue()) == []
    assert saved == []


def test_unknown_message_raises():
    state, _ = _state()
    with pytest.raises(TypeError):
        state.update("nonsense")