"""Tests for key-name binding."""

import pytest

from typedrill.keys import (
    ADVANCE,
    BACKSPACE,
    RESTART,
    ActionKind,
    KeyAction,
    actions_for_line,
    bind_key,
)


class TestBindKey:
    @pytest.mark.parametrize("key", ["a", "Z", "1", "=", '"', " ", "é"])
    def test_single_characters(self, key: str) -> None:
        assert bind_key(key) == KeyAction(ActionKind.CHAR, key)

    @pytest.mark.parametrize(
        "key,expected",
        [("Enter", ADVANCE), ("Escape", RESTART), ("Backspace", BACKSPACE)],
    )
    def test_control_keys(self, key: str, expected: KeyAction) -> None:
        assert bind_key(key) == expected

    def test_tab_types_a_tab(self) -> None:
        assert bind_key("Tab") == KeyAction(ActionKind.CHAR, "\t")

    @pytest.mark.parametrize("key", ["Shift", "Control", "ArrowLeft", "F5", "Dead", ""])
    def test_other_keys_are_dropped(self, key: str) -> None:
        assert bind_key(key) is None

    def test_composing_input_is_dropped(self) -> None:
        assert bind_key("a", composing=True) is None
        assert bind_key("Enter", composing=True) is None


class TestActionsForLine:
    def test_one_action_per_character(self) -> None:
        actions = actions_for_line("a b")
        assert [a.char for a in actions] == ["a", " ", "b"]
        assert all(a.kind is ActionKind.CHAR for a in actions)

    def test_empty_line(self) -> None:
        assert actions_for_line("") == []
