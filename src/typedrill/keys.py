"""Logical keystrokes and the key-name binding that produces them.

Raw key events are reduced to a small alphabet before they reach the typing
session: a single printable character, or one of the control actions
backspace, restart and advance.

Usage:
    >>> bind_key("a")
    KeyAction(kind=<ActionKind.CHAR: 1>, char='a')
    >>> bind_key("Shift") is None
    True

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ActionKind(Enum):
    """Kinds of logical keystroke."""

    CHAR = auto()
    BACKSPACE = auto()
    RESTART = auto()
    ADVANCE = auto()


@dataclass(frozen=True, slots=True)
class KeyAction:
    """A logical keystroke; ``char`` is set only for CHAR actions."""

    kind: ActionKind
    char: str = ""


BACKSPACE = KeyAction(ActionKind.BACKSPACE)
RESTART = KeyAction(ActionKind.RESTART)
ADVANCE = KeyAction(ActionKind.ADVANCE)

# Named keys with a fixed meaning
NAMED_KEYS: dict[str, KeyAction] = {
    "Enter": ADVANCE,
    "Escape": RESTART,
    "Backspace": BACKSPACE,
    "Tab": KeyAction(ActionKind.CHAR, "\t"),
}


def bind_key(key: str, *, composing: bool = False) -> KeyAction | None:
    """Translate a key name into a logical keystroke.

    Args:
        key: Key name as reported by the input device ("a", "Enter", "Shift")
        composing: True while an input method is composing text

    Returns:
        The KeyAction, or None for composed input, modifier-only presses and
        other multi-character key names.
    """
    if composing or not key:
        return None
    action = NAMED_KEYS.get(key)
    if action is not None:
        return action
    if len(key) == 1:
        return KeyAction(ActionKind.CHAR, key)
    return None


def actions_for_line(line: str) -> list[KeyAction]:
    """Expand a line of typed text into one CHAR action per character."""
    return [KeyAction(ActionKind.CHAR, char) for char in line]
