"""Typing progression state machine for one question.

State lives in an explicit SessionState value owned by the caller; the
module-level operations take that value and mutate it in place. TypingSession
is a thin façade that owns at most one SessionState at a time and adds the
IDLE phase (no active question).

Keystroke policy:
    A correct character extends the typed prefix of the current token. A
    wrong character is silently ignored: it is not recorded and does not
    advance anything. Backspace only removes characters of the current
    token's typed prefix; it never moves back across a completed token.

Whitespace and newline tokens are never typed. After every cursor advance
(and on start) the cursor skips forward to the next significant token.

Example:
    >>> state = start("a = 1")
    >>> for char in "a=1":
    ...     accept_char(state, char)
    True
    True
    True
    >>> state.ready_for_next
    True

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from typedrill.config import SessionConfig
from typedrill.errors import SessionError
from typedrill.lexer import tokenize
from typedrill.tokens import Token
from typedrill.utils.logger import get_logger

logger = get_logger(__name__)


class SessionPhase(Enum):
    """Phases of the typing state machine."""

    IDLE = auto()  # No active question
    TYPING = auto()  # cursor_index < len(tokens)
    QUESTION_COMPLETE = auto()  # All tokens typed; awaiting advance


@dataclass(slots=True)
class SessionState:
    """Mutable progression state for one question.

    Attributes:
        code: The question code being typed
        tokens: Tokens of ``code``
        cursor_index: Index of the token being typed; ``len(tokens)`` when done
        typed_prefix: Correctly typed prefix of the current token; always a
            strict prefix of ``tokens[cursor_index].text``
        ready_for_next: True once the cursor has passed every token

    """

    code: str
    tokens: tuple[Token, ...] = field(default=())
    cursor_index: int = 0
    typed_prefix: str = ""
    ready_for_next: bool = False

    @property
    def phase(self) -> SessionPhase:
        """Current phase (never IDLE for an existing state)."""
        if self.ready_for_next:
            return SessionPhase.QUESTION_COMPLETE
        return SessionPhase.TYPING


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only render view of a session.

    ``done_text`` covers every completed token plus the typed prefix of the
    current token, so a renderer draws ``done_text`` followed by
    ``remaining``. ``typed`` repeats the prefix for renderers that style it
    separately.

    Attributes:
        done_text: Completed tokens plus the typed prefix
        typed: Typed prefix of the current token
        remaining: Untyped rest of the current token
        question_number: 1-based question number (0 when unknown)
        total_questions: Questions in the topic (0 when unknown)
        cursor_index: Index of the current token
        token_count: Number of tokens in the question
        ready_for_next: Whether the question is complete

    """

    done_text: str
    typed: str
    remaining: str
    question_number: int = 0
    total_questions: int = 0
    cursor_index: int = 0
    token_count: int = 0
    ready_for_next: bool = False


def start(
    code: str,
    *,
    source_file: str | None = None,
    config: SessionConfig | None = None,
) -> SessionState:
    """Tokenize ``code`` and return a fresh state positioned on its first
    significant token.

    Code with no significant tokens (empty, whitespace only) yields a state
    that is already QUESTION_COMPLETE.

    Raises:
        UnterminatedStringError: only with ``strict_strings`` enabled
    """
    tokens = tuple(tokenize(code, source_file=source_file, config=config))
    state = SessionState(code=code, tokens=tokens)
    _auto_skip(state)
    logger.debug(
        "Question started: %d tokens, complete=%s", len(tokens), state.ready_for_next
    )
    return state


def restart(state: SessionState, *, config: SessionConfig | None = None) -> SessionState:
    """Return a fresh state for the same code; ``state`` is left untouched."""
    return start(state.code, config=config)


def current_token(state: SessionState) -> Token | None:
    """Token under the cursor, or None when the question is complete."""
    if state.cursor_index < len(state.tokens):
        return state.tokens[state.cursor_index]
    return None


def expected_char(state: SessionState) -> str | None:
    """Next character the learner must type, or None when complete."""
    token = current_token(state)
    if token is None:
        return None
    return token.text[len(state.typed_prefix)]


def accept_char(state: SessionState, char: str) -> bool:
    """Feed one typed character.

    Returns:
        True if the character matched and was recorded. Wrong characters and
        keystrokes after completion return False and change nothing.
    """
    if state.ready_for_next:
        return False
    token = current_token(state)
    if token is None:
        return False

    if char != token.text[len(state.typed_prefix)]:
        return False

    state.typed_prefix += char
    if state.typed_prefix == token.text:
        state.cursor_index += 1
        state.typed_prefix = ""
        _auto_skip(state)
        if state.ready_for_next:
            logger.debug("Question complete after %d tokens", len(state.tokens))
    return True


def accept_backspace(state: SessionState) -> bool:
    """Remove the last typed character of the current token.

    Returns:
        True if a character was removed. An empty prefix or a completed
        question is left unchanged.
    """
    if state.ready_for_next or not state.typed_prefix:
        return False
    state.typed_prefix = state.typed_prefix[:-1]
    return True


def is_ready_for_next(state: SessionState) -> bool:
    """Whether every token of the question has been typed."""
    return state.ready_for_next


def snapshot(
    state: SessionState,
    *,
    question_number: int = 0,
    total_questions: int = 0,
) -> Snapshot:
    """Build a render view without mutating ``state``."""
    done = "".join(token.text for token in state.tokens[: state.cursor_index])
    token = current_token(state)
    remaining = token.text[len(state.typed_prefix) :] if token is not None else ""
    return Snapshot(
        done_text=done + state.typed_prefix,
        typed=state.typed_prefix,
        remaining=remaining,
        question_number=question_number,
        total_questions=total_questions,
        cursor_index=state.cursor_index,
        token_count=len(state.tokens),
        ready_for_next=state.ready_for_next,
    )


def _auto_skip(state: SessionState) -> None:
    """Advance past whitespace/newline tokens, then settle completion."""
    tokens = state.tokens
    while state.cursor_index < len(tokens) and not tokens[state.cursor_index].significant:
        state.cursor_index += 1
        state.typed_prefix = ""
    if state.cursor_index >= len(tokens):
        state.ready_for_next = True


class TypingSession:
    """Owns the progression state of the active question.

    A new TypingSession is IDLE until ``start`` is called. Starting again
    discards the previous state.

    Usage:
            >>> session = TypingSession()
            >>> session.start('"hi"')
            >>> for char in '"hi"':
            ...     _ = session.accept_char(char)
            >>> session.is_ready_for_next()
            True

    """

    __slots__ = ("_config", "_state")

    def __init__(self, config: SessionConfig | None = None) -> None:
        self._config = config
        self._state: SessionState | None = None

    @property
    def state(self) -> SessionState:
        """The active state.

        Raises:
            SessionError: when no question has been started
        """
        if self._state is None:
            raise SessionError("no active question; call start() first")
        return self._state

    @property
    def phase(self) -> SessionPhase:
        if self._state is None:
            return SessionPhase.IDLE
        return self._state.phase

    def start(self, code: str, *, source_file: str | None = None) -> None:
        self._state = start(code, source_file=source_file, config=self._config)

    def restart(self) -> None:
        self._state = restart(self.state, config=self._config)

    def stop(self) -> None:
        """Drop the active question and return to IDLE."""
        self._state = None

    def accept_char(self, char: str) -> bool:
        if self._state is None:
            return False
        return accept_char(self._state, char)

    def accept_backspace(self) -> bool:
        if self._state is None:
            return False
        return accept_backspace(self._state)

    def is_ready_for_next(self) -> bool:
        return self._state is not None and self._state.ready_for_next

    def expected_char(self) -> str | None:
        if self._state is None:
            return None
        return expected_char(self._state)

    def snapshot(self, *, question_number: int = 0, total_questions: int = 0) -> Snapshot:
        """Render view of the active question (empty strings when IDLE)."""
        if self._state is None:
            return Snapshot(
                done_text="",
                typed="",
                remaining="",
                question_number=question_number,
                total_questions=total_questions,
            )
        return snapshot(
            self._state,
            question_number=question_number,
            total_questions=total_questions,
        )
