"""
typedrill: learn code by typing it

The learner reproduces a code fragment keystroke for keystroke. Whitespace
and newlines are consumed automatically so practice focuses on the
characters that matter.

Quick Start:
    >>> from typedrill import TypingSession
    >>> session = TypingSession()
    >>> session.start("x  y")
    >>> session.accept_char("x")
    True
    >>> session.expected_char()
    'y'

Topics:
    >>> from typedrill import Practice, load_bundled_topic
    >>> practice = Practice(load_bundled_topic("python-basics"))
    >>> practice.snapshot().question_number
    1
"""

from typedrill.config import (
    SessionConfig,
    get_session_config,
    reset_session_config,
    session_config_context,
    set_session_config,
)
from typedrill.content_loader import (
    load_bundled_index,
    load_bundled_topic,
    load_topic,
    load_topic_index,
    load_topics,
)
from typedrill.errors import (
    ContentError,
    SessionError,
    TokenizeError,
    TypedrillError,
    UnterminatedStringError,
)
from typedrill.keys import ActionKind, KeyAction, bind_key
from typedrill.lexer import Lexer, tokenize
from typedrill.location import SourceLocation
from typedrill.models import Question, Topic, TopicEntry
from typedrill.practice import Practice
from typedrill.session import (
    SessionPhase,
    SessionState,
    Snapshot,
    TypingSession,
    accept_backspace,
    accept_char,
    is_ready_for_next,
    snapshot,
    start,
)
from typedrill.tokens import Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "ActionKind",
    "ContentError",
    "KeyAction",
    "Lexer",
    "Practice",
    "Question",
    "SessionConfig",
    "SessionError",
    "SessionPhase",
    "SessionState",
    "Snapshot",
    "SourceLocation",
    "Token",
    "TokenKind",
    "TokenizeError",
    "Topic",
    "TopicEntry",
    "TypedrillError",
    "TypingSession",
    "UnterminatedStringError",
    "__version__",
    "accept_backspace",
    "accept_char",
    "bind_key",
    "get_session_config",
    "is_ready_for_next",
    "load_bundled_index",
    "load_bundled_topic",
    "load_topic",
    "load_topic_index",
    "load_topics",
    "reset_session_config",
    "session_config_context",
    "set_session_config",
    "snapshot",
    "start",
    "tokenize",
]
