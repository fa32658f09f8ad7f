"""Topic runner: walks a learner through every question of a topic.

Practice owns the question index and a TypingSession. When a question is
complete it waits for an explicit advance (or restart) before moving on;
after the last question the topic is complete.
"""

from __future__ import annotations

from typedrill.config import SessionConfig
from typedrill.keys import ActionKind, KeyAction
from typedrill.models import Question, Topic
from typedrill.session import SessionPhase, Snapshot, TypingSession
from typedrill.utils.logger import get_logger

logger = get_logger(__name__)


class Practice:
    """Question navigation and keystroke dispatch for one topic.

    Usage:
            >>> topic = Topic("demo", "Demo", (Question("a=1"),))
            >>> practice = Practice(topic)
            >>> for char in "a=1":
            ...     _ = practice.handle(KeyAction(ActionKind.CHAR, char))
            >>> practice.advance()
            True
            >>> practice.topic_complete
            True

    """

    def __init__(self, topic: Topic, config: SessionConfig | None = None) -> None:
        self.topic = topic
        self.question_index = 0
        self.topic_complete = False
        self.session = TypingSession(config=config)
        if topic.questions:
            self.start_question(0)
        else:
            self.topic_complete = True
            logger.debug("Topic %r has no questions", topic.id)

    @property
    def total_questions(self) -> int:
        return len(self.topic.questions)

    @property
    def question(self) -> Question | None:
        """The current question, or None for an empty topic."""
        if not self.topic.questions:
            return None
        return self.topic.questions[self.question_index]

    @property
    def ready_for_next(self) -> bool:
        return self.session.is_ready_for_next()

    def start_question(self, index: int) -> None:
        """Start question ``index`` from scratch.

        Raises:
            IndexError: if ``index`` is outside the topic
        """
        if not 0 <= index < len(self.topic.questions):
            raise IndexError(f"question index {index} out of range for topic {self.topic.id!r}")
        self.question_index = index
        self.topic_complete = False
        self.session.start(self.topic.questions[index].code)
        logger.debug("Topic %r: question %d/%d", self.topic.id, index + 1, self.total_questions)

    def restart(self) -> bool:
        """Restart the current question.

        Returns:
            False for a topic without questions, True otherwise.
        """
        if self.question is None:
            return False
        self.start_question(self.question_index)
        return True

    def advance(self) -> bool:
        """Move past a completed question.

        Returns:
            True if the practice moved on (to the next question or to topic
            completion); False when the current question is not finished.
        """
        if self.topic_complete or not self.ready_for_next:
            return False
        following = self.question_index + 1
        if following < len(self.topic.questions):
            self.start_question(following)
        else:
            self.topic_complete = True
            logger.debug("Topic %r complete", self.topic.id)
        return True

    def handle(self, action: KeyAction) -> bool:
        """Dispatch one logical keystroke.

        Returns:
            True if the keystroke changed the practice state.
        """
        if self.topic_complete or self.ready_for_next:
            if action.kind is ActionKind.ADVANCE:
                return self.advance()
            if action.kind is ActionKind.RESTART:
                return self.restart()
            return False

        if action.kind is ActionKind.RESTART:
            return self.restart()
        if action.kind is ActionKind.BACKSPACE:
            return self.session.accept_backspace()
        if action.kind is ActionKind.CHAR:
            return self.session.accept_char(action.char)
        return self._type_line_break()

    def _type_line_break(self) -> bool:
        """Type Enter inside a multi-line string literal.

        The line break may be ``\\n``, ``\\r\\n`` or a lone ``\\r``; Enter
        types all of it. Anywhere else Enter does nothing while typing.
        """
        if self.session.expected_char() == "\r":
            self.session.accept_char("\r")
            if self.session.expected_char() == "\n":
                self.session.accept_char("\n")
            return True
        if self.session.expected_char() == "\n":
            return self.session.accept_char("\n")
        return False

    @property
    def phase(self) -> SessionPhase:
        return self.session.phase

    def snapshot(self) -> Snapshot:
        """Render view with question numbering filled in."""
        number = self.question_index + 1 if self.topic.questions else 0
        return self.session.snapshot(
            question_number=number,
            total_questions=self.total_questions,
        )
