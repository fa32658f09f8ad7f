"""Topic and question models.

Loaded once from content files and never mutated.

Thread Safety:
All models are frozen dataclasses and safe to share across threads.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Question:
    """One code fragment to reproduce."""

    code: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class Topic:
    """Ordered questions practised together."""

    id: str
    title: str
    questions: tuple[Question, ...] = ()


@dataclass(frozen=True, slots=True)
class TopicEntry:
    """One row of the topic index."""

    id: str
    title: str
