"""Load topics and questions from JSON content.

Layout of a topics directory::

    topics/
    ├── index.json        # [{"id": "python-basics", "title": "Python basics"}, ...]
    └── python-basics.json

A topic file holds ``{"title": ..., "questions": [{"code": ..., "description": ...}]}``.
Missing or null fields are normalized here so the typing session never has
to validate its input: ``code`` and ``description`` default to ``""``.
"""

from __future__ import annotations

import json
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

from typedrill.errors import ContentError
from typedrill.models import Question, Topic, TopicEntry
from typedrill.utils.logger import get_logger

logger = get_logger(__name__)

CONTENT_PACKAGE = "typedrill.topics"
INDEX_FILE = "index.json"


def _question_from_dict(raw: Any, path: str) -> Question:
    """Build a question from raw JSON content."""
    if not isinstance(raw, dict):
        raise ContentError("question entries must be objects", path)
    code = raw.get("code")
    description = raw.get("description")
    return Question(
        code="" if code is None else str(code),
        description="" if description is None else str(description),
    )


def _topic_from_dict(topic_id: str, raw: Any, path: str) -> Topic:
    """Build a topic from raw JSON content."""
    if not isinstance(raw, dict):
        raise ContentError("topic file must contain a JSON object", path)
    questions = raw.get("questions") or []
    if not isinstance(questions, list):
        raise ContentError("'questions' must be a list", path)
    title = raw.get("title")
    return Topic(
        id=topic_id,
        title="" if title is None else str(title),
        questions=tuple(_question_from_dict(item, path) for item in questions),
    )


def _index_from_list(raw: Any, path: str) -> list[TopicEntry]:
    """Build topic index entries from raw JSON content."""
    if not isinstance(raw, list) or not raw:
        raise ContentError("topic index is empty or invalid", path)
    entries: list[TopicEntry] = []
    seen: set[str] = set()
    for item in raw:
        if not isinstance(item, dict) or not item.get("id"):
            raise ContentError("topic index entries need an 'id'", path)
        topic_id = str(item["id"])
        if topic_id in seen:
            raise ContentError(f"duplicate topic id: {topic_id}", path)
        seen.add(topic_id)
        entries.append(TopicEntry(id=topic_id, title=str(item.get("title") or topic_id)))
    return entries


def _read_json(entry: Path | Traversable) -> Any:
    """Read one JSON document, mapping I/O and syntax failures to ContentError."""
    try:
        text = entry.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise ContentError("file not found", str(entry)) from exc
    except OSError as exc:
        raise ContentError(f"cannot read file: {exc.strerror or exc}", str(entry)) from exc
    except UnicodeDecodeError as exc:
        raise ContentError(f"file is not valid UTF-8: {exc.reason}", str(entry)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ContentError(f"invalid JSON: {exc.msg} (line {exc.lineno})", str(entry)) from exc


def load_topic_index(path: Path) -> list[TopicEntry]:
    """Load ``index.json`` from a topics directory."""
    index_path = path / INDEX_FILE
    return _index_from_list(_read_json(index_path), str(index_path))


def load_topic(path: Path, topic_id: str) -> Topic:
    """Load ``<topic_id>.json`` from a topics directory."""
    topic_path = path / f"{topic_id}.json"
    topic = _topic_from_dict(topic_id, _read_json(topic_path), str(topic_path))
    logger.info("Loaded topic %r (%d questions)", topic.id, len(topic.questions))
    return topic


def load_topics(path: Path) -> dict[str, Topic]:
    """Load every topic listed in a directory's index, in index order."""
    return {entry.id: load_topic(path, entry.id) for entry in load_topic_index(path)}


def load_bundled_index() -> list[TopicEntry]:
    """Load the index of topics shipped with the package."""
    entry = resources.files(CONTENT_PACKAGE) / INDEX_FILE
    return _index_from_list(_read_json(entry), INDEX_FILE)


def load_bundled_topic(topic_id: str) -> Topic:
    """Load one topic shipped with the package."""
    name = f"{topic_id}.json"
    entry = resources.files(CONTENT_PACKAGE) / name
    topic = _topic_from_dict(topic_id, _read_json(entry), name)
    logger.info("Loaded bundled topic %r (%d questions)", topic.id, len(topic.questions))
    return topic
