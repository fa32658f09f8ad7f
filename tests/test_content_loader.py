"""Tests for topic and question loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from typedrill.content_loader import (
    load_bundled_index,
    load_bundled_topic,
    load_topic,
    load_topic_index,
    load_topics,
)
from typedrill.errors import ContentError
from typedrill.models import Question, TopicEntry
from typedrill.session import accept_char, expected_char, start


def write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture
def topics_dir(tmp_path: Path) -> Path:
    write_json(
        tmp_path / "index.json",
        [{"id": "basics", "title": "Basics"}, {"id": "loops", "title": "Loops"}],
    )
    write_json(
        tmp_path / "basics.json",
        {
            "title": "Basics",
            "questions": [
                {"code": "a = 1", "description": "assign"},
                {"code": None},
                {"description": "no code"},
            ],
        },
    )
    write_json(tmp_path / "loops.json", {"questions": [{"code": "for x in y:\n    pass"}]})
    return tmp_path


class TestTopicIndex:
    def test_load_index(self, topics_dir: Path) -> None:
        assert load_topic_index(topics_dir) == [
            TopicEntry(id="basics", title="Basics"),
            TopicEntry(id="loops", title="Loops"),
        ]

    def test_missing_title_falls_back_to_id(self, tmp_path: Path) -> None:
        write_json(tmp_path / "index.json", [{"id": "only"}])
        assert load_topic_index(tmp_path) == [TopicEntry(id="only", title="only")]

    @pytest.mark.parametrize("payload", [[], {}, "topics", [{"title": "no id"}]])
    def test_invalid_index(self, tmp_path: Path, payload: object) -> None:
        write_json(tmp_path / "index.json", payload)
        with pytest.raises(ContentError):
            load_topic_index(tmp_path)

    def test_duplicate_ids(self, tmp_path: Path) -> None:
        write_json(tmp_path / "index.json", [{"id": "a"}, {"id": "a"}])
        with pytest.raises(ContentError, match="duplicate topic id: a"):
            load_topic_index(tmp_path)

    def test_missing_index(self, tmp_path: Path) -> None:
        with pytest.raises(ContentError, match="file not found"):
            load_topic_index(tmp_path)


class TestTopic:
    def test_questions_are_normalized(self, topics_dir: Path) -> None:
        topic = load_topic(topics_dir, "basics")
        assert topic.id == "basics"
        assert topic.title == "Basics"
        assert topic.questions == (
            Question(code="a = 1", description="assign"),
            Question(code="", description=""),
            Question(code="", description="no code"),
        )

    def test_missing_title_is_empty(self, topics_dir: Path) -> None:
        assert load_topic(topics_dir, "loops").title == ""

    def test_utf8_bom_is_accepted(self, tmp_path: Path) -> None:
        text = json.dumps({"title": "T", "questions": [{"code": "x"}]})
        (tmp_path / "bom.json").write_bytes(b"\xef\xbb\xbf" + text.encode("utf-8"))
        assert load_topic(tmp_path, "bom").questions == (Question(code="x"),)

    def test_invalid_json(self, tmp_path: Path) -> None:
        (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ContentError, match="invalid JSON"):
            load_topic(tmp_path, "bad")

    def test_non_object_topic(self, tmp_path: Path) -> None:
        write_json(tmp_path / "list.json", [1, 2])
        with pytest.raises(ContentError, match="JSON object"):
            load_topic(tmp_path, "list")

    def test_questions_must_be_list(self, tmp_path: Path) -> None:
        write_json(tmp_path / "q.json", {"questions": "x"})
        with pytest.raises(ContentError, match="must be a list"):
            load_topic(tmp_path, "q")

    def test_load_topics_in_index_order(self, topics_dir: Path) -> None:
        topics = load_topics(topics_dir)
        assert list(topics) == ["basics", "loops"]


class TestBundledTopics:
    def test_index_is_not_empty(self) -> None:
        entries = load_bundled_index()
        assert entries
        assert all(entry.title for entry in entries)

    def test_every_bundled_topic_is_typeable(self) -> None:
        for entry in load_bundled_index():
            topic = load_bundled_topic(entry.id)
            assert topic.questions
            for question in topic.questions:
                assert question.description
                state = start(question.code)
                while not state.ready_for_next:
                    assert accept_char(state, expected_char(state))

    def test_missing_bundled_topic(self) -> None:
        with pytest.raises(ContentError):
            load_bundled_topic("does-not-exist")


class TestUnreadableContent:
    def test_invalid_utf8_names_the_file(self, tmp_path: Path) -> None:
        (tmp_path / "bad.json").write_bytes(b'{"title": "\xff"}')
        with pytest.raises(ContentError, match="not valid UTF-8") as excinfo:
            load_topic(tmp_path, "bad")
        assert excinfo.value.path == str(tmp_path / "bad.json")

    def test_topics_path_is_a_file(self, tmp_path: Path) -> None:
        not_a_dir = tmp_path / "topics.json"
        not_a_dir.write_text("[]", encoding="utf-8")
        with pytest.raises(ContentError, match="cannot read file"):
            load_topic_index(not_a_dir)

    def test_topic_path_is_a_directory(self, tmp_path: Path) -> None:
        (tmp_path / "dir.json").mkdir()
        with pytest.raises(ContentError):
            load_topic(tmp_path, "dir")
