"""Error construction and formatting tests."""

from typedrill.errors import (
    ContentError,
    SessionError,
    TokenizeError,
    TypedrillError,
    UnterminatedStringError,
)


class TestTokenizeErrorFormatting:
    """Verify TokenizeError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = TokenizeError("unexpected input")
        assert str(err) == "unexpected input"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = TokenizeError("bad input", lineno=42)
        assert str(err) == "42 bad input"

    def test_with_line_and_column(self) -> None:
        err = TokenizeError("bad input", lineno=10, col_offset=5)
        assert "10:5" in str(err)

    def test_with_source_file(self) -> None:
        err = TokenizeError("error", lineno=1, col_offset=1, source_file="q.py")
        assert str(err) == "q.py:1:1 error"

    def test_is_typedrill_error(self) -> None:
        assert isinstance(TokenizeError("x"), TypedrillError)


class TestUnterminatedStringError:
    def test_fields(self) -> None:
        err = UnterminatedStringError(7, 2, 3)
        assert (err.offset, err.lineno, err.col_offset) == (7, 2, 3)
        assert str(err) == "2:3 unterminated string literal"
        assert isinstance(err, TokenizeError)


class TestOtherErrors:
    def test_content_error_with_path(self) -> None:
        err = ContentError("invalid JSON", "topics/a.json")
        assert str(err) == "topics/a.json: invalid JSON"
        assert err.path == "topics/a.json"

    def test_content_error_without_path(self) -> None:
        assert str(ContentError("empty")) == "empty"

    def test_session_error_hierarchy(self) -> None:
        assert issubclass(SessionError, TypedrillError)
        assert issubclass(ContentError, TypedrillError)
