"""Token-class matchers for the lexer.

Each matcher is pure logic: given a start position it returns the end
position of its longest match, or None. Matchers never move the lexer.
The Lexer tries them in SCAN_ORDER and commits the first match.
"""

from __future__ import annotations

from typedrill.lexer.charsets import (
    BLANK_CHARS,
    DIGITS,
    IDENTIFIER_CHARS,
    IDENTIFIER_START,
    LINE_TERMINATORS,
    STRING_ESCAPE,
    STRING_QUOTE,
)
from typedrill.tokens import TokenKind

# Precedence: newline > whitespace > string > identifier > integer > symbol.
# The trailing WHITESPACE entry only sees characters every earlier matcher
# rejected (lone \r, form feed, Unicode spaces), which keeps tokenization total.
SCAN_ORDER: tuple[tuple[TokenKind, str], ...] = (
    (TokenKind.NEWLINE, "_match_newline"),
    (TokenKind.WHITESPACE, "_match_blank_run"),
    (TokenKind.STRING, "_match_string"),
    (TokenKind.IDENTIFIER, "_match_identifier"),
    (TokenKind.INTEGER, "_match_integer"),
    (TokenKind.SYMBOL, "_match_symbol"),
    (TokenKind.WHITESPACE, "_match_other_whitespace"),
)


class ScannerMixin:
    """Mixin providing one matcher per token class."""

    # Set by the Lexer class
    _source: str
    _source_len: int

    def _match_newline(self, pos: int) -> int | None:
        """Match ``\\n`` or ``\\r\\n``."""
        char = self._source[pos]
        if char == "\n":
            return pos + 1
        if char == "\r" and pos + 1 < self._source_len and self._source[pos + 1] == "\n":
            return pos + 2
        return None

    def _match_blank_run(self, pos: int) -> int | None:
        """Match a maximal run of spaces and tabs."""
        return self._match_run(pos, BLANK_CHARS)

    def _match_string(self, pos: int) -> int | None:
        """Match a double-quoted literal with backslash escapes.

        A backslash escapes any one character except a line terminator.
        Returns None when the literal never closes.
        """
        source = self._source
        if source[pos] != STRING_QUOTE:
            return None

        end = self._source_len
        i = pos + 1
        while i < end:
            char = source[i]
            if char == STRING_QUOTE:
                return i + 1
            if char == STRING_ESCAPE:
                if i + 1 < end and source[i + 1] not in LINE_TERMINATORS:
                    i += 2
                    continue
                return None
            i += 1
        return None

    def _match_identifier(self, pos: int) -> int | None:
        """Match an ASCII identifier."""
        if self._source[pos] not in IDENTIFIER_START:
            return None
        return self._match_run(pos + 1, IDENTIFIER_CHARS) or pos + 1

    def _match_integer(self, pos: int) -> int | None:
        """Match a maximal run of decimal digits."""
        return self._match_run(pos, DIGITS)

    def _match_symbol(self, pos: int) -> int | None:
        """Match exactly one non-whitespace character."""
        if self._source[pos].isspace():
            return None
        return pos + 1

    def _match_other_whitespace(self, pos: int) -> int | None:
        """Match whitespace no earlier class accepts, stopping before a newline."""
        source = self._source
        end = self._source_len
        i = pos
        while i < end:
            char = source[i]
            if not char.isspace() or char == "\n" or char in BLANK_CHARS:
                break
            if char == "\r" and i + 1 < end and source[i + 1] == "\n":
                break
            i += 1
        return i if i > pos else None

    def _match_run(self, pos: int, chars: frozenset[str]) -> int | None:
        """Match a maximal run of characters drawn from ``chars``."""
        source = self._source
        end = self._source_len
        i = pos
        while i < end and source[i] in chars:
            i += 1
        return i if i > pos else None
