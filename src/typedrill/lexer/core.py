"""Longest-match lexer for question code.

At each position the matchers from SCAN_ORDER are tried in precedence order;
the first one that matches is committed and scanning restarts right after it.
Every character belongs to some class, so the lexer always makes forward
progress and the concatenated token texts reproduce the input exactly.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from typedrill.config import SessionConfig, get_session_config
from typedrill.errors import UnterminatedStringError
from typedrill.lexer.charsets import STRING_QUOTE
from typedrill.lexer.scanners import SCAN_ORDER, ScannerMixin
from typedrill.tokens import Token, TokenKind


class Lexer(ScannerMixin):
    """Single-use lexer over one code string.

    Usage:
            >>> lexer = Lexer("a=1")
            >>> [token.text for token in lexer.tokenize()]
            ['a', '=', '1']

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_strict_strings",
        "_saved_lineno",
        "_saved_col",
        "_matchers",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: SessionConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Question code
            source_file: Optional source file path for error messages
            config: Explicit config; defaults to the active context config
        """
        config = config if config is not None else get_session_config()
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._strict_strings = config.strict_strings

        self._saved_lineno: int = 1
        self._saved_col: int = 1

        self._matchers: tuple[tuple[TokenKind, Callable[[int], int | None]], ...] = tuple(
            (kind, getattr(self, name)) for kind, name in SCAN_ORDER
        )

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects in source order

        Raises:
            UnterminatedStringError: strict mode only

        Complexity: O(n) where n = len(source)
        """
        while self._pos < self._source_len:
            yield self._scan_token()

    def _scan_token(self) -> Token:
        """Match and commit exactly one token at the current position."""
        self._save_location()
        start = self._pos
        for kind, matcher in self._matchers:
            end = matcher(start)
            if end is not None:
                self._commit_to(end)
                return self._make_token(kind, start)
            if kind is TokenKind.STRING and self._strict_strings:
                if self._source[start] == STRING_QUOTE:
                    raise UnterminatedStringError(
                        start, self._lineno, self._col, source_file=self._source_file
                    )
        # Unreachable: every character is either whitespace or a SYMBOL
        raise AssertionError(f"no token class matched at offset {start}")

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location before a token is committed."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _commit_to(self, end: int) -> None:
        """Advance to ``end``, updating line and column.

        Only ``\\n`` starts a new line; a lone ``\\r`` occupies a column.
        """
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")
        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl
        else:
            self._col += len(segment)
        self._pos = end

    def _make_token(self, kind: TokenKind, start: int) -> Token:
        """Create a Token for source[start:pos] with raw coordinates."""
        return Token(
            kind=kind,
            text=self._source[start : self._pos],
            _offset=start,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )


def tokenize(
    code: str,
    *,
    source_file: str | None = None,
    config: SessionConfig | None = None,
) -> list[Token]:
    """Split code into typing units.

    Args:
        code: Question code
        source_file: Optional source file path for error messages
        config: Explicit config; defaults to the active context config

    Returns:
        Tokens in source order; ``"".join(t.text for t in tokens) == code``

    Raises:
        UnterminatedStringError: only when ``config.strict_strings`` is set

    """
    return list(Lexer(code, source_file=source_file, config=config).tokenize())
