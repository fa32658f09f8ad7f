"""Token and TokenKind definitions for the typedrill lexer.

The lexer splits question code into a stream of Token objects that the
typing session walks through one character at a time. Each Token has a
kind, the exact source text, and source coordinates.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typedrill.location import SourceLocation


class TokenKind(Enum):
    """Kinds of typing units, in scanning precedence order.

    NEWLINE and WHITESPACE are non-significant: the session consumes them
    automatically and the learner never types them.

    """

    NEWLINE = auto()  # \n or \r\n
    WHITESPACE = auto()  # run of spaces/tabs (or other non-newline whitespace)
    STRING = auto()  # "double quoted", with backslash escapes
    IDENTIFIER = auto()  # [A-Za-z_][A-Za-z0-9_]*
    INTEGER = auto()  # [0-9]+
    SYMBOL = auto()  # any other single character


NON_SIGNIFICANT_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.NEWLINE, TokenKind.WHITESPACE}
)


@dataclass(frozen=True, slots=True)
class Token:
    """A typing unit produced by the lexer.

    Attributes:
        kind: The token kind (from TokenKind enum)
        text: The exact substring of the code; never empty
        _offset: Absolute start position in the code
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _end_lineno: End line number
        _end_col: End column offset
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy location cache uses an idempotent write.

    """

    kind: TokenKind
    text: str
    _offset: int = 0
    _lineno: int = 1
    _col: int = 1
    _end_lineno: int | None = None
    _end_col: int | None = None
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from typedrill.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._offset,
            end_offset=self._offset + len(self.text),
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def significant(self) -> bool:
        """Whether the learner has to type this token."""
        return self.kind not in NON_SIGNIFICANT_KINDS

    @property
    def offset(self) -> int:
        """Absolute start offset (convenience accessor)."""
        return self._offset

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self._lineno}:{self._col})"
