"""Exception classes for typedrill.

Wrong keystrokes are expected learner behaviour and never raise. These
exceptions cover construction-time problems: strict tokenization, malformed
topic content and façade misuse.
"""

from __future__ import annotations


class TypedrillError(Exception):
    """Base exception for all typedrill errors.

    Subclass this for specific error categories.
    """

    pass


class TokenizeError(TypedrillError):
    """Error while splitting code into typing units.

    Only raised when strict tokenization is enabled; the default tokenizer
    is total.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize tokenize error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnterminatedStringError(TokenizeError):
    """A double-quoted string literal reached end of input without closing."""

    def __init__(
        self,
        offset: int,
        lineno: int,
        col_offset: int,
        source_file: str | None = None,
    ) -> None:
        """Initialize with the position of the opening quote.

        Args:
            offset: Absolute offset of the opening quote
            lineno: Line of the opening quote (1-indexed)
            col_offset: Column of the opening quote (1-indexed)
            source_file: Path to source file (optional)
        """
        self.offset = offset
        super().__init__(
            "unterminated string literal",
            lineno=lineno,
            col_offset=col_offset,
            source_file=source_file,
        )


class ContentError(TypedrillError):
    """Topic index or topic file could not be loaded.

    Raised by the content loader for missing files, invalid JSON and
    structurally invalid documents.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        prefix = f"{path}: " if path else ""
        super().__init__(f"{prefix}{message}")


class SessionError(TypedrillError):
    """Operation requires an active question but the session is idle."""

    pass
