"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Identifier and digit classes are ASCII-only; any other letter is typed as a
one-character SYMBOL.

Usage:
    from typedrill.lexer.charsets import IDENTIFIER_START

    if char in IDENTIFIER_START:  # O(1) lookup
        ...
"""

import string

# Characters that may start an identifier
IDENTIFIER_START: frozenset[str] = frozenset(string.ascii_letters + "_")

# Characters that may continue an identifier
IDENTIFIER_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_")

# Integer literal digits
DIGITS: frozenset[str] = frozenset(string.digits)

# Horizontal whitespace forming a WHITESPACE run
BLANK_CHARS: frozenset[str] = frozenset(" \t")

# A backslash escape inside a string literal may not be followed by these
LINE_TERMINATORS: frozenset[str] = frozenset("\n\r\u2028\u2029")

STRING_QUOTE = '"'
STRING_ESCAPE = "\\"
