"""Longest-match scanner that splits question code into typing units.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize, SCAN_ORDER
├── core.py              # Lexer class (position/location tracking, dispatch)
├── scanners.py          # One matcher per token class, in precedence order
└── charsets.py          # Frozen character classes

Usage:
    >>> from typedrill.lexer import tokenize
    >>> for token in tokenize('x = "hi"'):
    ...     print(token)
Token(IDENTIFIER, 'x', 1:1)
Token(WHITESPACE, ' ', 1:2)
Token(SYMBOL, '=', 1:3)
Token(WHITESPACE, ' ', 1:4)
Token(STRING, '"hi"', 1:5)

"""

from typedrill.lexer.core import Lexer, tokenize
from typedrill.lexer.scanners import SCAN_ORDER

__all__ = ["SCAN_ORDER", "Lexer", "tokenize"]
