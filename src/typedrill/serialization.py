"""JSON serialization for tokens and snapshots.

Converts tokens and render snapshots to JSON-compatible dicts for external
renderers and the CLI's ``--json`` output.

All output is deterministic (sorted keys).

Example:
    from typedrill.lexer import tokenize
    from typedrill.serialization import to_json

    print(to_json(tokenize("a=1")))

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from typedrill.session import Snapshot
from typedrill.tokens import Token


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes the token kind, text, significance and its source span.

    """
    loc = token.location
    return {
        "kind": token.kind.name,
        "text": token.text,
        "significant": token.significant,
        "offset": loc.offset,
        "end_offset": loc.end_offset,
        "lineno": loc.lineno,
        "col_offset": loc.col_offset,
    }


def snapshot_to_dict(snapshot: Snapshot) -> dict[str, Any]:
    """Convert a render snapshot to a JSON-compatible dict."""
    return {f.name: getattr(snapshot, f.name) for f in fields(snapshot)}


def _serialize_value(value: Any) -> Any:
    """Serialize a token, snapshot, or sequence of them."""
    if isinstance(value, Token):
        return token_to_dict(value)
    if isinstance(value, Snapshot):
        return snapshot_to_dict(value)
    if isinstance(value, (list, tuple)):
        return [_serialize_value(item) for item in value]
    return value


def to_json(value: Token | Snapshot | list[Token] | tuple[Token, ...], *, indent: int | None = None) -> str:
    """Serialize tokens or a snapshot to a JSON string.

    Args:
        value: A Token, a Snapshot, or a sequence of Tokens.
        indent: JSON indentation (None for compact).

    Returns:
        JSON string with sorted keys.

    """
    return json.dumps(_serialize_value(value), indent=indent, sort_keys=True, ensure_ascii=False)
