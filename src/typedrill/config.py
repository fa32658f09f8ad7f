"""ContextVar-based session configuration for typedrill.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The tokenizer and typing session read the active config unless an explicit
``config=`` is passed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from typedrill.config import SessionConfig, session_config_context

    with session_config_context(SessionConfig(strict_strings=True)):
        tokens = tokenize(code)  # raises on unterminated string literals

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Immutable tokenizer/session configuration.

    Attributes:
        strict_strings: Raise UnterminatedStringError when a double-quoted
            string literal reaches end of input. When False (the default) the
            opening quote is emitted as a one-character SYMBOL and scanning
            continues after it, so the code is still reproduced losslessly.

    """

    strict_strings: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "SessionConfig":
        """Create SessionConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> SessionConfig.from_dict({"strict_strings": True, "other": 1})
            SessionConfig(strict_strings=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: SessionConfig = SessionConfig()

_session_config: ContextVar[SessionConfig] = ContextVar(
    "session_config",
    default=_DEFAULT_CONFIG,
)


def get_session_config() -> SessionConfig:
    """Get current session configuration (thread-local)."""
    return _session_config.get()


def set_session_config(config: SessionConfig) -> None:
    """Set session configuration for current context."""
    _session_config.set(config)


def reset_session_config() -> None:
    """Reset to default configuration."""
    _session_config.set(_DEFAULT_CONFIG)


@contextmanager
def session_config_context(config: SessionConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: SessionConfig to use within the context.

    """
    previous = _session_config.get()
    _session_config.set(config)
    try:
        yield
    finally:
        _session_config.set(previous)


__all__ = [
    "SessionConfig",
    "get_session_config",
    "reset_session_config",
    "session_config_context",
    "set_session_config",
]
