"""Utility modules for typedrill.

Provides:
- logger: get_logger and configure_logging
"""

from typedrill.utils.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
