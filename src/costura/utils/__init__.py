"""Utility modules for Costura.

Provides:
- logger: get_logger and configure_logging
"""

from costura.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
