"""
Utilities module - Common utility functions.
"""

from browser_auto.utils.logging import setup_logging, get_logger

__all__ = [
    "setup_logging",
    "get_logger",
]
