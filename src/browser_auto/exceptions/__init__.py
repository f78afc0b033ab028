"""
Exceptions module - Custom exception hierarchy.

Query failures, unreadable styles and serialization problems inside the
algorithms are recovered locally and never surface here. These exceptions
cover the edges: configuration, loading and capturing documents, and
invalid caller input.
"""

from browser_auto.exceptions.base import (
    BrowserAutoError,
    ConfigurationError,
)
from browser_auto.exceptions.dom import (
    DocumentError,
    DocumentLoadError,
    ElementNotFoundError,
    UnsupportedTargetError,
    BrowserError,
    BrowserLaunchError,
    CaptureError,
)

__all__ = [
    # Base exceptions
    "BrowserAutoError",
    "ConfigurationError",
    # Document exceptions
    "DocumentError",
    "DocumentLoadError",
    "ElementNotFoundError",
    "UnsupportedTargetError",
    # Browser exceptions
    "BrowserError",
    "BrowserLaunchError",
    "CaptureError",
]
