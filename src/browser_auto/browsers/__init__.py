"""
Browsers module - Live page capture.
"""

from browser_auto.browsers.playwright_browser import PlaywrightBrowser

__all__ = [
    "PlaywrightBrowser",
]
