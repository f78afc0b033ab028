"""
Document and browser related exceptions.
"""

from browser_auto.exceptions.base import BrowserAutoError


class DocumentError(BrowserAutoError):
    """Base exception for document-related errors."""
    pass


class DocumentLoadError(DocumentError):
    """
    HTML source could not be loaded.
    
    Raised when a file cannot be read or decoded.
    """
    
    def __init__(self, message: str, source: str):
        super().__init__(message, {"source": source})
        self.source = source


class ElementNotFoundError(DocumentError):
    """
    No element matched a selector.
    
    Raised when a caller-supplied selector used to pick a target
    or snapshot root finds nothing in the document.
    """
    
    def __init__(self, message: str, selector: str):
        super().__init__(message, {"selector": selector})
        self.selector = selector


class UnsupportedTargetError(DocumentError):
    """
    Element cannot be given a selector.
    
    Raised when selector synthesis is asked for the document root or body,
    which generated selectors never name.
    """
    
    def __init__(self, message: str, tag: str):
        super().__init__(message, {"tag": tag})
        self.tag = tag


class BrowserError(BrowserAutoError):
    """Base exception for live browser errors."""
    pass


class BrowserLaunchError(BrowserError):
    """
    Error launching the browser.
    
    Raised when the browser fails to start, which could be due to:
    - Missing browser binaries
    - Invalid browser options
    """
    pass


class CaptureError(BrowserError):
    """
    Error capturing a live page into a document.
    
    Raised when navigation or the in-page capture script fails.
    """
    
    def __init__(self, message: str, url: str | None = None):
        super().__init__(message, {"url": url} if url else None)
        self.url = url
