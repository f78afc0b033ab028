"""
DOM submodule - Parsed documents, layout and live capture.
"""

from browser_auto.dom.document import HTMLDocument, Layout
from browser_auto.dom.capture import capture_document, CAPTURE_DOCUMENT_JS

__all__ = [
    "HTMLDocument",
    "Layout",
    "capture_document",
    "CAPTURE_DOCUMENT_JS",
]
