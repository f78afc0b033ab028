"""
browser-auto - Unique selectors and size-budgeted structure snapshots.

This package derives short, uniquely matching selectors for DOM elements
(for macro replay and agent-driven interaction) and compact, depth-adaptive
JSON outlines of page structure (for feeding a language model).

Example:
    >>> from browser_auto import HTMLDocument, synthesize_selectors
    >>> document = HTMLDocument.from_html(html)
    >>> pair = synthesize_selectors(document, document.select_one("button"))
    >>> pair.primary
    '[data-testid="submit"]'
"""

__version__ = "0.1.0"

# Public API exports
from browser_auto.config.settings import Settings, SelectorSettings, StructureSettings
from browser_auto.dom.document import HTMLDocument
from browser_auto.dom.capture import capture_document
from browser_auto.selectors.synthesizer import SelectorPair, synthesize_selectors
from browser_auto.selectors.session import SelectorSession
from browser_auto.structure.models import StructureNode, StructureResult
from browser_auto.structure.snapshot import recognize_structure

__all__ = [
    "Settings",
    "SelectorSettings",
    "StructureSettings",
    "HTMLDocument",
    "capture_document",
    "SelectorPair",
    "synthesize_selectors",
    "SelectorSession",
    "StructureNode",
    "StructureResult",
    "recognize_structure",
    "__version__",
]
