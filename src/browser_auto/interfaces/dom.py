"""
Document Interface - Abstract base class for queryable DOM snapshots.

The selector and structure algorithms only ever talk to a document
through this contract: selector matching, text reads and visibility.
Elements themselves are BeautifulSoup tags.

Example:
    >>> from browser_auto.dom import HTMLDocument
    >>> document = HTMLDocument.from_html("<div id='app'></div>")
    >>> document.query_all("#app")
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from bs4 import Tag


class IDocument(ABC):
    """
    Abstract interface for a DOM the algorithms can query.
    
    Implementations must raise on malformed selectors rather than
    returning an empty list, so callers can tell "no match" from
    "could not evaluate".
    """

    @property
    @abstractmethod
    def document_element(self) -> Optional[Tag]:
        """The <html> element."""
        ...

    @property
    @abstractmethod
    def body(self) -> Optional[Tag]:
        """The <body> element, or the document element when there is none."""
        ...

    @abstractmethod
    def query_all(self, selector: str, scope: Optional[Tag] = None, limit: int = 0) -> List[Tag]:
        """
        Evaluate a CSS selector.
        
        Args:
            selector: CSS selector
            scope: Optional element to search under (document when None)
            limit: Stop after this many matches (0 for all)
            
        Returns:
            Matching elements in document order
        """
        ...

    @abstractmethod
    def is_visible(self, node: Tag) -> bool:
        """
        Check if an element is rendered with a non-empty box in the viewport.
        
        Must not raise: nodes whose style cannot be read are invisible.
        """
        ...

    @abstractmethod
    def text_content(self, node: Tag) -> str:
        """Raw concatenated text of the element and its descendants."""
        ...

    @abstractmethod
    def inner_text(self, node: Tag) -> str:
        """Rendered text of the element."""
        ...

    @abstractmethod
    def form_value(self, node: Tag) -> Optional[str]:
        """Current value of a form control, None for other elements."""
        ...

    def select_one(self, selector: str, scope: Optional[Tag] = None) -> Optional[Tag]:
        """First element matching a selector, or None."""
        matches = self.query_all(selector, scope, limit=1)
        return matches[0] if matches else None
