"""
HTMLDocument - A parsed DOM with optional layout information.

Selector matching is delegated to soupsieve, so a selector that matches
here matches the same way in a browser for the CSS subset the selector
generator emits (ids, classes, attributes, :nth-of-type, combinators).

Visibility comes from one of two places:
- Layout records captured from a live page (computed style + bounding box)
- Static markup: the hidden attribute and inline display/visibility styles
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

import soupsieve
from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from browser_auto.dom.elements import (
    element_children,
    get_attribute,
    parent_element,
    tag_name,
)
from browser_auto.interfaces.dom import IDocument

logger = logging.getLogger(__name__)


# Elements the browser never renders a box for
NON_RENDERED_TAGS = frozenset({
    "head", "script", "style", "template", "noscript",
    "meta", "link", "title", "base",
})

# Elements whose content a browser keeps as text, so their serialized
# children must not be matched against captured layout records
OPAQUE_CONTENT_TAGS = frozenset({
    "template", "noscript", "iframe", "xmp", "noembed", "noframes",
})

_BODY_RE = re.compile(r"<body[\s>]", re.IGNORECASE)


@dataclass(frozen=True)
class Layout:
    """
    Computed layout of one element.

    Attributes:
        display: Computed display value
        visibility: Computed visibility value
        x: Left edge relative to the viewport
        y: Top edge relative to the viewport
        width: Box width
        height: Box height
        value: Live value of a form control, if any
    """
    display: str = "block"
    visibility: str = "visible"
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    value: Optional[str] = None

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def has_area(self) -> bool:
        return self.width > 0 and self.height > 0

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Layout":
        """Build a layout from a capture record."""
        value = raw.get("value")
        return cls(
            display=str(raw.get("display") or "block"),
            visibility=str(raw.get("visibility") or "visible"),
            x=float(raw.get("x") or 0),
            y=float(raw.get("y") or 0),
            width=float(raw.get("width") or 0),
            height=float(raw.get("height") or 0),
            value=None if value is None else str(value),
        )


def _inline_style(node: Tag) -> Dict[str, str]:
    """Parse an inline style attribute into lowercase declarations."""
    style = get_attribute(node, "style")
    if not style:
        return {}
    declarations = {}
    for part in style.split(";"):
        if ":" not in part:
            continue
        prop, _, value = part.partition(":")
        value = value.replace("!important", "").strip().lower()
        declarations[prop.strip().lower()] = value
    return declarations


class HTMLDocument(IDocument):
    """
    A BeautifulSoup document queried with soupsieve.

    Example:
        >>> document = HTMLDocument.from_html(html)
        >>> button = document.select_one("button")
        >>> document.is_visible(button)
        True
    """

    def __init__(self, soup: BeautifulSoup, viewport_height: Optional[float] = None):
        """
        Initialize the document.

        Args:
            soup: Parsed document
            viewport_height: Viewport height used to drop off-screen boxes
        """
        self.soup = soup
        self.viewport_height = viewport_height
        self._layouts: Dict[int, Layout] = {}

    @classmethod
    def from_html(
        cls,
        html: str,
        viewport_height: Optional[float] = None,
        parser: str = "html.parser",
    ) -> "HTMLDocument":
        """
        Parse HTML into a document.

        Fragments without a <body> are wrapped in html/body so they
        behave like a page a browser would build.

        Args:
            html: HTML source or fragment
            viewport_height: Optional viewport height
            parser: BeautifulSoup parser name

        Returns:
            Parsed document
        """
        if not _BODY_RE.search(html):
            html = f"<html><body>{html}</body></html>"
        return cls(BeautifulSoup(html, parser), viewport_height=viewport_height)

    @classmethod
    def from_capture(
        cls,
        html: str,
        layouts: Sequence[Mapping[str, Any]],
        viewport_height: Optional[float] = None,
    ) -> "HTMLDocument":
        """
        Build a document from a live capture.

        Args:
            html: Serialized document element (outerHTML)
            layouts: One record per element in document order
            viewport_height: Viewport height at capture time

        Returns:
            Document with layouts attached
        """
        document = cls.from_html(html, viewport_height=viewport_height)
        document.attach_layouts(layouts)
        return document

    # =========================================================================
    # STRUCTURE
    # =========================================================================

    @property
    def document_element(self) -> Optional[Tag]:
        return self.soup.find("html")

    @property
    def body(self) -> Optional[Tag]:
        return self.soup.body or self.document_element

    def iter_elements(self, opaque: bool = False) -> Iterator[Tag]:
        """
        Walk elements in document order.

        Args:
            opaque: Also descend into elements whose content the browser
                keeps as text (template, noscript, iframe, ...)
        """
        stack = list(reversed(element_children(self.soup)))
        while stack:
            node = stack.pop()
            yield node
            if not opaque and tag_name(node) in OPAQUE_CONTENT_TAGS:
                continue
            stack.extend(reversed(element_children(node)))

    def query_all(self, selector: str, scope: Optional[Tag] = None, limit: int = 0) -> List[Tag]:
        root = self.soup if scope is None else scope
        return soupsieve.select(selector, root, limit=limit)

    # =========================================================================
    # LAYOUT
    # =========================================================================

    def set_layout(self, node: Tag, layout: Layout) -> None:
        """Attach computed layout to an element."""
        self._layouts[id(node)] = layout

    def layout_of(self, node: Tag) -> Optional[Layout]:
        """Computed layout of an element, if one was captured."""
        return self._layouts.get(id(node))

    def attach_layouts(self, records: Sequence[Mapping[str, Any]]) -> int:
        """
        Pair capture records with elements in document order.

        Pairing stops at the first tag mismatch; elements past that
        point fall back to static visibility.

        Args:
            records: Capture records, each with at least a "tag" key

        Returns:
            Number of elements that received a layout
        """
        attached = 0
        for position, (node, record) in enumerate(zip(self.iter_elements(), records)):
            expected = str(record.get("tag", "")).lower()
            if tag_name(node) != expected:
                logger.warning(
                    f"Capture out of step at element {position}: "
                    f"parsed <{tag_name(node)}>, captured <{expected}>"
                )
                break
            self.set_layout(node, Layout.from_dict(record))
            attached += 1
        return attached

    def is_visible(self, node: Tag) -> bool:
        try:
            return self._is_visible(node)
        except Exception as e:
            logger.debug(f"Treating unreadable element as invisible: {e}")
            return False

    def _is_visible(self, node: Tag) -> bool:
        if node.parent is None:
            # Detached from the tree
            return False

        layout = self.layout_of(node)
        if layout is not None:
            if layout.display == "none" or layout.visibility in ("hidden", "collapse"):
                return False
            if not layout.has_area:
                return False
            if self.viewport_height is not None:
                return layout.y < self.viewport_height and layout.bottom > 0
            return True

        if tag_name(node) in NON_RENDERED_TAGS:
            return False

        # display:none hides the whole subtree; visibility is inherited
        # from the nearest element that declares it
        visibility = None
        current: Optional[Tag] = node
        while current is not None:
            current_layout = self.layout_of(current)
            if current_layout is not None and current_layout.display == "none":
                return False
            if current.has_attr("hidden"):
                return False
            style = _inline_style(current)
            if style.get("display") == "none":
                return False
            if visibility is None:
                if current_layout is not None:
                    visibility = current_layout.visibility
                elif "visibility" in style:
                    visibility = style["visibility"]
            current = parent_element(current)

        return visibility not in ("hidden", "collapse")

    # =========================================================================
    # CONTENT
    # =========================================================================

    def text_content(self, node: Tag) -> str:
        return node.get_text()

    def inner_text(self, node: Tag) -> str:
        parts: List[str] = []
        self._collect_rendered_text(node, parts)
        return " ".join(parts)

    def _collect_rendered_text(self, node: Tag, parts: List[str]) -> None:
        for child in node.children:
            if isinstance(child, Tag):
                if tag_name(child) not in NON_RENDERED_TAGS and self.is_visible(child):
                    self._collect_rendered_text(child, parts)
            elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                text = child.strip()
                if text:
                    parts.append(text)

    def form_value(self, node: Tag) -> Optional[str]:
        layout = self.layout_of(node)
        if layout is not None and layout.value is not None:
            return layout.value

        tag = tag_name(node)
        if tag == "input":
            value = get_attribute(node, "value")
            if value is None:
                kind = (get_attribute(node, "type") or "").lower()
                return "on" if kind in ("checkbox", "radio") else ""
            return value
        if tag == "textarea":
            return node.get_text()
        if tag == "select":
            options = node.find_all("option")
            if not options:
                return ""
            chosen = next((o for o in options if o.has_attr("selected")), options[0])
            value = get_attribute(chosen, "value")
            return value if value is not None else chosen.get_text().strip()
        if tag == "button":
            return get_attribute(node, "value") or ""
        return None
