"""
Element helpers - DOM-style reads over BeautifulSoup tags.

BeautifulSoup exposes the document itself as a Tag subclass, so these
helpers stop at it the way parentElement stops at the document element.
"""

from typing import List, Optional

from bs4 import BeautifulSoup, Tag


ROOT_TAGS = frozenset({"html", "body"})


def tag_name(node: Tag) -> str:
    """Lowercase tag name, empty for anything that is not an element."""
    if not isinstance(node, Tag) or isinstance(node, BeautifulSoup):
        return ""
    return (node.name or "").lower()


def is_root_tag(node: Optional[Tag]) -> bool:
    """Check if a node is the document element or body."""
    return node is not None and tag_name(node) in ROOT_TAGS


def parent_element(node: Tag) -> Optional[Tag]:
    """Parent element, or None at the document element or when detached."""
    parent = node.parent
    if parent is None or isinstance(parent, BeautifulSoup):
        return None
    return parent


def element_children(node: Tag) -> List[Tag]:
    """Element children in document order (text and comments skipped)."""
    return [child for child in node.children if isinstance(child, Tag)]


def get_attribute(node: Tag, name: str) -> Optional[str]:
    """
    Read an attribute as a string.
    
    Multi-valued attributes (class, rel, ...) come back joined by a space,
    matching what getAttribute returns for normalized markup.
    """
    value = node.get(name)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def attribute_names(node: Tag) -> List[str]:
    """Attribute names in source order."""
    return list(node.attrs.keys())


def class_list(node: Tag) -> List[str]:
    """The element's classes in source order."""
    value = node.get("class")
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    return [c for c in value if c]


def element_id(node: Tag) -> str:
    """The element's id, or an empty string."""
    return get_attribute(node, "id") or ""


def same_tag_index(node: Tag) -> int:
    """
    1-based position among same-tag siblings.
    
    Returns 0 when the node has no parent element.
    """
    parent = parent_element(node)
    if parent is None:
        return 0
    tag = tag_name(node)
    position = 0
    for sibling in element_children(parent):
        if tag_name(sibling) == tag:
            position += 1
            if sibling is node:
                return position
    return 0
