"""
Structure Snapshotter - Size-budgeted outlines of a subtree.

The snapshot starts shallow and deepens one level at a time. Once the
serialized outline crosses the size limit, whichever of the last two
depths lands closer to the limit wins. The walk is greedy: it never
backtracks past the last in-budget depth.
"""

import json
import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from bs4 import Tag

from browser_auto.config.settings import StructureSettings
from browser_auto.dom.elements import (
    element_children,
    element_id,
    get_attribute,
    parent_element,
    tag_name,
)
from browser_auto.interfaces.dom import IDocument
from browser_auto.structure.models import StructureNode, StructureResult

logger = logging.getLogger(__name__)


Rendering = Tuple[Optional[StructureNode], str]


def is_own_ui(node: Optional[Tag], ui_attribute: str) -> bool:
    """Check if a node is, or sits inside, the tool's own injected UI."""
    current = node
    while current is not None:
        if get_attribute(current, ui_attribute) == "true":
            return True
        current = parent_element(current)
    return False


def serialize_tree(tree: Optional[StructureNode]) -> str:
    """
    Compact JSON for a tree.
    
    Returns "" for an empty tree or when serialization fails, so the depth
    walk sees a zero-length result instead of an exception.
    """
    if tree is None:
        return ""
    try:
        return json.dumps(tree.to_dict(), ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug(f"Could not serialize structure tree: {e}")
        return ""


def select_closest_depth(
    render: Callable[[int], Rendering],
    limit: int,
    start_depth: int = 2,
    max_depth: int = 20,
) -> StructureResult:
    """
    Walk depths forward and keep the one closest to the limit.
    
    Args:
        render: Builds (tree, serialized) for a depth
        limit: Target serialized length
        start_depth: First depth tried
        max_depth: Ceiling
        
    Returns:
        - the first zero-length result, if any
        - the first depth when it already exceeds the limit
        - on crossing the limit, the over-limit depth if its overshoot is
          smaller than the previous depth's undershoot, else the previous
        - the deepest result when the ceiling is reached in budget
    """
    previous: Optional[StructureResult] = None
    depth = start_depth
    
    while depth <= max_depth:
        tree, serialized = render(depth)
        current = StructureResult(depth=depth, length=len(serialized), serialized=serialized, tree=tree)
        logger.debug(f"Structure depth={depth} length={current.length} limit={limit}")
        
        if current.length == 0:
            return current
        
        if current.length > limit:
            if previous is None:
                return current
            overshoot = current.length - limit
            undershoot = limit - previous.length
            return current if overshoot < undershoot else previous
        
        previous = current
        depth += 1
    
    if previous is None:
        return StructureResult(depth=start_depth, length=0, serialized="", tree=None)
    return previous


class StructureSnapshotter:
    """
    Build adaptive-depth structure snapshots.
    
    Invisible nodes, skip-listed tags (style, script, svg, img) and the
    tool's own UI are left out. A node with no collected attributes and
    no kept children is dropped, except at the root.
    
    Example:
        >>> snapshotter = StructureSnapshotter(StructureSettings(limit=2000))
        >>> result = snapshotter.recognize(document)
        >>> result.depth, result.length
        (4, 1873)
    """
    
    def __init__(self, settings: Optional[StructureSettings] = None):
        """
        Initialize the snapshotter.
        
        Args:
            settings: Budget, ceiling and attribute keys (defaults when None)
        """
        self.settings = settings or StructureSettings()
        self._skip_tags = frozenset(tag.lower() for tag in self.settings.skip_tags)
    
    def recognize(
        self,
        document: IDocument,
        root: Optional[Tag] = None,
        attribute_keys: Optional[Sequence[str]] = None,
    ) -> StructureResult:
        """
        Snapshot a subtree at the depth closest to the size limit.
        
        Args:
            document: Document to read
            root: Subtree root (document body when None or when it is
                the tool's own UI)
            attribute_keys: Attribute keys to collect (settings default
                when None or empty)
                
        Returns:
            StructureResult
        """
        base = root if root is not None else document.body
        if base is not None and is_own_ui(base, self.settings.ui_attribute):
            base = document.body
        if base is None:
            return StructureResult(depth=self.settings.start_depth, length=0, serialized="", tree=None)
        
        keys = list(attribute_keys) if attribute_keys else list(self.settings.attribute_keys)
        
        def render(depth: int) -> Rendering:
            tree = self.build_tree(document, base, depth, keys)
            return tree, serialize_tree(tree)
        
        result = select_closest_depth(
            render,
            limit=self.settings.limit,
            start_depth=self.settings.start_depth,
            max_depth=self.settings.max_depth,
        )
        logger.debug(
            f"Structure recognized at depth={result.depth}, "
            f"length={result.length}, limit={self.settings.limit}"
        )
        return result
    
    def build_tree(
        self,
        document: IDocument,
        node: Tag,
        max_depth: int,
        attribute_keys: Sequence[str],
    ) -> Optional[StructureNode]:
        """
        Build a filtered tree down to max_depth levels (root is level 1).
        
        Returns:
            Tree, or None when the root itself is filtered out
        """
        return self._build(document, node, max_depth, attribute_keys, 1)
    
    def _build(
        self,
        document: IDocument,
        node: Tag,
        max_depth: int,
        attribute_keys: Sequence[str],
        depth: int,
    ) -> Optional[StructureNode]:
        if is_own_ui(node, self.settings.ui_attribute):
            return None
        if not document.is_visible(node):
            return None
        
        tag = tag_name(node)
        if not tag or tag in self._skip_tags:
            return None
        
        attributes = collect_attributes(document, node, attribute_keys)
        
        children: List[StructureNode] = []
        if depth < max_depth:
            for child in element_children(node):
                built = self._build(document, child, max_depth, attribute_keys, depth + 1)
                if built is not None:
                    children.append(built)
        
        result = StructureNode.create(tag, attributes, children)
        if result.is_bare and depth > 1:
            return None
        return result


def collect_attributes(
    document: IDocument,
    node: Tag,
    attribute_keys: Sequence[str],
) -> Dict[str, str]:
    """
    Read the requested attribute keys from an element.
    
    id and class read the element's id and full class string; innerText
    and value read rendered text and live form values; every other key
    is a plain attribute lookup. Empty values are omitted.
    """
    attributes: Dict[str, str] = {}
    for key in attribute_keys:
        if key == "id":
            value = element_id(node)
        elif key == "class":
            value = get_attribute(node, "class") or ""
        elif key == "innerText":
            value = document.inner_text(node).strip()
        elif key == "value":
            value = document.form_value(node) or ""
        else:
            # name, role, tabindex, placeholder and anything else
            value = get_attribute(node, key) or ""
        if value:
            attributes[key] = value
    return attributes


def recognize_structure(
    document: IDocument,
    root: Optional[Tag] = None,
    attribute_keys: Optional[Sequence[str]] = None,
    settings: Optional[StructureSettings] = None,
) -> StructureResult:
    """
    Snapshot a subtree at the depth closest to the configured limit.
    
    Args:
        document: Document to read
        root: Subtree root (document body when None)
        attribute_keys: Ordered attribute keys (default id, class, placeholder)
        settings: Budget and ceiling
        
    Returns:
        StructureResult with depth, length, serialized JSON and tree
    """
    return StructureSnapshotter(settings).recognize(document, root, attribute_keys)
