"""
Structure models - Immutable outline records.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class StructureNode:
    """
    One element in a structure snapshot.
    
    Empty attributes and children are stored as None and left out of
    the serialized form entirely.
    
    Attributes:
        tag: Lowercase tag name
        attributes: Collected attributes in key order
        children: Child nodes in document order
    """
    tag: str
    attributes: Optional[Mapping[str, str]] = None
    children: Optional[Tuple["StructureNode", ...]] = None
    
    @classmethod
    def create(
        cls,
        tag: str,
        attributes: Optional[Mapping[str, str]] = None,
        children: Optional[Sequence["StructureNode"]] = None,
    ) -> "StructureNode":
        """Build a node, normalizing empty fields to None."""
        return cls(
            tag=tag,
            attributes=MappingProxyType(dict(attributes)) if attributes else None,
            children=tuple(children) if children else None,
        )
    
    @property
    def is_bare(self) -> bool:
        """True when the node carries nothing beyond its tag."""
        return not self.attributes and not self.children
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape {tag, attributes?, children?}."""
        result: Dict[str, Any] = {"tag": self.tag}
        if self.attributes:
            result["attributes"] = dict(self.attributes)
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result


@dataclass(frozen=True)
class StructureResult:
    """
    Outcome of an adaptive-depth snapshot.
    
    Attributes:
        depth: Depth the snapshot was built at
        length: Length of the serialized form
        serialized: Compact JSON of the tree ("" when nothing is visible)
        tree: The snapshot tree, or None
    """
    depth: int
    length: int
    serialized: str
    tree: Optional[StructureNode]
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "depth": self.depth,
            "length": self.length,
            "serialized": self.serialized,
            "tree": self.tree.to_dict() if self.tree else None,
        }
