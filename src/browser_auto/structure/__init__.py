"""
Structure submodule - Adaptive-depth outlines for model consumption.
"""

from browser_auto.structure.models import StructureNode, StructureResult
from browser_auto.structure.snapshot import (
    StructureSnapshotter,
    recognize_structure,
    select_closest_depth,
    serialize_tree,
)

__all__ = [
    "StructureNode",
    "StructureResult",
    "StructureSnapshotter",
    "recognize_structure",
    "select_closest_depth",
    "serialize_tree",
]
