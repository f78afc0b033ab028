"""
Path Selector - Structural tag.class path, climbing until unique.

For callers who want a purely structural selector. Best effort: when no
prefix is unique within range the full nth-qualified path is returned
unverified.
"""

from typing import Iterator, List, Optional, Tuple

from bs4 import Tag

from browser_auto.dom.elements import is_root_tag, parent_element, tag_name
from browser_auto.selectors.context import SynthesisContext
from browser_auto.selectors.tokens import class_fragment, nth_of_type


def _segment(ctx: SynthesisContext, node: Tag) -> str:
    return tag_name(node) + class_fragment(ctx.classes(node)[:2])


def path_candidates(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    """Growing paths, each level tried without then with :nth-of-type."""
    segments: List[str] = []
    current: Optional[Tag] = node
    depth = 0
    while current is not None and not is_root_tag(current) and depth < ctx.settings.path_depth:
        segment = _segment(ctx, current)
        yield " > ".join([segment] + segments)
        segment += nth_of_type(current)
        yield " > ".join([segment] + segments)
        segments.insert(0, segment)
        current = parent_element(current)
        depth += 1


def full_path(ctx: SynthesisContext, node: Tag) -> str:
    """nth-qualified path from below body down to the node, capped in length."""
    segments: List[str] = []
    current: Optional[Tag] = node
    while current is not None and not is_root_tag(current):
        segments.insert(0, _segment(ctx, current) + nth_of_type(current))
        current = parent_element(current)
    # Dropping leading segments keeps the selector valid while shortening it
    while len(segments) > 1 and len(" > ".join(segments)) > ctx.settings.max_length:
        segments.pop(0)
    return " > ".join(segments)


def compute_path_selector(ctx: SynthesisContext, node: Tag) -> Tuple[str, bool]:
    """
    Structural path selector.
    
    Returns:
        (selector, verified) where verified tells whether the oracle
        confirmed it unique
    """
    for candidate in path_candidates(ctx, node):
        if ctx.is_unique(candidate, node):
            return candidate, True
    return full_path(ctx, node), False
