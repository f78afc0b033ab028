"""
Anchor Search - Find an ancestor that is unique on its own.

An anchor gives a child selector a short, stable prefix: "#app > button"
instead of a long structural path. Candidates per ancestor are tried in
a fixed order (id, stable attributes, stable classes, bare tag) and the
first one the oracle confirms wins.
"""

import logging
from typing import Iterator, Optional

from bs4 import Tag

from browser_auto.dom.elements import is_root_tag, parent_element, tag_name
from browser_auto.selectors.context import Anchor, SynthesisContext
from browser_auto.selectors.tokens import css_escape

logger = logging.getLogger(__name__)


def anchor_candidates(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    """Candidate selectors for an ancestor, most stable first."""
    tag = tag_name(node)
    
    own_id = ctx.id_fragment(node)
    if own_id:
        yield own_id
    
    yield from ctx.attributes(node)
    
    for name in ctx.classes(node):
        yield f".{css_escape(name)}"
        yield f"{tag}.{css_escape(name)}"
    
    # Unique tags include custom elements like <app-nav>
    yield tag


def resolve_anchor(ctx: SynthesisContext, node: Tag) -> Optional[Anchor]:
    """First candidate that is unique for this ancestor, if any."""
    for selector in anchor_candidates(ctx, node):
        if ctx.is_unique(selector, node):
            return Anchor(selector=selector, node=node)
    return None


def _climb(ctx: SynthesisContext, start: Optional[Tag], levels: int) -> Optional[Anchor]:
    current = start
    depth = 0
    while current is not None and depth < levels:
        # html/body still count towards the depth bound
        if not is_root_tag(current):
            anchor = resolve_anchor(ctx, current)
            if anchor is not None:
                return anchor
        current = parent_element(current)
        depth += 1
    return None


def find_nearest_anchor(ctx: SynthesisContext, node: Tag) -> Optional[Anchor]:
    """
    Nearest independently unique ancestor.
    
    Walks up to settings.anchor_depth levels from the parent, skipping
    html and body. Results are memoized on the context for the
    remainder of the call.
    
    Args:
        ctx: Synthesis context
        node: Target element
        
    Returns:
        Anchor, or None if no ancestor within range is unique
    """
    key = id(node)
    if key not in ctx.anchors:
        anchor = _climb(ctx, parent_element(node), ctx.settings.anchor_depth)
        if anchor is not None:
            logger.debug(f"Anchor for <{tag_name(node)}>: {anchor.selector}")
        ctx.anchors[key] = anchor
    return ctx.anchors[key]


def find_wider_anchor(
    ctx: SynthesisContext,
    node: Tag,
    nearest: Optional[Anchor],
) -> Optional[Anchor]:
    """
    Look further up for another anchor.
    
    Starts at the nearest anchor's parent (or at the node's own parent
    when there is no anchor) and climbs settings.widen_depth levels.
    """
    start = parent_element(nearest.node) if nearest is not None else parent_element(node)
    return _climb(ctx, start, ctx.settings.widen_depth)
