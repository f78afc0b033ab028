"""
Fallback Ladder - Ordered strategy tables for primary and secondary selectors.

Each tier is a candidate generator. Verified tiers only return a
candidate the oracle confirms; unverified tiers (text and the terminal
fallback) return their first candidate as a best effort.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Sequence

from bs4 import Tag

from browser_auto.dom.elements import tag_name
from browser_auto.selectors.anchors import find_nearest_anchor, find_wider_anchor
from browser_auto.selectors.chain import chain_candidates, scoped_parent_candidates
from browser_auto.selectors.context import SynthesisContext
from browser_auto.selectors.tokens import class_fragment, css_escape, nth_of_type


CandidateSource = Callable[[SynthesisContext, Tag], Iterable[str]]


@dataclass(frozen=True)
class Tier:
    """
    One rung of a ladder.
    
    Attributes:
        name: Tier identifier reported back to callers
        candidates: Generator of candidate selectors
        verified: Whether candidates must pass the oracle
    """
    name: str
    candidates: CandidateSource
    verified: bool = True


@dataclass(frozen=True)
class LadderHit:
    """The selector a ladder settled on."""
    selector: str
    tier: str
    verified: bool


def text_selector(text: str) -> str:
    """Quote text for a text="..." selector."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'text="{escaped}"'


def run_ladder(ctx: SynthesisContext, node: Tag, tiers: Sequence[Tier]) -> Optional[LadderHit]:
    """
    Try tiers in order and return the first acceptable candidate.
    
    Args:
        ctx: Synthesis context
        node: Target element
        tiers: Ordered strategy table
        
    Returns:
        First hit, or None when every tier is exhausted
    """
    for tier in tiers:
        for candidate in tier.candidates(ctx, node):
            if not tier.verified or ctx.is_unique(candidate, node):
                return LadderHit(selector=candidate, tier=tier.name, verified=tier.verified)
    return None


# =========================================================================
# CANDIDATE SOURCES
# =========================================================================

def own_id(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    fragment = ctx.id_fragment(node)
    if fragment:
        yield fragment


def own_attributes(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    yield from ctx.attributes(node)


def anchored_chain(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    yield from chain_candidates(ctx, find_nearest_anchor(ctx, node), node)


def widened_chain(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    wider = find_wider_anchor(ctx, node, find_nearest_anchor(ctx, node))
    yield from chain_candidates(ctx, wider, node)


def self_combos(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    """The node's own tag with its attributes and classes, no anchor."""
    tag = tag_name(node)
    classes = ctx.classes(node)
    for fragment in ctx.attributes(node):
        yield f"{tag}{fragment}"
    for name in classes:
        yield f"{tag}.{css_escape(name)}"
    if len(classes) >= 2:
        pair = class_fragment(classes[:2])
        yield pair
        yield f"{tag}{pair}"


def minimal_nth(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    tag = tag_name(node)
    nth = nth_of_type(node)
    if not nth:
        return
    classes = ctx.classes(node)
    for name in classes:
        yield f"{tag}.{css_escape(name)}{nth}"
    if not classes:
        yield f"{tag}{nth}"


def scoped_parent_chain(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    yield from scoped_parent_candidates(ctx, node)


def text_only(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    text = ctx.text(node)
    if text:
        yield text_selector(text)


def anchored_text(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    text = ctx.text(node)
    if not text:
        return
    anchor = find_nearest_anchor(ctx, node)
    if anchor is not None:
        yield f"{anchor.selector} >> {text_selector(text)}"
    else:
        yield text_selector(text)


def terminal(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    """Always-valid last resort: tag.firstClass, else tag:nth-of-type(n)."""
    tag = tag_name(node)
    classes = ctx.classes(node)
    if classes:
        selector = f"{tag}.{css_escape(classes[0])}"
        if len(selector) <= ctx.settings.max_length:
            yield selector
    yield f"{tag}{nth_of_type(node)}"


def terminal_hit(node: Tag) -> LadderHit:
    """Unverified tag:nth-of-type(n) hit for when every tier is exhausted."""
    return LadderHit(selector=f"{tag_name(node)}{nth_of_type(node)}", tier="terminal", verified=False)


PRIMARY_TIERS = (
    Tier("id", own_id),
    Tier("attribute", own_attributes),
    Tier("anchor-chain", anchored_chain),
    Tier("self-combo", self_combos),
    Tier("nth-of-type", minimal_nth),
    Tier("parent-chain", scoped_parent_chain),
    Tier("text", text_only, verified=False),
    Tier("terminal", terminal, verified=False),
)

SECONDARY_TIERS = (
    Tier("anchor-chain", anchored_chain),
    Tier("wide-anchor-chain", widened_chain),
    Tier("parent-chain", scoped_parent_chain),
    Tier("anchor-text", anchored_text, verified=False),
)
