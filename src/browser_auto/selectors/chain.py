"""
Chain Composition - anchor + relation + child token.

Candidates are generated lazily in priority order; the ladder stops
pulling as soon as the oracle accepts one, which keeps the number of
queries per call small.
"""

from typing import Iterator, List, Optional, Tuple

from bs4 import Tag

from browser_auto.dom.elements import is_root_tag, parent_element, tag_name
from browser_auto.selectors.context import Anchor, SynthesisContext
from browser_auto.selectors.tokens import class_fragment, css_escape, nth_of_type


def child_tokens(ctx: SynthesisContext, node: Tag) -> Tuple[List[str], List[str]]:
    """
    Child-token candidates for an element.
    
    Returns:
        (tokens without a structural index, tokens with :nth-of-type)
    """
    tag = tag_name(node)
    classes = ctx.classes(node)
    nth = nth_of_type(node)
    
    plain: List[str] = list(ctx.attributes(node))
    
    own_id = ctx.id_fragment(node)
    if own_id:
        plain.append(own_id)
    
    for name in classes:
        plain.append(f"{tag}.{css_escape(name)}")
    
    if len(classes) >= 2:
        pair = class_fragment(classes[:2])
        plain.append(pair)
        plain.append(f"{tag}{pair}")
    
    indexed: List[str] = []
    if nth:
        if not classes:
            indexed.append(f"{tag}{nth}")
        for name in classes:
            indexed.append(f"{tag}.{css_escape(name)}{nth}")
    
    return plain, indexed


def chain_candidates(
    ctx: SynthesisContext,
    anchor: Optional[Anchor],
    node: Tag,
) -> Iterator[str]:
    """
    Selectors built from an anchor and the node's own tokens.
    
    Uses " > " when the node is the anchor's direct child and a
    descendant combinator otherwise. Without an anchor the child tokens
    are tried on their own.
    """
    if anchor is None:
        base = ""
    elif parent_element(node) is anchor.node:
        base = f"{anchor.selector} > "
    else:
        base = f"{anchor.selector} "
    
    plain, indexed = child_tokens(ctx, node)
    for token in plain + indexed:
        yield base + token


def scoped_parent_candidates(ctx: SynthesisContext, node: Tag) -> Iterator[str]:
    """
    Two-level parent > child selectors built from the parent's own tokens.
    
    The parent may carry an :nth-of-type, but then the child may not, so a
    selector never holds two structural indices. Nothing is produced when
    the parent is html or body.
    """
    parent = parent_element(node)
    if parent is None or is_root_tag(parent):
        return
    
    parent_tag = tag_name(parent)
    parent_nth = nth_of_type(parent)
    
    bases: List[str] = []
    parent_id = ctx.id_fragment(parent)
    if parent_id:
        bases.append(parent_id)
    bases.extend(ctx.attributes(parent))
    for name in ctx.classes(parent):
        bases.append(f".{css_escape(name)}")
        bases.append(f"{parent_tag}.{css_escape(name)}")
    bases.append(parent_tag)
    
    variants: List[Tuple[str, bool]] = []
    for base in bases:
        variants.append((base, False))
        if parent_nth and not base.startswith("#"):
            variants.append((f"{base}{parent_nth}", True))
    
    plain, indexed = child_tokens(ctx, node)
    for base, base_indexed in variants:
        children = plain if base_indexed else plain + indexed
        for child in children:
            yield f"{base} > {child}"
