"""
Selector Synthesizer - Primary and secondary selectors for one element.

The two selectors come from independent ladders, so they usually differ
in anchor or strategy. A caller replaying an action can fall back to
the secondary when a localized DOM change breaks the primary.

Neither selector is cached: every call recomputes from the document as
it is now.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional

from bs4 import Tag

from browser_auto.config.settings import SelectorSettings
from browser_auto.dom.elements import is_root_tag, tag_name
from browser_auto.exceptions import UnsupportedTargetError
from browser_auto.interfaces.dom import IDocument
from browser_auto.selectors.context import SynthesisContext
from browser_auto.selectors.ladder import (
    PRIMARY_TIERS,
    SECONDARY_TIERS,
    run_ladder,
    terminal_hit,
)
from browser_auto.selectors.path import compute_path_selector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorPair:
    """
    Two independently derived selectors for the same element.
    
    Attributes:
        primary: Preferred selector
        secondary: Redundant selector, usually via a different anchor
        primary_tier: Ladder tier that produced the primary
        secondary_tier: Ladder tier that produced the secondary
        primary_verified: Whether the primary was confirmed unique
        secondary_verified: Whether the secondary was confirmed unique
    """
    primary: str
    secondary: str
    primary_tier: str
    secondary_tier: str
    primary_verified: bool
    secondary_verified: bool
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


class SelectorSynthesizer:
    """
    Derive short, unique selectors for elements.
    
    Primary ladder:
    1. Own id
    2. Own stable attribute
    3. Nearest unique anchor + child token
    4. Own tag with attributes/classes
    5. Minimal :nth-of-type
    6. Parent > child built from the parent's tokens
    7. text="..." (unverified)
    8. tag.class or tag:nth-of-type (unverified)
    
    Secondary ladder: anchor chain, widened anchor chain, parent chain,
    anchored text, and finally the primary result.
    
    Example:
        >>> synthesizer = SelectorSynthesizer()
        >>> pair = synthesizer.synthesize(document, button)
        >>> pair.primary
        '[data-testid="submit"]'
    """
    
    def __init__(self, settings: Optional[SelectorSettings] = None):
        """
        Initialize the synthesizer.
        
        Args:
            settings: Selector limits (defaults when None)
        """
        self.settings = settings or SelectorSettings()
    
    def _context(self, document: IDocument, node: Tag, blocked_tokens: Iterable[str]) -> SynthesisContext:
        if is_root_tag(node) or not tag_name(node):
            raise UnsupportedTargetError(
                "Selectors are never generated for the document root or body",
                tag=tag_name(node) or str(getattr(node, "name", "")),
            )
        return SynthesisContext.create(document, blocked_tokens, self.settings)
    
    def synthesize(
        self,
        document: IDocument,
        node: Tag,
        blocked_tokens: Iterable[str] = (),
    ) -> SelectorPair:
        """
        Compute primary and secondary selectors.
        
        Args:
            document: Document the element belongs to
            node: Target element
            blocked_tokens: Fragments that must not appear in the result
            
        Returns:
            SelectorPair (the terminal tiers are not guaranteed unique)
            
        Raises:
            UnsupportedTargetError: If node is html or body
        """
        ctx = self._context(document, node, blocked_tokens)
        
        primary = run_ladder(ctx, node, PRIMARY_TIERS) or terminal_hit(node)
        
        secondary = run_ladder(ctx, node, SECONDARY_TIERS) or primary
        
        logger.debug(
            f"<{tag_name(node)}> primary={primary.selector!r} ({primary.tier}), "
            f"secondary={secondary.selector!r} ({secondary.tier}), "
            f"{ctx.oracle.queries} queries"
        )
        
        return SelectorPair(
            primary=primary.selector,
            secondary=secondary.selector,
            primary_tier=primary.tier,
            secondary_tier=secondary.tier,
            primary_verified=primary.verified,
            secondary_verified=secondary.verified,
        )
    
    def path_selector(
        self,
        document: IDocument,
        node: Tag,
        blocked_tokens: Iterable[str] = (),
    ) -> str:
        """
        Structural tag.class path selector (best effort).
        
        Raises:
            UnsupportedTargetError: If node is html or body
        """
        ctx = self._context(document, node, blocked_tokens)
        selector, verified = compute_path_selector(ctx, node)
        if not verified:
            logger.debug(f"Path selector {selector!r} is not confirmed unique")
        return selector


def synthesize_selectors(
    document: IDocument,
    node: Tag,
    blocked_tokens: Iterable[str] = (),
    settings: Optional[SelectorSettings] = None,
) -> SelectorPair:
    """
    Compute primary and secondary selectors for an element.
    
    Args:
        document: Document the element belongs to
        node: Target element
        blocked_tokens: Fragments such as "#id", ".cls" or '[data-x="v"]'
            that must not be reused
        settings: Selector limits
        
    Returns:
        SelectorPair
    """
    return SelectorSynthesizer(settings).synthesize(document, node, blocked_tokens)
