"""
Synthesis context - Everything one selector synthesis call reads.

A context lives for exactly one call: it holds the document, the
caller's blocked tokens, the limits, and a per-call memo of anchor
lookups so the primary and secondary ladders agree on the nearest
anchor without searching twice.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional

from bs4 import Tag

from browser_auto.config.settings import SelectorSettings
from browser_auto.interfaces.dom import IDocument
from browser_auto.selectors import tokens
from browser_auto.selectors.oracle import UniquenessOracle


@dataclass(frozen=True)
class Anchor:
    """
    An ancestor whose selector is unique on its own.
    
    Attributes:
        selector: Selector that matches only this ancestor
        node: The ancestor element (only used to tell direct children)
    """
    selector: str
    node: Tag


@dataclass
class SynthesisContext:
    """Per-call state shared by the ladder tiers."""
    document: IDocument
    settings: SelectorSettings
    blocked: FrozenSet[str]
    oracle: UniquenessOracle
    anchors: Dict[int, Optional[Anchor]] = field(default_factory=dict)
    
    @classmethod
    def create(
        cls,
        document: IDocument,
        blocked_tokens: Iterable[str] = (),
        settings: Optional[SelectorSettings] = None,
    ) -> "SynthesisContext":
        settings = settings or SelectorSettings()
        blocked = frozenset(blocked_tokens or ())
        return cls(
            document=document,
            settings=settings,
            blocked=blocked,
            oracle=UniquenessOracle(document, blocked, max_length=settings.max_length),
        )
    
    def is_unique(self, selector: str, node: Tag) -> bool:
        return self.oracle.is_unique(selector, node)
    
    def classes(self, node: Tag) -> List[str]:
        return tokens.stable_classes(node, self.blocked, self.settings)
    
    def attributes(self, node: Tag) -> List[str]:
        return tokens.stable_attributes(node, self.blocked, self.settings)
    
    def id_fragment(self, node: Tag) -> str:
        return tokens.id_fragment(node, self.blocked)
    
    def text(self, node: Tag) -> str:
        return tokens.trimmed_text(self.document, node, self.settings)
