"""
Selector Session - Keep selectors distinct across repeated calls.

A recorder that captures several actions in one session blocks the
leading fragment of every verified selector it hands out, so later
selectors do not lean on the same single-fragment anchor.
"""

import re
from typing import Iterable, List, Optional, Set

from bs4 import Tag

from browser_auto.config.settings import SelectorSettings
from browser_auto.interfaces.dom import IDocument
from browser_auto.selectors.synthesizer import SelectorPair, SelectorSynthesizer


_LEADING_FRAGMENT_RE = re.compile(
    r'^(?:#(?:\\.|[^\s>+~.:#\[\\])+|\.(?:\\.|[^\s>+~.:#\[\\])+|\[[^\]]+\])'
)


def leading_fragment(selector: str) -> str:
    """
    The first id, class or attribute fragment of a selector.
    
    Returns "" for selectors that start with a tag or are text selectors.
    """
    match = _LEADING_FRAGMENT_RE.match(selector)
    return match.group(0) if match else ""


class SelectorSession:
    """
    Selector synthesis with a growing blocked-token set.
    
    Example:
        >>> session = SelectorSession(document)
        >>> first = session.synthesize(button)
        >>> second = session.synthesize(button)
        >>> first.primary != second.primary
        True
    """
    
    def __init__(
        self,
        document: IDocument,
        settings: Optional[SelectorSettings] = None,
        blocked_tokens: Iterable[str] = (),
    ):
        """
        Initialize the session.
        
        Args:
            document: Document to synthesize against (may be swapped later)
            settings: Selector limits
            blocked_tokens: Fragments blocked from the start
        """
        self.document = document
        self._initial = frozenset(blocked_tokens)
        self.blocked: Set[str] = set(self._initial)
        self.history: List[SelectorPair] = []
        self._synthesizer = SelectorSynthesizer(settings)
    
    def synthesize(self, node: Tag) -> SelectorPair:
        """Synthesize for a node and block the fragments it used."""
        pair = self._synthesizer.synthesize(self.document, node, self.blocked)
        self.remember(pair)
        return pair
    
    def remember(self, pair: SelectorPair) -> None:
        """Block the leading fragments of a pair's verified selectors."""
        for selector, verified in (
            (pair.primary, pair.primary_verified),
            (pair.secondary, pair.secondary_verified),
        ):
            if not verified:
                continue
            fragment = leading_fragment(selector)
            if fragment:
                self.blocked.add(fragment)
        self.history.append(pair)
    
    def reset(self) -> None:
        """Forget fragments blocked by earlier calls, keeping the initial ones."""
        self.blocked = set(self._initial)
        self.history.clear()
