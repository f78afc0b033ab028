"""
Uniqueness Oracle - Does a selector resolve to exactly one given element?

Every verified ladder tier goes through is_unique(), so the length cap
and the blocked-token rule are enforced in one place.
"""

import logging
import re
from typing import AbstractSet, Optional, Pattern, List

from bs4 import Tag

from browser_auto.interfaces.dom import IDocument

logger = logging.getLogger(__name__)


def _fragment_pattern(fragment: str) -> Pattern[str]:
    """Match a fragment as a whole token (#app must not hit #app-shell)."""
    head = r"(?<![\w-])" if fragment[:1].isalnum() else ""
    return re.compile(head + re.escape(fragment) + r"(?![\w-])")


class UniquenessOracle:
    """
    Answers uniqueness questions against one document.
    
    Any failure while evaluating a selector (bad syntax, escaping edge
    cases) counts as "not unique" and is never propagated.
    
    Example:
        >>> oracle = UniquenessOracle(document)
        >>> oracle.is_unique("#app", app_div)
        True
    """
    
    def __init__(
        self,
        document: IDocument,
        blocked: AbstractSet[str] = frozenset(),
        max_length: int = 160,
    ):
        """
        Initialize the oracle.
        
        Args:
            document: Document to query
            blocked: Fragments no accepted selector may contain
            max_length: Longest selector accepted
        """
        self.document = document
        self.max_length = max_length
        self._blocked: List[Pattern[str]] = [
            _fragment_pattern(fragment) for fragment in sorted(blocked) if fragment
        ]
        self.queries = 0
    
    def contains_blocked(self, selector: str) -> bool:
        """Check if a selector uses any blocked fragment."""
        return any(pattern.search(selector) for pattern in self._blocked)
    
    def is_unique(self, selector: str, target: Tag, scope: Optional[Tag] = None) -> bool:
        """
        Check if a selector matches only the target.
        
        Args:
            selector: Candidate selector
            target: Element the selector must resolve to
            scope: Optional element to search under
            
        Returns:
            True iff exactly one element matches and it is the target
        """
        if not selector or len(selector) > self.max_length:
            return False
        if self.contains_blocked(selector):
            return False
        
        self.queries += 1
        try:
            # Two matches are enough to prove non-uniqueness
            matches = self.document.query_all(selector, scope, limit=2)
        except Exception as e:
            logger.debug(f"Selector {selector!r} could not be evaluated: {e}")
            return False
        
        return len(matches) == 1 and matches[0] is target
