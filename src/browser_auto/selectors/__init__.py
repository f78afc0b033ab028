"""
Selectors submodule - Unique selector synthesis.
"""

from browser_auto.selectors.oracle import UniquenessOracle
from browser_auto.selectors.context import Anchor, SynthesisContext
from browser_auto.selectors.synthesizer import (
    SelectorPair,
    SelectorSynthesizer,
    synthesize_selectors,
)
from browser_auto.selectors.session import SelectorSession

__all__ = [
    "UniquenessOracle",
    "Anchor",
    "SynthesisContext",
    "SelectorPair",
    "SelectorSynthesizer",
    "synthesize_selectors",
    "SelectorSession",
]
