"""
Interfaces module - Abstract contracts consumed by the algorithms.
"""

from browser_auto.interfaces.dom import IDocument

__all__ = [
    "IDocument",
]
