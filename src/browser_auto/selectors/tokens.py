"""
Token Extractors - Candidate identity fragments for one element.

Each extractor turns an element into selector fragments ranked by how
likely they are to survive re-renders: test/accessibility attributes,
semantic class names, short visible text, and finally the element's
position among same-tag siblings.
"""

import re
from typing import AbstractSet, List

import soupsieve
from bs4 import Tag

from browser_auto.config.settings import SelectorSettings
from browser_auto.dom.elements import (
    attribute_names,
    class_list,
    get_attribute,
    same_tag_index,
)
from browser_auto.interfaces.dom import IDocument


# Build-tool generated prefixes (Angular, styled-jsx, emotion, CSS modules)
GENERATED_CLASS_RE = re.compile(r"^(?:ng-|jsx-|css-|style-|_)")

# Utility-framework families (spacing, layout, color, typography, motion)
UTILITY_CLASS_RE = re.compile(
    r"^(?:flex|grid|block|inline|hidden|visible|container|h-|w-|min-|max-|p-|m-|mx-|my-"
    r"|pl|pr|pt|pb|space-|rounded|shadow|text-|font-|leading|tracking|bg-|border|opacity"
    r"|z-|ring|outline|overflow|transition|duration-|ease-|animate-)"
)

_STATES = (
    "hover|active|focus|selected|pressed|expanded|collapsed|open|closed"
    "|visible|hidden|loading|busy|error|success"
)

STATEFUL_CLASS_RE = re.compile(
    rf"(?:^|[-_])(?:{_STATES}|disabled|enabled|current|prev|next)(?:$|[-_])"
)
STATE_PREFIX_RE = re.compile(r"^(?:is-|has-)")
STATE_MODIFIER_RE = re.compile(rf"--(?:{_STATES})")

# Test and accessibility hooks, most intentional first
PRIORITY_ATTRIBUTES = (
    "data-testid",
    "data-test",
    "data-cy",
    "data-qa",
    "data-automation",
    "data-name",
    "role",
    "aria-label",
)

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Collapse whitespace runs and trim."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def css_escape(value: str) -> str:
    """Escape a string the way CSS.escape() does."""
    return soupsieve.escape(value)


def class_score(name: str) -> int:
    """
    Rank a class name by how semantic it looks.

    +2 if hyphenated, +1 if it has no digits, +1 if it is not a BEM
    modifier. Higher is better.
    """
    score = 0
    if "-" in name:
        score += 2
    if not any(ch.isdigit() for ch in name):
        score += 1
    if "--" not in name:
        score += 1
    return score


def is_stable_class(name: str) -> bool:
    """Check if a class survives the generated/utility/state filters."""
    if GENERATED_CLASS_RE.match(name):
        return False
    if "[" in name or "]" in name or ":" in name:
        return False
    if UTILITY_CLASS_RE.match(name):
        return False
    if STATEFUL_CLASS_RE.search(name):
        return False
    if STATE_PREFIX_RE.match(name):
        return False
    if STATE_MODIFIER_RE.search(name):
        return False
    return True


def stable_classes(
    node: Tag,
    blocked: AbstractSet[str],
    settings: SelectorSettings,
) -> List[str]:
    """
    Semantic classes of an element, best first.

    Args:
        node: Element to read
        blocked: Fragments the caller forbids
        settings: Selector limits

    Returns:
        At most settings.max_classes raw class names
    """
    candidates = [
        name for name in class_list(node)
        if is_stable_class(name)
        and f".{name}" not in blocked
        and f".{css_escape(name)}" not in blocked
    ]
    # sorted() is stable, so equal scores keep source order
    candidates = sorted(candidates, key=class_score, reverse=True)
    return candidates[:settings.max_classes]


def attribute_fragment(name: str, value: str) -> str:
    """Render an attribute-selector fragment with an escaped value."""
    return f'[{name}="{css_escape(value)}"]'


def stable_attributes(
    node: Tag,
    blocked: AbstractSet[str],
    settings: SelectorSettings,
) -> List[str]:
    """
    Attribute-selector fragments for test/accessibility hooks.

    The fixed priority list comes first, followed by a couple of other
    data-* attributes. Values must be non-empty after whitespace
    normalization and short enough to be an intentional label.

    Returns:
        At most settings.max_attributes fragments like [data-testid="x"]
    """
    fragments: List[str] = []

    def pick(name: str) -> None:
        value = normalize_text(get_attribute(node, name) or "")
        if not value or len(value) > settings.max_attribute_value_length:
            return
        fragment = attribute_fragment(name, value)
        if fragment not in blocked and f'[{name}="{value}"]' not in blocked:
            fragments.append(fragment)

    for name in PRIORITY_ATTRIBUTES:
        pick(name)

    extra = [
        name for name in attribute_names(node)
        if name.startswith("data-") and name not in PRIORITY_ATTRIBUTES
    ]
    for name in extra[:settings.extra_data_attributes]:
        pick(name)

    return fragments[:settings.max_attributes]


def trimmed_text(document: IDocument, node: Tag, settings: SelectorSettings) -> str:
    """Normalized text content, or "" when it is too long to be a label."""
    text = normalize_text(document.text_content(node))
    return text if len(text) <= settings.max_text_length else ""


def nth_of_type(node: Tag) -> str:
    """:nth-of-type(n) fragment, or "" when the node has no parent element."""
    index = same_tag_index(node)
    return f":nth-of-type({index})" if index else ""


def id_fragment(node: Tag, blocked: AbstractSet[str]) -> str:
    """#id fragment, or "" when there is no id or it is blocked."""
    value = get_attribute(node, "id")
    if not value:
        return ""
    fragment = f"#{css_escape(value)}"
    if f"#{value}" in blocked or fragment in blocked:
        return ""
    return fragment


def class_fragment(names: List[str]) -> str:
    """.a.b fragment for raw class names."""
    return "".join(f".{css_escape(name)}" for name in names)
