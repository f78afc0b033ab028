"""
Tests for selector sessions.
"""

import pytest

from browser_auto.selectors import SelectorSession
from browser_auto.selectors.session import leading_fragment


class TestLeadingFragment:
    """Test leading_fragment()."""

    @pytest.mark.parametrize("selector,expected", [
        ("#app > button", "#app"),
        (".btn.large", ".btn"),
        ('[data-testid="a b"] > span', '[data-testid="a b"]'),
        ("#a\\:b c", "#a\\:b"),
        ("div > a", ""),
        ('text="Send"', ""),
    ])
    def test_leading_fragment(self, selector, expected):
        """Test the first id/class/attribute fragment is extracted."""
        assert leading_fragment(selector) == expected


class TestSelectorSession:
    """Test SelectorSession."""

    def test_blocks_used_fragments(self, submit_document):
        """Test fragments of returned selectors become blocked."""
        session = SelectorSession(submit_document)

        pair = session.synthesize(submit_document.select_one("button"))

        assert pair.primary == '[data-testid="submit"]'
        assert session.blocked == {'[data-testid="submit"]', "#app"}
        assert session.history == [pair]

    def test_later_selectors_diverge(self, submit_document):
        """Test a second call avoids the first call's fragments."""
        session = SelectorSession(submit_document)
        button = submit_document.select_one("button")

        first = session.synthesize(button)
        second = session.synthesize(button)

        assert second.primary == "div > button.btn-primary"
        assert second.primary != first.primary
        assert "#app" not in second.secondary

    def test_initial_tokens_survive_reset(self, submit_document):
        """Test reset keeps only the initial blocked tokens."""
        session = SelectorSession(submit_document, blocked_tokens=["#app"])

        session.synthesize(submit_document.select_one("button"))
        assert len(session.blocked) > 1

        session.reset()

        assert session.blocked == {"#app"}
        assert session.history == []

    def test_unverified_selectors_are_not_remembered(self):
        """Test text and terminal fallbacks do not grow the blocked set."""
        from browser_auto.dom import HTMLDocument

        document = HTMLDocument.from_html("<div><span></span></div><div><span></span></div>")
        session = SelectorSession(document)

        pair = session.synthesize(document.select_one("span"))

        assert pair.primary_verified is False
        assert session.blocked == set()
