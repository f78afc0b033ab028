"""
Tests for element helpers.
"""

from browser_auto.dom import HTMLDocument
from browser_auto.dom.elements import (
    class_list,
    element_children,
    get_attribute,
    is_root_tag,
    parent_element,
    same_tag_index,
    tag_name,
)


class TestElementHelpers:
    """Test DOM-style reads over BeautifulSoup tags."""

    def test_tag_name_of_document_is_empty(self):
        """Test the BeautifulSoup object is not treated as an element."""
        document = HTMLDocument.from_html("<p>x</p>")
        assert tag_name(document.soup) == ""

    def test_parent_stops_at_document_element(self):
        """Test parent_element returns None above <html>."""
        document = HTMLDocument.from_html("<p>x</p>")
        assert parent_element(document.document_element) is None
        assert parent_element(document.body) is document.document_element

    def test_root_tags(self):
        """Test html and body are root tags."""
        document = HTMLDocument.from_html("<p>x</p>")
        assert is_root_tag(document.document_element)
        assert is_root_tag(document.body)
        assert not is_root_tag(document.select_one("p"))
        assert not is_root_tag(None)

    def test_class_attribute_is_joined(self):
        """Test multi-valued attributes read like getAttribute."""
        document = HTMLDocument.from_html('<p class="a  b">x</p>')
        node = document.select_one("p")

        assert get_attribute(node, "class") == "a b"
        assert class_list(node) == ["a", "b"]
        assert get_attribute(node, "id") is None

    def test_element_children_skip_text(self):
        """Test text nodes are not children elements."""
        document = HTMLDocument.from_html("<div>a<span>b</span>c<em>d</em></div>")
        names = [tag_name(child) for child in element_children(document.select_one("div"))]
        assert names == ["span", "em"]

    def test_same_tag_index(self):
        """Test position counts only same-tag siblings."""
        document = HTMLDocument.from_html("<ul><li>a</li><span></span><li>b</li></ul>")
        items = document.query_all("li")

        assert same_tag_index(items[0]) == 1
        assert same_tag_index(items[1]) == 2
        assert same_tag_index(document.document_element) == 0
