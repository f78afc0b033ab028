"""
Tests for HTMLDocument parsing, layout and visibility.
"""

import pytest

from browser_auto.dom import HTMLDocument, Layout
from browser_auto.dom.elements import tag_name


class TestParsing:
    """Test building documents from HTML."""

    def test_fragment_is_wrapped_in_body(self):
        """Test fragments get an html/body scaffold."""
        document = HTMLDocument.from_html('<div id="a"></div>')

        assert tag_name(document.document_element) == "html"
        assert tag_name(document.body) == "body"
        assert document.select_one("#a").parent is document.body

    def test_full_page_is_not_wrapped(self, shop_document):
        """Test a page with a body is parsed as is."""
        assert len(shop_document.query_all("body")) == 1
        assert shop_document.select_one("title").get_text() == "Shop"

    def test_query_all_with_scope_and_limit(self, shop_document):
        """Test scoped queries and match limits."""
        products = shop_document.select_one(".catalog")

        assert len(shop_document.query_all("span", scope=products)) == 3
        assert len(shop_document.query_all("span", limit=2)) == 2

    def test_query_all_raises_on_bad_selector(self, shop_document):
        """Test malformed selectors raise instead of matching nothing."""
        with pytest.raises(Exception):
            shop_document.query_all("div[")

    def test_iter_elements_skips_opaque_content(self):
        """Test template content is not walked by default."""
        document = HTMLDocument.from_html("<template><p>x</p></template><p>y</p>")

        names = [tag_name(node) for node in document.iter_elements()]
        assert names == ["html", "body", "template", "p"]

        names = [tag_name(node) for node in document.iter_elements(opaque=True)]
        assert names == ["html", "body", "template", "p", "p"]


class TestStaticVisibility:
    """Test visibility derived from markup alone."""

    def test_plain_element_is_visible(self):
        """Test an unstyled element counts as visible."""
        document = HTMLDocument.from_html("<p>Hello</p>")
        assert document.is_visible(document.select_one("p")) is True

    def test_hidden_attribute(self):
        """Test the hidden attribute hides an element."""
        document = HTMLDocument.from_html("<p hidden>Hello</p>")
        assert document.is_visible(document.select_one("p")) is False

    def test_display_none_hides_subtree(self):
        """Test inline display:none on an ancestor hides descendants."""
        document = HTMLDocument.from_html(
            '<div style="color: red; display: none !important"><span>x</span></div>'
        )
        assert document.is_visible(document.select_one("span")) is False

    def test_visibility_is_inherited(self):
        """Test visibility:hidden applies to descendants."""
        document = HTMLDocument.from_html(
            '<div style="visibility:hidden"><span>x</span></div>'
        )
        assert document.is_visible(document.select_one("span")) is False

    def test_nearest_visibility_wins(self):
        """Test a descendant can make itself visible again."""
        document = HTMLDocument.from_html(
            '<div style="visibility:hidden"><span style="visibility: visible">x</span></div>'
        )
        assert document.is_visible(document.select_one("span")) is True

    def test_non_rendered_tags(self, shop_document):
        """Test head content and scripts are never visible."""
        assert shop_document.is_visible(shop_document.select_one("title")) is False

        document = HTMLDocument.from_html("<script>var a;</script>")
        assert document.is_visible(document.select_one("script")) is False

    def test_detached_node_is_invisible(self):
        """Test nodes outside the tree are invisible."""
        document = HTMLDocument.from_html("<p>x</p>")
        orphan = document.soup.new_tag("div")
        assert document.is_visible(orphan) is False


class TestLayoutVisibility:
    """Test visibility derived from captured layout."""

    @pytest.fixture
    def document(self):
        """Document with a known viewport."""
        return HTMLDocument.from_html("<div><p>x</p></div>", viewport_height=720)

    def test_box_in_viewport(self, document):
        """Test a box inside the viewport is visible."""
        p = document.select_one("p")
        document.set_layout(p, Layout(y=100, width=50, height=20))
        assert document.is_visible(p) is True

    def test_display_none(self, document):
        """Test computed display:none hides the element."""
        p = document.select_one("p")
        document.set_layout(p, Layout(display="none", width=50, height=20))
        assert document.is_visible(p) is False

    def test_visibility_collapse(self, document):
        """Test computed visibility:collapse hides the element."""
        p = document.select_one("p")
        document.set_layout(p, Layout(visibility="collapse", width=50, height=20))
        assert document.is_visible(p) is False

    def test_zero_area(self, document):
        """Test an empty box is invisible."""
        p = document.select_one("p")
        document.set_layout(p, Layout(width=0, height=20))
        assert document.is_visible(p) is False

    def test_below_viewport(self, document):
        """Test a box starting below the fold is invisible."""
        p = document.select_one("p")
        document.set_layout(p, Layout(y=800, width=50, height=20))
        assert document.is_visible(p) is False

    def test_above_viewport(self, document):
        """Test a box scrolled out above the viewport is invisible."""
        p = document.select_one("p")
        document.set_layout(p, Layout(y=-50, width=50, height=20))
        assert document.is_visible(p) is False

    def test_layout_from_dict_defaults(self):
        """Test missing fields in a capture record fall back to defaults."""
        layout = Layout.from_dict({"tag": "div", "width": None, "height": 10})

        assert layout.display == "block"
        assert layout.visibility == "visible"
        assert layout.width == 0
        assert layout.height == 10
        assert layout.value is None
        assert layout.has_area is False


class TestAttachLayouts:
    """Test pairing capture records with parsed elements."""

    def test_records_attach_in_order(self):
        """Test every element receives its record."""
        document = HTMLDocument.from_html('<div id="a"></div>')
        records = [
            {"tag": "html", "width": 100, "height": 100},
            {"tag": "body", "width": 100, "height": 100},
            {"tag": "div", "display": "none"},
        ]

        assert document.attach_layouts(records) == 3
        assert document.layout_of(document.select_one("#a")).display == "none"
        assert document.is_visible(document.select_one("#a")) is False

    def test_pairing_stops_at_mismatch(self):
        """Test elements after a tag mismatch keep static visibility."""
        document = HTMLDocument.from_html('<div id="a"></div>')
        records = [{"tag": "html"}, {"tag": "span"}, {"tag": "div"}]

        assert document.attach_layouts(records) == 1
        assert document.layout_of(document.select_one("#a")) is None


class TestContent:
    """Test text and form value reads."""

    def test_text_content_includes_hidden_text(self):
        """Test text_content returns raw text."""
        document = HTMLDocument.from_html(
            '<button>Send <span style="display:none">later</span></button>'
        )
        assert "later" in document.text_content(document.select_one("button"))

    def test_inner_text_skips_hidden_and_scripts(self):
        """Test inner_text only returns rendered text."""
        document = HTMLDocument.from_html(
            '<button>Send <span style="display:none">later</span>'
            '<script>var a;</script><!-- note --> now</button>'
        )
        assert document.inner_text(document.select_one("button")) == "Send now"

    def test_input_value(self):
        """Test input values come from the value attribute."""
        document = HTMLDocument.from_html('<input value="abc"><input type="checkbox">')
        inputs = document.query_all("input")

        assert document.form_value(inputs[0]) == "abc"
        assert document.form_value(inputs[1]) == "on"

    def test_select_value(self):
        """Test select values follow the selected option."""
        document = HTMLDocument.from_html(
            '<select id="a"><option value="x">X</option><option value="y" selected>Y</option></select>'
            '<select id="b"><option>Only</option></select>'
        )

        assert document.form_value(document.select_one("#a")) == "y"
        assert document.form_value(document.select_one("#b")) == "Only"

    def test_textarea_value(self):
        """Test textarea values are their text."""
        document = HTMLDocument.from_html("<textarea>hello</textarea>")
        assert document.form_value(document.select_one("textarea")) == "hello"

    def test_captured_value_wins(self):
        """Test a live value from capture overrides markup."""
        document = HTMLDocument.from_html('<input value="abc">')
        node = document.select_one("input")
        document.set_layout(node, Layout(width=10, height=10, value="typed"))

        assert document.form_value(node) == "typed"

    def test_non_form_element_has_no_value(self):
        """Test plain elements have no form value."""
        document = HTMLDocument.from_html("<div>x</div>")
        assert document.form_value(document.select_one("div")) is None
