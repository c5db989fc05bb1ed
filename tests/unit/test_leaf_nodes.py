"""
Unit Tests for Leaf Nodes
=========================

Tests for text, link, grid and field nodes.
"""

import pytest

from pagelayout.core.layout.field import Field
from pagelayout.core.layout.grid import Grid
from pagelayout.core.layout.link import Link
from pagelayout.core.layout.page_node import LayoutError
from pagelayout.core.layout.templating import dom_id
from pagelayout.core.layout.text import Text
from pagelayout.models.schemas import LinkBehaviour, LinkStyle

from tests.utils.helpers import scrub


class TestTextNode:
    """Test text blocks."""

    def test_plain_text(self, page_config):
        html = scrub(Text(page_config, "Hello").render())
        assert html == '<div class="crossbeams-field no-flex">\nHello\n</div>'

    @pytest.mark.parametrize(
        "wrapper,expected",
        [
            ("p", "<p>Hello</p>"),
            ("h2", "<h2>Hello</h2>"),
            ("i", "<em>Hello</em>"),
            ("em", "<em>Hello</em>"),
            ("b", "<strong>Hello</strong>"),
            ("strong", "<strong>Hello</strong>"),
            ("none", "Hello"),
        ],
    )
    def test_wrappers(self, page_config, wrapper, expected):
        assert expected in Text(page_config, "Hello", wrapper=wrapper).render()

    def test_nested_wrappers_with_classes(self, page_config):
        """Test classes go on the outermost wrapper."""
        html = Text(page_config, "Hello", wrapper=["p", "b"], wrapper_classes="red").render()
        assert '<p class="red"><strong>Hello</strong></p>' in html

    def test_wrapper_chain(self, page_config):
        html = Text(page_config, "TEXT", wrapper=["p", "b", "i"]).render()
        assert "<p><strong><em>TEXT</em></strong></p>" in html

    def test_unknown_wrapper(self, page_config):
        with pytest.raises(LayoutError):
            Text(page_config, "Hello", wrapper="blink")

    def test_preformatted(self, page_config):
        html = Text(page_config, "select 1;", preformatted=True).render()
        assert "<pre>\nselect 1;\n</pre>" in html

    def test_text_is_not_escaped(self, page_config):
        assert "<a href='#'>go</a>" in Text(page_config, "<a href='#'>go</a>").render()

    def test_toggle_button(self, page_config):
        """Test a toggle button hides the text and targets it by caption."""
        node = Text(page_config, "Secret", toggle_button=True, toggle_caption="Show SQL")
        html = node.render()
        assert node.toggle_id == "show_sql"
        assert node.hidden is True
        assert "crossbeamsUtils.toggleVisibility('show_sql', this);return false" in html
        assert "Show SQL</a>" in html
        assert "<div class=\"crossbeams-field no-flex\" id='show_sql' hidden>" in html

    def test_default_toggle_caption(self, page_config):
        node = Text(page_config, "Secret", toggle_button=True)
        assert node.toggle_caption == "Show/Hide Text"
        assert "Show/Hide Text</a>" in node.render()

    def test_toggle_element(self, page_config):
        """Test a toggle can target an element inside the text."""
        node = Text(page_config, '<p id="extra">More</p>', toggle_button=True, toggle_element_id="extra")
        html = node.render()
        assert node.hidden is False
        assert "toggleVisibility('extra', this)" in html
        assert '<div class="crossbeams-field no-flex">' in html

    def test_toggle_element_must_exist(self, page_config):
        with pytest.raises(LayoutError, match='toggle_element_id "extra"'):
            Text(page_config, "<p>More</p>", toggle_button=True, toggle_element_id="extra")

    @pytest.mark.parametrize("options", [{"hide_on_load": True}, {"initially_visible": False}])
    def test_hidden_text(self, page_config, options):
        node = Text(page_config, "Hello", **options)
        assert node.hidden is True
        assert node.invisible is False
        assert '<div class="crossbeams-field no-flex" hidden>' in node.render()

    def test_dom_id(self):
        assert dom_id("Show More Detail") == "show_more_detail"


class TestLinkNode:
    """Test link nodes."""

    def test_plain_link(self):
        assert Link(text="Users", url="/users").render() == '<a href="/users">Users</a>'

    def test_link_with_class(self):
        assert Link(text="Users", url="/users", css_class="red").render() == '<a href="/users" class="red">Users</a>'

    def test_button(self):
        html = Link(text="New", url="/users/new", style="button").render()
        assert 'class="f6 link dim br2 ph3 pv2 dib white bg-silver"' in html

    def test_back_button(self):
        html = Link(text="Back", url="/users", style=LinkStyle.BACK_BUTTON).render()
        assert 'class="f6 link dim br2 ph3 pv2 dib white bg-dark-blue"' in html
        assert html.endswith("</svg> Back</a>")

    @pytest.mark.parametrize(
        "behaviour,attribute",
        [
            (LinkBehaviour.POPUP, ' data-popup-dialog="true"'),
            ("replace_dialog", ' data-replace-dialog="true"'),
        ],
    )
    def test_behaviours(self, behaviour, attribute):
        assert attribute in Link(text="Edit", url="/users/1/edit", behaviour=behaviour).render()

    def test_grid_id(self):
        html = Link(text="Edit", url="/x", grid_id="users_grid").render()
        assert 'data-grid-id="users_grid"' in html

    @pytest.mark.parametrize("options", [{"text": "Users"}, {"url": "/users"}])
    def test_requires_text_and_url(self, options):
        with pytest.raises(LayoutError, match="Link requires text and url options"):
            Link(**options)

    def test_invalid_style(self):
        with pytest.raises(LayoutError, match="Link style must be one of"):
            Link(text="Users", url="/users", style="banner")

    def test_always_visible(self):
        link = Link(text="Users", url="/users")
        assert link.invisible is False
        assert link.hidden is False


class TestGridNode:
    """Test grid containers."""

    def test_render(self, page_config):
        html = Grid(page_config, "users_grid", "/list/users/grid", caption="Users").render()
        assert '<div class="crossbeams-grid">' in html
        assert '<label class="grid-caption">Users</label>' in html
        assert 'id="users_grid" style="height: 20em;" class="ag-theme-balham"' in html
        assert 'data-gridurl="/list/users/grid" data-grid="grid"' in html

    def test_height(self, page_config):
        assert "height: 35em;" in Grid(page_config, "g", "/g", height=35).render()

    def test_fit_height(self, page_config):
        html = Grid(page_config, "g", "/g", fit_height=True).render()
        assert "crossbeams-grid-fit-height" in html
        assert "style=" not in html

    def test_requires_id_and_url(self, page_config):
        with pytest.raises(LayoutError, match="Grid requires grid_id and url"):
            Grid(page_config, "g", "")


class TestFieldNode:
    """Test field nodes."""

    def test_uses_page_field_config(self, make_page_config):
        page_config = make_page_config({"qty": {"renderer": "integer"}})
        assert 'type="number"' in Field(page_config, "qty").render()

    def test_node_options_override(self, make_page_config):
        page_config = make_page_config({"qty": {"renderer": "integer", "caption": "Quantity"}})
        html = Field(page_config, "qty", {"caption": "Units"}).render()
        assert 'type="number"' in html
        assert ">Units</label>" in html

    def test_undeclared_field_is_input(self, page_config):
        assert 'type="text"' in Field(page_config, "anything").render()

    def test_invisible(self, make_page_config):
        page_config = make_page_config({"secret": {"invisible": True}})
        assert Field(page_config, "secret").invisible is True

    @pytest.mark.parametrize("options", [{"renderer": "hidden"}, {"hide_on_load": True}])
    def test_hidden(self, make_page_config, options):
        page_config = make_page_config({"code": options})
        node = Field(page_config, "code")
        assert node.hidden is True
        assert node.invisible is False
