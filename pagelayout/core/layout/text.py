"""
Text Node
=========

A block of text, optionally wrapped in heading/paragraph/emphasis elements,
preformatted, or toggled by a button.
"""

import re
from typing import List, Optional, Sequence, Union

from markupsafe import Markup

from pagelayout.config.logging import get_logger
from pagelayout.config.settings import get_settings
from pagelayout.core.layout.page_node import LayoutError, PageNode
from pagelayout.core.layout.templating import dom_id, render_template
from pagelayout.models.schemas import PageConfig, TextWrapper

logger = get_logger(__name__)

WRAPPER_TAGS = {
    TextWrapper.NONE: None,
    TextWrapper.P: "p",
    TextWrapper.H1: "h1",
    TextWrapper.H2: "h2",
    TextWrapper.H3: "h3",
    TextWrapper.H4: "h4",
    TextWrapper.I: "em",
    TextWrapper.EM: "em",
    TextWrapper.B: "strong",
    TextWrapper.STRONG: "strong",
}

WrapperSpec = Union[TextWrapper, str, Sequence[Union[TextWrapper, str]], None]


def _wrappers(wrapper: WrapperSpec) -> List[TextWrapper]:
    if wrapper is None:
        return [TextWrapper.NONE]
    if isinstance(wrapper, str):
        wrapper = [wrapper]
    try:
        return [TextWrapper(item) for item in wrapper] or [TextWrapper.NONE]
    except ValueError as e:
        raise LayoutError(f"Text: unknown wrapper - {e}") from e


class Text(PageNode):
    """A text node."""

    def __init__(
        self,
        page_config: PageConfig,
        text: str,
        wrapper: WrapperSpec = None,
        wrapper_classes: Optional[str] = None,
        preformatted: bool = False,
        toggle_button: bool = False,
        toggle_caption: Optional[str] = None,
        toggle_element_id: Optional[str] = None,
        hide_on_load: bool = False,
        initially_visible: bool = True,
    ) -> None:
        self.page_config = page_config
        self.text = text
        self.wrapper = _wrappers(wrapper)
        self.wrapper_classes = wrapper_classes
        self.preformatted = preformatted
        self.toggle_button = toggle_button
        self.toggle_caption = toggle_caption or get_settings().text_toggle_caption
        self.toggle_element_id = toggle_element_id
        self.hide_on_load = hide_on_load or not initially_visible

        if toggle_element_id and not re.search(rf"""id=["']{re.escape(toggle_element_id)}["']""", text):
            logger.warning("Toggle element missing from text", toggle_element_id=toggle_element_id)
            raise LayoutError(
                f'Text: toggle_element_id "{toggle_element_id}" does not match an element id in the text'
            )

    @property
    def invisible(self) -> bool:
        return False

    @property
    def hidden(self) -> bool:
        return self.hide_on_load or self._toggles_self

    @property
    def toggle_id(self) -> str:
        """DOM id of the toggled element."""
        return self.toggle_element_id or dom_id(self.toggle_caption)

    @property
    def _toggles_self(self) -> bool:
        return self.toggle_button and not self.toggle_element_id

    def render(self) -> str:
        """
        Render the text block.

        Returns:
            HTML representation of this node
        """
        div_attrs = ""
        if self._toggles_self:
            div_attrs += f" id='{self.toggle_id}'"
        if self.hidden:
            div_attrs += " hidden"

        return render_template(
            "text.html",
            toggle_button=self.toggle_button,
            toggle_caption=self.toggle_caption,
            toggle_id=self.toggle_id,
            div_attrs=Markup(div_attrs),
            content=Markup(self._wrapped_text()),
        )

    def _wrapped_text(self) -> str:
        content = f"<pre>\n{self.text}\n</pre>" if self.preformatted else self.text
        tags = [WRAPPER_TAGS[item] for item in self.wrapper if WRAPPER_TAGS[item]]
        for index, tag in reversed(list(enumerate(tags))):
            css = f' class="{self.wrapper_classes}"' if index == 0 and self.wrapper_classes else ""
            content = f"<{tag}{css}>{content}</{tag}>"
        return content


class TextBuilderMixin:
    """Adds ``add_text`` to a container node."""

    def add_text(self, text: str, **options) -> Text:
        return self.append_node(Text(self.page_config, text, **options))
