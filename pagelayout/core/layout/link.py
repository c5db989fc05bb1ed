"""
Link Node
=========

A link rendered outside a form, styled as a link or a button.
"""

from typing import Optional, Union

from markupsafe import escape

from pagelayout.config.logging import get_logger
from pagelayout.core.layout.page_node import LayoutError, PageNode
from pagelayout.core.rendering.icon import Icon
from pagelayout.models.schemas import LinkBehaviour, LinkStyle, PageConfig

logger = get_logger(__name__)

BUTTON_CLASSES = "f6 link dim br2 ph3 pv2 dib white"

BEHAVIOUR_ATTRIBUTES = {
    LinkBehaviour.DIRECT: "",
    LinkBehaviour.POPUP: ' data-popup-dialog="true"',
    LinkBehaviour.REPLACE_DIALOG: ' data-replace-dialog="true"',
}


def _coerce(enum_type, value, option):
    try:
        return enum_type(value)
    except ValueError:
        logger.warning("Invalid link option", option=option, value=value)
        raise LayoutError(f"Link {option} must be one of: {', '.join(e.value for e in enum_type)}") from None


class Link(PageNode):
    """A link node."""

    def __init__(
        self,
        text: Optional[str] = None,
        url: Optional[str] = None,
        style: Union[LinkStyle, str] = LinkStyle.LINK,
        behaviour: Union[LinkBehaviour, str] = LinkBehaviour.DIRECT,
        css_class: str = "",
        grid_id: str = "",
        page_config: Optional[PageConfig] = None,
    ) -> None:
        if text is None or url is None:
            logger.warning("Link missing required options", text=text, url=url)
            raise LayoutError("Link requires text and url options")
        self.text = text
        self.url = url
        self.style = _coerce(LinkStyle, style, "style")
        self.behaviour = _coerce(LinkBehaviour, behaviour, "behaviour")
        self.css_class = css_class or ""
        self.grid_id = grid_id or ""
        self.page_config = page_config

    @property
    def invisible(self) -> bool:
        return False

    @property
    def hidden(self) -> bool:
        return False

    def render(self) -> str:
        """
        Render this node as an HTML link.

        Returns:
            HTML representation of this node
        """
        return (
            f'<a href="{escape(self.url)}"{self._class_string()}'
            f"{BEHAVIOUR_ATTRIBUTES[self.behaviour]}{self._grid_string()}>{self._render_text()}</a>"
        )

    def _class_string(self) -> str:
        if self.style == LinkStyle.LINK:
            return f' class="{self.css_class}"' if self.css_class else ""
        background = "bg-silver" if self.style == LinkStyle.BUTTON else "bg-dark-blue"
        classes = " ".join(part for part in (BUTTON_CLASSES, background, self.css_class) if part)
        return f' class="{classes}"'

    def _render_text(self) -> str:
        if self.style == LinkStyle.BACK_BUTTON:
            return f"{Icon.render('back')} {self.text}"
        return self.text

    def _grid_string(self) -> str:
        return f' data-grid-id="{escape(self.grid_id)}"' if self.grid_id else ""


class LinkBuilderMixin:
    """Adds ``add_link`` to a container node."""

    def add_link(self, text: str, url: str, **options) -> Link:
        return self.append_node(Link(text=text, url=url, page_config=self.page_config, **options))
