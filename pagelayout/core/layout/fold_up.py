"""
FoldUp Node
===========

Wraps its content in a ``<details>`` element which is folded up by default.
"""

from contextlib import contextmanager
from typing import Iterator

from pagelayout.config.settings import get_settings
from pagelayout.core.layout.field import FieldBuilderMixin
from pagelayout.core.layout.form import FormBuilderMixin
from pagelayout.core.layout.grid import GridBuilderMixin
from pagelayout.core.layout.page_node import ContainerNode
from pagelayout.core.layout.row import RowBuilderMixin
from pagelayout.core.layout.templating import render_template
from pagelayout.core.layout.text import TextBuilderMixin
from pagelayout.models.schemas import PageConfig


class FoldUp(
    FormBuilderMixin, RowBuilderMixin, TextBuilderMixin, GridBuilderMixin, FieldBuilderMixin, ContainerNode
):
    """A collapsible section."""

    def __init__(self, page_config: PageConfig, sequence: int = 1) -> None:
        super().__init__(page_config, sequence)
        self.caption_text = get_settings().fold_up_caption
        self.is_open = False

    def caption(self, value: str) -> None:
        self.caption_text = value

    def open(self) -> None:
        """Render unfolded."""
        self.is_open = True

    def render(self) -> str:
        if self.invisible:
            return ""
        return render_template(
            "fold_up.html", caption=self.caption_text, is_open=self.is_open, content=self.render_nodes()
        )


class FoldUpBuilderMixin:
    """Adds ``fold_up`` to a container node."""

    @contextmanager
    def fold_up(self) -> Iterator[FoldUp]:
        yield self.append_node(FoldUp(self.page_config, self.next_sequence()))
