"""
Section Node
============
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from pagelayout.core.layout.fold_up import FoldUpBuilderMixin
from pagelayout.core.layout.form import FormBuilderMixin
from pagelayout.core.layout.grid import GridBuilderMixin
from pagelayout.core.layout.link import LinkBuilderMixin
from pagelayout.core.layout.page_node import ContainerNode
from pagelayout.core.layout.row import RowBuilderMixin
from pagelayout.core.layout.templating import render_template
from pagelayout.core.layout.text import TextBuilderMixin
from pagelayout.models.schemas import PageConfig


class Section(
    FormBuilderMixin,
    RowBuilderMixin,
    FoldUpBuilderMixin,
    TextBuilderMixin,
    GridBuilderMixin,
    LinkBuilderMixin,
    ContainerNode,
):
    """A captioned section of a page."""

    def __init__(self, page_config: PageConfig, sequence: int = 1) -> None:
        super().__init__(page_config, sequence)
        self.caption_text: Optional[str] = None
        self.caption_hidden = False
        self.bordered = False
        self.fits_height = False

    def caption(self, value: str) -> None:
        self.caption_text = value

    def hide_caption(self) -> None:
        self.caption_hidden = True

    def show_border(self) -> None:
        self.bordered = True

    def fit_height(self) -> None:
        self.fits_height = True

    def render(self) -> str:
        if self.invisible:
            return ""
        return render_template(
            "section.html",
            section=self,
            show_caption=bool(self.caption_text) and not self.caption_hidden,
            content=self.render_nodes(),
        )


class SectionBuilderMixin:
    """Adds ``section`` to a container node."""

    @contextmanager
    def section(self) -> Iterator[Section]:
        yield self.append_node(Section(self.page_config, self.next_sequence()))
