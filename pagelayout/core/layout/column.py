"""
Column Node
===========
"""

from pagelayout.core.layout.field import FieldBuilderMixin
from pagelayout.core.layout.grid import GridBuilderMixin
from pagelayout.core.layout.link import LinkBuilderMixin
from pagelayout.core.layout.page_node import ContainerNode, LayoutError, PageNode
from pagelayout.core.layout.templating import render_template
from pagelayout.core.layout.text import TextBuilderMixin
from pagelayout.models.schemas import PageConfig

COLUMN_CLASSES = {
    "full": "crossbeams-col",
    "half": "crossbeams-col crossbeams-col-half",
    "third": "crossbeams-col crossbeams-col-third",
    "quarter": "crossbeams-col crossbeams-col-quarter",
}


class Column(FieldBuilderMixin, TextBuilderMixin, GridBuilderMixin, LinkBuilderMixin, ContainerNode):
    """A column within a row."""

    def __init__(self, page_config: PageConfig, size: str = "full", sequence: int = 1) -> None:
        super().__init__(page_config, sequence)
        if size not in COLUMN_CLASSES:
            raise LayoutError(f"Column size must be one of: {', '.join(COLUMN_CLASSES)}")
        self.size = size

    def render(self) -> str:
        if self.invisible:
            return ""
        return render_template(
            "column.html", css_class=COLUMN_CLASSES[self.size], content=self.render_nodes()
        )


class BlankColumn(PageNode):
    """An empty column that only takes up space."""

    def __init__(self, page_config: PageConfig) -> None:
        self.page_config = page_config

    @property
    def invisible(self) -> bool:
        return False

    @property
    def hidden(self) -> bool:
        return False

    def render(self) -> str:
        return '<div class="crossbeams-col"><!-- BLANK COL --></div>'
