"""
Row Node
========
"""

from contextlib import contextmanager
from typing import Iterator

from pagelayout.core.layout.column import BlankColumn, Column
from pagelayout.core.layout.page_node import ContainerNode
from pagelayout.core.layout.templating import render_template


class Row(ContainerNode):
    """A row of columns."""

    @contextmanager
    def column(self, size: str = "full") -> Iterator[Column]:
        yield self.append_node(Column(self.page_config, size, self.next_sequence()))

    def blank_column(self) -> BlankColumn:
        return self.append_node(BlankColumn(self.page_config))

    def render(self) -> str:
        if self.invisible:
            return ""
        return render_template("row.html", content=self.render_nodes())


class RowBuilderMixin:
    """Adds ``row`` to a container node."""

    @contextmanager
    def row(self) -> Iterator[Row]:
        yield self.append_node(Row(self.page_config, self.next_sequence()))
