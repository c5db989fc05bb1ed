"""
Grid Node
=========

A placeholder element that the client grid script fills from ``url``.
"""

from typing import Optional

from pagelayout.config.logging import get_logger
from pagelayout.config.settings import get_settings
from pagelayout.core.layout.page_node import LayoutError, PageNode
from pagelayout.core.layout.templating import render_template
from pagelayout.models.schemas import PageConfig

logger = get_logger(__name__)


class Grid(PageNode):
    """A data grid loaded from a URL."""

    def __init__(
        self,
        page_config: PageConfig,
        grid_id: str,
        url: str,
        caption: Optional[str] = None,
        height: Optional[int] = None,
        fit_height: bool = False,
    ) -> None:
        if not grid_id or not url:
            logger.warning("Grid missing required options", grid_id=grid_id, url=url)
            raise LayoutError("Grid requires grid_id and url")
        self.page_config = page_config
        self.grid_id = grid_id
        self.url = url
        self.caption = caption
        self.height = height or get_settings().grid_height
        self.fit_height = fit_height

    @property
    def invisible(self) -> bool:
        return False

    @property
    def hidden(self) -> bool:
        return False

    def render(self) -> str:
        return render_template(
            "grid.html",
            grid_id=self.grid_id,
            url=self.url,
            caption=self.caption,
            height=self.height,
            fit_height=self.fit_height,
            theme=get_settings().grid_theme,
        )


class GridBuilderMixin:
    """Adds ``add_grid`` to a container node."""

    def add_grid(self, grid_id: str, url: str, **options) -> Grid:
        return self.append_node(Grid(self.page_config, grid_id, url, **options))
