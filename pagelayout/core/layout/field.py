"""
Field Node
==========

A form field. The node looks up the field's configuration on the page,
applies any node-level overrides and dispatches to the registered renderer.
"""

from typing import Any, Dict, Optional

from pagelayout.core.layout.page_node import PageNode
from pagelayout.core.rendering.field_types import FieldRendererFactory
from pagelayout.models.schemas import FieldConfig, FieldType, PageConfig


class Field(PageNode):
    """A field node."""

    def __init__(self, page_config: PageConfig, name: str, options: Optional[Dict[str, Any]] = None) -> None:
        self.page_config = page_config
        self.name = name
        self.options = options or {}

    @property
    def field_config(self) -> FieldConfig:
        """Page-level configuration for this field merged with node options."""
        return self.page_config.field_config(self.name).merged(self.options)

    @property
    def invisible(self) -> bool:
        return self.field_config.invisible

    @property
    def hidden(self) -> bool:
        config = self.field_config
        return config.renderer == FieldType.HIDDEN.value or config.hide_on_load

    def render(self) -> str:
        return FieldRendererFactory.create(self.name, self.field_config, self.page_config).render()


class FieldBuilderMixin:
    """Adds ``add_field`` to a container node."""

    def add_field(self, name: str, **options) -> Field:
        return self.append_node(Field(self.page_config, name, options))
