"""
Multi Renderer
==============
"""

from typing import List, Optional

from pagelayout.core.rendering.select import SelectRenderer


class MultiRenderer(SelectRenderer):
    """Render a multi-choice select submitting an array of values."""

    def _name(self) -> str:
        return self.name_attribute_multi

    def _attr_list(self) -> List[Optional[str]]:
        return ["multiple", 'data-multi="true"', *super()._attr_list()]

    def selected_values(self) -> List[str]:
        value = self.resolved_value()
        if value is None:
            value = self.field_config.selected
        if value is None:
            return []
        if isinstance(value, (list, tuple, set)):
            return [str(item) for item in value]
        return [str(value)]
