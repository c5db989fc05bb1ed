"""
Checkbox Renderer
=================
"""

from typing import Any

from pagelayout.core.rendering.base import BaseRenderer, join_attributes

TRUTHY_VALUES = {"t", "true", "y", "yes", "1", "on"}


def is_checked(value: Any) -> bool:
    """Interpret a form value as a checkbox state."""
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_VALUES
    return bool(value)


class CheckboxRenderer(BaseRenderer):
    """Render a checkbox with a hidden companion so an unchecked box still submits."""

    def render(self) -> str:
        self.require_configured()
        attrs = join_attributes(
            [
                'class="cbl-input"',
                "checked" if is_checked(self.resolved_value()) else None,
                self.attr_disabled(),
                self.behaviours(),
            ]
        )
        return f"""<div {self.wrapper_id} class="{self.div_class}"{self.wrapper_visibility}>{self.hint_text()}
  <input {self.name_attribute} type="hidden" value="f">
  <input type="checkbox" value="t" {self.name_attribute} {self.field_id} {attrs}>
  {self.label_html()}
</div>"""
