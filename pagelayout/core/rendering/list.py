"""
List Renderer
=============
"""

from markupsafe import escape

from pagelayout.core.rendering.base import BaseRenderer


class ListRenderer(BaseRenderer):
    """Render a read-only ordered list of items."""

    def render(self) -> str:
        self.require_configured()
        items = self.field_config.items or self.resolved_value() or []
        lines = "\n".join(f"    <li>{escape(item)}</li>" for item in items)
        return f"""<div {self.wrapper_id} class="{self.div_class}"{self.wrapper_visibility}>{self.hint_text()}
  <ol class="cbl-list" {self.field_id}>
{lines}
  </ol>
  <label>{self.caption}{self.error_state()}{self.hint_trigger()}</label>
</div>"""
