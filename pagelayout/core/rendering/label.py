"""
Label Renderer
==============

Read-only display of a field's value.
"""

from markupsafe import escape

from pagelayout.core.rendering.base import BaseRenderer
from pagelayout.core.rendering.checkbox import is_checked
from pagelayout.core.rendering.icon import Icon


class LabelRenderer(BaseRenderer):
    """Render a field's value as non-editable text."""

    def render(self) -> str:
        self.require_configured()
        return f"""<div {self.wrapper_id} class="{self.div_class}"{self.wrapper_visibility}>{self.hint_text()}
  <div class="crossbeams-label-value" {self.field_id}>{self._display_value()}</div>
  <label>{self.caption}{self.error_state()}{self.hint_trigger()}</label>
</div>"""

    def _display_value(self) -> str:
        if self.field_config.with_value is not None:
            value = self.field_config.with_value
        else:
            value = self.resolved_value()

        if self.field_config.as_boolean:
            if is_checked(value):
                return Icon.render("checkon", css_class="green")
            return Icon.render("checkoff", css_class="light-red")
        return "" if value is None else str(escape(value))
