"""
Hidden Renderer
===============
"""

from markupsafe import escape

from pagelayout.core.rendering.base import BaseRenderer


class HiddenRenderer(BaseRenderer):
    """Render a hidden input carrying the field's value."""

    def render(self) -> str:
        self.require_configured()
        value = self.resolved_value()
        value = "" if value is None else value
        return f'<input type="hidden" value="{escape(value)}" {self.name_attribute} {self.field_id}>'
