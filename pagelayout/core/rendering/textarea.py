"""
Textarea Renderer
=================
"""

from markupsafe import escape

from pagelayout.core.rendering.base import BaseRenderer, join_attributes


class TextareaRenderer(BaseRenderer):
    """Render a multi-line text field."""

    def render(self) -> str:
        self.require_configured()
        value = self.resolved_value()
        attrs = join_attributes(
            [
                'class="cbl-input"',
                f'rows="{self.field_config.rows}"' if self.field_config.rows else None,
                f'cols="{self.field_config.cols}"' if self.field_config.cols else None,
                self.attr_placeholder(),
                self.attr_title(),
                f'minlength="{self.field_config.minlength}"' if self.field_config.minlength else None,
                f'maxlength="{self.field_config.maxlength}"' if self.field_config.maxlength else None,
                self.attr_readonly(),
                self.attr_disabled(),
                self.attr_required(),
                self.behaviours(),
            ]
        )
        content = "" if value is None else escape(value)
        return f"""<div {self.wrapper_id} class="{self.div_class}"{self.wrapper_visibility}>{self.hint_text()}
  <textarea {self.name_attribute} {self.field_id} {attrs}>{content}</textarea>
  {self.label_html()}
</div>"""
