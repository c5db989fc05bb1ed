"""
Lookup Renderer
===============

Render a button that opens a lookup dialog. The client script reads the
lookup parameters from data attributes and fills the hidden fields.
"""

from markupsafe import escape

from pagelayout.core.rendering.base import BaseRenderer, json_attribute, join_attributes
from pagelayout.core.rendering.icon import Icon


class LookupRenderer(BaseRenderer):
    """Render a lookup trigger with the hidden fields it populates."""

    def validate(self) -> None:
        if not self.field_config.lookup_name or not self.field_config.lookup_key:
            raise self.fail(f'Lookup field "{self.field_name}" requires lookup_name and lookup_key')

    def render(self) -> str:
        self.require_configured()
        config = self.field_config
        param_values = {key: str(value) for key, value in config.param_values.items()}
        attrs = join_attributes(
            [
                f'data-lookup-name="{escape(config.lookup_name)}"',
                f'data-lookup-key="{escape(config.lookup_key)}"',
                f"data-param-keys='{json_attribute(config.param_keys)}'",
                f"data-param-values='{json_attribute(param_values)}'",
                self.attr_disabled(),
            ]
        )
        hidden = "\n".join(
            f'  <input type="hidden" name="{self.page_config.name}[{name}]" '
            f'id="{self.page_config.name}_{name}" value="{escape(self._value_of(name))}">'
            for name in config.hidden_fields
        )
        show = ""
        if config.show_field:
            show = (
                f'\n  <input type="text" readonly="true" class="cbl-input" '
                f'id="{self.page_config.name}_{config.show_field}" '
                f'value="{escape(self._value_of(config.show_field))}">'
            )
        return f"""<div {self.wrapper_id} class="{self.div_class}"{self.wrapper_visibility}>{self.hint_text()}
  <button type="button" class="cbl-lookup" {self.field_id} {attrs}>{Icon.render("search")} {self.caption}</button>
{hidden}{show}
  <label>{self.error_state(newline=False)}{self.hint_trigger()}</label>
</div>"""

    def _value_of(self, name: str) -> str:
        value = self.page_config.form_object.get(name)
        return "" if value is None else str(value)
