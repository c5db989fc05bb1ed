"""
Select Renderer
===============

Render a ``<select>`` from a list of values, ``(label, value)`` pairs, or a
mapping of option groups.
"""

from typing import Any, Iterable, List, Optional, Tuple

from markupsafe import escape

from pagelayout.config.settings import get_settings
from pagelayout.core.rendering.base import BaseRenderer, FieldConfigError, join_attributes


def option_pair(option: Any) -> Tuple[Any, Any]:
    """Split an option into (label, value)."""
    if isinstance(option, (list, tuple)):
        if len(option) != 2:
            raise FieldConfigError(f"Select option must be a value or a (label, value) pair: {option!r}")
        return option[0], option[1]
    return option, option


class SelectRenderer(BaseRenderer):
    """Render a single-choice select."""

    def render(self) -> str:
        self.require_configured()
        attrs = join_attributes(self._attr_list())
        return f"""<div {self.wrapper_id} class="{self.div_class}"{self.wrapper_visibility}>{self.hint_text()}
  <select {self._name()} {self.field_id} {attrs}>
{self.build_options()}
  </select>
  {self.label_html()}
</div>"""

    def _name(self) -> str:
        return self.name_attribute

    def _attr_list(self) -> List[Optional[str]]:
        return [
            'class="cbl-input"',
            self.attr_disabled(),
            self.attr_required(),
            self._attr_autofocus(),
            self.behaviours(),
        ]

    def _attr_autofocus(self) -> Optional[str]:
        return "autofocus" if self.field_config.autofocus else None

    def selected_values(self) -> List[str]:
        """Values to mark as selected, as strings."""
        value = self.resolved_value()
        if value is None:
            value = self.field_config.selected
        if value is None:
            return []
        return [str(value)]

    def build_options(self) -> str:
        lines: List[str] = []
        prompt = self._prompt()
        if prompt:
            lines.append(f'<option value="">{escape(prompt)}</option>')

        options = self.field_config.options
        if isinstance(options, dict):
            for group, group_options in options.items():
                lines.append(f'<optgroup label="{escape(group)}">')
                lines.extend(self._option_tags(group_options))
                lines.append("</optgroup>")
        else:
            lines.extend(self._option_tags(options))
        return "\n".join(lines)

    def _option_tags(self, options: Iterable[Any]) -> List[str]:
        selected = set(self.selected_values())
        disabled = {str(value) for value in self.field_config.disabled_options}
        tags: List[str] = []
        for option in options:
            label, value = option_pair(option)
            markers = ""
            if str(value) in selected:
                markers += " selected"
            if str(value) in disabled:
                markers += " disabled"
            tags.append(f'<option value="{escape(value)}"{markers}>{escape(label)}</option>')
        return tags

    def _prompt(self) -> Optional[str]:
        prompt = self.field_config.prompt
        if prompt is True:
            return get_settings().select_prompt
        return prompt or None
