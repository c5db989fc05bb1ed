"""
Input Renderer
==============

Render a single ``<input>`` control. The HTML input type is dispatched from
the field's ``subtype`` (or ``renderer``) tag.
"""

import re
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

from markupsafe import escape

from pagelayout.core.rendering.base import BaseRenderer, join_attributes
from pagelayout.core.rendering.icon import Icon
from pagelayout.models.schemas import PatternPreset

NUMBER_SUBTYPES = {"integer", "numeric", "number"}
DATE_SUBTYPES = {"date", "month", "time"}
PASSTHROUGH_SUBTYPES = {"email", "url", "password", "file"}

RANGE_INPUT_TYPES = {"date", "month", "week", "time", "number", "range"}
LENGTH_INPUT_TYPES = {"text", "search", "url", "tel", "email", "password"}

DATE_FORMATS = {
    "date": "%Y-%m-%d",
    "month": "%Y-%m",
    "time": "%H:%M",
}

PATTERN_REGEX = {
    PatternPreset.NO_SPACES: r"[^\s]+",
    PatternPreset.VALID_FILENAME: r"[^\s\/\\*?:&amp;&quot;<>\|]+",
    PatternPreset.LOWERCASE_UNDERSCORE: r"[a-z_]*",
    PatternPreset.ALPHANUMERIC: r"[a-zA-Z0-9]*",
    PatternPreset.IPV4_ADDRESS: r"(?:(25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])(\.(?!$)|$)){4}",
}

PATTERN_TITLES = {
    PatternPreset.NO_SPACES: "no spaces allowed",
    PatternPreset.VALID_FILENAME: (
        "no spaces, asterisks, question marks, greater-than or less-than signs, "
        "colons, pipes, quotes, ampersands or slashes allowed"
    ),
    PatternPreset.LOWERCASE_UNDERSCORE: "only alphabetic characters and underscore (_) allowed",
    PatternPreset.ALPHANUMERIC: "only alphanumeric characters allowed (a-z and 0-9)",
    PatternPreset.IPV4_ADDRESS: "must be a valid IP v4 address",
}


def _date_getter(fmt: str) -> Callable[[Any], str]:
    def getter(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return value.strftime(fmt)

    return getter


DATE_VALUE_GETTERS: Dict[str, Callable[[Any], str]] = {
    subtype: _date_getter(fmt) for subtype, fmt in DATE_FORMATS.items()
}


def pattern_preset(pattern: Any) -> Optional[PatternPreset]:
    """The preset named by ``pattern``, if any."""
    if isinstance(pattern, PatternPreset):
        return pattern
    if isinstance(pattern, str):
        try:
            return PatternPreset(pattern)
        except ValueError:
            return None
    return None


def strip_anchors(source: str) -> str:
    """Remove regex delimiters and anchors; HTML patterns are implicitly anchored."""
    if len(source) > 1 and source.startswith("/") and source.endswith("/"):
        source = source[1:-1]
    if source.startswith("^"):
        source = source[1:]
    if source.endswith("$") and not source.endswith("\\$"):
        source = source[:-1]
    return source


class InputRenderer(BaseRenderer):
    """Render an input field."""

    def render(self) -> str:
        self.require_configured()
        datalist = self._build_datalist()
        attrs = join_attributes(self._attr_list(datalist is not None))
        value = escape(self._value())

        return f"""<div {self.wrapper_id} class="{self.div_class}"{self.wrapper_visibility}>{self.hint_text()}{self._copy_prefix()}
  <input type="{self.input_type}" value="{value}" {self.name_attribute} {self.field_id} {attrs}>{self._copy_suffix()}
  {self.label_html()}
  {datalist or ''}
</div>"""

    @property
    def subtype(self) -> Optional[str]:
        return self.field_config.subtype or self.field_config.renderer

    @property
    def input_type(self) -> str:
        """The HTML type attribute for this field's subtype."""
        subtype = self.subtype
        if subtype in NUMBER_SUBTYPES:
            return "number"
        if subtype in PASSTHROUGH_SUBTYPES or subtype in DATE_SUBTYPES:
            return subtype
        return "text"

    def _value(self) -> Any:
        value = self.resolved_value()
        if isinstance(value, Decimal):
            return format(value, "f")
        getter = DATE_VALUE_GETTERS.get(self.subtype)
        if getter is not None:
            return getter(value)
        if isinstance(value, (datetime, date, time)):
            return value.isoformat()
        return "" if value is None else value

    def _copy_prefix(self) -> str:
        return '<div class="cbl-copy-wrapper">' if self.field_config.copy_to_clipboard else ""

    def _copy_suffix(self) -> str:
        if not self.field_config.copy_to_clipboard:
            return ""
        icon = Icon.render("copy", attrs=[f"id='{self.id_base}_clip_i'", 'data-clipboard="copy"'])
        return (
            f'<button type="button" id="{self.id_base}_clip" class="cbl-clipcopy" '
            f'data-clipboard="copy" title="Copy to clipboard">\n  {icon}\n  </button></div>'
        )

    def _build_datalist(self) -> Optional[str]:
        if not self.field_config.datalist:
            return None
        options = "\n".join(f'<option value="{escape(opt)}">' for opt in self.field_config.datalist)
        return f'<datalist id="{self.id_base}_listing">\n{options}\n</datalist>'

    # Pattern

    def pattern_title(self) -> Optional[str]:
        """The tooltip explaining the pattern: explicit message, else the preset's."""
        if self.field_config.pattern_msg:
            return self.field_config.pattern_msg
        preset = pattern_preset(self.field_config.pattern)
        return PATTERN_TITLES[preset] if preset else None

    def _pattern_source(self) -> Optional[str]:
        pattern = self.field_config.pattern
        if pattern is None:
            return None
        preset = pattern_preset(pattern)
        if preset is not None:
            return PATTERN_REGEX[preset]
        if isinstance(pattern, re.Pattern):
            return str(escape(strip_anchors(pattern.pattern)))
        return str(escape(strip_anchors(str(pattern))))

    # Attributes

    def _attr_list(self, has_datalist: bool) -> List[Optional[str]]:
        return [
            self._attr_class(),
            self.attr_placeholder(),
            self._attr_title(),
            self._attr_pattern(),
            self._attr_range("minvalue", "min"),
            self._attr_range("maxvalue", "max"),
            self._attr_length("minlength"),
            self._attr_length("maxlength"),
            self.attr_readonly(),
            self.attr_disabled(),
            self.attr_required(),
            self._attr_step(),
            self._attr_case(),
            self._attr_accept(),
            self._attr_autofocus(),
            self.behaviours(),
            f'list="{self.id_base}_listing"' if has_datalist else None,
        ]

    def _attr_class(self) -> str:
        classes = ["cbl-input"]
        if self.field_config.force_uppercase:
            classes.append("cbl-to-upper")
        if self.field_config.force_lowercase:
            classes.append("cbl-to-lower")
        return f'class="{" ".join(classes)}"'

    def _attr_title(self) -> Optional[str]:
        if self.field_config.title:
            return self.attr_title()
        title = self.pattern_title()
        return f'title="{escape(title)}"' if title else None

    def _attr_pattern(self) -> Optional[str]:
        source = self._pattern_source()
        return f'pattern="{source}"' if source is not None else None

    def _attr_range(self, option: str, attribute: str) -> Optional[str]:
        value = getattr(self.field_config, option)
        if value is None:
            return None
        if self.input_type not in RANGE_INPUT_TYPES:
            raise self.fail(f"Input: {option} is not applicable for type {self.input_type}")
        return f'{attribute}="{escape(value)}"'

    def _attr_length(self, option: str) -> Optional[str]:
        value = getattr(self.field_config, option)
        if value is None:
            return None
        if self.input_type not in LENGTH_INPUT_TYPES:
            raise self.fail(f"Input: {option} is not applicable for type {self.input_type}")
        return f'{option}="{value}"'

    def _attr_step(self) -> Optional[str]:
        return 'step="any"' if self.subtype == "numeric" else None

    def _attr_case(self) -> Optional[str]:
        if self.field_config.force_uppercase:
            return 'onblur="this.value = this.value.toUpperCase()"'
        if self.field_config.force_lowercase:
            return 'onblur="this.value = this.value.toLowerCase()"'
        return None

    def _attr_accept(self) -> Optional[str]:
        return f'accept="{escape(self.field_config.accept)}"' if self.field_config.accept else None

    def _attr_autofocus(self) -> Optional[str]:
        return "autofocus" if self.field_config.autofocus else None
