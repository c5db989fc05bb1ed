"""
Datetime Renderer
=================

Render a date-time as separate date and time controls plus a hidden input
carrying the combined ISO-8601 value that is actually submitted.
"""

from datetime import date, datetime
from typing import Any, List, Optional

from markupsafe import escape

from pagelayout.core.rendering.base import BaseRenderer, join_attributes

COMBINED_FORMAT = "%Y-%m-%dT%H:%M"


class DatetimeRenderer(BaseRenderer):
    """Render a date time as separate date and time controls."""

    def validate(self) -> None:
        hour = self.field_config.default_hour
        minute = self.field_config.default_minute
        if hour is not None and not 0 <= hour <= 23:
            raise self.fail("Default hour must be a number from 0 to 23.")
        if minute is not None and not 0 <= minute <= 59:
            raise self.fail("Default minute must be a number from 0 to 59.")

    def render(self) -> str:
        self.require_configured()
        value = self.value()
        has_time = isinstance(value, datetime)

        date_portion = value.strftime("%Y-%m-%d") if value is not None else ""
        time_portion = value.strftime("%H:%M") if has_time else self.default_time_string()
        combined = self._combined(value)

        return f"""<div {self.wrapper_id} class="{self.div_class}"{self.wrapper_visibility}>{self.hint_text()}
  <input type="date" value="{escape(date_portion)}" name="{self._part_name("date")}" id="{self.id_base}_date" data-datetime="date" {join_attributes(self._attr_list("date"))}>
  <input type="time" value="{escape(time_portion)}" name="{self._part_name("time")}" id="{self.id_base}_time" data-datetime="time" {join_attributes(self._attr_list("time"))}>
  <input type="hidden" value="{escape(combined)}" {self.name_attribute} {self.field_id}>
  {self.label_html(f"{self.id_base}_date")}
</div>"""

    def value(self) -> Optional[date]:
        """
        The bound value as a date or datetime.

        Strings are parsed as ISO-8601; an empty string means no value.
        """
        value = self.resolved_value()
        if isinstance(value, str):
            if not value.strip():
                return None
            try:
                return date.fromisoformat(value.strip())
            except ValueError:
                return datetime.fromisoformat(value.strip())
        return value

    def default_time_string(self) -> str:
        """Time seeded from default_hour/default_minute, or empty."""
        if self.field_config.default_hour is None:
            return ""
        return f"{self.field_config.default_hour:02d}:{self.field_config.default_minute or 0:02d}"

    def _part_name(self, part: str) -> str:
        return f"{self.page_config.name}[{self.field_name}_{part}]"

    def _combined(self, value: Any) -> str:
        if value is None:
            return ""
        if not isinstance(value, datetime):
            value = datetime.combine(value, datetime.min.time())
        return value.strftime(COMBINED_FORMAT)

    def _attr_list(self, part: str) -> List[Optional[str]]:
        return [
            'class="cbl-input"',
            self.attr_placeholder(),
            self.attr_title(),
            self._attr_bound("min", getattr(self.field_config, f"minvalue_{part}")),
            self._attr_bound("max", getattr(self.field_config, f"maxvalue_{part}")),
            self.attr_readonly(),
            self.attr_disabled(),
            self.attr_required(),
            self.behaviours(),
        ]

    @staticmethod
    def _attr_bound(attribute: str, value: Optional[str]) -> Optional[str]:
        return f'{attribute}="{escape(value)}"' if value else None
