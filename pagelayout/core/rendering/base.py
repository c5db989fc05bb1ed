"""
Renderer Base
=============

Shared attribute building for field renderers: DOM identity, value
resolution, error display, hints and behaviour wiring.
"""

import json
import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from markupsafe import escape

from pagelayout.config.logging import get_logger
from pagelayout.core.rendering.icon import Icon
from pagelayout.models.schemas import BehaviourKind, BehaviourRule, FieldConfig, PageConfig

logger = get_logger(__name__)

EXTENDED_COLUMN_PREFIX = "extcol_"


class FieldConfigError(ValueError):
    """Exception raised when a field's configuration cannot be rendered."""

    pass


def present_field_as_label(field: str) -> str:
    """Create reasonable label text from a field name."""
    return " ".join(word.capitalize() for word in re.sub(r"_id$", "", str(field)).split("_"))


def join_attributes(attrs: Iterable[Optional[str]]) -> str:
    """Join pre-formatted attributes, dropping empty ones."""
    return " ".join(attr for attr in attrs if attr)


class BaseRenderer(ABC):
    """Abstract base class for all field renderers."""

    def __init__(self) -> None:
        self.field_name: Optional[str] = None
        self.field_config: FieldConfig = FieldConfig()
        self.page_config: Optional[PageConfig] = None
        self.caption: str = ""
        self.logger: Any = logger.bind(renderer=type(self).__name__)

    def configure(self, field_name: str, field_config: FieldConfig, page_config: PageConfig) -> None:
        """
        Bind the renderer to a field.

        Args:
            field_name: Name of the field in the form object
            field_config: Options for the field
            page_config: Page context (name, form object, errors, behaviours)

        Raises:
            FieldConfigError: If the configuration is invalid for this renderer
        """
        self.field_name = field_name
        self.field_config = field_config
        self.page_config = page_config
        self.caption = field_config.caption or present_field_as_label(field_name)
        self.validate()

    def validate(self) -> None:
        """Configure-time checks. Subclasses raise FieldConfigError."""

    @abstractmethod
    def render(self) -> str:
        """Render the field as an HTML fragment."""
        pass

    def fail(self, message: str) -> FieldConfigError:
        """Log a configuration error and build the exception to raise."""
        self.logger.warning("Field configuration rejected", field=self.field_name, error=message)
        return FieldConfigError(message)

    def require_configured(self) -> None:
        """Raise unless ``configure`` has been called."""
        if self.page_config is None or self.field_name is None:
            raise FieldConfigError(f"{type(self).__name__} must be configured before render")

    # DOM identity

    @property
    def id_base(self) -> str:
        """The value for an element's DOM id."""
        return f"{self.page_config.name}_{self.field_name}"

    @property
    def field_id(self) -> str:
        """The element's id attribute."""
        return f'id="{self.id_base}"'

    @property
    def wrapper_id(self) -> str:
        """The field wrapper div's id attribute."""
        return f'id="{self.id_base}_field_wrapper"'

    @property
    def name_base(self) -> str:
        """The value for an element's DOM name."""
        return f"{self.page_config.name}[{self.field_name}]"

    @property
    def name_attribute(self) -> str:
        """The element's name attribute."""
        return f'name="{self.name_base}"'

    @property
    def name_attribute_multi(self) -> str:
        """The element's name attribute with array suffix."""
        return f'name="{self.name_base}[]"'

    @property
    def div_class(self) -> str:
        """The class of the div wrapping label and control."""
        if self.field_errors:
            return "crossbeams-field crossbeams-div-error bg-washed-red"
        return "crossbeams-field"

    @property
    def wrapper_visibility(self) -> str:
        return " hidden" if self.field_config.hide_on_load else ""

    # Values

    def form_object_value(self) -> Any:
        """
        The value of the field extracted from the form object.

        Fields named ``extcol_<name>`` are read from the form object's
        ``extended_columns`` mapping.
        """
        form_object = self.page_config.form_object
        if self.field_name.startswith(EXTENDED_COLUMN_PREFIX):
            extended = form_object.get("extended_columns") or {}
            return extended.get(self.field_name[len(EXTENDED_COLUMN_PREFIX):])
        return form_object.get(self.field_name)

    def override_with_form_value(self, value: Any) -> Any:
        """Prefer a re-submitted form value over the form object's value."""
        form_values = self.page_config.form_values
        if form_values is None or self.field_name not in form_values:
            return value
        return form_values[self.field_name]

    def resolved_value(self) -> Any:
        return self.override_with_form_value(self.form_object_value())

    # Errors and hints

    @property
    def field_errors(self) -> List[str]:
        errors = self.page_config.form_errors
        if not errors:
            return []
        return [message for message in errors.get(self.field_name) or [] if message]

    def error_state(self, newline: bool = True) -> str:
        """Styling for a field in error. Empty if the field is not in error."""
        messages = self.field_errors
        if not messages:
            return ""
        prefix = "<br>" if newline else ""
        text = "; ".join(str(escape(message)) for message in messages)
        return f"<span class='brown crossbeams-form-error'>{prefix}{text}</span>"

    def hint_text(self) -> str:
        """Render hint text associated with the field."""
        if not self.field_config.hint:
            return ""
        return (
            f'\n<div style="display:none" data-cb-hint="{self.id_base}">\n'
            f"  {self.field_config.hint}\n"
            "</div>\n"
        )

    def hint_trigger(self) -> str:
        """Render the icon to be clicked to display hint text."""
        if not self.field_config.hint:
            return ""
        return Icon.render(
            "question",
            css_class="ml1 blue pointer",
            attrs=['title="Click for hint"', f"data-cb-hint-for='{self.id_base}'"],
        )

    def label_html(self, for_id: Optional[str] = None) -> str:
        target = for_id or self.id_base
        return f'<label for="{target}">{self.caption}{self.error_state()}{self.hint_trigger()}</label>'

    # Common attributes

    def attr_placeholder(self) -> Optional[str]:
        if self.field_config.placeholder:
            return f'placeholder="{escape(self.field_config.placeholder)}"'
        return None

    def attr_title(self) -> Optional[str]:
        if self.field_config.title:
            return f'title="{escape(self.field_config.title)}"'
        return None

    def attr_readonly(self) -> Optional[str]:
        return 'readonly="true"' if self.field_config.readonly else None

    def attr_disabled(self) -> Optional[str]:
        return 'disabled="true"' if self.field_config.disabled else None

    def attr_required(self) -> Optional[str]:
        return 'required="true"' if self.field_config.required else None

    # Behaviours

    def behaviours(self) -> Optional[str]:
        """
        Data attributes wiring client-side behaviours for this field.

        Returns:
            Space-separated attributes, or None when no rule targets the field

        Raises:
            FieldConfigError: If two rules of the same kind target the field
        """
        matched = [
            rule
            for element in self.page_config.options.behaviours
            for field, rule in element.items()
            if field == self.field_name
        ]
        if not matched:
            return None

        kinds = [rule.kind for rule in matched]
        if len(kinds) != len(set(kinds)):
            raise self.fail(
                f'Renderer: cannot have more than one of the same behaviour for field "{self.field_name}"'
            )
        return " ".join(self._build_behaviour(rule) for rule in matched)

    def _build_behaviour(self, rule: BehaviourRule) -> str:
        kind = rule.kind
        if kind == BehaviourKind.CHANGE_AFFECTS:
            targets = ",".join(f"{self.page_config.name}_{name}" for name in rule.change_affects)
            return f'data-change-values="{targets}"'
        if kind == BehaviourKind.ENABLE_ON_CHANGE:
            values = ",".join(str(value) for value in rule.enable_on_change)
            return f'data-enable-on-values="{escape(values)}"'
        if kind == BehaviourKind.NOTIFY:
            combined = [
                {
                    "url": notify.url,
                    "param_keys": notify.param_keys,
                    "param_values": {key: str(value) for key, value in notify.param_values.items()},
                }
                for notify in rule.notify
            ]
            return f"data-observe-change='{json_attribute(combined)}'"
        combined = [{"sortable": selected.sortable} for selected in rule.populate_from_selected]
        return f"data-observe-selected='{json_attribute(combined)}'"


def json_attribute(value: Any) -> str:
    """Compact JSON safe for a single-quoted attribute."""
    return json.dumps(value, separators=(",", ":")).replace("'", "&#39;")
