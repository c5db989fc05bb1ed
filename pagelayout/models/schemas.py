"""
Pydantic Models and Schemas
===========================

Core data models for field configuration, page configuration, behaviour rules
and page-definition parse results.
"""

from typing import Optional, List, Dict, Any, Union
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pagelayout.config.settings import get_settings


# Enums
class FieldType(str, Enum):
    """Declared field types, each mapped to one renderer."""
    CHECKBOX = "checkbox"
    DATE = "date"
    DATETIME = "datetime"
    EMAIL = "email"
    FILE = "file"
    HIDDEN = "hidden"
    INTEGER = "integer"
    INPUT = "input"
    LABEL = "label"
    LIST = "list"
    LOOKUP = "lookup"
    MULTI = "multi"
    NUMBER = "number"
    NUMERIC = "numeric"
    SELECT = "select"
    TEXT = "text"
    TEXTAREA = "textarea"
    TIME = "time"
    URL = "url"


class PatternPreset(str, Enum):
    """Named input patterns with a built-in regex and explanation."""
    NO_SPACES = "no_spaces"
    VALID_FILENAME = "valid_filename"
    LOWERCASE_UNDERSCORE = "lowercase_underscore"
    ALPHANUMERIC = "alphanumeric"
    IPV4_ADDRESS = "ipv4_address"


class BehaviourKind(str, Enum):
    """Client-side effect kinds a behaviour rule can carry."""
    CHANGE_AFFECTS = "change_affects"
    ENABLE_ON_CHANGE = "enable_on_change"
    NOTIFY = "notify"
    POPULATE_FROM_SELECTED = "populate_from_selected"


class LinkStyle(str, Enum):
    """Visual styles of a link node."""
    LINK = "link"
    BUTTON = "button"
    BACK_BUTTON = "back_button"


class LinkBehaviour(str, Enum):
    """Interaction behaviours of a link node."""
    DIRECT = "direct"
    POPUP = "popup"
    REPLACE_DIALOG = "replace_dialog"


class TextWrapper(str, Enum):
    """Elements a text node can be wrapped in."""
    NONE = "none"
    P = "p"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    I = "i"  # noqa: E741
    EM = "em"
    B = "b"
    STRONG = "strong"


# Behaviour Models
class NotifyRule(BaseModel):
    """Notify a URL when the observed field changes."""
    url: str = Field(..., description="URL called on change")
    param_keys: List[str] = Field(default_factory=list, description="Field names sent as params")
    param_values: Dict[str, Any] = Field(default_factory=dict, description="Fixed params")


class SelectedRule(BaseModel):
    """Populate the field from the items selected in a sortable list."""
    sortable: str = Field(..., description="DOM id of the sortable list")


class BehaviourRule(BaseModel):
    """A single client-side effect attached to a field."""
    change_affects: Optional[List[str]] = Field(None, description="Dependent field names")
    enable_on_change: Optional[List[Any]] = Field(None, description="Values that enable the field")
    notify: Optional[List[NotifyRule]] = Field(None, description="URLs to notify on change")
    populate_from_selected: Optional[List[SelectedRule]] = Field(
        None, description="Sortable lists feeding the field"
    )

    @field_validator("change_affects", mode="before")
    @classmethod
    def split_change_affects(cls, v: Any) -> Any:
        """Accept a semicolon-separated string of field names."""
        if isinstance(v, str):
            return [name for name in v.split(";") if name]
        return v

    @model_validator(mode="after")
    def check_single_effect(self) -> "BehaviourRule":
        """A rule carries exactly one effect kind."""
        present = [kind for kind in BehaviourKind if getattr(self, kind.value) is not None]
        if len(present) != 1:
            raise ValueError(
                f"A behaviour rule must have exactly one of: {', '.join(k.value for k in BehaviourKind)}"
            )
        return self

    @property
    def kind(self) -> BehaviourKind:
        """The effect kind of this rule."""
        return next(kind for kind in BehaviourKind if getattr(self, kind.value) is not None)


# Field Models
class FieldConfig(BaseModel):
    """Options controlling how a single field renders."""
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    renderer: Optional[str] = Field(None, description="Field type tag selecting the renderer")
    subtype: Optional[str] = Field(None, description="Input type refinement")
    caption: Optional[str] = Field(None, description="Label text")
    placeholder: Optional[str] = None
    title: Optional[str] = Field(None, description="Tooltip; overrides any pattern message")
    hint: Optional[str] = Field(None, description="Hint text shown on demand")

    # Validation
    pattern: Optional[Any] = Field(None, description="Preset name, regex string or re.Pattern")
    pattern_msg: Optional[str] = Field(None, description="Explanation of the pattern")
    minvalue: Optional[Any] = None
    maxvalue: Optional[Any] = None
    minlength: Optional[int] = None
    maxlength: Optional[int] = None
    required: bool = False
    readonly: bool = False
    disabled: bool = False

    # Behaviour flags
    autofocus: bool = False
    force_uppercase: bool = False
    force_lowercase: bool = False
    accept: Optional[str] = Field(None, description="File type filter for file inputs")
    datalist: List[Any] = Field(default_factory=list, description="Suggested values")
    copy_to_clipboard: bool = False

    # Visibility
    hide_on_load: bool = False
    invisible: bool = False

    # Datetime
    default_hour: Optional[int] = None
    default_minute: Optional[int] = None
    minvalue_date: Optional[str] = None
    maxvalue_date: Optional[str] = None
    minvalue_time: Optional[str] = None
    maxvalue_time: Optional[str] = None

    # Select and multi
    options: Union[List[Any], Dict[str, List[Any]]] = Field(default_factory=list)
    selected: Optional[Any] = None
    prompt: Optional[Union[bool, str]] = None
    disabled_options: List[Any] = Field(default_factory=list)

    # Textarea
    rows: Optional[int] = None
    cols: Optional[int] = None

    # Label
    with_value: Optional[Any] = None
    as_boolean: bool = False

    # List
    items: List[Any] = Field(default_factory=list)

    # Lookup
    lookup_name: Optional[str] = None
    lookup_key: Optional[str] = None
    param_keys: List[str] = Field(default_factory=list)
    param_values: Dict[str, Any] = Field(default_factory=dict)
    hidden_fields: List[str] = Field(default_factory=list)
    show_field: Optional[str] = None

    @model_validator(mode="after")
    def check_single_case(self) -> "FieldConfig":
        """A field is forced to one case at most."""
        if self.force_uppercase and self.force_lowercase:
            raise ValueError("force_uppercase and force_lowercase cannot both be set")
        return self

    def merged(self, overrides: Dict[str, Any]) -> "FieldConfig":
        """Return a new config with ``overrides`` applied."""
        if not overrides:
            return self
        return FieldConfig(**{**self.model_dump(exclude_unset=True), **overrides})


# Page Models
class PageOptions(BaseModel):
    """Field definitions and behaviour rules shared by a page."""
    fields: Dict[str, FieldConfig] = Field(default_factory=dict, description="Field configs by name")
    behaviours: List[Dict[str, BehaviourRule]] = Field(
        default_factory=list, description="Behaviour rules keyed by field name"
    )


class PageConfig(BaseModel):
    """Per-page context shared by every node and renderer of a page."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(
        default_factory=lambda: get_settings().default_page_name,
        description="DOM id/name prefix",
    )
    form_object: Dict[str, Any] = Field(default_factory=dict, description="Current field values")
    form_values: Optional[Dict[str, Any]] = Field(
        None, description="Re-submitted values overriding the form object"
    )
    form_errors: Optional[Dict[str, List[Optional[str]]]] = Field(
        None, description="Error messages by field name"
    )
    options: PageOptions = Field(default_factory=PageOptions)

    def field_config(self, name: str) -> FieldConfig:
        """Configured options for ``name`` (empty when not declared)."""
        return self.options.fields.get(name) or FieldConfig()


# Parsing Results
class ParseResult(BaseModel):
    """Result of loading a page definition."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool = Field(..., description="Whether loading succeeded")
    page: Optional[Any] = Field(None, description="Root page node")
    errors: List[str] = Field(default_factory=list, description="Loading errors")
    warnings: List[str] = Field(default_factory=list, description="Loading warnings")
    processing_time: Optional[float] = Field(None, description="Loading time in seconds")
