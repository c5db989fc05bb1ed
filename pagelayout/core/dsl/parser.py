"""
Page Definition Parser
======================

Loads declarative page definitions (JSON or YAML) into page node trees.
Documents are validated with Cerberus schemas plus a recursive check of
which node types each container accepts.

Example document (YAML)::

    name: user
    fields:
      email: {renderer: email, required: true}
    nodes:
      - type: form
        action: /users
        nodes:
          - type: field
            name: email
"""

from typing import Dict, List, Any, Optional, Tuple
import json
import yaml  # type: ignore[import-untyped]
import time
from abc import ABC, abstractmethod
from cerberus import Validator  # type: ignore[import-untyped]
from pydantic import ValidationError

from pagelayout.config.logging import get_logger
from pagelayout.core.layout.column import COLUMN_CLASSES
from pagelayout.core.layout.form import FORM_METHODS
from pagelayout.core.layout.page import Page
from pagelayout.core.layout.page_node import ContainerNode, LayoutError
from pagelayout.core.rendering.field_types import UnknownFieldTypeError, resolve_field_type
from pagelayout.models.schemas import (
    BehaviourRule,
    FieldConfig,
    LinkBehaviour,
    LinkStyle,
    PageConfig,
    PageOptions,
    ParseResult,
)

logger = get_logger(__name__)

# Node types each container accepts; "page" is the document root.
ALLOWED_CHILDREN: Dict[str, Tuple[str, ...]] = {
    "page": ("section", "form", "row", "fold_up", "text", "grid", "link"),
    "section": ("form", "row", "fold_up", "text", "grid", "link"),
    "fold_up": ("form", "row", "text", "grid", "field"),
    "form": ("row", "field", "text"),
    "row": ("column", "blank_column"),
    "column": ("field", "text", "grid", "link"),
    "blank_column": (),
    "field": (),
    "text": (),
    "grid": (),
    "link": (),
}

# Options each node type accepts besides "type" and "nodes".
NODE_OPTIONS: Dict[str, Tuple[str, ...]] = {
    "section": ("caption", "hide_caption", "show_border", "fit_height"),
    "form": (
        "action",
        "method",
        "remote",
        "multipart",
        "view_only",
        "no_submit",
        "submit_caption",
        "disable_caption",
    ),
    "fold_up": ("caption", "open"),
    "row": (),
    "column": ("size",),
    "blank_column": (),
    "field": ("name", "options"),
    "text": (
        "text",
        "wrapper",
        "wrapper_classes",
        "preformatted",
        "toggle_button",
        "toggle_caption",
        "toggle_element_id",
        "hide_on_load",
        "initially_visible",
    ),
    "grid": ("grid_id", "url", "caption", "height", "fit_height"),
    "link": ("text", "url", "style", "behaviour", "css_class", "grid_id"),
}

REQUIRED_OPTIONS: Dict[str, Tuple[str, ...]] = {
    "field": ("name",),
    "text": ("text",),
    "grid": ("grid_id", "url"),
    "link": ("text", "url"),
}


class PageDefinitionError(Exception):
    """Exception raised when a page definition cannot be loaded."""

    pass


class PageDefinitionValidator:
    """Page definition validation using Cerberus schemas."""

    def __init__(self) -> None:
        self.logger: Any = logger.bind(component="validator")
        self._setup_schemas()

    def _setup_schemas(self) -> None:
        """Setup validation schemas."""
        self.node_schema: Dict[str, Any] = {
            "type": {
                "type": "string",
                "required": True,
                "allowed": [t for t in ALLOWED_CHILDREN if t != "page"],
            },
            "nodes": {"type": "list", "schema": {"type": "dict"}},
            # Containers
            "caption": {"type": "string"},
            "hide_caption": {"type": "boolean"},
            "show_border": {"type": "boolean"},
            "fit_height": {"type": "boolean"},
            "open": {"type": "boolean"},
            "size": {"type": "string", "allowed": list(COLUMN_CLASSES)},
            # Form
            "action": {"type": "string"},
            "method": {"type": "string", "allowed": sorted(FORM_METHODS)},
            "remote": {"type": "boolean"},
            "multipart": {"type": "boolean"},
            "view_only": {"type": "boolean"},
            "no_submit": {"type": "boolean"},
            "submit_caption": {"type": "string"},
            "disable_caption": {"type": "string"},
            # Field
            "name": {"type": "string", "empty": False},
            "options": {"type": "dict"},
            # Text
            "text": {"type": "string"},
            "wrapper": {"type": ["string", "list"], "schema": {"type": "string"}},
            "wrapper_classes": {"type": "string"},
            "preformatted": {"type": "boolean"},
            "toggle_button": {"type": "boolean"},
            "toggle_caption": {"type": "string"},
            "toggle_element_id": {"type": "string"},
            "hide_on_load": {"type": "boolean"},
            "initially_visible": {"type": "boolean"},
            # Grid and link
            "grid_id": {"type": "string"},
            "url": {"type": "string"},
            "height": {"type": "integer", "min": 1},
            "style": {"type": "string", "allowed": [s.value for s in LinkStyle]},
            "behaviour": {"type": "string", "allowed": [b.value for b in LinkBehaviour]},
            "css_class": {"type": "string"},
        }

        self.document_schema: Dict[str, Any] = {
            "name": {"type": "string", "empty": False},
            "fields": {"type": "dict", "valuesrules": {"type": "dict"}, "default": {}},
            "behaviours": {
                "type": "list",
                "schema": {"type": "dict", "valuesrules": {"type": "dict"}},
                "default": [],
            },
            "form_object": {"type": "dict", "nullable": True},
            "form_values": {"type": "dict", "nullable": True},
            "form_errors": {"type": "dict", "nullable": True},
            "nodes": {"type": "list", "required": True, "schema": {"type": "dict"}},
        }

    def validate_document(self, data: Dict[str, Any]) -> Tuple[bool, List[str], List[str]]:
        """
        Validate page definition structure.

        Args:
            data: Document data to validate

        Returns:
            Tuple of (is_valid, errors, warnings)
        """
        validator = Validator(self.document_schema)  # type: ignore[misc]

        is_valid = validator.validate(data)  # type: ignore[misc]
        errors: List[str] = []
        warnings: List[str] = []

        if not is_valid:
            errors.extend(self._format_validation_errors(validator.errors))  # type: ignore[attr-defined]
            return False, errors, warnings

        custom_errors, custom_warnings = self._perform_custom_validations(data)
        errors.extend(custom_errors)
        warnings.extend(custom_warnings)
        self.logger.debug("Page definition validated", error_count=len(errors), warning_count=len(warnings))

        return len(errors) == 0, errors, warnings

    def _format_validation_errors(self, errors: Any, path: str = "") -> List[str]:
        """Format Cerberus validation errors into readable messages."""
        formatted_errors: List[str] = []

        for field, error_info in errors.items():
            current_path = f"{path}.{field}" if path else str(field)

            for error in error_info if isinstance(error_info, list) else [error_info]:
                if isinstance(error, dict):
                    formatted_errors.extend(self._format_validation_errors(error, current_path))
                else:
                    formatted_errors.append(f"{current_path}: {error}")

        return formatted_errors

    def _perform_custom_validations(self, data: Dict[str, Any]) -> Tuple[List[str], List[str]]:
        """Check field configs, behaviour rules and the node hierarchy."""
        errors: List[str] = []
        warnings: List[str] = []

        fields = data.get("fields") or {}
        for name, config in fields.items():
            errors.extend(self._validate_field_config(name, config))

        for i, entry in enumerate(data.get("behaviours") or []):
            for name, rule in entry.items():
                try:
                    BehaviourRule(**rule)
                except ValidationError as e:
                    errors.extend(_pydantic_messages(e, f"behaviours[{i}].{name}"))
                if name not in fields:
                    warnings.append(f"behaviours[{i}]: rule for undeclared field '{name}'")

        for i, node in enumerate(data.get("nodes", [])):
            node_errors, node_warnings = self._validate_node(node, "page", f"nodes[{i}]", fields)
            errors.extend(node_errors)
            warnings.extend(node_warnings)

        return errors, warnings

    def _validate_field_config(self, name: str, config: Dict[str, Any]) -> List[str]:
        errors: List[str] = []
        try:
            resolve_field_type(config.get("renderer"))
        except UnknownFieldTypeError as e:
            errors.append(f"fields.{name}: {e}")
        try:
            FieldConfig(**config)
        except ValidationError as e:
            errors.extend(_pydantic_messages(e, f"fields.{name}"))
        return errors

    def _validate_node(
        self, node: Dict[str, Any], parent_type: str, path: str, fields: Dict[str, Any]
    ) -> Tuple[List[str], List[str]]:
        """Validate a single node and, recursively, its children."""
        errors: List[str] = []
        warnings: List[str] = []

        validator = Validator(self.node_schema)  # type: ignore[misc]
        if not validator.validate(node):  # type: ignore[misc]
            errors.extend(self._format_validation_errors(validator.errors, path))  # type: ignore[attr-defined]
            return errors, warnings

        node_type = node["type"]
        if node_type not in ALLOWED_CHILDREN[parent_type]:
            errors.append(f"{path}: '{node_type}' is not allowed inside '{parent_type}'")

        unknown = [key for key in node if key not in ("type", "nodes") + NODE_OPTIONS[node_type]]
        for key in unknown:
            errors.append(f"{path}: option '{key}' is not valid for '{node_type}'")

        for key in REQUIRED_OPTIONS.get(node_type, ()):
            if not node.get(key):
                errors.append(f"{path}: '{node_type}' requires '{key}'")

        children = node.get("nodes", [])
        if "nodes" in node and not ALLOWED_CHILDREN[node_type]:
            errors.append(f"{path}: '{node_type}' cannot have child nodes")
            return errors, warnings

        if node_type == "field" and node.get("name") and node["name"] not in fields:
            warnings.append(f"{path}: field '{node['name']}' has no configuration; defaults apply")
        if node_type == "field" and node.get("options"):
            merged = {**fields.get(node.get("name"), {}), **node["options"]}
            errors.extend(self._validate_field_config(f"{path}.options", merged))
        if ALLOWED_CHILDREN[node_type] and not children:
            warnings.append(f"{path}: '{node_type}' has no child nodes and will not render")

        for i, child in enumerate(children):
            child_errors, child_warnings = self._validate_node(child, node_type, f"{path}.nodes[{i}]", fields)
            errors.extend(child_errors)
            warnings.extend(child_warnings)

        return errors, warnings


def _pydantic_messages(error: ValidationError, path: str) -> List[str]:
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        prefix = f"{path}.{location}" if location else path
        messages.append(f"{prefix}: {detail['msg']}")
    return messages


def _leaf_options(node: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in node.items() if key not in ("type", "nodes")}


def _build_section(container: ContainerNode, node: Dict[str, Any]) -> None:
    with container.section() as section:  # type: ignore[attr-defined]
        if node.get("caption"):
            section.caption(node["caption"])
        if node.get("hide_caption"):
            section.hide_caption()
        if node.get("show_border"):
            section.show_border()
        if node.get("fit_height"):
            section.fit_height()
        _build_nodes(section, node.get("nodes", []))


def _build_form(container: ContainerNode, node: Dict[str, Any]) -> None:
    with container.form() as form:  # type: ignore[attr-defined]
        if node.get("action"):
            form.action(node["action"])
        if node.get("method"):
            form.method(node["method"])
        if node.get("remote"):
            form.remote()
        if node.get("multipart"):
            form.multipart()
        if node.get("view_only"):
            form.view_only()
        if node.get("no_submit"):
            form.no_submit()
        if node.get("submit_caption") or node.get("disable_caption"):
            form.submit_captions(
                node.get("submit_caption", form.submit_caption), node.get("disable_caption")
            )
        _build_nodes(form, node.get("nodes", []))


def _build_fold_up(container: ContainerNode, node: Dict[str, Any]) -> None:
    with container.fold_up() as fold_up:  # type: ignore[attr-defined]
        if node.get("caption"):
            fold_up.caption(node["caption"])
        if node.get("open"):
            fold_up.open()
        _build_nodes(fold_up, node.get("nodes", []))


def _build_row(container: ContainerNode, node: Dict[str, Any]) -> None:
    with container.row() as row:  # type: ignore[attr-defined]
        _build_nodes(row, node.get("nodes", []))


def _build_column(container: ContainerNode, node: Dict[str, Any]) -> None:
    with container.column(node.get("size", "full")) as column:  # type: ignore[attr-defined]
        _build_nodes(column, node.get("nodes", []))


NODE_BUILDERS = {
    "section": _build_section,
    "form": _build_form,
    "fold_up": _build_fold_up,
    "row": _build_row,
    "column": _build_column,
    "blank_column": lambda container, node: container.blank_column(),
    "field": lambda container, node: container.add_field(node["name"], **node.get("options", {})),
    "text": lambda container, node: container.add_text(**_leaf_options(node)),
    "grid": lambda container, node: container.add_grid(**_leaf_options(node)),
    "link": lambda container, node: container.add_link(**_leaf_options(node)),
}


def _build_nodes(container: ContainerNode, nodes: List[Dict[str, Any]]) -> None:
    for node in nodes:
        NODE_BUILDERS[node["type"]](container, node)


def build_page(
    data: Dict[str, Any],
    form_object: Optional[Any] = None,
    form_values: Optional[Any] = None,
    form_errors: Optional[Dict[str, Any]] = None,
) -> Page:
    """
    Build a page node tree from a validated page definition.

    Args:
        data: Page definition document
        form_object: Overrides the document's ``form_object``
        form_values: Overrides the document's ``form_values``
        form_errors: Overrides the document's ``form_errors``

    Returns:
        The root Page node

    Raises:
        LayoutError: If a node is built with invalid options
        ValueError: If a field config or behaviour rule is invalid
    """
    config_data: Dict[str, Any] = {
        "options": PageOptions(
            fields={name: FieldConfig(**config) for name, config in (data.get("fields") or {}).items()}
        )
    }
    if data.get("name"):
        config_data["name"] = data["name"]

    page = Page(PageConfig(**config_data))
    page.form_object(form_object if form_object is not None else data.get("form_object"))
    page.form_values(form_values if form_values is not None else data.get("form_values"))
    page.form_errors(form_errors if form_errors is not None else data.get("form_errors"))
    page.add_behaviours(data.get("behaviours") or [])
    _build_nodes(page, data.get("nodes", []))
    return page


class BasePageParser(ABC):
    """Abstract base class for page definition parsers."""

    def __init__(self) -> None:
        self.validator = PageDefinitionValidator()

    @abstractmethod
    def load(self, content: str) -> Any:
        """Decode raw content into Python data."""
        pass

    @abstractmethod
    def validate_syntax(self, content: str) -> bool:
        """Validate syntax without building a page."""
        pass

    def parse(
        self,
        content: str,
        form_object: Optional[Any] = None,
        form_values: Optional[Any] = None,
        form_errors: Optional[Dict[str, Any]] = None,
    ) -> ParseResult:
        """
        Parse content into a page node tree.

        Args:
            content: Raw page definition
            form_object: Framework-supplied field values
            form_values: Re-submitted values
            form_errors: Validation errors keyed by field name

        Returns:
            ParseResult containing the page or errors
        """
        start_time = time.time()

        try:
            raw_data = self.load(content)
        except PageDefinitionError as e:
            self.logger.error("Page definition parsing failed", error=str(e))
            return ParseResult(success=False, errors=[str(e)], processing_time=time.time() - start_time)

        if not isinstance(raw_data, dict):
            return ParseResult(
                success=False,
                errors=[f"Page definition must be a dictionary/object, got {type(raw_data).__name__}"],
                processing_time=time.time() - start_time,
            )

        is_valid, errors, warnings = self.validator.validate_document(raw_data)
        if not is_valid:
            self.logger.info("Page definition is invalid", error_count=len(errors))
            return ParseResult(
                success=False, errors=errors, warnings=warnings, processing_time=time.time() - start_time
            )

        try:
            page = build_page(raw_data, form_object, form_values, form_errors)
        except (LayoutError, ValueError) as e:
            error_msg = f"Invalid page definition: {e}"
            self.logger.error("Page build failed", error=error_msg)
            return ParseResult(
                success=False,
                errors=[error_msg],
                warnings=warnings,
                processing_time=time.time() - start_time,
            )
        except Exception as e:
            error_msg = f"Unexpected error building page: {e}"
            self.logger.error("Page build failed", error=error_msg)
            return ParseResult(
                success=False,
                errors=[error_msg],
                warnings=warnings,
                processing_time=time.time() - start_time,
            )

        self.logger.info("Page definition loaded", nodes=len(page.nodes), warnings=len(warnings))
        return ParseResult(
            success=True, page=page, warnings=warnings, processing_time=time.time() - start_time
        )


class JSONPageParser(BasePageParser):
    """JSON page definition parser."""

    def __init__(self) -> None:
        super().__init__()
        self.logger: Any = logger.bind(parser="json")

    def load(self, content: str) -> Any:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise PageDefinitionError(
                f"Invalid JSON syntax at line {e.lineno}, column {e.colno}: {e.msg}"
            ) from e

    def validate_syntax(self, content: str) -> bool:
        try:
            json.loads(content)
            return True
        except json.JSONDecodeError:
            return False


class YAMLPageParser(BasePageParser):
    """YAML page definition parser."""

    def __init__(self) -> None:
        super().__init__()
        self.logger: Any = logger.bind(parser="yaml")

    def load(self, content: str) -> Any:
        try:
            raw_data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise PageDefinitionError(f"Invalid YAML syntax: {e}") from e
        if raw_data is None:
            raise PageDefinitionError("Empty YAML document")
        return raw_data

    def validate_syntax(self, content: str) -> bool:
        try:
            yaml.safe_load(content)
            return True
        except yaml.YAMLError:
            return False


class PageParserFactory:
    """Factory for creating page definition parsers based on content type."""

    _parsers = {
        "json": JSONPageParser,
        "yaml": YAMLPageParser,
    }

    @classmethod
    def create_parser(cls, parser_type: str) -> BasePageParser:
        """
        Create a parser instance.

        Args:
            parser_type: Type of parser ("json", "yaml")

        Returns:
            Parser instance

        Raises:
            ValueError: If parser type is not supported
        """
        if parser_type not in cls._parsers:
            raise ValueError(f"Unsupported parser type: {parser_type}")

        return cls._parsers[parser_type]()

    @classmethod
    def detect_parser_type(cls, content: str) -> str:
        """
        Detect parser type from content.

        Args:
            content: Raw page definition

        Returns:
            Detected parser type
        """
        content = content.strip()
        if content.startswith(("{", "[")):
            return "json"
        elif content.startswith(("---", "- ")) or "\n-" in content[:100]:
            return "yaml"
        else:
            try:
                json.loads(content)
                return "json"
            except json.JSONDecodeError:
                return "yaml"


def parse_page_definition(
    content: str,
    parser_type: Optional[str] = None,
    form_object: Optional[Any] = None,
    form_values: Optional[Any] = None,
    form_errors: Optional[Dict[str, Any]] = None,
) -> ParseResult:
    """
    Load a page definition into a page node tree.

    Args:
        content: Raw page definition
        parser_type: Optional parser type override
        form_object: Framework-supplied field values
        form_values: Re-submitted values overriding the form object
        form_errors: Validation errors keyed by field name

    Returns:
        ParseResult containing the root Page or errors
    """
    if not content or not content.strip():
        return ParseResult(success=False, errors=["Empty page definition provided"], processing_time=0.0)

    if not parser_type:
        parser_type = PageParserFactory.detect_parser_type(content)

    try:
        parser = PageParserFactory.create_parser(parser_type)
    except ValueError as e:
        return ParseResult(success=False, errors=[str(e)], processing_time=0.0)
    return parser.parse(content, form_object, form_values, form_errors)


def validate_page_syntax(content: str, parser_type: Optional[str] = None) -> bool:
    """
    Validate page definition syntax without building a page.

    Args:
        content: Raw page definition
        parser_type: Optional parser type override

    Returns:
        True if syntax is valid, False otherwise
    """
    if not content or not content.strip():
        return False

    if not parser_type:
        parser_type = PageParserFactory.detect_parser_type(content)

    try:
        parser = PageParserFactory.create_parser(parser_type)
        return parser.validate_syntax(content)
    except ValueError:
        return False
