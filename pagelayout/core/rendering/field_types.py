"""
Field Types
===========

Rules for which renderer to use for each field type, and a factory that
builds configured renderers.
"""

from typing import Any, Dict, List, Optional, Type

from pagelayout.config.logging import get_logger
from pagelayout.core.rendering.base import BaseRenderer
from pagelayout.core.rendering.checkbox import CheckboxRenderer
from pagelayout.core.rendering.datetime import DatetimeRenderer
from pagelayout.core.rendering.hidden import HiddenRenderer
from pagelayout.core.rendering.input import InputRenderer
from pagelayout.core.rendering.label import LabelRenderer
from pagelayout.core.rendering.list import ListRenderer
from pagelayout.core.rendering.lookup import LookupRenderer
from pagelayout.core.rendering.multi import MultiRenderer
from pagelayout.core.rendering.select import SelectRenderer
from pagelayout.core.rendering.textarea import TextareaRenderer
from pagelayout.models.schemas import FieldConfig, FieldType, PageConfig

logger = get_logger(__name__)


class UnknownFieldTypeError(ValueError):
    """Exception raised when a field declares a type with no renderer."""

    pass


BUILT_IN_RENDERERS: Dict[FieldType, Type[BaseRenderer]] = {
    FieldType.CHECKBOX: CheckboxRenderer,
    FieldType.DATE: InputRenderer,
    FieldType.DATETIME: DatetimeRenderer,
    FieldType.EMAIL: InputRenderer,
    FieldType.FILE: InputRenderer,
    FieldType.HIDDEN: HiddenRenderer,
    FieldType.INTEGER: InputRenderer,
    FieldType.INPUT: InputRenderer,
    FieldType.LABEL: LabelRenderer,
    FieldType.LIST: ListRenderer,
    FieldType.LOOKUP: LookupRenderer,
    FieldType.MULTI: MultiRenderer,
    FieldType.NUMBER: InputRenderer,
    FieldType.NUMERIC: InputRenderer,
    FieldType.SELECT: SelectRenderer,
    FieldType.TEXT: InputRenderer,
    FieldType.TEXTAREA: TextareaRenderer,
    FieldType.TIME: InputRenderer,
    FieldType.URL: InputRenderer,
}


def resolve_field_type(tag: Optional[Any]) -> FieldType:
    """
    Resolve a declared field type tag.

    Args:
        tag: Field type tag; None means a plain input

    Returns:
        The matching FieldType

    Raises:
        UnknownFieldTypeError: If the tag names no known field type
    """
    if tag is None:
        return FieldType.INPUT
    try:
        return FieldType(tag)
    except ValueError:
        raise UnknownFieldTypeError(f"Unknown field type: {tag}") from None


class FieldRendererFactory:
    """Factory for creating configured field renderers."""

    _renderers = BUILT_IN_RENDERERS

    @classmethod
    def renderer_class(cls, tag: Optional[Any]) -> Type[BaseRenderer]:
        """The renderer class responsible for a field type tag."""
        return cls._renderers[resolve_field_type(tag)]

    @classmethod
    def create(cls, field_name: str, field_config: FieldConfig, page_config: PageConfig) -> BaseRenderer:
        """
        Create a renderer bound to a field.

        Args:
            field_name: Name of the field
            field_config: Options for the field
            page_config: Page context

        Returns:
            A configured renderer, ready to render

        Raises:
            UnknownFieldTypeError: If the field's renderer tag is unknown
        """
        renderer_class = cls.renderer_class(field_config.renderer)
        logger.debug(
            "Dispatching field renderer",
            field=field_name,
            field_type=field_config.renderer,
            renderer=renderer_class.__name__,
        )
        renderer = renderer_class()
        renderer.configure(field_name, field_config, page_config)
        return renderer


def get_supported_field_types() -> List[str]:
    """
    Get list of supported field types.

    Returns:
        List of supported field type strings
    """
    return [field_type.value for field_type in BUILT_IN_RENDERERS]
