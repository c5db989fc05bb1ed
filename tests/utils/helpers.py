"""
Test Helpers
============

Helper functions for common testing operations.
"""

import re
from typing import Any, Dict, Optional

from pagelayout.core.rendering.field_types import FieldRendererFactory
from pagelayout.models.schemas import FieldConfig, PageConfig, PageOptions


def scrub(html: str) -> str:
    """Normalise rendered HTML so comparisons ignore indentation."""
    return re.sub(r"\n\s*", "\n", html.strip()).strip("\n")


def render_field(
    field_name: str,
    options: Optional[Dict[str, Any]] = None,
    form_object: Optional[Dict[str, Any]] = None,
    page_name: str = "crossbeams",
    **page_kwargs: Any,
) -> str:
    """Render one field through the renderer registry."""
    field_config = FieldConfig(**(options or {}))
    page_config = PageConfig(
        name=page_name,
        form_object=form_object or {},
        options=PageOptions(fields={field_name: field_config}, behaviours=page_kwargs.pop("behaviours", [])),
        **page_kwargs,
    )
    return FieldRendererFactory.create(field_name, field_config, page_config).render()
