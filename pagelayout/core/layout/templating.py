"""
Template Environment
====================

Jinja2 environment used by container nodes to wrap their rendered children
in structural HTML.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import jinja2
from markupsafe import Markup

from pagelayout.config.logging import get_logger
from pagelayout.core.rendering.icon import Icon

logger = get_logger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderError(Exception):
    """Exception raised when a node template fails to render."""

    pass


def dom_id(value: str) -> str:
    """Turn a caption into a DOM id: lower-cased, spaces replaced by underscores."""
    return value.lower().replace(" ", "_")


def _register_template_functions(env: jinja2.Environment) -> None:
    """Register custom Jinja2 functions and filters."""

    def icon(name: str, css_class: Optional[str] = None) -> Markup:
        """Render a named icon."""
        return Markup(Icon.render(name, css_class=css_class))

    env.globals["icon"] = icon


@lru_cache(maxsize=1)
def get_environment() -> jinja2.Environment:
    """The shared template environment; created once, read-only afterwards."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=jinja2.select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    _register_template_functions(env)
    return env


def render_template(template_name: str, **context: Any) -> str:
    """
    Render a node template.

    Args:
        template_name: Template filename under ``templates/``
        **context: Template variables; pass pre-rendered HTML as Markup

    Returns:
        Rendered HTML

    Raises:
        TemplateRenderError: If the template cannot be loaded or rendered
    """
    try:
        template = get_environment().get_template(template_name)
        return template.render(**context)
    except jinja2.TemplateError as e:
        error_msg = f"Template rendering failed: {e}"
        logger.error("Node rendering failed", template=template_name, error=error_msg)
        raise TemplateRenderError(error_msg) from e
