"""
Form Node
=========

An HTML form. Forms are the nodes that emit the CSRF field, so they
implement the CSRF-injection capability.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from markupsafe import Markup

from pagelayout.config.logging import get_logger
from pagelayout.config.settings import get_settings
from pagelayout.core.layout.field import FieldBuilderMixin
from pagelayout.core.layout.page_node import ContainerNode, LayoutError, SupportsCsrfInjection
from pagelayout.core.layout.row import RowBuilderMixin
from pagelayout.core.layout.templating import render_template
from pagelayout.core.layout.text import TextBuilderMixin
from pagelayout.models.schemas import PageConfig

logger = get_logger(__name__)

FORM_METHODS = {"create", "update"}


class Form(FieldBuilderMixin, RowBuilderMixin, TextBuilderMixin, SupportsCsrfInjection, ContainerNode):
    """A form node."""

    def __init__(self, page_config: PageConfig, sequence: int = 1) -> None:
        super().__init__(page_config, sequence)
        settings = get_settings()
        self.form_action: Optional[str] = None
        self.form_method = "create"
        self.remote_form = False
        self.multipart_form = False
        self.view_only_form = False
        self.show_submit = True
        self.submit_caption = settings.submit_caption
        self.disable_caption = settings.submit_disable_caption
        self.csrf_tag: Optional[str] = None

    def action(self, url: str) -> None:
        self.form_action = url

    def method(self, value: str) -> None:
        """Set to ``update`` to submit as PATCH."""
        if value not in FORM_METHODS:
            raise LayoutError(f"Form method must be one of: {', '.join(sorted(FORM_METHODS))}")
        self.form_method = value

    def remote(self, value: bool = True) -> None:
        """Submit the form through the client script instead of a page load."""
        self.remote_form = value

    def multipart(self) -> None:
        self.multipart_form = True

    def view_only(self) -> None:
        """Display only: no submit button and no action required."""
        self.view_only_form = True
        self.show_submit = False

    def no_submit(self) -> None:
        self.show_submit = False

    def submit_captions(self, caption: str, disable_caption: Optional[str] = None) -> None:
        self.submit_caption = caption
        self.disable_caption = disable_caption or caption

    def inject_csrf_tag(self, tag: str) -> None:
        self.csrf_tag = tag

    def render(self) -> str:
        """
        Render the form and its children.

        Returns:
            HTML representation of this node

        Raises:
            LayoutError: If the form has no action and is not view-only
        """
        if self.invisible:
            return ""
        if not self.form_action and not self.view_only_form:
            logger.warning("Form rendered without an action", sequence=self.sequence)
            raise LayoutError("Form requires an action unless it is view only")

        return render_template(
            "form.html",
            form=self,
            csrf_tag=Markup(self.csrf_tag) if self.csrf_tag else None,
            content=self.render_nodes(),
        )


class FormBuilderMixin:
    """Adds ``form`` to a container node."""

    @contextmanager
    def form(self) -> Iterator[Form]:
        yield self.append_node(Form(self.page_config, self.next_sequence()))
