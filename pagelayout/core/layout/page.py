"""
Page Node
=========

Root of a page tree. The page owns the ``PageConfig`` shared by every node
below it and binds the data supplied by the web framework: the form object,
re-submitted values, validation errors and behaviour rules.
"""

import time
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Union

from pagelayout.config.logging import get_logger
from pagelayout.core.layout.fold_up import FoldUpBuilderMixin
from pagelayout.core.layout.form import FormBuilderMixin
from pagelayout.core.layout.grid import GridBuilderMixin
from pagelayout.core.layout.link import LinkBuilderMixin
from pagelayout.core.layout.page_node import ContainerNode
from pagelayout.core.layout.row import RowBuilderMixin
from pagelayout.core.layout.section import SectionBuilderMixin
from pagelayout.core.layout.text import TextBuilderMixin
from pagelayout.models.schemas import BehaviourRule, PageConfig

logger = get_logger(__name__)


def _as_mapping(value: Any) -> Dict[str, Any]:
    """Read a framework-supplied object as a plain mapping."""
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    if hasattr(value, "model_dump"):
        return value.model_dump()
    return dict(vars(value))


class Page(
    SectionBuilderMixin,
    FormBuilderMixin,
    RowBuilderMixin,
    FoldUpBuilderMixin,
    TextBuilderMixin,
    GridBuilderMixin,
    LinkBuilderMixin,
    ContainerNode,
):
    """
    The root node of a page.

    Example:
        page = Page(PageConfig(name="user"))
        page.form_object({"email": "a@b.com"})
        with page.form() as form:
            form.action("/users")
            form.add_field("email", renderer="email")
        html = page.render()
    """

    def __init__(self, page_config: Optional[PageConfig] = None) -> None:
        super().__init__(page_config or PageConfig())
        self.logger = logger.bind(page=self.page_config.name)

    def form_object(self, value: Any) -> None:
        """Bind the object whose attributes supply field values."""
        self.page_config.form_object = _as_mapping(value)

    def form_values(self, value: Optional[Any]) -> None:
        """Bind re-submitted values, which take precedence over the form object."""
        self.page_config.form_values = None if value is None else _as_mapping(value)

    def form_errors(self, value: Optional[Mapping]) -> None:
        """Bind validation errors keyed by field name."""
        if value is None:
            self.page_config.form_errors = None
            return
        self.page_config.form_errors = {
            str(field): list(messages) if isinstance(messages, (list, tuple)) else [messages]
            for field, messages in value.items()
        }

    def add_behaviours(self, rules: Iterable[Mapping[str, Union[BehaviourRule, Dict[str, Any]]]]) -> None:
        """
        Add client-side behaviour rules.

        Args:
            rules: Mappings of field name to a rule, e.g.
                ``[{"province": {"change_affects": "city;suburb"}}]``
        """
        added: List[Dict[str, BehaviourRule]] = []
        for entry in rules:
            added.append(
                {
                    field: rule if isinstance(rule, BehaviourRule) else BehaviourRule(**rule)
                    for field, rule in entry.items()
                }
            )
        self.page_config.options.behaviours.extend(added)
        self.logger.debug("Behaviours added", count=len(added))

    def render(self) -> str:
        """
        Render the whole page.

        Returns:
            HTML of every visible node, or an empty string if nothing is visible
        """
        if self.invisible:
            self.logger.debug("Page has no visible nodes")
            return ""

        start_time = time.time()
        html = str(self.render_nodes())
        self.logger.debug(
            "Page rendered",
            nodes=len(self.nodes),
            size=len(html),
            render_time=round(time.time() - start_time, 4),
        )
        return html
