"""
Page Nodes
==========

Base classes for the page composition tree.

Every node reports whether it is ``invisible`` (excluded entirely) or
``hidden`` (rendered but not shown) and renders itself to HTML. Containers
own their children and are invisible when all of their children are.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Sequence, TypeVar

from markupsafe import Markup

from pagelayout.models.schemas import PageConfig

NodeT = TypeVar("NodeT", bound="PageNode")


class LayoutError(ValueError):
    """Exception raised when a page node is built with invalid options."""

    pass


class PageNode(ABC):
    """Abstract base class for every node in a page tree."""

    page_config: PageConfig

    @property
    @abstractmethod
    def invisible(self) -> bool:
        """True if the node should not be rendered at all."""
        pass

    @property
    @abstractmethod
    def hidden(self) -> bool:
        """True if the node is rendered but not shown."""
        pass

    @abstractmethod
    def render(self) -> str:
        """Render this node as HTML."""
        pass

    @property
    def children(self) -> Sequence["PageNode"]:
        return ()

    def walk(self) -> Iterator["PageNode"]:
        """This node and all of its descendants, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()


class SupportsCsrfInjection(ABC):
    """Capability of nodes that emit a hidden CSRF field."""

    @abstractmethod
    def inject_csrf_tag(self, tag: str) -> None:
        """Store the CSRF tag to emit when rendering."""
        pass


class ContainerNode(PageNode):
    """A node that renders its children and wraps them in structural HTML."""

    def __init__(self, page_config: PageConfig, sequence: int = 1) -> None:
        self.page_config = page_config
        self.sequence = sequence
        self.nodes: List[PageNode] = []

    @property
    def children(self) -> Sequence[PageNode]:
        return self.nodes

    @property
    def invisible(self) -> bool:
        return all(node.invisible for node in self.nodes)

    @property
    def hidden(self) -> bool:
        return all(node.hidden for node in self.nodes)

    def append_node(self, node: NodeT) -> NodeT:
        self.nodes.append(node)
        return node

    def next_sequence(self) -> int:
        return len(self.nodes) + 1

    def render_nodes(self) -> Markup:
        """Rendered visible children, one per line."""
        return Markup("\n".join(node.render() for node in self.nodes if not node.invisible))

    def add_csrf_tag(self, tag: str) -> None:
        """Hand ``tag`` to every node of this subtree that emits a CSRF field."""
        for node in self.walk():
            if isinstance(node, SupportsCsrfInjection):
                node.inject_csrf_tag(tag)
