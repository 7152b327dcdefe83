"""Page object tree and identifier path composition.

A PageObject is one component of a page (form, panel, button...). Page
objects are assembled into a tree mirroring the page structure; the
identifier path of a node is the rendered identifiers of its ancestors
and itself, root first, so the element can be located from the path:

    form = PageObject.create("form", name="Form")
    panel = PageObject.create("panel", name="Panel")
    button = PageObject.create_at(0, "selector1", name="MenuPanel")
    attach(form, panel)
    attach(panel, button)
    path_of(button)  # "form:panel:[0/selector1]"

Paths are computed on every read, so the result never depends on the
order the tree was assembled in and always reflects re-parenting.

The separator between a parent segment and a child segment is the
parent's own separator.

Trees are built and read from a single thread; attach() mutates parent
and child without locking.
"""

from __future__ import annotations

from collections.abc import Iterator

from pagetree.config.logging import get_logger
from pagetree.config.settings import get_settings
from pagetree.core.exceptions import InvalidArgumentError, MissingIdentifierError
from pagetree.data.models.identifier import (
    Identifier,
    PositionSelector,
    StringId,
    position_selector,
    string_id,
)

log = get_logger(__name__)


class PageObject:
    """Node of a page object tree.

    Attributes:
        identifier: How the element is named or located; None only for
            placeholder roots.
        name: Optional display label, never part of the path.
    """

    def __init__(
        self,
        identifier: Identifier | None = None,
        name: str | None = None,
        path_separator: str | None = None,
    ) -> None:
        if identifier is not None and not isinstance(identifier, (StringId, PositionSelector)):
            raise InvalidArgumentError(
                f"Identifier must be a StringId or PositionSelector, got {identifier!r}"
            )
        self._identifier = identifier
        self._name = name
        self._children: list[PageObject] = []
        self._parent: PageObject | None = None
        self._path_separator = (
            get_settings().path_separator
            if path_separator is None
            else _checked_separator(path_separator)
        )

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, element_id: str, name: str | None = None) -> PageObject:
        """Create a leaf identified by a literal element id.

        Raises:
            InvalidArgumentError: If element_id is None or empty.
        """
        return cls(string_id(element_id), name=name)

    @classmethod
    def create_at(cls, position: int, selector: str, name: str | None = None) -> PageObject:
        """Create a leaf identified by its position among elements matching selector.

        Raises:
            InvalidArgumentError: If position < 0 or selector is None or empty.
        """
        return cls(position_selector(position, selector), name=name)

    @classmethod
    def placeholder(cls, name: str | None = None) -> PageObject:
        """Create an identifier-less node, e.g. a synthetic root.

        Paths running through a placeholder cannot be composed.
        """
        return cls(None, name=name)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def identifier(self) -> Identifier | None:
        return self._identifier

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def parent(self) -> PageObject | None:
        return self._parent

    @property
    def children(self) -> tuple[PageObject, ...]:
        """Children in insertion order. Read-only; use add_child() to mutate."""
        return tuple(self._children)

    @property
    def is_leaf(self) -> bool:
        return not self._children

    @property
    def child_count(self) -> int:
        return len(self._children)

    @property
    def path_separator(self) -> str:
        return self._path_separator

    @property
    def root(self) -> PageObject:
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    @property
    def id_path(self) -> str:
        """Identifier path from the root down to this node."""
        return path_of(self)

    # -------------------------------------------------------------------------
    # Tree assembly
    # -------------------------------------------------------------------------

    def add_child(self, child: PageObject) -> PageObject:
        """Append child beneath this node.

        A child already attached elsewhere is moved: it is removed from its
        previous parent first. Attaching a child to its current parent
        leaves the sibling order unchanged.

        Args:
            child: Node to attach.

        Returns:
            This node, so calls can be chained.

        Raises:
            InvalidArgumentError: If child is None, or is this node or one
                of its ancestors (the tree would become cyclic).
        """
        if child is None:
            raise InvalidArgumentError("Child page object must not be None")
        if child is self or any(ancestor is child for ancestor in self.ancestors()):
            raise InvalidArgumentError(
                f"Cannot attach {child!r} beneath its own descendant {self!r}"
            )

        if child._parent is self:
            return self
        if child._parent is not None:
            child.detach()
        self._children.append(child)
        child._parent = self

        log.debug(
            "page_object_attached",
            parent=self._name,
            child=child._name,
            child_count=len(self._children),
        )
        return self

    def set_parent(self, parent: PageObject) -> None:
        """Attach this node beneath parent. Same as parent.add_child(self)."""
        if parent is None:
            raise InvalidArgumentError("Parent page object must not be None")
        parent.add_child(self)

    def detach(self) -> None:
        """Remove this node from its parent. Does nothing for a root."""
        parent = self._parent
        if parent is None:
            return
        parent._children = [c for c in parent._children if c is not self]
        self._parent = None
        log.debug("page_object_detached", parent=parent._name, child=self._name)

    def set_path_separator(self, separator: str) -> None:
        """Set the separator placed between this node and its children in paths."""
        self._path_separator = _checked_separator(separator)

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def ancestors(self) -> Iterator[PageObject]:
        """Yield parent, grandparent... up to the root."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def walk(self) -> Iterator[PageObject]:
        """Traverse the subtree depth-first, yielding self then children."""
        yield self
        for child in self._children:
            yield from child.walk()

    def find(self, name: str) -> PageObject | None:
        """Find the first node in this subtree with the given name."""
        for node in self.walk():
            if node._name == name:
                return node
        return None

    def __repr__(self) -> str:
        try:
            id_path: str | None = path_of(self)
        except MissingIdentifierError:
            id_path = None
        return f"PageObject[name={self._name},idPath={id_path}]"


def _checked_separator(separator: str) -> str:
    if not isinstance(separator, str):
        raise InvalidArgumentError(f"Path separator must be a string, got {separator!r}")
    return separator


def attach(parent: PageObject, child: PageObject) -> PageObject:
    """Attach child beneath parent and return parent for chaining.

    Raises:
        InvalidArgumentError: If parent or child is None, or the attach
            would create a cycle.
    """
    if parent is None:
        raise InvalidArgumentError("Parent page object must not be None")
    return parent.add_child(child)


def path_of(node: PageObject) -> str:
    """Compose the identifier path of node.

    Walks from node up to the root, then joins the rendered identifiers
    root first. Each segment is preceded by its parent's separator.

    Args:
        node: Node whose path is wanted.

    Returns:
        Path string, e.g. "form:panel:[0/selector1]".

    Raises:
        MissingIdentifierError: If node or any ancestor has no identifier.
    """
    chain = [node, *node.ancestors()]
    for current in chain:
        if current.identifier is None:
            log.debug(
                "path_composition_failed",
                node=node.name,
                missing=current.name,
            )
            raise MissingIdentifierError(
                f"Page object {current.name!r} has no identifier; "
                f"cannot compose path of {node.name!r}",
                node_name=current.name,
            )

    chain.reverse()
    parts = [chain[0].identifier.render()]
    for parent, child in zip(chain, chain[1:]):
        parts.append(parent.path_separator)
        parts.append(child.identifier.render())
    return "".join(parts)
