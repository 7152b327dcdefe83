"""PageTree exception hierarchy.

This module defines the base exception class and the specialized
exceptions raised while building page object trees and composing
identifier paths.
"""


class PageTreeError(Exception):
    """Base exception for all PageTree errors.

    All custom exceptions in PageTree inherit from this class so callers
    can catch library failures with a single except clause.
    """

    pass


class InvalidArgumentError(PageTreeError, ValueError):
    """Raised when a node or identifier is built from invalid input.

    Use this for empty or missing string ids, empty or missing selectors,
    negative positions, and attaching a missing or cyclic child.

    Example:
        raise InvalidArgumentError("Position must be >= 0, got -1")
    """

    pass


class MissingIdentifierError(PageTreeError, LookupError):
    """Raised when path composition reaches a node without an identifier.

    Attributes:
        node_name: Name of the identifier-less node (if it has one).

    Example:
        raise MissingIdentifierError("Cannot compose path", node_name="Root")
    """

    def __init__(self, message: str, node_name: str | None = None) -> None:
        super().__init__(message)
        self.node_name = node_name
