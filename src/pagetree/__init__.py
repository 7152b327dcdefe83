"""PageTree: hierarchical identifiers for UI test page objects.

Usage:
    from pagetree import PageObject, attach, path_of

    form = PageObject.create("form")
    attach(form, PageObject.create_at(0, "button"))
    path_of(form.children[0])  # "form:[0/button]"
"""

from pagetree.core.exceptions import (
    InvalidArgumentError,
    MissingIdentifierError,
    PageTreeError,
)
from pagetree.core.page_object import PageObject, attach, path_of
from pagetree.data.models.identifier import (
    Identifier,
    PositionSelector,
    StringId,
    parse_identifier,
    position_selector,
    string_id,
)

__all__ = [
    "Identifier",
    "InvalidArgumentError",
    "MissingIdentifierError",
    "PageObject",
    "PageTreeError",
    "PositionSelector",
    "StringId",
    "attach",
    "parse_identifier",
    "path_of",
    "position_selector",
    "string_id",
]
