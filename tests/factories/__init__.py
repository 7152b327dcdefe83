"""Factory-boy factories for PageTree test data."""

from tests.factories.page_object import (
    PageObjectFactory,
    PositionSelectorFactory,
    StringIdFactory,
    create_chain,
)

__all__ = [
    "PageObjectFactory",
    "PositionSelectorFactory",
    "StringIdFactory",
    "create_chain",
]
