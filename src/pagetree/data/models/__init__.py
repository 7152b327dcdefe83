"""Pydantic models for page element identifiers."""

from pagetree.data.models.identifier import (
    NULL_SELECTOR,
    Identifier,
    PositionSelector,
    StringId,
    parse_identifier,
    position_selector,
    string_id,
)

__all__ = [
    "NULL_SELECTOR",
    "Identifier",
    "PositionSelector",
    "StringId",
    "parse_identifier",
    "position_selector",
    "string_id",
]
