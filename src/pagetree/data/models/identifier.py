"""Identifier Pydantic models.

An identifier names or locates the page element a PageObject points to.
There are exactly two kinds:

- StringId: a literal element id, rendered verbatim.
- PositionSelector: the n-th element among the parent's children that
  match a selector, rendered as ``[<position>/<selector>]``.

Both are immutable. Use the ``string_id()`` / ``position_selector()``
factories to get InvalidArgumentError instead of pydantic's ValidationError.
"""

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from pagetree.core.exceptions import InvalidArgumentError

NULL_SELECTOR = "<NULL>"


class StringId(BaseModel):
    """Identification of an element by a literal id string.

    Attributes:
        kind: Union discriminator, always "string".
        value: The element id (non-empty).

    Example:
        StringId(value="form").render()  # "form"
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: str = Field(min_length=1, strict=True, description="Element id")

    def render(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.render()


class PositionSelector(BaseModel):
    """Identification of an element by position within a selected set.

    The selector picks candidate children of the parent element; the
    position is the zero-based index among those candidates.

    Attributes:
        kind: Union discriminator, always "position".
        position: Zero-based index (>= 0).
        selector: Selector expression (non-empty).

    Example:
        PositionSelector(position=0, selector="selector1").render()  # "[0/selector1]"
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["position"] = "position"
    position: int = Field(ge=0, strict=True, description="Index among matching elements")
    selector: str = Field(min_length=1, strict=True, description="Selector expression")

    def render(self) -> str:
        # selector is only None when validation was bypassed via model_construct
        selector = NULL_SELECTOR if self.selector is None else self.selector
        return f"[{self.position}/{selector}]"

    def __str__(self) -> str:
        return self.render()


Identifier = Annotated[StringId | PositionSelector, Field(discriminator="kind")]

_identifier_adapter: TypeAdapter[StringId | PositionSelector] = TypeAdapter(Identifier)


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"]) or "identifier"
    return f"{location}: {error['msg']}"


def string_id(value: str) -> StringId:
    """Build a StringId, raising InvalidArgumentError on empty or missing ids.

    Args:
        value: Element id.

    Returns:
        Validated StringId.

    Raises:
        InvalidArgumentError: If value is None, not a string, or empty.
    """
    try:
        return StringId(value=value)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid string id {value!r}: {_first_error(e)}") from e


def position_selector(position: int, selector: str) -> PositionSelector:
    """Build a PositionSelector, raising InvalidArgumentError on bad input.

    Args:
        position: Zero-based index among the elements matching selector.
        selector: Selector expression.

    Returns:
        Validated PositionSelector.

    Raises:
        InvalidArgumentError: If position is negative or not an int, or if
            selector is None, not a string, or empty.
    """
    try:
        return PositionSelector(position=position, selector=selector)
    except ValidationError as e:
        raise InvalidArgumentError(
            f"Invalid position selector ({position!r}, {selector!r}): {_first_error(e)}"
        ) from e


def parse_identifier(data: Mapping[str, Any]) -> StringId | PositionSelector:
    """Build an identifier from a plain mapping such as a fixture file entry.

    Example:
        parse_identifier({"kind": "position", "position": 2, "selector": "li"})
    """
    try:
        return _identifier_adapter.validate_python(data)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid identifier data: {_first_error(e)}") from e
