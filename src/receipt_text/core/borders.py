"""
Border character tables for framed text boxes.

Every border type maps to exactly eight glyphs. All of them exist in
code page 437, so framed output prints on any CP437 receipt printer.
"""

from collections import namedtuple
from enum import Enum
from types import MappingProxyType
from typing import Union


class BorderType(Enum):
    SINGLE = "single"
    DOUBLE = "double"
    LIGHT_SHADE = "light_shade"
    MEDIUM_SHADE = "medium_shade"
    DARK_SHADE = "dark_shade"
    BLACK = "black"


BorderCharacters = namedtuple(
    "BorderCharacters",
    ["top_left", "top", "top_right", "left", "right", "bottom_left", "bottom", "bottom_right"],
)


def _uniform(glyph: str) -> BorderCharacters:
    return BorderCharacters(*([glyph] * 8))


BORDER_CHARACTERS = MappingProxyType({
    BorderType.SINGLE: BorderCharacters("┌", "─", "┐", "│", "│", "└", "─", "┘"),
    BorderType.DOUBLE: BorderCharacters("╔", "═", "╗", "║", "║", "╚", "═", "╝"),
    BorderType.LIGHT_SHADE: _uniform("░"),
    BorderType.MEDIUM_SHADE: _uniform("▒"),
    BorderType.DARK_SHADE: _uniform("▓"),
    # Half blocks so the frame hugs the text on both sides
    BorderType.BLACK: BorderCharacters("▄", "▄", "▄", "▐", "▌", "▀", "▀", "▀"),
})


def parse_border_type(value: Union[BorderType, str]) -> BorderType:
    """
    Resolve a border type from an enum member or its config name.

    Examples:
        >>> parse_border_type("double")
        <BorderType.DOUBLE: 'double'>
        >>> parse_border_type("LIGHT_SHADE")
        <BorderType.LIGHT_SHADE: 'light_shade'>

    Raises:
        ValueError: If the name is not a known border type
    """
    if isinstance(value, BorderType):
        return value
    try:
        return BorderType(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown border type: {value}") from None


def border_characters(border_type: Union[BorderType, str]) -> BorderCharacters:
    """Return the eight glyphs for a border type."""
    return BORDER_CHARACTERS[parse_border_type(border_type)]
