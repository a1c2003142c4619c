"""
Box drawing around wrapped text.

A framed block looks like this (SINGLE border):

    ┌───────────┐
    │ the quick │
    │ brown fox │
    └───────────┘

Each content line gets one space of padding on both sides and is padded
with trailing spaces to the widest line, so every row has the same width.
"""

from typing import List, Optional, Sequence, Union

from .borders import BorderType, border_characters


def _rule(left: str, fill: str, right: str, width: int) -> str:
    return f"{left}{fill * width}{right}"


def frame_lines(lines: Sequence[str], border_type: Optional[Union[BorderType, str]] = None) -> List[str]:
    """
    Frame lines with a border.

    Args:
        lines: Content lines (usually from wrap_text)
        border_type: BorderType or its name; None returns the lines as-is

    Returns:
        list[str]: Top rule, padded lines, bottom rule

    Examples:
        >>> frame_lines(["hi"], "single")
        ['┌────┐', '│ hi │', '└────┘']

        >>> frame_lines([], "double")
        ['╔══╗', '╚══╝']
    """
    if border_type is None:
        return list(lines)

    chars = border_characters(border_type)
    max_width = max((len(line) for line in lines), default=0)

    framed = [_rule(chars.top_left, chars.top, chars.top_right, max_width + 2)]
    for line in lines:
        padding = " " * (max_width - len(line))
        framed.append(f"{chars.left} {line}{padding} {chars.right}")
    framed.append(_rule(chars.bottom_left, chars.bottom, chars.bottom_right, max_width + 2))

    return framed
