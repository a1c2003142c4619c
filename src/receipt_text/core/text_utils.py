"""
Text wrapping utilities for receipt printers.

Words are packed greedily into lines of at most max_width characters.
Text is split on the single space character only: tabs, newlines and
runs of spaces are kept as they are, not collapsed. A word longer than
the line is printed unsplit on a line of its own.
"""

from typing import List, Optional


def wrap_text(text: str, max_width: Optional[int] = None) -> List[str]:
    """
    Wrap text into lines respecting word boundaries.

    Args:
        text (str): Text to wrap
        max_width (int): Maximum characters per line, or None to keep the
            whole text on one line

    Returns:
        list[str]: Wrapped lines (empty for empty text when wrapping)

    Raises:
        ValueError: If max_width is negative or not an int

    Examples:
        >>> wrap_text("the quick brown fox", 10)
        ['the quick', 'brown fox']

        >>> wrap_text("supercalifragilisticexpialidocious", 10)
        ['supercalifragilisticexpialidocious']

        >>> wrap_text("no wrapping at all")
        ['no wrapping at all']
    """
    if max_width is None:
        return [text]

    if isinstance(max_width, bool) or not isinstance(max_width, int) or max_width < 0:
        raise ValueError(f"max_width must be a non-negative int, got {max_width!r}")

    lines = []
    current_line = ""

    for word in text.split(" "):
        # An empty token never starts a line
        if not word and not current_line:
            continue

        # The separator is counted even for the first word of a line
        if len(current_line) + len(word) + 1 > max_width:
            if not current_line:
                # Word alone is too long: never split it
                lines.append(word)
            else:
                lines.append(current_line)
                current_line = word
        else:
            if current_line:
                current_line += " "
            current_line += word

    if current_line:
        lines.append(current_line)

    return lines
