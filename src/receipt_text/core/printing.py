"""
Styled line and text box printing.

This is where the layout engine meets the printer: a text is wrapped,
optionally framed, and every resulting line is sent with a line feed,
all inside a style scope that is reverted on every exit path.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from ..logger_module import logger
from ..printers.base_printer import BasePrinter
from .borders import BorderType, parse_border_type
from .box_renderer import frame_lines
from .styles import Style, run_command, styled
from .text_utils import wrap_text


class TextBox:
    """
    Layout settings for a block of text.

    Args:
        wrap_chars: Maximum characters per line, or None for no wrapping
        border_type: BorderType (or its name) to frame the text with, or None
    """

    def __init__(self, wrap_chars: Optional[int] = None, border_type: Optional[Union[BorderType, str]] = None):
        if wrap_chars is not None and (isinstance(wrap_chars, bool) or not isinstance(wrap_chars, int) or wrap_chars < 0):
            raise ValueError(f"wrap_chars must be a non-negative int, got {wrap_chars!r}")
        self.wrap_chars = wrap_chars
        self.border_type = parse_border_type(border_type) if border_type is not None else None

    @classmethod
    def from_config(cls, layout: Optional[Dict[str, Any]]) -> "TextBox":
        """Build a TextBox from a config "layout" section."""
        layout = layout or {}
        return cls(layout.get('wrap_chars'), layout.get('border'))

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, TextBox)
            and self.wrap_chars == other.wrap_chars
            and self.border_type == other.border_type
        )

    def __repr__(self) -> str:
        return f"TextBox(wrap_chars={self.wrap_chars!r}, border_type={self.border_type!r})"


def layout_text(text: str, text_box: Optional[TextBox] = None) -> List[str]:
    """
    Return the lines a text box prints, without printing them.

    Examples:
        >>> layout_text("the quick brown fox", TextBox(10, "single"))
        ['┌───────────┐', '│ the quick │', '│ brown fox │', '└───────────┘']
    """
    text_box = text_box or TextBox()
    lines = wrap_text(text, text_box.wrap_chars)
    return frame_lines(lines, text_box.border_type)


def print_text(printer: BasePrinter, text: str):
    """
    Send text to the printer without a line feed.

    Raises:
        EncodingViolation: If the printer's code page cannot represent the text
        SinkFailure: phase "emit", if the printer fails
    """
    run_command("emit", printer.custom, text)


def print_line(printer: BasePrinter, text: str):
    """Send text followed by a line feed."""
    print_text(printer, text)
    run_command("emit", printer.feed)


def print_line_with_style(printer: BasePrinter, style: Style, text: str):
    """Print one line with a style applied, then revert the style."""
    with styled(printer, style):
        print_line(printer, text)
    logger.debug(f"Printed 1 line with {len(style)} style layer(s)")


def print_line_with_style_box(printer: BasePrinter, style: Style, text: str, text_box: TextBox) -> int:
    """
    Print text wrapped and framed according to text_box, with a style applied.

    The style is reverted even if wrapping or printing fails part way.
    Lines already sent before a failure stay printed.

    Returns:
        int: Number of lines printed (zero for empty text with wrapping)
    """
    with styled(printer, style):
        lines = layout_text(text, text_box)
        for line in lines:
            print_line(printer, line)
    logger.debug(f"Printed {len(lines)} line(s) in text box {text_box!r}")
    return len(lines)


def print_lines_with_style(
    printer: BasePrinter,
    style: Style,
    paragraphs: Iterable[str],
    text_box: Optional[TextBox] = None,
) -> int:
    """
    Print several paragraphs under a single style scope.

    Each paragraph is laid out on its own (and framed separately when the
    text box has a border).

    Returns:
        int: Total number of lines printed
    """
    count = 0
    with styled(printer, style):
        for paragraph in paragraphs:
            for line in layout_text(paragraph, text_box):
                print_line(printer, line)
                count += 1
    logger.debug(f"Printed {count} line(s) with {len(style)} style layer(s)")
    return count
