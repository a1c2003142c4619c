"""
receipt-text: styled, wrapped and boxed text for receipt printers.

Example usage:
    >>> from receipt_text import (
    ...     Bold, Style, TextBox, Underline, UnderlineMode,
    ...     print_line_with_style_box,
    ... )
    >>> from receipt_text.printers.escpos import EscPosDriver
    >>> printer = EscPosDriver({'debug': True})
    >>> printer.connect()
    True
    >>> style = Style([Bold(), Underline(UnderlineMode.SINGLE)])
    >>> print_line_with_style_box(printer, style, "the quick brown fox", TextBox(10, "single"))
    4
"""

from .version import VERSION
from .errors import PrinterError, SinkFailure, EncodingViolation
from .core.borders import BorderType, BorderCharacters, BORDER_CHARACTERS, border_characters
from .core.text_utils import wrap_text
from .core.box_renderer import frame_lines
from .core.styles import (
    FontType, UnderlineMode, JustifyMode,
    Font, Size, Bold, Underline, Justify, UpsideDown, Reverse, DoubleStrike, LineSpacing,
    Style, set_style, undo_style, styled,
)
from .core.printing import (
    TextBox,
    layout_text,
    print_text,
    print_line,
    print_line_with_style,
    print_line_with_style_box,
    print_lines_with_style,
)
from .printers import BasePrinter, create_printer

__version__ = VERSION

__all__ = [
    'VERSION',
    'PrinterError',
    'SinkFailure',
    'EncodingViolation',
    'BorderType',
    'BorderCharacters',
    'BORDER_CHARACTERS',
    'border_characters',
    'wrap_text',
    'frame_lines',
    'FontType',
    'UnderlineMode',
    'JustifyMode',
    'Font',
    'Size',
    'Bold',
    'Underline',
    'Justify',
    'UpsideDown',
    'Reverse',
    'DoubleStrike',
    'LineSpacing',
    'Style',
    'set_style',
    'undo_style',
    'styled',
    'TextBox',
    'layout_text',
    'print_text',
    'print_line',
    'print_line_with_style',
    'print_line_with_style_box',
    'print_lines_with_style',
    'BasePrinter',
    'create_printer',
]
