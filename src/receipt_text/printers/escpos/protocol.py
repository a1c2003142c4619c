"""
ESC/POS Protocol Constants

Based on the Epson ESC/POS command reference, which most receipt printers
(Epson, Star in ESC/POS mode, Citizen, Bixolon, generic 58/80mm) follow.

This module contains all protocol-related constants used for
communication with ESC/POS printers.
"""

# Protocol control characters
ESC = b"\x1b"  # Escape
GS = b"\x1d"   # Group separator
LF = b"\x0a"   # Line feed (print and advance one line)

# Printer control
INIT = ESC + b"@"                  # Reset to power-on state
SELECT_CODE_TABLE = ESC + b"t"     # ESC t n

# Character styling
SELECT_FONT = ESC + b"M"           # ESC M n
BOLD = ESC + b"E"                  # ESC E n
UNDERLINE = ESC + b"-"             # ESC - n
JUSTIFY = ESC + b"a"               # ESC a n
UPSIDE_DOWN = ESC + b"{"           # ESC { n
DOUBLE_STRIKE = ESC + b"G"         # ESC G n
REVERSE = GS + b"B"                # GS B n
CHARACTER_SIZE = GS + b"!"         # GS ! n

# Line spacing
LINE_SPACING = ESC + b"3"          # ESC 3 n (n dots)
DEFAULT_LINE_SPACING = ESC + b"2"  # ESC 2

# Argument values
font_codes = {
    "A": 0,
    "B": 1,
    "C": 2,
}

underline_codes = {
    "none": 0,
    "single": 1,
    "double": 2,
}

justify_codes = {
    "left": 0,
    "center": 1,
    "right": 2,
}

# Python codec name -> ESC t code table number
code_tables = {
    "cp437": 0,
    "cp850": 2,
    "cp860": 3,
    "cp863": 4,
    "cp865": 5,
    "cp866": 17,
    "cp852": 18,
    "cp858": 19,
}


def size_argument(width: int, height: int) -> int:
    """GS ! argument: width scale in the high nibble, height in the low one.

    Examples:
        >>> size_argument(1, 1)
        0
        >>> size_argument(2, 3)
        18
    """
    return ((width - 1) << 4) | (height - 1)


# Serial communication settings
DEFAULT_BAUD_RATE = 9600
DEFAULT_SERIAL_TIMEOUT = 5  # seconds
DEFAULT_CODEPAGE = "cp437"
DEFAULT_LINE_WIDTH = 48  # characters per line, font A on 80mm paper
