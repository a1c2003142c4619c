"""
ESC/POS Receipt Printer Driver Package

This package provides the ESC/POS driver and its protocol constants.

Example usage:
    >>> from receipt_text.printers.escpos import EscPosDriver
    >>> config = {
    ...     'com_port': 'COM3',
    ...     'baud_rate': 9600,
    ...     'serial_timeout': 5,
    ...     'codepage': 'cp437',
    ...     'debug': True,
    ... }
    >>> driver = EscPosDriver(config)
    >>> driver.connect()
    True
    >>> status = driver.get_status()
"""

from .escpos_driver import EscPosDriver, strip_commands
from .protocol import (
    ESC, GS, LF,
    font_codes,
    underline_codes,
    justify_codes,
    code_tables,
    size_argument,
    DEFAULT_BAUD_RATE,
    DEFAULT_SERIAL_TIMEOUT,
    DEFAULT_CODEPAGE,
    DEFAULT_LINE_WIDTH,
)

__all__ = [
    'EscPosDriver',
    'strip_commands',
    'ESC',
    'GS',
    'LF',
    'font_codes',
    'underline_codes',
    'justify_codes',
    'code_tables',
    'size_argument',
    'DEFAULT_BAUD_RATE',
    'DEFAULT_SERIAL_TIMEOUT',
    'DEFAULT_CODEPAGE',
    'DEFAULT_LINE_WIDTH',
]
