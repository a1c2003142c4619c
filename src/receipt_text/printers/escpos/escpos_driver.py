"""
ESC/POS Receipt Printer Driver

This module implements the BasePrinter interface for ESC/POS receipt
printers connected over a serial (or USB-serial) port.

Text is transcoded to the configured code page (CP437 by default) before
it is sent. In debug mode no port is opened and all bytes are collected
in memory, which is what the tests and previews use.
"""

from typing import Dict, Any, Optional

import serial
import serial.tools.list_ports

from ...core.printing import TextBox
from ...core.styles import FontType, JustifyMode, UnderlineMode
from ...errors import EncodingViolation, PrinterError
from ...logger_module import logger
from ..base_printer import BasePrinter
from .protocol import *


class EscPosDriver(BasePrinter):
    """
    ESC/POS Receipt Printer Driver.

    Implements the BasePrinter command interface by emitting ESC/POS byte
    sequences.
    """

    def __init__(self, config: Dict[str, Any]):
        """Initialize the ESC/POS driver.

        Args:
            config: Printer-specific config dict containing:
                - com_port: Serial port name, or "AUTO"/None to scan
                - baud_rate: Serial baud rate (default: 9600)
                - serial_timeout: Write timeout in seconds (default: 5)
                - codepage: Python codec name (default: cp437)
                - line_width: Characters per line (default: 48)
                - debug: Collect output in memory instead of a port
        """
        super().__init__(config)

        # Extract configuration
        self.baud_rate = config.get('baud_rate', DEFAULT_BAUD_RATE)
        self.serial_timeout = config.get('serial_timeout', DEFAULT_SERIAL_TIMEOUT)
        self.codepage = str(config.get('codepage', DEFAULT_CODEPAGE)).lower()
        self.line_width = config.get('line_width', DEFAULT_LINE_WIDTH)
        self.debug = self.is_debug_mode()

        if self.codepage not in code_tables:
            raise ValueError(f"Unsupported code page: {self.codepage}")

        self._serial = None
        self.buffer = bytearray()
        self.bytes_written = 0

        logger.debug(f"ESC/POS driver initialized (codepage={self.codepage}, debug={self.debug})")

    def get_name(self) -> str:
        """Get printer driver name."""
        return "escpos"

    # =========================================================================
    # CONNECTION MANAGEMENT
    # =========================================================================

    def connect(self) -> bool:
        """Open the printer port and reset the printer.

        Tries the configured port first, then falls back to scanning all
        serial ports.

        Returns:
            bool: True if connected successfully
        """
        if self.debug:
            logger.debug("DEBUG mode enabled - collecting output in memory")
            self.com_port = "DEBUG"
            self.connected = True
            self._initialize()
            return True

        configured_port = self.config.get('com_port')
        if configured_port and str(configured_port).upper() in ['AUTO', 'NULL', 'NONE']:
            configured_port = None

        # Try configured port first if specified
        if configured_port:
            logger.info(f"Trying configured COM port: {configured_port}")
            if self._open_port(configured_port):
                return True
            logger.warning(f"Configured port {configured_port} did not respond, falling back to auto-detection")

        # Auto-detect: try ports in reverse order (USB adapters are usually enumerated last)
        logger.info("Scanning for ESC/POS printer...")
        candidates = [
            port.device for port in reversed(serial.tools.list_ports.comports())
            if port.device != configured_port
        ]

        if not candidates:
            logger.error("No COM ports found")
            return False

        for port in candidates:
            if self._open_port(port):
                return True

        logger.error("ESC/POS printer not found on any COM port")
        return False

    def _open_port(self, port: str) -> bool:
        """Open a serial port and initialize the printer on it."""
        logger.debug(f"Opening {port}...")
        try:
            self._serial = serial.Serial(
                port,
                self.baud_rate,
                timeout=self.serial_timeout,
                write_timeout=self.serial_timeout,
            )
        except serial.SerialException as e:
            logger.warning(f"Could not open {port}: {e}")
            return False

        self.com_port = port
        self.connected = True
        try:
            self._initialize()
        except PrinterError:
            self.disconnect()
            return False
        logger.info(f"Connected to ESC/POS printer on {port}")
        return True

    def disconnect(self) -> bool:
        """Close the printer port.

        Returns:
            bool: True if disconnected successfully
        """
        if self._serial is not None:
            try:
                self._serial.close()
            except serial.SerialException as e:
                logger.warning(f"Error closing {self.com_port}: {e}")
            self._serial = None

        self.connected = False
        self.com_port = None
        logger.info("Disconnected from printer")
        return True

    def _initialize(self):
        """Reset the printer and select the code table."""
        self._write(INIT + SELECT_CODE_TABLE + bytes([code_tables[self.codepage]]))

    # =========================================================================
    # TRANSPORT (private methods)
    # =========================================================================

    def _write(self, data: bytes):
        """Send raw bytes to the printer.

        Raises:
            PrinterError: If not connected or the port write fails
        """
        if not self.connected:
            raise PrinterError("Printer not connected")

        if self.debug:
            self.buffer.extend(data)
        else:
            try:
                self._serial.write(data)
            except serial.SerialException as e:
                logger.error(f"Serial communication error on {self.com_port}: {e}")
                raise PrinterError(f"Serial write failed: {e}") from e

        self.bytes_written += len(data)

    def _command(self, prefix: bytes, argument: int):
        self._write(prefix + bytes([argument]))

    def encode(self, text: str) -> bytes:
        """Transcode text to the printer's code page.

        Raises:
            EncodingViolation: If a character has no code in the code page
        """
        try:
            return text.encode(self.codepage)
        except UnicodeEncodeError as e:
            raise EncodingViolation(text[e.start], self.codepage, e.start) from None

    @property
    def output(self) -> bytes:
        """Bytes collected in debug mode."""
        return bytes(self.buffer)

    # =========================================================================
    # OUTPUT PRIMITIVES
    # =========================================================================

    def custom(self, data: str):
        self._write(self.encode(data))

    def feed(self, lines: int = 1):
        if lines < 1:
            raise ValueError(f"Feed must be at least one line, got {lines}")
        self._write(LF * lines)

    # =========================================================================
    # STYLE PRIMITIVES
    # =========================================================================

    def font(self, font: FontType):
        self._command(SELECT_FONT, font_codes[font.value])

    def size(self, width: int, height: int):
        self._command(CHARACTER_SIZE, size_argument(width, height))

    def reset_size(self):
        self._command(CHARACTER_SIZE, size_argument(1, 1))

    def bold(self, enabled: bool):
        self._command(BOLD, 1 if enabled else 0)

    def underline(self, mode: UnderlineMode):
        self._command(UNDERLINE, underline_codes[mode.value])

    def justify(self, mode: JustifyMode):
        self._command(JUSTIFY, justify_codes[mode.value])

    def upside_down(self, enabled: bool):
        self._command(UPSIDE_DOWN, 1 if enabled else 0)

    def reverse(self, enabled: bool):
        self._command(REVERSE, 1 if enabled else 0)

    def double_strike(self, enabled: bool):
        self._command(DOUBLE_STRIKE, 1 if enabled else 0)

    def line_spacing(self, dots: int):
        self._command(LINE_SPACING, dots)

    def reset_line_spacing(self):
        self._write(DEFAULT_LINE_SPACING)

    # =========================================================================
    # STATUS
    # =========================================================================

    def get_status(self) -> Dict[str, Any]:
        """Get printer status.

        Returns:
            dict: Connection state, port, debug flag, code page and
                number of bytes sent since the driver was created
        """
        status = super().get_status()
        status.update({
            "codepage": self.codepage,
            "bytes_written": self.bytes_written,
        })
        return status

    def text_box(self, border_type=None) -> TextBox:
        """Build a TextBox that fills one printed line.

        With a border, four columns go to the frame and its padding.

        Examples:
            >>> EscPosDriver({"line_width": 32}).text_box("double")
            TextBox(wrap_chars=28, border_type=<BorderType.DOUBLE: 'double'>)
        """
        if border_type is None:
            return TextBox(self.line_width)
        return TextBox(max(self.line_width - 4, 1), border_type)

    def preview(self) -> Optional[str]:
        """Decode the debug buffer back to text, dropping ESC/POS commands.

        Returns None outside debug mode.
        """
        if not self.debug:
            return None
        return strip_commands(self.output).decode(self.codepage)


def strip_commands(data: bytes) -> bytes:
    """Remove ESC/POS command sequences, keeping printable bytes and LF."""
    result = bytearray()
    i = 0
    while i < len(data):
        byte = data[i:i + 1]
        if byte == ESC:
            # ESC @ and ESC 2 carry no argument, all others used here carry one
            i += 2 if data[i + 1:i + 2] in (b"@", b"2") else 3
        elif byte == GS:
            i += 3
        else:
            result.extend(byte)
            i += 1
    return bytes(result)
