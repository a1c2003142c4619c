"""Pytest configuration and fixtures."""

import pytest

from receipt_text.errors import PrinterError
from receipt_text.printers.base_printer import BasePrinter


class RecordingPrinter(BasePrinter):
    """Printer double that records every command as (name, args)."""

    def __init__(self, fail_on=None, fail_from=None):
        """
        Args:
            fail_on: Command name that raises PrinterError when called
            fail_from: Index of the first command (0-based) that fails
        """
        super().__init__({})
        self.commands = []
        self.fail_on = fail_on
        self.fail_from = fail_from

    def _record(self, name, *args):
        index = len(self.commands)
        self.commands.append((name, args))
        if name == self.fail_on or (self.fail_from is not None and index >= self.fail_from):
            raise PrinterError(f"{name} failed")

    @property
    def names(self):
        return [name for name, _ in self.commands]

    @property
    def printed(self):
        """Text sent with custom(), one entry per call."""
        return [args[0] for name, args in self.commands if name == "custom"]

    def get_name(self):
        return "recording"

    def connect(self):
        self.connected = True
        return True

    def disconnect(self):
        self.connected = False
        return True

    def custom(self, data):
        self._record("custom", data)

    def feed(self, lines=1):
        self._record("feed")

    def font(self, font):
        self._record("font", font)

    def size(self, width, height):
        self._record("size", width, height)

    def reset_size(self):
        self._record("reset_size")

    def bold(self, enabled):
        self._record("bold", enabled)

    def underline(self, mode):
        self._record("underline", mode)

    def justify(self, mode):
        self._record("justify", mode)

    def upside_down(self, enabled):
        self._record("upside_down", enabled)

    def reverse(self, enabled):
        self._record("reverse", enabled)

    def double_strike(self, enabled):
        self._record("double_strike", enabled)

    def line_spacing(self, dots):
        self._record("line_spacing", dots)

    def reset_line_spacing(self):
        self._record("reset_line_spacing")


@pytest.fixture
def printer():
    """A connected recording printer."""
    recording = RecordingPrinter()
    recording.connect()
    return recording


@pytest.fixture
def debug_config():
    """ESC/POS driver config that collects output in memory."""
    return {
        'baud_rate': 9600,
        'serial_timeout': 5,
        'codepage': 'cp437',
        'line_width': 48,
        'debug': True,
    }
