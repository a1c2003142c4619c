"""
Error types for receipt-text.

PrinterError is raised by printer drivers when the device or transport
fails. The formatting core wraps any driver failure in SinkFailure so the
caller can tell which phase (apply, emit, revert) broke. EncodingViolation
marks text that the printer's code page cannot represent; it is a
programming error, not something the core recovers from.
"""

from typing import Optional


class PrinterError(Exception):
    """A printer driver failed to carry out a command."""


class SinkFailure(PrinterError):
    """A printer command failed while styling or emitting output.

    Attributes:
        phase: "apply", "emit" or "revert"
    """

    PHASES = ("apply", "emit", "revert")

    def __init__(self, phase: str, message: str = ""):
        if phase not in self.PHASES:
            raise ValueError(f"Unknown phase: {phase}")
        self.phase = phase
        super().__init__(f"{phase} failed: {message}" if message else f"{phase} failed")


class EncodingViolation(ValueError):
    """Text contains a character the printer's code page cannot represent."""

    def __init__(self, character: str, codepage: str, position: Optional[int] = None):
        self.character = character
        self.codepage = codepage
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Character {character!r} (U+{ord(character):04X}){where} "
            f"is not representable in {codepage}"
        )
