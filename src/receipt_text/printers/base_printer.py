"""
Base abstract class for receipt printer drivers.

This module defines the command interface the text formatting core talks
to. Every driver (ESC/POS, test doubles) must implement it.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any

from ..core.styles import FontType, JustifyMode, UnderlineMode


class BasePrinter(ABC):
    """
    Abstract base class for receipt printer drivers.

    Drivers raise PrinterError when a command cannot be delivered. Text
    passed to custom() must already be representable in the printer's
    code page; drivers raise EncodingViolation otherwise.
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the printer driver.

        Args:
            config: Printer-specific config dict from config.json
        """
        self.config = config
        self.com_port = None
        self.connected = False

    @abstractmethod
    def connect(self) -> bool:
        """
        Connect to the printer.

        Returns:
            bool: True if connected successfully
        """
        pass

    @abstractmethod
    def disconnect(self) -> bool:
        """
        Disconnect from the printer.

        Returns:
            bool: True if disconnected successfully
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """
        Get printer driver name.

        Returns:
            str: Printer name (e.g., "escpos")
        """
        pass

    # =========================================================================
    # OUTPUT PRIMITIVES
    # =========================================================================

    @abstractmethod
    def custom(self, data: str):
        """Send text as-is, without a line feed."""
        pass

    @abstractmethod
    def feed(self, lines: int = 1):
        """Advance the paper by a number of lines."""
        pass

    # =========================================================================
    # STYLE PRIMITIVES
    # =========================================================================

    @abstractmethod
    def font(self, font: FontType):
        pass

    @abstractmethod
    def size(self, width: int, height: int):
        """Set the character scale (1..8 in each direction)."""
        pass

    @abstractmethod
    def reset_size(self):
        pass

    @abstractmethod
    def bold(self, enabled: bool):
        pass

    @abstractmethod
    def underline(self, mode: UnderlineMode):
        pass

    @abstractmethod
    def justify(self, mode: JustifyMode):
        pass

    @abstractmethod
    def upside_down(self, enabled: bool):
        pass

    @abstractmethod
    def reverse(self, enabled: bool):
        """White-on-black printing."""
        pass

    @abstractmethod
    def double_strike(self, enabled: bool):
        pass

    @abstractmethod
    def line_spacing(self, dots: int):
        pass

    @abstractmethod
    def reset_line_spacing(self):
        """Restore the printer's default line spacing."""
        pass

    # =========================================================================
    # STATUS
    # =========================================================================

    def get_status(self) -> Dict[str, Any]:
        """
        Get printer status.

        Returns:
            dict: Status information including:
                - connected: bool
                - com_port: str
                - debug: bool
        """
        return {
            "connected": self.connected,
            "com_port": self.com_port,
            "debug": self.is_debug_mode(),
        }

    def __repr__(self) -> str:
        """String representation of the printer."""
        status = "connected" if self.connected else "disconnected"
        return f"<{self.__class__.__name__} ({self.get_name()}) {status} on {self.com_port or 'None'}>"

    def is_debug_mode(self) -> bool:
        """Return True when debug mode is enabled in config."""
        system_cfg = self.config.get("system", {})
        return bool(system_cfg.get("debug", False) or self.config.get("debug", False))
