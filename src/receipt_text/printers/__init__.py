"""
Receipt printer driver modules.

This package contains the printer command interface and its drivers:
- escpos: ESC/POS receipt printers over a serial port
"""

from .base_printer import BasePrinter


def create_printer(config):
    """
    Factory function to create printer driver instance.

    Args:
        config: Full config dict from config.json

    Returns:
        BasePrinter: Instance of the active printer driver

    Raises:
        ValueError: If printer not found or not supported
    """
    printer_name = config['printer']['active']

    if printer_name not in config['printer']:
        raise ValueError(f"Printer '{printer_name}' not found in config")

    # Merge printer-specific config with the global system section
    printer_config = dict(config['printer'][printer_name])
    printer_config['system'] = config.get('system', {})

    if printer_name == 'escpos':
        from .escpos.escpos_driver import EscPosDriver
        return EscPosDriver(printer_config)
    else:
        raise ValueError(f"Unknown printer: {printer_name}")


__all__ = ['BasePrinter', 'create_printer']
