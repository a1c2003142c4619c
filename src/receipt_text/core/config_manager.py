"""
Configuration management for receipt-text.

This module handles loading, validating, and saving the config.json file
that selects the printer driver and the default text layout.
"""

import copy
import json
import os
from typing import Dict, Any, Optional
import logging

from .borders import parse_border_type

logger = logging.getLogger(__name__)


# Determine base directory (env override, else current working directory)
_env_base = os.environ.get("RECEIPT_TEXT_BASE")
if _env_base:
    BASE_DIR = _env_base
else:
    BASE_DIR = os.getcwd()


CONFIG_FILE = os.path.join(BASE_DIR, 'config.json')

DEFAULT_CONFIG: Dict[str, Any] = {
    "system": {
        "log_level": "INFO",
        "debug": False,
    },
    "printer": {
        "active": "escpos",
        "escpos": {
            "com_port": None,
            "baud_rate": 9600,
            "serial_timeout": 5,
            "codepage": "cp437",
            "line_width": 48,
        },
    },
    "layout": {
        "wrap_chars": None,
        "border": None,
    },
}


def default_config() -> Dict[str, Any]:
    """Return a fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from config.json.

    Args:
        config_path: Optional path to config file (defaults to BASE_DIR/config.json)

    Returns:
        dict: Configuration dictionary

    Raises:
        FileNotFoundError: If config file not found
        json.JSONDecodeError: If config file is invalid JSON
    """
    path = config_path or CONFIG_FILE

    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
        logger.info(f"Configuration loaded from {path}")
        return config
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in config file: {e}")
        raise


def save_config(config: Dict[str, Any], config_path: Optional[str] = None) -> bool:
    """
    Save configuration to config.json atomically.

    Args:
        config: Configuration dictionary
        config_path: Optional path to config file

    Returns:
        bool: True if saved successfully

    Raises:
        OSError: If the file cannot be written
    """
    path = config_path or CONFIG_FILE
    temp_path = path + '.tmp'

    try:
        # Write to temporary file first (atomic operation)
        with open(temp_path, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=2, ensure_ascii=False)

        os.replace(temp_path, path)

        logger.info(f"Configuration saved to {path}")
        return True

    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error saving config: {e}")
        # Clean up temp file if exists
        if os.path.exists(temp_path):
            try:
                os.remove(temp_path)
            except OSError:
                pass
        raise


def get_printer_config(config: Dict[str, Any], printer_name: Optional[str] = None) -> Dict[str, Any]:
    """
    Get configuration for a specific printer driver.

    Args:
        config: Full configuration dictionary
        printer_name: Name of printer (defaults to active printer)

    Returns:
        dict: Printer-specific configuration

    Raises:
        KeyError: If printer not found in config
    """
    if printer_name is None:
        printer_name = config['printer']['active']

    if printer_name not in config['printer']:
        raise KeyError(f"Printer '{printer_name}' not found in config")

    return config['printer'][printer_name]


def get_layout_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Get the default text layout.

    When a border is configured but no wrap width, the wrap width is
    derived from the printer's line width minus the four border columns.

    Returns:
        dict: {"wrap_chars": int or None, "border": str or None}
    """
    layout = config.get('layout', {}) or {}
    wrap_chars = layout.get('wrap_chars')
    border = layout.get('border')

    if border is not None and wrap_chars is None:
        try:
            line_width = get_printer_config(config).get('line_width')
        except KeyError:
            line_width = None
        if line_width:
            wrap_chars = max(int(line_width) - 4, 1)

    return {"wrap_chars": wrap_chars, "border": border}


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure.

    Args:
        config: Configuration dictionary to validate

    Returns:
        bool: True if valid

    Raises:
        ValueError: If configuration is invalid
    """
    if 'printer' not in config:
        raise ValueError("Missing required config key: printer")

    if 'active' not in config['printer']:
        raise ValueError("Missing printer.active in config")

    active_printer = config['printer']['active']
    if active_printer not in config['printer']:
        raise ValueError(f"Active printer '{active_printer}' not found in config.printer")

    layout = config.get('layout', {}) or {}
    wrap_chars = layout.get('wrap_chars')
    if wrap_chars is not None and (isinstance(wrap_chars, bool) or not isinstance(wrap_chars, int) or wrap_chars < 0):
        raise ValueError(f"layout.wrap_chars must be a non-negative integer, got {wrap_chars!r}")

    if layout.get('border') is not None:
        parse_border_type(layout['border'])

    logger.info("Configuration validation passed")
    return True
