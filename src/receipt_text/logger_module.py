"""
Centralized logging configuration for receipt-text.

Provides a configured logger instance that writes to the console and,
when RECEIPT_TEXT_LOG_DIR is set, to a rotating log file.
"""

import json
import logging
from logging.handlers import RotatingFileHandler
import os

# Determine base directory (config.json lives here)
_env_base = os.environ.get("RECEIPT_TEXT_BASE")
if _env_base:
    BASE_DIR = _env_base.strip()
else:
    BASE_DIR = os.getcwd()

LOG_DIR = os.environ.get("RECEIPT_TEXT_LOG_DIR", "").strip() or None

# Create logger
logger = logging.getLogger('receipt_text')
logger.setLevel(logging.DEBUG)

# Create formatters
detailed_formatter = logging.Formatter(
    '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

simple_formatter = logging.Formatter(
    '%(levelname)s - %(message)s'
)


def _load_config_log_level():
    config_path = os.path.join(BASE_DIR, 'config.json')
    try:
        with open(config_path, 'r', encoding='utf-8') as handle:
            config = json.load(handle)
        level_name = str(config.get('system', {}).get('log_level', 'INFO')).upper()
    except (OSError, ValueError, AttributeError):
        level_name = 'INFO'

    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL,
    }
    return level_map.get(level_name, logging.INFO)


# Console handler
console_handler = logging.StreamHandler()
console_handler.setLevel(logging.INFO)
console_handler.setFormatter(simple_formatter)

# File handler (with rotation), only when a log directory is configured
file_handler = None
if LOG_DIR:
    os.makedirs(LOG_DIR, exist_ok=True)
    file_handler = RotatingFileHandler(
        os.path.join(LOG_DIR, 'receipt_text.log'),
        maxBytes=10*1024*1024,  # 10 MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(_load_config_log_level())
    file_handler.setFormatter(detailed_formatter)

# Add handlers to logger (avoid duplicates on re-import)
if not logger.handlers:
    logger.addHandler(console_handler)
    if file_handler is not None:
        logger.addHandler(file_handler)

# Prevent logging from propagating to root logger
logger.propagate = False
