"""Version information for receipt-text."""

VERSION = "1.0.0"
