"""
Core modules for receipt-text.

This package contains the text formatting engine:
- config_manager: Configuration loading and management
- text_utils: Greedy word wrapping
- borders: Border character tables
- box_renderer: Framing wrapped lines with a border
- styles: Style layers and the apply/revert sequencer
- printing: Styled line and text box printing
"""

__all__ = ['config_manager', 'text_utils', 'borders', 'box_renderer', 'styles', 'printing']
