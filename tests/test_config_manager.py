"""
Tests for configuration loading and layout defaults.
"""

import json

import pytest

from receipt_text.core.config_manager import (
    DEFAULT_CONFIG,
    default_config,
    get_layout_defaults,
    get_printer_config,
    load_config,
    save_config,
    validate_config,
)
from receipt_text.core.printing import TextBox
from receipt_text.core.styles import Bold, Style, Underline, UnderlineMode


class TestLoadSave:
    """Tests for load_config() and save_config()."""

    def test_round_trip(self, tmp_path):
        """A saved config loads back identically."""
        path = str(tmp_path / "config.json")
        config = default_config()
        config["layout"]["border"] = "double"
        assert save_config(config, path)
        assert load_config(path) == config
        assert not (tmp_path / "config.json.tmp").exists()

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.json"))

    def test_invalid_json(self, tmp_path):
        """Invalid JSON is re-raised."""
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_config(str(path))

    def test_box_glyphs_saved_unescaped(self, tmp_path):
        """Non-ASCII text is written as-is."""
        path = tmp_path / "config.json"
        save_config({"banner": "┌hi┐"}, str(path))
        assert "┌hi┐" in path.read_text(encoding="utf-8")

    def test_default_config_is_a_copy(self):
        """Changing the returned default does not touch DEFAULT_CONFIG."""
        config = default_config()
        config["printer"]["escpos"]["line_width"] = 32
        assert DEFAULT_CONFIG["printer"]["escpos"]["line_width"] == 48


class TestPrinterConfig:
    """Tests for get_printer_config()."""

    def test_active_printer(self):
        """Defaults to the active printer section."""
        assert get_printer_config(DEFAULT_CONFIG)["codepage"] == "cp437"

    def test_unknown_printer(self):
        """Unknown printers raise KeyError."""
        with pytest.raises(KeyError):
            get_printer_config(DEFAULT_CONFIG, "laser")


class TestLayoutDefaults:
    """Tests for get_layout_defaults()."""

    def test_no_layout(self):
        """No layout means no wrapping and no border."""
        assert get_layout_defaults(default_config()) == {"wrap_chars": None, "border": None}

    def test_border_derives_width(self):
        """A border without a width wraps to the line width minus the frame."""
        config = default_config()
        config["layout"]["border"] = "single"
        assert get_layout_defaults(config) == {"wrap_chars": 44, "border": "single"}

    def test_explicit_width_wins(self):
        """An explicit wrap width is kept."""
        config = default_config()
        config["layout"] = {"wrap_chars": 20, "border": "black"}
        assert TextBox.from_config(get_layout_defaults(config)) == TextBox(20, "black")

    def test_style_from_config(self):
        """Styles can live in config next to the layout."""
        config = default_config()
        config["layout"]["style"] = ["bold", {"underline": "double"}]
        style = Style.from_config(config["layout"]["style"])
        assert style == Style([Bold(), Underline(UnderlineMode.DOUBLE)])


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_default_is_valid(self):
        """The default config validates."""
        assert validate_config(default_config())

    def test_missing_printer(self):
        """The printer section is required."""
        with pytest.raises(ValueError, match="printer"):
            validate_config({})

    def test_active_without_section(self):
        """The active printer needs its own section."""
        with pytest.raises(ValueError):
            validate_config({"printer": {"active": "escpos"}})

    def test_bad_wrap_chars(self):
        """wrap_chars must be a non-negative integer."""
        config = default_config()
        config["layout"]["wrap_chars"] = "wide"
        with pytest.raises(ValueError):
            validate_config(config)

    def test_bad_border(self):
        """Unknown border names fail validation."""
        config = default_config()
        config["layout"]["border"] = "dotted"
        with pytest.raises(ValueError):
            validate_config(config)
