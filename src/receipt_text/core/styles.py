"""
Text style layers and the apply/revert command sequencer.

A Style is an ordered list of layers (Bold, Font(B), Size(2, 2), ...).
set_style() sends one printer command per layer, in list order.
undo_style() sends the neutral command for each layer's kind, also in list
order; the value stored in the layer is ignored when reverting, so undoing
is idempotent.

Use styled() to wrap output in a scope that always reverts, even when the
output fails part way through.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, List, Tuple, Union

from ..errors import PrinterError, SinkFailure
from ..logger_module import logger


class FontType(Enum):
    A = "A"
    B = "B"
    C = "C"


class UnderlineMode(Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


class JustifyMode(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# Character scale accepted by GS ! (1x..8x)
MIN_SCALE = 1
MAX_SCALE = 8


# =============================================================================
# STYLE LAYERS
# =============================================================================

@dataclass(frozen=True)
class Font:
    font: FontType
    kind = "font"

    def __post_init__(self):
        if not isinstance(self.font, FontType):
            object.__setattr__(self, "font", FontType(str(self.font).upper()))


@dataclass(frozen=True)
class Size:
    width: int
    height: int
    kind = "size"

    def __post_init__(self):
        for name, value in (("width", self.width), ("height", self.height)):
            if not isinstance(value, int) or not MIN_SCALE <= value <= MAX_SCALE:
                raise ValueError(f"Size {name} must be an int in {MIN_SCALE}..{MAX_SCALE}, got {value!r}")


@dataclass(frozen=True)
class Bold:
    kind = "bold"


@dataclass(frozen=True)
class Underline:
    mode: UnderlineMode
    kind = "underline"

    def __post_init__(self):
        if not isinstance(self.mode, UnderlineMode):
            object.__setattr__(self, "mode", UnderlineMode(str(self.mode).lower()))


@dataclass(frozen=True)
class Justify:
    mode: JustifyMode
    kind = "justify"

    def __post_init__(self):
        if not isinstance(self.mode, JustifyMode):
            object.__setattr__(self, "mode", JustifyMode(str(self.mode).lower()))


@dataclass(frozen=True)
class UpsideDown:
    kind = "upside_down"


@dataclass(frozen=True)
class Reverse:
    kind = "reverse"


@dataclass(frozen=True)
class DoubleStrike:
    kind = "double_strike"


@dataclass(frozen=True)
class LineSpacing:
    dots: int
    kind = "line_spacing"

    def __post_init__(self):
        if not isinstance(self.dots, int) or not 0 <= self.dots <= 255:
            raise ValueError(f"Line spacing must be an int in 0..255, got {self.dots!r}")


StyleLayer = Union[Font, Size, Bold, Underline, Justify, UpsideDown, Reverse, DoubleStrike, LineSpacing]

# Flag layers that config files may name with a bare string
_FLAG_LAYERS = {
    "bold": Bold,
    "upside_down": UpsideDown,
    "reverse": Reverse,
    "double_strike": DoubleStrike,
}


def layer_from_config(entry: Any) -> StyleLayer:
    """
    Build a style layer from a config/JSON entry.

    Accepted forms:
        "bold", "upside_down", "reverse", "double_strike"
        {"font": "B"}
        {"size": [2, 2]}
        {"underline": "single"}
        {"justify": "center"}
        {"line_spacing": 40}

    Raises:
        ValueError: If the entry does not describe a known layer
    """
    if isinstance(entry, str):
        layer_cls = _FLAG_LAYERS.get(entry.lower())
        if layer_cls is None:
            raise ValueError(f"Unknown style layer: {entry}")
        return layer_cls()

    if not isinstance(entry, dict) or len(entry) != 1:
        raise ValueError(f"Style layer must be a name or a single-key mapping, got {entry!r}")

    key, value = next(iter(entry.items()))
    key = key.lower()
    if key in _FLAG_LAYERS:
        return _FLAG_LAYERS[key]()
    if key == "font":
        return Font(value)
    if key == "size":
        width, height = value
        return Size(width, height)
    if key == "underline":
        return Underline(value)
    if key == "justify":
        return Justify(value)
    if key == "line_spacing":
        return LineSpacing(value)
    raise ValueError(f"Unknown style layer: {key}")


class Style:
    """Ordered, immutable list of style layers."""

    def __init__(self, layers: Iterable[StyleLayer] = ()):
        self.layers: Tuple[StyleLayer, ...] = tuple(layers)

    @classmethod
    def from_config(cls, entries: List[Any]) -> "Style":
        return cls(layer_from_config(entry) for entry in entries or [])

    def __iter__(self) -> Iterator[StyleLayer]:
        return iter(self.layers)

    def __len__(self) -> int:
        return len(self.layers)

    def __eq__(self, other) -> bool:
        return isinstance(other, Style) and self.layers == other.layers

    def __repr__(self) -> str:
        return f"Style({list(self.layers)!r})"


# =============================================================================
# DISPATCH TABLES
# =============================================================================

_APPLY = {
    "font": lambda printer, layer: printer.font(layer.font),
    "size": lambda printer, layer: printer.size(layer.width, layer.height),
    "bold": lambda printer, layer: printer.bold(True),
    "underline": lambda printer, layer: printer.underline(layer.mode),
    "justify": lambda printer, layer: printer.justify(layer.mode),
    "upside_down": lambda printer, layer: printer.upside_down(True),
    "reverse": lambda printer, layer: printer.reverse(True),
    "double_strike": lambda printer, layer: printer.double_strike(True),
    "line_spacing": lambda printer, layer: printer.line_spacing(layer.dots),
}

_REVERT = {
    "font": lambda printer: printer.font(FontType.A),
    "size": lambda printer: printer.reset_size(),
    "bold": lambda printer: printer.bold(False),
    "underline": lambda printer: printer.underline(UnderlineMode.NONE),
    "justify": lambda printer: printer.justify(JustifyMode.LEFT),
    "upside_down": lambda printer: printer.upside_down(False),
    "reverse": lambda printer: printer.reverse(False),
    "double_strike": lambda printer: printer.double_strike(False),
    "line_spacing": lambda printer: printer.reset_line_spacing(),
}


def run_command(phase: str, command, *args):
    """Run one printer command, wrapping driver failures in SinkFailure.

    Only PrinterError is wrapped; anything else is a caller bug and
    propagates unchanged.
    """
    try:
        command(*args)
    except SinkFailure:
        raise
    except PrinterError as e:
        raise SinkFailure(phase, str(e)) from e


def set_style(printer, style: Style):
    """
    Apply every layer of the style, in order.

    Raises:
        SinkFailure: phase "apply", on the first failing command. Layers
            already applied are left in place.
    """
    for layer in style:
        run_command("apply", _APPLY[layer.kind], printer, layer)


def undo_style(printer, style: Style):
    """
    Send the neutral command for each layer kind, in order.

    Raises:
        SinkFailure: phase "revert", on the first failing command
    """
    for layer in style:
        run_command("revert", _REVERT[layer.kind], printer)


@contextmanager
def styled(printer, style: Style):
    """
    Apply a style for the duration of a with-block and always revert it.

    If the apply phase fails, the layers are still reverted before the
    error propagates. If the block raises and the revert fails as well,
    the revert failure is logged and the original error propagates.
    """
    try:
        set_style(printer, style)
        yield printer
    except BaseException:
        try:
            undo_style(printer, style)
        except SinkFailure as revert_error:
            logger.error(f"Could not revert style after failure: {revert_error}")
        raise
    else:
        undo_style(printer, style)
