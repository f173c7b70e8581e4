"""statbar — progress bars for status lines, as text or dzen2 graphics."""

from .models import NO_TEXT, AtLeft, AtRight, BarText, BarTextType, BarType, FilledBar, HollowBar, TextBar
from .presets import cdbar, cgdbar, dbar, dbar_style, gdbar, gdbar_style, graphic_style, text_style
from .primitives import DString
from .render import InvalidRangeError, Printer, bar, bar_draw, bar_round, bar_text, cbar

__version__ = "0.1.0"

__all__ = [
    "AtLeft",
    "AtRight",
    "BarText",
    "BarTextType",
    "BarType",
    "DString",
    "FilledBar",
    "HollowBar",
    "InvalidRangeError",
    "NO_TEXT",
    "Printer",
    "TextBar",
    "bar",
    "bar_draw",
    "bar_round",
    "bar_text",
    "cbar",
    "cdbar",
    "cgdbar",
    "dbar",
    "dbar_style",
    "gdbar",
    "gdbar_style",
    "graphic_style",
    "text_style",
]
