"""Ready-made styles mimicking the ``dbar`` and ``gdbar`` utilities."""

from __future__ import annotations

from typing import Optional

from .models import NO_TEXT, AtLeft, BarText, BarTextType, BarType, FilledBar, HollowBar, TextBar
from .primitives import DString
from .render import Printer, bar, cbar

DEFAULT_TEXT_WIDTH = 20
DEFAULT_GRAPHIC_SIZE = (80, 10)


def _percent_left(enabled: bool) -> BarText:
    return AtLeft(BarTextType.PERCENTAGE) if enabled else NO_TEXT


def dbar_style(char: str = "=", width: int = DEFAULT_TEXT_WIDTH) -> TextBar:
    """The look of ``dbar``: ``[=====     ]``."""
    return TextBar(
        open="[",
        filled=char,
        middle=None,
        background=" ",
        close="]",
        width=width,
    )


def gdbar_style(
    size: tuple[int, int] = DEFAULT_GRAPHIC_SIZE,
    filled: Optional[str] = None,
    background: Optional[str] = None,
    outline: bool = False,
) -> BarType:
    """The look of ``gdbar``; ``outline`` mimics its ``-o`` option.

    With an outline the background colour is used for the border and the
    unfilled part is left transparent, as gdbar does.
    """
    if outline:
        return HollowBar(filled=filled, background=None, border=background, size=size)
    return FilledBar(filled=filled, background=background, size=size)


text_style = dbar_style
graphic_style = gdbar_style


def dbar(percent_left: bool, width: int, value_range: tuple, value) -> DString:
    """Mimic ``dbar``; ``percent_left`` writes the percentage on the left."""
    return bar(_percent_left(percent_left), dbar_style("=", width), value_range, value)


def cdbar(percent_left: bool, width: int, value_range: tuple) -> Printer:
    """:func:`dbar` taking its value at render time."""
    return cbar(_percent_left(percent_left), dbar_style("=", width), value_range)


def gdbar(
    percent_left: bool,
    size: tuple[int, int],
    filled: Optional[str],
    background: Optional[str],
    outline: bool,
    value_range: tuple,
    value,
) -> DString:
    """Mimic ``gdbar``."""
    style = gdbar_style(size, filled, background, outline)
    return bar(_percent_left(percent_left), style, value_range, value)


def cgdbar(
    percent_left: bool,
    size: tuple[int, int],
    filled: Optional[str],
    background: Optional[str],
    outline: bool,
    value_range: tuple,
) -> Printer:
    """:func:`gdbar` taking its value at render time."""
    style = gdbar_style(size, filled, background, outline)
    return cbar(_percent_left(percent_left), style, value_range)
