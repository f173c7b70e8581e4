"""Serializers turning a ``DString`` into something displayable.

``to_dzen`` emits dzen2 in-text commands for status bars; ``to_rich``
builds a rich ``Text`` for terminals (text only).
"""

from __future__ import annotations

from typing import Optional

from rich.text import Text

from .primitives import (
    DString,
    Foreground,
    IgnoreBackground,
    Literal,
    Move,
    Rect,
    RectOutline,
)


def _escape(s: str) -> str:
    return s.replace("^", "^^")


def to_dzen(ds: DString) -> str:
    """Render as dzen2 markup, e.g. ``^fg(red)^r(40x10)^fg()^p(40)``."""
    out: list[str] = []
    _dzen_into(out, ds, fg_colour=None, ignoring_bg=False)
    return "".join(out)


def _dzen_into(out: list[str], ds: DString, fg_colour: Optional[str], ignoring_bg: bool) -> None:
    for item in ds:
        if isinstance(item, Literal):
            out.append(_escape(item.text))
        elif isinstance(item, Rect):
            out.append(f"^r({item.width}x{item.height})")
        elif isinstance(item, RectOutline):
            out.append(f"^ro({item.width}x{item.height})")
        elif isinstance(item, Move):
            out.append(f"^p({item.dx})")
        elif isinstance(item, Foreground):
            out.append(f"^fg({item.colour})")
            _dzen_into(out, item.body, item.colour, ignoring_bg)
            # Restore the enclosing colour; ^fg() means the default.
            out.append(f"^fg({fg_colour or ''})")
        elif isinstance(item, IgnoreBackground):
            out.append(f"^ib({int(item.ignore)})")
            _dzen_into(out, item.body, fg_colour, item.ignore)
            out.append(f"^ib({int(ignoring_bg)})")
        else:
            raise TypeError(f"unknown primitive: {item!r}")


def to_rich(ds: DString, style: str = "") -> Text:
    """Render as rich ``Text``, literals styled with their tint.

    Raises ValueError for pixel primitives (rectangles, moves), which
    have no terminal representation.
    """
    t = Text()
    _rich_into(t, ds, style)
    return t


def _rich_into(t: Text, ds: DString, style: str) -> None:
    for item in ds:
        if isinstance(item, Literal):
            t.append(item.text, style=style)
        elif isinstance(item, Foreground):
            _rich_into(t, item.body, item.colour)
        elif isinstance(item, IgnoreBackground):
            _rich_into(t, item.body, style)
        else:
            raise ValueError(
                f"{type(item).__name__} cannot be drawn in a terminal; use dzen output"
            )
