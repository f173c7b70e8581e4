"""Bar renderer: proportional rounding, body drawing and labels.

Example (from the dzen ``dbar`` look)::

    >>> style = TextBar("[", "=", ">", " ", "]", 20)
    >>> str(bar(AtLeft(BarTextType.PERCENTAGE), style, (-10, 10), 0))
    ' 50% [=========>          ]'

Rendering is pure: the same arguments always give the same ``DString``.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

from .models import (
    AtLeft,
    AtRight,
    BarText,
    BarTextType,
    BarType,
    FilledBar,
    HollowBar,
    TextBar,
    _NoText,
)
from .primitives import (
    DString,
    change_fg,
    fg,
    ignore_bg,
    move,
    pad_left,
    pad_right,
    rect,
    rect_outline,
    text,
)

LABEL_WIDTH = 4


class InvalidRangeError(ValueError):
    """Raised when a range's maximum is below its minimum."""

    def __init__(self, minimum, maximum) -> None:
        super().__init__(f"bar range max value {maximum!r} is less than min {minimum!r}")
        self.minimum = minimum
        self.maximum = maximum


# ── Rounding ──────────────────────────────────────────────


def bar_round(width: int, value_range: tuple, value) -> tuple[tuple[int, int], bool]:
    """Split ``width`` units into ``(filled, background)`` for ``value``.

    Always rounds towards minus infinity, so only the maximum gives a full
    bar.  Values outside the range are clamped.  The boolean is True iff
    rounding half-up would have filled one more unit.

    Raises InvalidRangeError if ``max < min``.
    """
    filled, more = _round_filled(width, value_range, value)
    return (filled, width - filled), more


def _round_filled(width: int, value_range: tuple, value) -> tuple[int, bool]:
    mini, maxi = value_range
    if maxi < mini:
        raise InvalidRangeError(mini, maxi)
    if value <= mini:
        return 0, False
    if value >= maxi:
        return width, False
    # Doubling before the floor division keeps the half-unit visible
    # in the remainder without any fractional arithmetic.
    r = int((2 * width * (value - mini)) // (maxi - mini))
    filled, rem = divmod(r, 2)
    return filled, rem == 1


# ── Body ──────────────────────────────────────────────────


def _edge_full(f: int, w: int) -> tuple[int, int, int]:
    return (w, 0, 0)


# (filled glyphs, leading-edge glyphs, background glyphs),
# keyed by (f == 0, f >= w, more).
_EDGE_LAYOUT: dict[tuple[bool, bool, bool], Callable[[int, int], tuple[int, int, int]]] = {
    (False, False, True):  lambda f, w: (f, 1, w - f - 1),
    (False, False, False): lambda f, w: (f - 1, 1, w - f),
    (True, False, True):   lambda f, w: (0, 1, w - 1),
    (True, False, False):  lambda f, w: (0, 0, w),
    (False, True, True):   _edge_full,
    (False, True, False):  _edge_full,
    (True, True, True):    _edge_full,
    (True, True, False):   _edge_full,
}


def edge_layout(filled: int, width: int, more: bool) -> tuple[int, int, int]:
    """Cell counts for a text bar that has a leading-edge glyph."""
    return _EDGE_LAYOUT[(filled == 0, filled >= width, more)](filled, width)


def _draw_text(style: TextBar, value_range: tuple, value) -> DString:
    (f, b), more = bar_round(style.width, value_range, value)
    if style.middle is None:
        cells = [style.filled * f, style.background * b]
    else:
        nf, ne, nb = edge_layout(f, style.width, more)
        cells = [style.filled * nf, style.middle * ne, style.background * nb]
    return DString.concat([style.open, *cells, style.close])


def _transparent_rect(colour: Optional[str], width: int, height: int) -> DString:
    """Leave the area undrawn unless a colour is given."""
    if colour is None:
        return move(width)
    return fg(colour, rect(width, height))


def _draw_interior(filled: Optional[str], background: Optional[str],
                   size: tuple[int, int], value_range: tuple, value) -> DString:
    w, h = size
    (f, b), _ = bar_round(w, value_range, value)
    return change_fg(filled, rect(f, h)) + _transparent_rect(background, b, h)


def _draw_hollow(style: HollowBar, value_range: tuple, value) -> DString:
    w, h = style.interior
    margin = HollowBar.BORDER_MARGIN
    return DString.concat([
        move(margin),
        _draw_interior(style.filled, style.background, (w, h), value_range, value),
        move(-(w + margin)),
        change_fg(style.border, ignore_bg(True, rect_outline(*style.size))),
    ])


def bar_draw(style: BarType, value_range: tuple, value) -> DString:
    """Draw the bar body (no label)."""
    if isinstance(style, TextBar):
        return _draw_text(style, value_range, value)
    if isinstance(style, FilledBar):
        return _draw_interior(style.filled, style.background, style.size, value_range, value)
    if isinstance(style, HollowBar):
        return _draw_hollow(style, value_range, value)
    raise TypeError(f"unknown bar type: {type(style).__name__}")


# ── Labels ────────────────────────────────────────────────


def bar_text(kind: BarTextType, value_range: tuple, value) -> DString:
    """Format the label: the raw value, or the rounded percentage."""
    if kind is BarTextType.ABSOLUTE:
        return text(str(value))
    (pct, _), _ = bar_round(100, value_range, value)
    return text(f"{pct}%")


def bar(placement: Optional[BarText], style: BarType, value_range: tuple, value) -> DString:
    """Draw a bar and, optionally, a label describing ``value``.

    Labels are padded to four characters, with the spaces always on the
    outside::

        "  2% [                    ]"      AtLeft(PERCENTAGE)
        "[                    ] 2%  "      AtRight(PERCENTAGE)

    ``None`` is accepted as a placement and means the same as ``NO_TEXT``.
    """
    drawn = bar_draw(style, value_range, value)
    if placement is None or isinstance(placement, _NoText):
        return drawn
    if isinstance(placement, AtLeft):
        label = bar_text(placement.kind, value_range, value)
        return pad_left(LABEL_WIDTH, label) + " " + drawn
    if isinstance(placement, AtRight):
        label = bar_text(placement.kind, value_range, value)
        return drawn + " " + pad_right(LABEL_WIDTH, label)
    raise TypeError(f"unknown bar text placement: {placement!r}")


# ── Dynamic input ─────────────────────────────────────────


class Printer:
    """A bar whose value is supplied at render time.

    Holds the placement, style and range; each call renders one value with
    exactly the semantics of :func:`bar`.
    """

    def __init__(self, placement: BarText, style: BarType, value_range: tuple) -> None:
        self.placement = placement
        self.style = style
        self.value_range = value_range

    def __call__(self, value) -> DString:
        return bar(self.placement, self.style, self.value_range, value)

    def pull(self, source: Callable[[], object]) -> DString:
        """Read the current value from ``source`` and render it."""
        return self(source())

    def stream(self, values: Iterable) -> Iterator[DString]:
        """Render each value of ``values`` as it arrives."""
        for value in values:
            yield self(value)

    def __repr__(self) -> str:
        return f"Printer({self.placement!r}, {self.style!r}, {self.value_range!r})"


def cbar(placement: BarText, style: BarType, value_range: tuple) -> Printer:
    """:func:`bar` with the value taken from an input at render time."""
    return Printer(placement, style, value_range)
