"""Drawing primitives for status-bar output.

A ``DString`` is an immutable sequence of primitives: literal text,
rectangles, cursor moves and scoped modifiers (foreground tint, background
suppression).  The bar renderer only builds these sequences; turning them
into dzen2 markup or rich text is done by :mod:`statbar.output`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union


@dataclass(frozen=True)
class Literal:
    """Plain text."""

    text: str


@dataclass(frozen=True)
class Rect:
    """A filled rectangle, vertically centred on the line."""

    width: int
    height: int


@dataclass(frozen=True)
class RectOutline:
    """An outline-only rectangle."""

    width: int
    height: int


@dataclass(frozen=True)
class Move:
    """Advance the drawing cursor by ``dx`` pixels (negative moves back)."""

    dx: int


@dataclass(frozen=True)
class Foreground:
    """Draw ``body`` with foreground colour ``colour``, then restore."""

    colour: str
    body: "DString"


@dataclass(frozen=True)
class IgnoreBackground:
    """Draw ``body`` with background filling switched on or off."""

    ignore: bool
    body: "DString"


Primitive = Union[Literal, Rect, RectOutline, Move, Foreground, IgnoreBackground]


class DString:
    """An immutable, concatenable sequence of drawing primitives."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Primitive] = ()) -> None:
        # Adjacent literals are merged so equal output compares equal.
        merged: list[Primitive] = []
        for item in items:
            if isinstance(item, Literal):
                if not item.text:
                    continue
                if merged and isinstance(merged[-1], Literal):
                    merged[-1] = Literal(merged[-1].text + item.text)
                    continue
            merged.append(item)
        self._items: tuple[Primitive, ...] = tuple(merged)

    @classmethod
    def concat(cls, parts: Iterable["DString | str"]) -> "DString":
        """Join many pieces left to right."""
        items: list[Primitive] = []
        for part in parts:
            items.extend(as_dstring(part).items)
        return cls(items)

    @property
    def items(self) -> tuple[Primitive, ...]:
        return self._items

    @property
    def width(self) -> int:
        """Number of text characters (graphics count as zero)."""
        return len(str(self))

    def __add__(self, other: "DString | str") -> "DString":
        if isinstance(other, (DString, str)):
            return DString.concat([self, other])
        return NotImplemented

    def __radd__(self, other: "DString | str") -> "DString":
        if isinstance(other, str):
            return DString.concat([other, self])
        return NotImplemented

    def __mul__(self, count: int) -> "DString":
        if not isinstance(count, int):
            return NotImplemented
        return DString(self._items * max(0, count))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DString):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self):
        return iter(self._items)

    def __str__(self) -> str:
        return "".join(_plain(item) for item in self._items)

    def __repr__(self) -> str:
        return f"DString({list(self._items)!r})"


def _plain(item: Primitive) -> str:
    if isinstance(item, Literal):
        return item.text
    if isinstance(item, (Foreground, IgnoreBackground)):
        return str(item.body)
    return ""


EMPTY = DString()


def as_dstring(value: "DString | str") -> DString:
    """Coerce a plain string to a ``DString``; pass ``DString`` through."""
    if isinstance(value, DString):
        return value
    if isinstance(value, str):
        return text(value)
    raise TypeError(f"expected DString or str, got {type(value).__name__}")


# ── Constructors ──────────────────────────────────────────


def text(s: str) -> DString:
    return DString([Literal(s)])


def rect(width: int, height: int) -> DString:
    return DString([Rect(width, height)])


def rect_outline(width: int, height: int) -> DString:
    return DString([RectOutline(width, height)])


def move(dx: int) -> DString:
    return DString([Move(dx)])


def fg(colour: str, body: "DString | str") -> DString:
    """Tint ``body`` with ``colour`` for its duration only."""
    return DString([Foreground(colour, as_dstring(body))])


def change_fg(colour: Optional[str], body: "DString | str") -> DString:
    """Like :func:`fg`, but ``None`` leaves the current colour in place."""
    if colour is None:
        return as_dstring(body)
    return fg(colour, body)


def ignore_bg(ignore: bool, body: "DString | str") -> DString:
    return DString([IgnoreBackground(ignore, as_dstring(body))])


# ── Padding ───────────────────────────────────────────────


def pad_left(width: int, ds: "DString | str") -> DString:
    """Right-align ``ds`` in ``width`` characters. Never truncates."""
    ds = as_dstring(ds)
    return text(" " * max(0, width - ds.width)) + ds


def pad_right(width: int, ds: "DString | str") -> DString:
    """Left-align ``ds`` in ``width`` characters. Never truncates."""
    ds = as_dstring(ds)
    return ds + text(" " * max(0, width - ds.width))
