"""Style model for statbar: bar types and label placements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .primitives import DString, as_dstring


@dataclass(frozen=True)
class TextBar:
    """A bar drawn from repeated glyphs, e.g. ``[=====>    ]``.

    The glyphs may be any ``DString``, so they can carry colours or even
    shapes.  Plain ``str`` values are converted on construction.
    """

    open: DString
    filled: DString
    middle: Optional[DString]
    background: DString
    close: DString
    width: int

    def __post_init__(self) -> None:
        # Frozen dataclass: coerce through object.__setattr__.
        for name in ("open", "filled", "background", "close"):
            object.__setattr__(self, name, as_dstring(getattr(self, name)))
        if self.middle is not None:
            object.__setattr__(self, "middle", as_dstring(self.middle))


@dataclass(frozen=True)
class FilledBar:
    """A solid graphical bar, like ``gdbar`` draws.

    ``None`` colours mean the renderer's current default.
    """

    filled: Optional[str]
    background: Optional[str]
    size: tuple[int, int]


@dataclass(frozen=True)
class HollowBar:
    """A graphical bar inside an outline.

    ``size`` covers the whole bar, border included.
    """

    filled: Optional[str]
    background: Optional[str]
    border: Optional[str]
    size: tuple[int, int]

    BORDER_MARGIN = 2

    @property
    def interior(self) -> tuple[int, int]:
        """Drawable area once the margin on every side is removed."""
        w, h = self.size
        return (w - 2 * self.BORDER_MARGIN, h - 2 * self.BORDER_MARGIN)


BarType = Union[TextBar, FilledBar, HollowBar]


class BarTextType(Enum):
    """How the label next to a bar is formatted."""

    PERCENTAGE = "percentage"
    ABSOLUTE = "absolute"


@dataclass(frozen=True)
class AtLeft:
    kind: BarTextType


@dataclass(frozen=True)
class AtRight:
    kind: BarTextType


class _NoText:
    """Placement meaning no label is drawn."""

    _instance: Optional["_NoText"] = None

    def __new__(cls) -> "_NoText":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_TEXT"


NO_TEXT = _NoText()

BarText = Union[AtLeft, AtRight, _NoText]
