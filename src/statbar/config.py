"""Configuration file handling for statbar.

Config lives at ~/.config/statbar/settings.json (XDG).

Styles are named so the CLI can pick one with ``--style``.  The built-in
``dbar`` and ``gdbar`` styles are always available; entries in the file
with the same name replace them.

Example config:
{
  "styles": [
    { "name": "dbar",  "type": "text", "width": 20 },
    { "name": "cpu",   "type": "text", "filled": "#", "middle": ">",
      "background": ".", "width": 30 },
    { "name": "disk",  "type": "hollow", "size": [80, 12],
      "filled": "#88cc88", "border": "#444444" }
  ],
  "default_style": "dbar",
  "label": "left",
  "label_kind": "percentage",
  "output": "plain"
}
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from rich.color import Color, ColorParseError

from .helpers import config_dir, debug_log
from .models import NO_TEXT, AtLeft, AtRight, BarText, BarTextType, BarType, FilledBar, HollowBar, TextBar
from .presets import DEFAULT_GRAPHIC_SIZE, DEFAULT_TEXT_WIDTH

STYLE_TYPES = ("text", "filled", "hollow")
LABELS = ("left", "right", "none")
OUTPUTS = ("plain", "dzen", "rich")


def _colour(raw) -> Optional[str]:
    """Validate a colour name or #rrggbb value, passing None through."""
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ValueError(f"colour must be a string, got {raw!r}")
    try:
        Color.parse(raw)
    except ColorParseError as e:
        raise ValueError(f"invalid colour {raw!r}") from e
    return raw


@dataclass
class StyleConfig:
    """One named bar style from the config file."""
    name: str
    type: str = "text"
    width: int = DEFAULT_TEXT_WIDTH
    size: tuple[int, int] = DEFAULT_GRAPHIC_SIZE
    open: str = "["
    filled_glyph: str = "="
    middle: Optional[str] = None
    background_glyph: str = " "
    close: str = "]"
    filled: Optional[str] = None
    background: Optional[str] = None
    border: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "StyleConfig":
        kind = d.get("type", "text")
        if kind not in STYLE_TYPES:
            raise ValueError(f"style '{d.get('name', '?')}' has unknown type {kind!r}")
        if kind == "text":
            middle = d.get("middle")
            if middle is not None and not isinstance(middle, str):
                raise ValueError(f"style '{d.get('name', '?')}' has non-string middle {middle!r}")
            return cls(
                name=d["name"],
                type=kind,
                width=int(d.get("width", DEFAULT_TEXT_WIDTH)),
                open=str(d.get("open", "[")),
                filled_glyph=str(d.get("filled", "=")),
                middle=middle,
                background_glyph=str(d.get("background", " ")),
                close=str(d.get("close", "]")),
            )
        width, height = d.get("size", DEFAULT_GRAPHIC_SIZE)
        return cls(
            name=d["name"],
            type=kind,
            size=(int(width), int(height)),
            filled=_colour(d.get("filled")),
            background=_colour(d.get("background")),
            border=_colour(d.get("border")),
        )

    def to_dict(self) -> dict:
        """Serialize back to a JSON-friendly dict."""
        d: dict = {"name": self.name, "type": self.type}
        if self.type == "text":
            d.update(
                open=self.open,
                filled=self.filled_glyph,
                background=self.background_glyph,
                close=self.close,
                width=self.width,
            )
            if self.middle is not None:
                d["middle"] = self.middle
            return d
        d["size"] = list(self.size)
        for key in ("filled", "background", "border"):
            value = getattr(self, key)
            if value is not None:
                d[key] = value
        return d

    def to_bar_type(self) -> BarType:
        if self.type == "text":
            return TextBar(
                open=self.open,
                filled=self.filled_glyph,
                middle=self.middle,
                background=self.background_glyph,
                close=self.close,
                width=self.width,
            )
        if self.type == "filled":
            return FilledBar(filled=self.filled, background=self.background, size=self.size)
        return HollowBar(
            filled=self.filled,
            background=self.background,
            border=self.border,
            size=self.size,
        )


def builtin_styles() -> list[StyleConfig]:
    """The dbar and gdbar presets as named styles."""
    return [
        StyleConfig(name="dbar", type="text"),
        StyleConfig(name="gdbar", type="filled"),
    ]


@dataclass
class AppConfig:
    """Top-level application configuration."""
    styles: list[StyleConfig] = field(default_factory=builtin_styles)
    default_style: str = "dbar"
    label: str = "left"
    label_kind: str = "percentage"
    output: str = "plain"

    @property
    def style_names(self) -> list[str]:
        return [s.name for s in self.styles]

    def style(self, name: str | None = None) -> StyleConfig:
        """Look up a style by name (default style when name is None)."""
        wanted = name or self.default_style
        for s in self.styles:
            if s.name == wanted:
                return s
        raise KeyError(f"unknown style: {wanted}")

    def bar_text(self) -> BarText:
        kind = BarTextType(self.label_kind)
        if self.label == "left":
            return AtLeft(kind)
        if self.label == "right":
            return AtRight(kind)
        return NO_TEXT

    @classmethod
    def from_dict(cls, d: dict) -> "AppConfig":
        styles = {s.name: s for s in builtin_styles()}
        for raw in d.get("styles", []):
            try:
                style = StyleConfig.from_dict(raw)
            except (KeyError, TypeError, ValueError) as e:
                print(f"statbar: skipping style {raw!r}: {e}", file=sys.stderr)
                continue
            styles[style.name] = style

        label = d.get("label", "left")
        if label not in LABELS:
            raise ValueError(f"label must be one of {', '.join(LABELS)}")
        label_kind = d.get("label_kind", "percentage")
        BarTextType(label_kind)
        output = d.get("output", "plain")
        if output not in OUTPUTS:
            raise ValueError(f"output must be one of {', '.join(OUTPUTS)}")

        cfg = cls(
            styles=list(styles.values()),
            default_style=d.get("default_style", "dbar"),
            label=label,
            label_kind=label_kind,
            output=output,
        )
        if cfg.default_style not in styles:
            raise ValueError(f"default_style {cfg.default_style!r} is not a known style")
        return cfg

    def to_dict(self) -> dict:
        return {
            "styles": [s.to_dict() for s in self.styles],
            "default_style": self.default_style,
            "label": self.label,
            "label_kind": self.label_kind,
            "output": self.output,
        }

    @classmethod
    def default(cls) -> "AppConfig":
        return cls()


def config_path() -> Path:
    """Return the config file path, preferring XDG."""
    return config_dir("settings.json")


def load_config() -> AppConfig:
    """Load config from disk, or return defaults if no file exists."""
    path = config_path()
    if not path.exists():
        return AppConfig.default()

    try:
        cfg = AppConfig.from_dict(json.loads(path.read_text()))
        debug_log("config_loaded", path=path, styles=cfg.style_names)
        return cfg
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        print(f"statbar: bad config ({path}): {e} — using defaults", file=sys.stderr)
        return AppConfig.default()


def init_config() -> None:
    """Create a config file holding the built-in styles."""
    path = config_path()
    if path.exists():
        print(f"Config already exists: {path}")
        return

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(AppConfig.default().to_dict(), indent=2) + "\n")
    print(f"Created config: {path}")
