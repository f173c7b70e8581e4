"""Tests for the textual status bar widget."""

from __future__ import annotations

from statbar.models import NO_TEXT, AtRight, BarTextType
from statbar.presets import dbar_style
from statbar.render import cbar
from statbar.widgets.status_bar import StatusBar, _bar_color


def _styles_of_bar(value: int) -> list[str]:
    printer = cbar(NO_TEXT, dbar_style("=", 10), (0, 100))
    text = StatusBar(printer, source=lambda: value).render()
    return [str(span.style) for span in text.spans]


def test_bar_color_thresholds() -> None:
    assert _bar_color(10) == "green"
    assert _bar_color(30) == "bright_green"
    assert _bar_color(55) == "yellow"
    assert _bar_color(80) == "red"
    assert _bar_color(95) == "bold red"


def test_status_bar_styles_follow_value() -> None:
    assert "green" in _styles_of_bar(10)
    assert "bold red" in _styles_of_bar(95)


def test_status_bar_pulls_value_on_each_render() -> None:
    readings = iter([0, 50])
    printer = cbar(AtRight(BarTextType.PERCENTAGE), dbar_style("=", 4), (0, 100))
    widget = StatusBar(printer, source=lambda: next(readings), colored=False)

    assert widget.render().plain == "[    ] 0%  "
    second = widget.render()
    assert second.plain == "[==  ] 50% "
    assert second.spans == []
