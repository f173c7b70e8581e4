"""Status bar widget — a text progress bar that polls its value."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.widget import Widget

from ..output import to_rich
from ..render import Printer, bar_round


def _bar_color(pct: float) -> str:
    """Low = green, high = red."""
    if pct >= 90:
        return "bold red"
    if pct >= 75:
        return "red"
    if pct >= 50:
        return "yellow"
    if pct >= 25:
        return "bright_green"
    return "green"


class StatusBar(Widget):
    """A one-line bar whose value is pulled from ``source`` on every render.

    When mounted, the widget re-reads the source every ``interval`` seconds.
    """

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        width: 1fr;
    }
    """

    def __init__(
        self,
        printer: Printer,
        source: Callable[[], object],
        interval: float = 1.0,
        colored: bool = True,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._bar_printer = printer
        self._value_source = source
        self._poll_interval = interval
        self._colored = colored

    def on_mount(self) -> None:
        self.set_interval(self._poll_interval, self.refresh)

    def render(self) -> Text:
        value = self._value_source()
        style = ""
        if self._colored:
            (pct, _), _ = bar_round(100, self._bar_printer.value_range, value)
            style = _bar_color(pct)
        return to_rich(self._bar_printer(value), style=style)

