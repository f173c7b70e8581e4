"""Entry point for statbar — run with `python -m statbar` or `statbar`.

    $ statbar 42 --max 100
     42% [========            ]
    $ seq 0 10 100 | statbar --style gdbar --output dzen
"""

from __future__ import annotations

import argparse
import sys
from decimal import Decimal, InvalidOperation
from typing import Iterator, TextIO

from . import __version__


def parse_number(raw: str):
    """Parse an int, or an exact Decimal for anything with a fraction."""
    raw = raw.strip()
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"not a number: {raw!r}") from None
    if not value.is_finite():
        raise ValueError(f"not a finite number: {raw!r}")
    if "e" in raw.lower():
        # Exponent form: print 1e3 as 1000, 2.5e-1 as 0.25
        if value == value.to_integral_value():
            return int(value)
        return Decimal(f"{value:f}")
    return value


def _number_arg(raw: str):
    try:
        return parse_number(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _read_values(stream: TextIO) -> Iterator:
    for line in stream:
        if line.strip():
            yield parse_number(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statbar",
        description="statbar — draw progress bars for status lines (dbar/gdbar style).",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"statbar {__version__}",
    )
    parser.add_argument(
        "value",
        nargs="?",
        type=_number_arg,
        help="Value to draw. Read one per line from stdin when omitted.",
    )
    parser.add_argument(
        "--min",
        type=_number_arg,
        default=0,
        help="Minimum of the range (default: 0).",
    )
    parser.add_argument(
        "--max",
        type=_number_arg,
        default=100,
        help="Maximum of the range (default: 100).",
    )
    parser.add_argument(
        "--style",
        default=None,
        metavar="NAME",
        help="Named style from settings.json (default: the config's default_style).",
    )
    parser.add_argument(
        "--label",
        choices=["left", "right", "none"],
        default=None,
        help="Where to write the label.",
    )
    parser.add_argument(
        "--label-kind",
        choices=["percentage", "absolute"],
        default=None,
        help="Write the percentage or the raw value.",
    )
    parser.add_argument(
        "--output",
        choices=["plain", "dzen", "rich"],
        default=None,
        help="Output format (graphical styles need dzen).",
    )
    parser.add_argument(
        "--stream",
        action="store_true",
        help="Read values from stdin even when VALUE is given.",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Create a default config file and exit.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.init_config:
        from .config import init_config
        init_config()
        return

    from .config import load_config

    config = load_config()

    # CLI flags override config
    if args.label is not None:
        config.label = args.label
    if args.label_kind is not None:
        config.label_kind = args.label_kind
    if args.output is not None:
        config.output = args.output

    try:
        style = config.style(args.style)
    except KeyError:
        parser.error(
            f"unknown style {args.style!r} (known: {', '.join(config.style_names)})"
        )

    if style.type != "text" and config.output != "dzen":
        parser.error(f"style {style.name!r} draws graphics; use --output dzen")

    from .helpers import debug_log
    from .render import cbar

    debug_log("cli_start", style=style.name, output=config.output, min=args.min, max=args.max)
    printer = cbar(config.bar_text(), style.to_bar_type(), (args.min, args.max))

    if args.value is not None and not args.stream:
        values: Iterator = iter([args.value])
    else:
        values = _read_values(sys.stdin)

    emit = _emitter(config.output)
    try:
        for drawn in printer.stream(values):
            emit(drawn)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


def _emitter(output: str):
    """Return a function printing one rendered bar per line."""
    if output == "dzen":
        from .output import to_dzen
        return lambda drawn: print(to_dzen(drawn), flush=True)
    if output == "rich":
        from rich.console import Console

        from .output import to_rich
        console = Console()
        # soft_wrap keeps a bar on one line however narrow the terminal is.
        return lambda drawn: console.print(to_rich(drawn), soft_wrap=True)
    return lambda drawn: print(str(drawn), flush=True)


if __name__ == "__main__":
    main()
