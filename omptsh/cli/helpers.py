from typing import List, Optional

import click

from omptsh.palette import DEFAULT_PALETTE, Palette, PaletteParseError, parse_palette
from omptsh.streams import ResourceAccessError, TextSink, TextSource

CLIPBOARD_ERROR = 1
UNRECOGNIZED_FORMAT = 2


def colors_argument(colors: Optional[str], extra_args: List[str]) -> Optional[str]:
    """The first argument that is not an option, unknown options and whatever
    comes after the colors are ignored"""
    for arg in [colors, *extra_args]:
        if arg is not None and not arg.startswith("-"):
            return arg

    return None


def palette_or_default(raw: Optional[str], quiet: bool) -> Palette:
    try:
        return parse_palette(raw)
    except PaletteParseError:
        # Don't pollute the output when it goes to stdout
        if not quiet:
            click.echo("Colors not provided properly. Default colors will be used.")
        return DEFAULT_PALETTE


def read_or_exit(ctx: click.Context, source: TextSource) -> str:
    try:
        return source.read()
    except ResourceAccessError as e:
        click.echo(f"Unable to access the clipboard. ({e})", err=True)
        ctx.exit(CLIPBOARD_ERROR)


def write_or_exit(ctx: click.Context, sink: TextSink, text: str) -> None:
    try:
        sink.write(text)
    except ResourceAccessError as e:
        click.echo(f"Unable to access the clipboard. ({e})", err=True)
        ctx.exit(CLIPBOARD_ERROR)
