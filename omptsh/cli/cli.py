"""Command Line Interface"""

from typing import Optional

import click

from omptsh.formats import UnrecognizedFormat
from omptsh.highlight import highlight_text
from omptsh.streams import sink_for, source_for
from omptsh.version import __version__

from .helpers import (
    UNRECOGNIZED_FORMAT,
    colors_argument,
    palette_or_default,
    read_or_exit,
    write_or_exit,
)

COLORS_HELP = """\b
Colors:
X,X,X,X,X,X,X,X  Each value from 0 to 15 (Discord only supports 0 to 7)
format: Default,Note,Instrument,Volume,Panning,Pitch,Global,ChannelSeparator
if not provided: 7,5,4,2,6,3,1,7
"""


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
    epilog=COLORS_HELP,
)
@click.argument("colors", required=False, envvar="OMPTSH_COLORS")
@click.option(
    "-i",
    "--stdin",
    "use_stdin",
    is_flag=True,
    help="Read input from STDIN instead of clipboard",
)
@click.option(
    "-o",
    "--stdout",
    "use_stdout",
    is_flag=True,
    help="Write output to STDOUT instead of clipboard",
)
@click.option(
    "-m",
    "--markdown",
    "--auto-markdown",
    "auto_markdown",
    is_flag=True,
    help="Wrap output in Markdown code block (for Discord)",
)
@click.option(
    "-r",
    "--reverse",
    is_flag=True,
    help="Reverse mode (removes syntax highlighting instead of adding)",
)
@click.version_option(__version__)
@click.pass_context
def highlight(
    ctx: click.Context,
    colors: Optional[str],
    use_stdin: bool,
    use_stdout: bool,
    auto_markdown: bool,
    reverse: bool,
) -> None:
    """Add ANSI syntax highlighting to OpenMPT pattern data.

    Using markdown does nothing if reverse mode is enabled."""
    colors = colors_argument(colors, ctx.args)
    palette = palette_or_default(colors, quiet=use_stdout)
    source = source_for(use_stdin)
    text = read_or_exit(ctx, source)

    try:
        result = highlight_text(
            text, palette, reverse=reverse, markdown=auto_markdown
        )
    except UnrecognizedFormat:
        click.echo(f"{source.name} does not contain OpenMPT pattern data.", err=True)
        ctx.exit(UNRECOGNIZED_FORMAT)

    write_or_exit(ctx, sink_for(use_stdout), result)


if __name__ == "__main__":
    highlight()
