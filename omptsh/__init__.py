"""
omptsh : ANSI syntax highlighting for OpenMPT pattern data

Copy a few rows in OpenMPT's pattern editor, run omptsh, and paste the
colored result in a terminal or in a Discord ```ansi code block.
"""

from .formats import Format, UnrecognizedFormat, detect_format, format_family
from .highlight import annotate, highlight_text, strip_sgr, wrap_in_markdown
from .palette import DEFAULT_PALETTE, Palette, PaletteParseError, Role, parse_palette
from .version import __version__
