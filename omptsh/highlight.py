"""
Add or remove ANSI syntax highlighting on OpenMPT pattern data

The pattern data is not parsed : colors are picked from the position of
each character relative to the last channel separator ('|') seen, which is
enough since OpenMPT always lays out channel cells with fixed widths.
"""

import re
from io import StringIO
from typing import Optional

from .formats import Format, detect_format
from .palette import Palette, Role, sgr_code
from .rules import effect_command_role, instrument_role, note_role, volume_command_role

SGR_SEQUENCE = re.compile("\u001b\\[\\d+(;\\d+)*m")

CHANNEL_SEPARATOR = "|"

NOTE_COLUMN = 1
INSTRUMENT_COLUMN = 4
VOLUME_COMMAND_COLUMN = 6
FIRST_EFFECT_COLUMN = 9
EFFECT_WIDTH = 3


def strip_sgr(text: str) -> str:
    return SGR_SEQUENCE.sub("", text)


def annotate(
    text: str, palette: Palette, format_: Format, reverse: bool = False
) -> str:
    """Return the text with an escape sequence inserted before every
    non-blank character where the color changes.

    Existing escape sequences are removed first, so already highlighted text
    can be fed back in. In reverse mode that's all that is done."""
    text = strip_sgr(text)
    if reverse:
        return text

    res = StringIO()
    rel_pos = -1
    # Columns that are not listed below keep the color of the column before
    color: Optional[int] = None
    previous_color: Optional[int] = None
    for i, c in enumerate(text):
        if c == CHANNEL_SEPARATOR:
            rel_pos = 0

        if rel_pos == 0:
            color = palette[Role.CHANNEL_SEPARATOR]
        elif rel_pos == NOTE_COLUMN:
            color = palette[note_role(c)]
        elif rel_pos == INSTRUMENT_COLUMN:
            color = palette[instrument_role(c)]
        elif rel_pos == VOLUME_COMMAND_COLUMN:
            color = palette[volume_command_role(c)]
        elif rel_pos >= FIRST_EFFECT_COLUMN:
            offset = rel_pos % EFFECT_WIDTH
            if offset == 0:
                color = palette[effect_command_role(c, format_)]
            elif c == "." and text[i - offset] != ".":
                # empty parameter of an actual effect command
                c = "0"

        if not c.isspace():
            if color != previous_color:
                assert color is not None
                res.write(sgr_code(color))
            previous_color = color

        res.write(c)
        if rel_pos >= 0:
            rel_pos += 1

    return res.getvalue()


def wrap_in_markdown(text: str) -> str:
    """Put the text in a code block that Discord renders with colors"""
    if not text.endswith("\n"):
        text += "\n"

    return f"```ansi\n{text}```"


def highlight_text(
    text: str, palette: Palette, reverse: bool = False, markdown: bool = False
) -> str:
    """Check that the text is OpenMPT pattern data then (un)highlight it.
    Raises UnrecognizedFormat if it isn't"""
    format_ = detect_format(text)
    res = annotate(text, palette, format_, reverse)
    if markdown and not reverse:
        res = wrap_in_markdown(res)

    return res
