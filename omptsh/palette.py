"""
Colors used for the highlighting

A palette is written on the command line as 8 comma separated values, each
one being an ANSI color number from 0 to 15 :

    Default,Note,Instrument,Volume,Panning,Pitch,Global,ChannelSeparator

Values 0 to 7 are the regular colors, 8 to 15 are their bright variants
(Discord only knows about the first 8).
"""

from enum import IntEnum
from typing import Any, List, NamedTuple, Optional

from parsimonious import Grammar, NodeVisitor, ParseError
from parsimonious.nodes import Node

ESC = "\u001b"

MAX_COLOR = 15


class Role(IntEnum):
    DEFAULT = 0
    NOTE = 1
    INSTRUMENT = 2
    VOLUME = 3
    PANNING = 4
    PITCH = 5
    GLOBAL = 6
    CHANNEL_SEPARATOR = 7


class Palette(NamedTuple):
    """Can be indexed with a Role"""

    default: int
    note: int
    instrument: int
    volume: int
    panning: int
    pitch: int
    global_: int
    channel_separator: int


DEFAULT_PALETTE = Palette(7, 5, 4, 2, 6, 3, 1, 7)


class PaletteParseError(ValueError):
    pass


palette_grammar = Grammar(
    r"""
    palette = color ("," color)*
    color   = ws number ws
    number  = ~r"[0-9]+"
    ws      = ~r"[\t ]*"
    """
)


class PaletteVisitor(NodeVisitor):

    """Returns the list of numbers in the order they appear"""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.values: List[int] = []

    def visit_palette(self, node: Node, visited_children: List[Node]) -> List[int]:
        return self.values

    def visit_number(self, node: Node, visited_children: List[Node]) -> None:
        self.values.append(int(node.text))

    def generic_visit(self, node: Node, visited_children: List[Node]) -> None:
        ...


def parse_palette(raw: Optional[str]) -> Palette:
    if raw is None:
        raise PaletteParseError("No colors provided")

    try:
        tree = palette_grammar.parse(raw)
    except ParseError:
        raise PaletteParseError(f"Invalid color list : {raw!r}") from None

    values = PaletteVisitor().visit(tree)
    if len(values) != len(Role):
        raise PaletteParseError(
            f"Expected {len(Role)} colors but got {len(values)} : {raw!r}"
        )

    for value in values:
        if value > MAX_COLOR:
            raise PaletteParseError(
                f"Color value out of [0, {MAX_COLOR}] range : {value}"
            )

    return Palette(*values)


def sgr_code(color: int) -> str:
    """Escape sequence that switches the foreground to the given color,
    bright colors (8 to 15) map to the 90-97 codes"""
    n = color + (30 if color < 8 else 82)
    return f"{ESC}[{n}m"
