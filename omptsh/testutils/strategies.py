"""
Hypothesis strategies to generate OpenMPT pattern data
"""

from typing import List

import hypothesis.strategies as st

from omptsh.formats import HEADER, Format
from omptsh.palette import MAX_COLOR, Palette

HEX_DIGITS = "0123456789ABCDEF"


@st.composite
def palette(draw: st.DrawFn) -> Palette:
    color = st.integers(min_value=0, max_value=MAX_COLOR)
    colors = draw(st.lists(color, min_size=8, max_size=8))
    return Palette(*colors)


@st.composite
def hex_byte(draw: st.DrawFn) -> str:
    digit = st.sampled_from(HEX_DIGITS)
    return draw(digit) + draw(digit)


@st.composite
def note(draw: st.DrawFn) -> str:
    special = st.sampled_from(["...", "===", "^^^", "~~~", "PC ", "PCs"])
    name = st.sampled_from(["C-", "C#", "D-", "D#", "E-", "F-", "G-", "A-", "B-"])
    octave = st.integers(min_value=0, max_value=9).map(str)
    regular = st.tuples(name, octave).map("".join)
    return draw(st.one_of(special, regular))


@st.composite
def instrument(draw: st.DrawFn) -> str:
    return draw(st.one_of(st.just(".."), hex_byte()))


@st.composite
def volume_command(draw: st.DrawFn) -> str:
    command = st.sampled_from("abcdefghlpruv")
    value = st.integers(min_value=0, max_value=99).map("{:02d}".format)
    return draw(st.one_of(st.just("..."), st.tuples(command, value).map("".join)))


@st.composite
def effect_command(draw: st.DrawFn) -> str:
    command = st.sampled_from("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ+*#\\:")
    param = st.one_of(hex_byte(), st.just(".."), st.sampled_from(HEX_DIGITS + "."))
    effect = st.tuples(command, param).map("".join)
    # half empty parameters like "A1."
    effect = effect.map(lambda e: e.ljust(3, "."))
    return draw(st.one_of(st.just("..."), effect))


@st.composite
def channel_cell(draw: st.DrawFn, max_effects: int = 2) -> str:
    fields = [draw(note()), draw(instrument()), draw(volume_command())]
    effects: List[str] = draw(
        st.lists(effect_command(), min_size=1, max_size=max_effects)
    )
    return "|" + "".join(fields + effects)


@st.composite
def row(draw: st.DrawFn, channels: int) -> str:
    return "".join(draw(channel_cell()) for _ in range(channels))


@st.composite
def pattern_text(
    draw: st.DrawFn,
    format_strat: st.SearchStrategy[Format] = st.sampled_from(Format),
    line_ending_strat: st.SearchStrategy[str] = st.sampled_from(["\n", "\r\n"]),
) -> str:
    format_ = draw(format_strat)
    line_ending = draw(line_ending_strat)
    channels = draw(st.integers(min_value=1, max_value=4))
    rows = draw(st.lists(row(channels), max_size=16))
    return "".join(line + line_ending for line in [HEADER + format_.value, *rows])


# No ESC in there, so that no escape sequence can be formed by accident
printable_text = st.text(
    alphabet=st.characters(min_codepoint=0x20, max_codepoint=0x7E)
)
pattern_like_text = st.text(alphabet=" \t\r\n|.ABCDEFG0123abcdv")
noisy_text = st.one_of(printable_text, pattern_like_text)
