import re

from hypothesis import example, given
from hypothesis import strategies as st

from ..formats import Format
from ..highlight import annotate, strip_sgr
from ..palette import DEFAULT_PALETTE, Palette
from ..testutils import strategies as omst
from . import examples

ESCAPE_BEFORE_BLANK = re.compile(r"\x1b\[\d+m\s")


@given(omst.pattern_text(), st.sampled_from(Format), omst.palette())
@example(examples.it_pattern, Format.IT, DEFAULT_PALETTE)
@example(examples.mod_pattern, Format.MOD, DEFAULT_PALETTE)
def test_that_highlighting_twice_changes_nothing(
    text: str, format_: Format, palette: Palette
) -> None:
    once = annotate(text, palette, format_)
    assert annotate(strip_sgr(once), palette, format_) == once
    assert annotate(once, palette, format_) == once


@given(omst.noisy_text, st.sampled_from(Format), omst.palette())
def test_that_highlighting_twice_changes_nothing_on_any_text(
    text: str, format_: Format, palette: Palette
) -> None:
    once = annotate(text, palette, format_)
    assert annotate(strip_sgr(once), palette, format_) == once


@given(st.one_of(omst.pattern_text(), omst.noisy_text), st.sampled_from(Format))
def test_that_reverse_mode_only_strips(text: str, format_: Format) -> None:
    highlighted = annotate(text, DEFAULT_PALETTE, format_)
    assert annotate(highlighted, DEFAULT_PALETTE, format_, reverse=True) == strip_sgr(
        highlighted
    )
    assert annotate(text, DEFAULT_PALETTE, format_, reverse=True) == text


@given(st.one_of(omst.pattern_text(), omst.noisy_text), omst.palette())
def test_that_blanks_never_follow_an_escape(text: str, palette: Palette) -> None:
    res = annotate(text, palette, Format.IT)
    assert not ESCAPE_BEFORE_BLANK.search(res)


@given(omst.pattern_text(), st.sampled_from(Format), omst.palette())
def test_that_only_dots_are_changed(
    text: str, format_: Format, palette: Palette
) -> None:
    res = strip_sgr(annotate(text, palette, format_))
    assert len(res) == len(text)
    for before, after in zip(text, res):
        assert before == after or (before, after) == (".", "0")
