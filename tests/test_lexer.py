import pytest

from notocore.lexer import classify_line


@pytest.mark.parametrize(
    "line, expected",
    [
        ("", ("BLANK", "", 0, 0)),
        ("   \t", ("BLANK", "", 0, 0)),
        ("  $$x$$  ", ("DISPLAY_MATH", "x$$", 0, 0)),
        ("$$", ("DISPLAY_MATH", "", 0, 0)),
        ("\\section{Intro}", ("HEADING", "Intro", 0, 1)),
        ("\\subsection{Two}", ("HEADING", "Two", 0, 2)),
        ("\\subsubsection{Three} ", ("HEADING", "Three", 0, 3)),
        ("# One", ("HEADING", "One", 0, 1)),
        ("## Two", ("HEADING", "Two", 0, 2)),
        ("### Three", ("HEADING", "Three", 0, 3)),
        ("> quoted", ("QUOTE", "quoted", 0, 0)),
        ("- item", ("UL_ITEM", "item", 0, 0)),
        ("12. item", ("OL_ITEM", "item", 0, 0)),
        ("plain", ("TEXT", "plain", 0, 0)),
    ],
)
def test_classify_line(line, expected):
    assert classify_line(line) == expected


@pytest.mark.parametrize(
    "line",
    [
        "#### Four",
        "#NoSpace",
        "-dash",
        ">quote",
        "1.no space",
        "\\section{x} trailing",
        "  - indented item",
    ],
)
def test_near_misses_are_plain_text(line):
    assert classify_line(line)[0] == "TEXT"


def test_line_number_is_carried():
    assert classify_line("- a", 7)[2] == 7
