from colorout.color import Color, Color256, Rgb
from colorout.text import Text


def test_default_matches_explicit():
    explicit = Text(
        text="",
        color=Color.DEFAULT,
        bg_color=Color.DEFAULT,
        bold=False,
        endl=False,
    )
    assert Text().display_str() == explicit.display_str()


def test_default_is_reset_only():
    assert Text().display_str() == "\x1b[0m"


def test_plain_with_colours():
    text = Text("hi", color=Color.RED, bg_color=Color.BLUE)
    assert text.display_str() == "\x1b[44m\x1b[31mhi\x1b[0m"


def test_bold_and_endl():
    text = Text("x", color=Rgb(1, 2, 3), bg_color=Color256(0), bold=True, endl=True)
    assert text.display_str() == (
        "\x1b[48;5;16m\x1b[38;2;1;2;3m\x1b[1mx\x1b[22m\x1b[0m\n"
    )


def test_endl_appends_newline():
    assert Text("a", endl=True).display_str().endswith("\x1b[0m\n")