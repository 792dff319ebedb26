"""ANSI colour escape sequences and colour types for text and background."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

DEFAULT = ""
RESET = "\x1b[0m"
BOLD = "\x1b[1m"
UNBOLD = "\x1b[22m"

BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"

BG_BLACK = "\x1b[40m"
BG_RED = "\x1b[41m"
BG_GREEN = "\x1b[42m"
BG_YELLOW = "\x1b[43m"
BG_BLUE = "\x1b[44m"
BG_MAGENTA = "\x1b[45m"
BG_CYAN = "\x1b[46m"
BG_WHITE = "\x1b[47m"

_MAX_U32 = 0xFFFFFFFF


def _check_component(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} component must be in 0..255, got {value}")


def color256_fg_color(code: int) -> str:
    """Return the 256-colour foreground escape sequence for ``code``."""
    if not 0 <= code <= _MAX_U32:
        raise ValueError(f"colour code out of range: {code}")
    return f"\x1b[38;5;{code}m"


def color256_bg_color(code: int) -> str:
    """Map a 0xRRGGBB value onto the 256-colour cube as a background sequence.

    Values above 0xFFFFFF yield an empty string.
    """
    if code < 0:
        raise ValueError(f"colour code out of range: {code}")
    if code > 0xFFFFFF:
        return ""
    r = (code >> 16) & 0xFF
    g = (code >> 8) & 0xFF
    b = code & 0xFF
    index = 16 + 36 * (r * 6 // 256) + 6 * (g * 6 // 256) + (b * 6 // 256)
    return f"\x1b[48;5;{index}m"


def rgb_fg_color(r: int, g: int, b: int) -> str:
    """Return the true-colour foreground escape sequence."""
    for name, value in (("red", r), ("green", g), ("blue", b)):
        _check_component(name, value)
    return f"\x1b[38;2;{r};{g};{b}m"


def rgb_bg_color(r: int, g: int, b: int) -> str:
    """Return the true-colour background escape sequence."""
    for name, value in (("red", r), ("green", g), ("blue", b)):
        _check_component(name, value)
    return f"\x1b[48;2;{r};{g};{b}m"


class DisplayType(Enum):
    """Whether a colour applies to the text or to its background."""

    TEXT = "text"
    BACKGROUND = "background"


class Color(Enum):
    """The built-in terminal colours."""

    DEFAULT = "default"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    def get_str(self, display_type: DisplayType) -> str:
        """Return the escape sequence for this colour."""
        table = _FOREGROUND if display_type is DisplayType.TEXT else _BACKGROUND
        return table[self]

    def __str__(self) -> str:
        return self.get_str(DisplayType.TEXT)


_FOREGROUND = {
    Color.DEFAULT: DEFAULT,
    Color.BLACK: BLACK,
    Color.RED: RED,
    Color.GREEN: GREEN,
    Color.YELLOW: YELLOW,
    Color.BLUE: BLUE,
    Color.MAGENTA: MAGENTA,
    Color.CYAN: CYAN,
    Color.WHITE: WHITE,
}

_BACKGROUND = {
    Color.DEFAULT: DEFAULT,
    Color.BLACK: BG_BLACK,
    Color.RED: BG_RED,
    Color.GREEN: BG_GREEN,
    Color.YELLOW: BG_YELLOW,
    Color.BLUE: BG_BLUE,
    Color.MAGENTA: BG_MAGENTA,
    Color.CYAN: BG_CYAN,
    Color.WHITE: BG_WHITE,
}


@dataclass(frozen=True)
class Rgb:
    """A true colour given by its red, green and blue components."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, value in (("red", self.r), ("green", self.g), ("blue", self.b)):
            _check_component(name, value)

    def get_str(self, display_type: DisplayType) -> str:
        """Return the escape sequence for this colour."""
        if display_type is DisplayType.TEXT:
            return rgb_fg_color(self.r, self.g, self.b)
        return rgb_bg_color(self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.get_str(DisplayType.TEXT)


@dataclass(frozen=True)
class Color256:
    """A 256-colour code; as a background it is read as 0xRRGGBB."""

    code: int

    def __post_init__(self) -> None:
        if not 0 <= self.code <= _MAX_U32:
            raise ValueError(f"colour code out of range: {self.code}")

    def get_str(self, display_type: DisplayType) -> str:
        """Return the escape sequence for this colour."""
        if display_type is DisplayType.TEXT:
            return color256_fg_color(self.code)
        return color256_bg_color(self.code)

    def __str__(self) -> str:
        return self.get_str(DisplayType.TEXT)


ColorType = Union[Color, Rgb, Color256]