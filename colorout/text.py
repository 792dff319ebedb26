"""A piece of text together with its formatting."""

from __future__ import annotations

from dataclasses import dataclass

from .color import BOLD, RESET, UNBOLD, Color, ColorType, DisplayType


@dataclass(frozen=True)
class Text:
    """Text with foreground and background colour, weight and line ending."""

    text: str = ""
    color: ColorType = Color.DEFAULT
    bg_color: ColorType = Color.DEFAULT
    bold: bool = False
    endl: bool = False

    def display_str(self) -> str:
        """Return the text wrapped in its escape sequences."""
        fg = self.color.get_str(DisplayType.TEXT)
        bg = self.bg_color.get_str(DisplayType.BACKGROUND)
        if self.bold:
            rendered = f"{bg}{fg}{BOLD}{self.text}{UNBOLD}{RESET}"
        else:
            rendered = f"{bg}{fg}{self.text}{RESET}"
        if self.endl:
            rendered += "\n"
        return rendered