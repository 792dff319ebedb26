"""A single formatted piece of output and the function that writes it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from .color import Color, ColorType
from .task import Task
from .text import Text


@dataclass(frozen=True)
class Output:
    """Text to write together with its colours, weight and line ending."""

    text: str = ""
    color: ColorType = Color.DEFAULT
    bg_color: ColorType = Color.DEFAULT
    bold: bool = False
    endl: bool = False

    def output(self, file: Optional[TextIO] = None) -> None:
        """Write this output to ``file`` (standard output by default)."""
        output(self, file)


def output(output: Output, file: Optional[TextIO] = None) -> None:
    """Write one ``Output`` to ``file`` (standard output by default).

    Outputs with empty text write nothing.
    """
    task = Task()
    task.add(
        Text(
            text=output.text,
            color=output.color,
            bg_color=output.bg_color,
            bold=output.bold,
            endl=output.endl,
        )
    )
    task.run_all(file)