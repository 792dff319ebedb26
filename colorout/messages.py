"""Timestamped status messages and a helper that writes several outputs."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, TextIO

from .color import Color256, ColorType, Rgb
from .output import Output
from .output_list import output_list

_HEADER_COLOR = Color256(0xFFFFFF)
_SUCCESS = Rgb(0, 255, 0)
_WARNING = Rgb(255, 255, 0)
_ERROR = Rgb(255, 0, 0)


def timestamp() -> str:
    """Return the current local time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def output_all(*args: Any) -> None:
    """Write each of ``args`` in turn by calling its ``output`` method."""
    for item in args:
        item.output()


def _split_lines(text: str) -> list[str]:
    """Split on newlines, dropping a trailing empty line and any ``\\r``."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _print_message(
    level: str,
    color: ColorType,
    endl: bool,
    args: tuple[Any, ...],
    file: Optional[TextIO],
) -> None:
    header = Output(
        text=f"[{timestamp()} => {level}]",
        color=_HEADER_COLOR,
        bg_color=color,
        bold=True,
    )
    newline = Output(text="\n")
    lines = _split_lines("".join(str(arg) for arg in args))
    for position, line in enumerate(lines):
        outputs = [header, Output(text=line, color=color, bold=True)]
        if position + 1 < len(lines) or endl:
            outputs.append(newline)
        output_list(outputs, file)


def print_success(*args: Any, file: Optional[TextIO] = None) -> None:
    """Write ``args`` as a success message, without a final newline."""
    _print_message("success", _SUCCESS, False, args, file)


def print_warning(*args: Any, file: Optional[TextIO] = None) -> None:
    """Write ``args`` as a warning message, without a final newline."""
    _print_message("warning", _WARNING, False, args, file)


def print_error(*args: Any, file: Optional[TextIO] = None) -> None:
    """Write ``args`` as an error message, without a final newline."""
    _print_message("error", _ERROR, False, args, file)


def println_success(*args: Any, file: Optional[TextIO] = None) -> None:
    """Write ``args`` as a success message followed by a newline."""
    _print_message("success", _SUCCESS, True, args, file)


def println_warning(*args: Any, file: Optional[TextIO] = None) -> None:
    """Write ``args`` as a warning message followed by a newline."""
    _print_message("warning", _WARNING, True, args, file)


def println_error(*args: Any, file: Optional[TextIO] = None) -> None:
    """Write ``args`` as an error message followed by a newline."""
    _print_message("error", _ERROR, True, args, file)