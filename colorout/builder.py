"""Chainable builders for single outputs and lists of outputs."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, TextIO

from .color import ColorType
from .output import Output
from .output import output as _emit
from .output_list import output_list


class OutputBuilder:
    """Builds an ``Output`` step by step."""

    def __init__(self, output: Optional[Output] = None) -> None:
        self._output = output if output is not None else Output()

    def text(self, text: str) -> OutputBuilder:
        """Set the text."""
        self._output = replace(self._output, text=text)
        return self

    def color(self, color: ColorType) -> OutputBuilder:
        """Set the text colour."""
        self._output = replace(self._output, color=color)
        return self

    def bg_color(self, bg_color: ColorType) -> OutputBuilder:
        """Set the background colour."""
        self._output = replace(self._output, bg_color=bg_color)
        return self

    def bold(self, bold: bool) -> OutputBuilder:
        """Set whether the text is bold."""
        self._output = replace(self._output, bold=bold)
        return self

    def endl(self, endl: bool) -> OutputBuilder:
        """Set whether a newline follows the text."""
        self._output = replace(self._output, endl=endl)
        return self

    def build(self) -> Output:
        """Return the output built so far."""
        return self._output

    def output(self, file: Optional[TextIO] = None) -> None:
        """Write the output built so far."""
        _emit(self._output, file)


class OutputListBuilder:
    """Collects outputs and writes them together."""

    def __init__(self, outputs: Optional[Iterable[Output]] = None) -> None:
        self.outputs: list[Output] = list(outputs) if outputs is not None else []

    def __len__(self) -> int:
        return len(self.outputs)

    def _in_range(self, idx: int) -> bool:
        return 0 <= idx < len(self.outputs)

    def add(self, output: Output) -> OutputListBuilder:
        """Append an output."""
        self.outputs.append(output)
        return self

    def remove(self, idx: int) -> OutputListBuilder:
        """Remove the output at ``idx``; an index out of range changes nothing."""
        if self._in_range(idx):
            del self.outputs[idx]
        return self

    def clear(self) -> None:
        """Drop every output."""
        self.outputs.clear()

    def run(self, file: Optional[TextIO] = None) -> OutputListBuilder:
        """Write every output in order, then empty the list."""
        pending = list(self.outputs)
        self.clear()
        output_list(pending, file)
        return self

    def query_idx(self, idx: int) -> Output:
        """Return the output at ``idx``, or a default output if out of range."""
        if not self._in_range(idx):
            return Output()
        return self.outputs[idx]

    def run_idx(self, idx: int, file: Optional[TextIO] = None) -> OutputListBuilder:
        """Write the output at ``idx`` without removing it."""
        if self._in_range(idx):
            self.query_idx(idx).output(file)
        return self