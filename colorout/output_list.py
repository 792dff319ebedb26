"""A sequence of outputs written out together."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, TextIO

from .output import Output
from .task import Task
from .text import Text


def output_list(outputs: Iterable[Output], file: Optional[TextIO] = None) -> None:
    """Write every output in ``outputs`` in order, in a single write."""
    task = Task()
    for item in outputs:
        task.add(
            Text(
                text=item.text,
                color=item.color,
                bg_color=item.bg_color,
                bold=item.bold,
                endl=item.endl,
            )
        )
    task.run_all(file)


@dataclass
class OutputList:
    """An ordered list of outputs; by default it holds one default output."""

    outputs: list[Output] = field(default_factory=lambda: [Output()])

    def __iter__(self) -> Iterator[Output]:
        return iter(self.outputs)

    def __len__(self) -> int:
        return len(self.outputs)

    def __getitem__(self, idx: int) -> Output:
        return self.outputs[idx]

    def output(self, file: Optional[TextIO] = None) -> None:
        """Write every output in the list to ``file``."""
        output_list(list(self.outputs), file)