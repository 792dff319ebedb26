"""A queue of formatted texts written out together."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, TextIO

from .text import Text


@dataclass
class Task:
    """Collects texts and writes them to a stream."""

    text_list: list[Text] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.text_list)

    def __iter__(self) -> Iterator[Text]:
        return iter(self.text_list)

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < len(self.text_list):
            raise IndexError(f"task index out of range: {idx}")

    def add(self, text: Text) -> Task:
        """Append ``text`` unless its content is empty."""
        if text.text:
            self.text_list.append(text)
        return self

    def remove(self, idx: int) -> None:
        """Remove the text at ``idx``."""
        self._check_index(idx)
        del self.text_list[idx]

    def query_idx(self, idx: int) -> Text:
        """Remove and return the text at ``idx``."""
        self._check_index(idx)
        return self.text_list.pop(idx)

    def query_idx_format_str(self, idx: int) -> str:
        """Remove the text at ``idx`` and return its rendered form."""
        return self.query_idx(idx).display_str()

    def run_idx(self, idx: int, file: Optional[TextIO] = None) -> Text:
        """Remove the text at ``idx``, write it out and return it."""
        text = self.query_idx(idx)
        stream = file if file is not None else sys.stdout
        stream.write(text.display_str())
        return text

    def clear(self) -> Task:
        """Drop every queued text."""
        self.text_list.clear()
        return self

    def run_all(self, file: Optional[TextIO] = None) -> Task:
        """Write every queued text in order, then empty the queue."""
        pending = list(self.text_list)
        self.clear()
        stream = file if file is not None else sys.stdout
        stream.write("".join(text.display_str() for text in pending))
        stream.flush()
        return self