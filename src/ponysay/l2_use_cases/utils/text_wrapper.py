"""Greedy word wrapping measured in terminal cells."""

from __future__ import annotations

from collections.abc import Iterator

from rich.cells import cell_len

DEFAULT_WRAP_WIDTH = 65


class WrappedText:
    """Lines of *text* wrapped to *width* cells.

    Iterating is lazy and can be repeated; every pass yields the same lines.
    Newlines in the input are ordinary break points. A word wider than
    *width* is never split; it gets a line to itself.
    """

    def __init__(self, text: str, width: int = DEFAULT_WRAP_WIDTH) -> None:
        if width < 1:
            raise ValueError(f'wrap width must be positive, got {width}')
        self.text = text
        self.width = width

    def __iter__(self) -> Iterator[str]:
        words = self.text.split()
        if not words:
            yield ''
            return

        line: list[str] = []
        line_width = 0
        for word in words:
            word_width = cell_len(word)
            if line and line_width + 1 + word_width <= self.width:
                line.append(word)
                line_width += 1 + word_width
                continue
            if line:
                yield ' '.join(line)
            line = [word]
            line_width = word_width
        yield ' '.join(line)

    def lines(self) -> list[str]:
        return list(self)


def wrap(text: str, width: int = DEFAULT_WRAP_WIDTH) -> WrappedText:
    return WrappedText(text, width)
