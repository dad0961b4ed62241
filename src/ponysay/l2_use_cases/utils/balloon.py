"""Speech balloon rendering."""

from __future__ import annotations

from collections.abc import Iterable

from rich.cells import cell_len

from ponysay.l2_use_cases.utils.text_wrapper import DEFAULT_WRAP_WIDTH, wrap


def balloon_width(lines: Iterable[str]) -> int:
    """Widest line in terminal cells, 0 when there are no lines."""
    return max((cell_len(line) for line in lines), default=0)


def _corners(index: int, count: int) -> tuple[str, str]:
    if index == 0:
        return '/', '\\'
    if index == count - 1:
        return '\\', '/'
    return '|', '|'


def render_balloon(lines: Iterable[str]) -> str:
    """Frame already-wrapped *lines* in a balloon.

    Every row, rules included, is ``width + 4`` cells wide. The result has no
    trailing newline.
    """
    lines = [line.rstrip() for line in lines]
    width = balloon_width(lines)

    rows = [' ' + '_' * (width + 2) + ' ']
    if len(lines) == 1:
        rows.append(f'< {lines[0]} >')
    else:
        for i, line in enumerate(lines):
            left, right = _corners(i, len(lines))
            padding = ' ' * (width - cell_len(line) + 1)
            rows.append(f'{left} {line}{padding}{right}')
    rows.append(' ' + '-' * (width + 2) + ' ')
    return '\n'.join(rows)


def create_balloon(quote: str, wrap_width: int = DEFAULT_WRAP_WIDTH) -> str:
    """Wrap *quote* and frame it."""
    return render_balloon(wrap(quote, wrap_width))
