"""Tab-aligned table output."""

from __future__ import annotations

from collections.abc import Iterable
from types import TracebackType
from typing import TextIO

from ollamasearch.models import ModelResult

CAPABILITY_SEPARATOR = " + "
DESCRIPTION_LIMIT = 80
ELLIPSIS = "..."


def ellipsis(text: str, limit: int = DESCRIPTION_LIMIT) -> str:
    """Cut ``text`` to ``limit`` characters and mark the cut with ``...``."""
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def format_row(result: ModelResult) -> str:
    return "\t".join(
        (
            result.name,
            CAPABILITY_SEPARATOR.join(result.capabilities),
            ellipsis(result.description),
        )
    ) + "\n"


class TableWriter:
    """
    Elastic tabstop writer.

    Text is buffered until ``flush``. Each tab-terminated cell is padded to
    the width of its column, where a column spans the consecutive lines that
    have a cell at that position. The last cell of a line is not aligned.
    """

    def __init__(
        self,
        output: TextIO,
        *,
        min_width: int = 10,
        padding: int = 5,
        pad_char: str = " ",
    ):
        self.output = output
        self.min_width = min_width
        self.padding = padding
        self.pad_char = pad_char
        self._lines: list[list[str]] = []
        self._partial = ""

    def __enter__(self) -> TableWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.flush()

    def write(self, text: str) -> int:
        *complete, self._partial = (self._partial + text).split("\n")
        self._lines.extend(line.split("\t") for line in complete)
        return len(text)

    def flush(self) -> None:
        lines = self._lines
        endings = ["\n"] * len(lines)
        if self._partial:
            lines.append(self._partial.split("\t"))
            endings.append("")
        self._lines = []
        self._partial = ""

        widths: list[list[int]] = [[] for _ in lines]
        self._measure(lines, widths, 0, len(lines), 0)
        for cells, cell_widths, ending in zip(lines, widths, endings):
            self.output.write(self._join(cells, cell_widths) + ending)
        self.output.flush()

    def _measure(
        self,
        lines: list[list[str]],
        widths: list[list[int]],
        start: int,
        end: int,
        column: int,
    ) -> None:
        line = start
        while line < end:
            if column >= len(lines[line]) - 1:
                line += 1
                continue

            block_end = line
            width = self.min_width
            while block_end < end and column < len(lines[block_end]) - 1:
                width = max(width, len(lines[block_end][column]) + self.padding)
                block_end += 1

            for index in range(line, block_end):
                widths[index].append(width)
            self._measure(lines, widths, line, block_end, column + 1)
            line = block_end

    def _join(self, cells: list[str], widths: list[int]) -> str:
        padded = [cell.ljust(width, self.pad_char) for cell, width in zip(cells, widths)]
        return "".join(padded) + cells[-1]


def render_results(results: Iterable[ModelResult], output: TextIO) -> int:
    """Write one table row per result and return the row count."""
    count = 0
    with TableWriter(output) as table:
        for result in results:
            table.write(format_row(result))
            count += 1
    return count
