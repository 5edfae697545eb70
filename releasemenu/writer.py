# releasemenu - Interactive release selection menu
# Copyright (c) 2024-2026 Matthew Bright
# Licensed under the MIT License. See LICENSE file for details.

"""Output writers for in-place terminal repaints.

ClearableWriter counts the lines it has written so the next paint can move
the cursor back up over them. TabWriter lines up tab-separated cells into
columns before they reach the terminal.
"""

import re

from rich.cells import cell_len

CLEAR_LINES = "\033[{}A"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def display_width(text: str) -> int:
    """Width of text on screen, ignoring ANSI escape sequences."""
    return cell_len(_ANSI_ESCAPE.sub("", text))


class ClearableWriter:
    """Writer that can erase everything it wrote since the last clear."""

    def __init__(self, sink):
        self._sink = sink
        self.lines = 0

    def write(self, text: str):
        self.lines += text.count("\n")
        return self._sink.write(text)

    def clear(self):
        """Move the cursor up over the previous paint and reset the count."""
        self._sink.write(CLEAR_LINES.format(self.lines))
        self.lines = 0

    def flush(self):
        return self._sink.flush()


class TabWriter:
    """Align tab-terminated cells into columns.

    Text is buffered until flush(). Each column block (consecutive lines
    that all have a cell in that column) is padded to its widest cell plus
    ``padding``. The trailing cell of a line is written as-is.
    """

    def __init__(self, stream, minwidth=0, padding=2, padchar=" "):
        self._stream = stream
        self.minwidth = minwidth
        self.padding = padding
        self.padchar = padchar
        self._buffer = []

    def write(self, text: str):
        self._buffer.append(text)
        return len(text)

    def flush(self):
        text = "".join(self._buffer)
        self._buffer = []
        if text:
            self._stream.write(self._format(text))
        if hasattr(self._stream, "flush"):
            self._stream.flush()

    def _format(self, text):
        lines = text.split("\n")
        rows = [line.split("\t") for line in lines]
        widths = [[0] * (len(cells) - 1) for cells in rows]

        columns = max(len(cells) - 1 for cells in rows)
        for column in range(columns):
            start = None
            for index in range(len(rows) + 1):
                in_block = index < len(rows) and len(rows[index]) - 1 > column
                if in_block and start is None:
                    start = index
                elif not in_block and start is not None:
                    self._size_block(rows, widths, column, start, index)
                    start = None

        out = []
        for cells, cell_widths in zip(rows, widths):
            parts = []
            for cell, width in zip(cells, cell_widths):
                parts.append(cell + self.padchar * (width - display_width(cell)))
            parts.append(cells[-1])
            out.append("".join(parts))
        return "\n".join(out)

    def _size_block(self, rows, widths, column, start, end):
        width = max(display_width(rows[i][column]) for i in range(start, end))
        width = max(width + self.padding, self.minwidth)
        for i in range(start, end):
            widths[i][column] = width
