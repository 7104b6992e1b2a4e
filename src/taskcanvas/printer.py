"""Printer: tracks the block of lines written since the last clear.

A printer knows the logical extent of everything it has written
(:class:`CanvasSize`) and where the cursor sits inside that block
(:class:`CursorPosition`). :meth:`Printer.clear_canvas` erases exactly that
block, which is what lets a canvas redraw in place without clearing the
screen.

Rows are counted from 1: a fresh block is ``CanvasSize(rows=1, cols=0)``
and every newline written adds a row. ``cols`` is the visible width of the
last (possibly partial) line, escape sequences excluded.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TextIO

from taskcanvas.cursor import Cursor
from taskcanvas.utils import visible_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanvasSize:
    rows: int = 1
    cols: int = 0


@dataclass(frozen=True)
class CursorPosition:
    row: int
    col: int


class Printer:
    """Formatted output that remembers the size of what it wrote."""

    def __init__(self, writer: TextIO | None = None) -> None:
        self.cursor = Cursor(writer)
        self._current_line: str = ""
        self._size = CanvasSize()
        # None means "at the bottom-right of the block", true right after a write
        self._cursor_position: CursorPosition | None = None
        self._write_lock = threading.Lock()
        self._clear_lock = threading.Lock()

    @property
    def writer(self) -> TextIO:
        return self.cursor.writer

    def size(self) -> CanvasSize:
        return self._size

    def cursor_position(self) -> CursorPosition:
        """Return the position just past the last character written."""
        return CursorPosition(row=self._size.rows, col=self._size.cols)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def write(self, text: str) -> None:
        """Write *text* and update the tracked block size."""
        with self._write_lock:
            line_count = text.count("\n")
            if line_count:
                self._current_line = text.rsplit("\n", 1)[1]
            else:
                self._current_line += text

            self.cursor.write(text)

            self._size = CanvasSize(
                rows=self._size.rows + line_count,
                cols=visible_width(self._current_line),
            )
            logger.debug("printer wrote %r (size %s)", text, self._size)

    def printf(self, fmt: str, *args: object) -> None:
        """Write ``fmt % args``; *fmt* is written verbatim when no args are given."""
        self.write(fmt % args if args else fmt)

    def writeln(self, *values: object) -> None:
        """Write *values* separated by spaces and terminated by a newline."""
        self.write(" ".join(str(v) for v in values) + "\n")

    # ------------------------------------------------------------------
    # Cursor positioning
    # ------------------------------------------------------------------

    def set_cursor_position(self, position: CursorPosition) -> None:
        """Move the cursor to *position* inside the block using relative motion.

        Does nothing (emits no escape sequences) when the cursor is already
        there.
        """
        if self._cursor_position == position:
            return

        current = self._cursor_position or self.cursor_position()

        row_diff = position.row - current.row
        if row_diff > 0:
            self.cursor.move_down(row_diff)
        elif row_diff < 0:
            self.cursor.move_up(-row_diff)

        self.cursor.move_to_start_of_line()
        self.cursor.move_right(position.col)

        self._cursor_position = position

    def move_cursor_to_end(self) -> None:
        self.set_cursor_position(self.cursor_position())

    # ------------------------------------------------------------------
    # Clearing
    # ------------------------------------------------------------------

    def clear_canvas(self) -> None:
        """Erase every row written since the last clear, bottom to top.

        Leaves the cursor at the start of the block's first row and resets the
        tracked size and cursor position.
        """
        with self._clear_lock:
            logger.debug("clearing canvas of %s", self._size)
            self.move_cursor_to_end()

            for row in range(self._size.rows, 0, -1):
                self.cursor.clear_line()
                if row > 1:
                    self.cursor.move_up(1)

            self._size = CanvasSize()
            self._current_line = ""
            self._cursor_position = None
