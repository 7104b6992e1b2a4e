"""Low-level terminal cursor control over an output stream.

Only relative cursor motion is used; absolute positioning is never assumed.
Set ``TASKCANVAS_WRITE_LOG`` to a file path to append every byte written
through a cursor to that file.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CLEAR_LINE = "\x1b[2K\r"
START_OF_LINE = "\r"

_CURSOR_UP_FMT = "\x1b[{}A"
_CURSOR_DOWN_FMT = "\x1b[{}B"
_CURSOR_RIGHT_FMT = "\x1b[{}C"
_CURSOR_LEFT_FMT = "\x1b[{}D"


class Cursor:
    """Writes cursor-control sequences (and raw text) to a stream."""

    def __init__(self, writer: TextIO | None = None) -> None:
        self.writer: TextIO = writer if writer is not None else sys.stdout
        self._write_log_path: str = os.environ.get("TASKCANVAS_WRITE_LOG", "")

    def write(self, data: str) -> None:
        """Write *data* and flush, mirroring it to the write log if enabled."""
        if not data:
            return
        self.writer.write(data)
        flush = getattr(self.writer, "flush", None)
        if flush is not None:
            flush()

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError:
                pass

    # -- relative motion ----------------------------------------------------

    def move_up(self, lines: int) -> None:
        if lines > 0:
            self.write(_CURSOR_UP_FMT.format(lines))

    def move_down(self, lines: int) -> None:
        if lines > 0:
            self.write(_CURSOR_DOWN_FMT.format(lines))

    def move_right(self, cols: int) -> None:
        if cols > 0:
            self.write(_CURSOR_RIGHT_FMT.format(cols))

    def move_left(self, cols: int) -> None:
        if cols > 0:
            self.write(_CURSOR_LEFT_FMT.format(cols))

    def move_by(self, lines: int) -> None:
        """Move the cursor up (negative) or down (positive) by *lines*."""
        if lines < 0:
            self.move_up(-lines)
        elif lines > 0:
            self.move_down(lines)

    def move_to_start_of_line(self) -> None:
        self.write(START_OF_LINE)

    # -- visibility / erase -------------------------------------------------

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    def clear_line(self) -> None:
        self.write(CLEAR_LINE)
