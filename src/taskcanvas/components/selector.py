"""Choice selector: pick one entry from a list, with type-to-filter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TextIO

from taskcanvas.canvas import Canvas
from taskcanvas.colors import bold, cyan, hi_black, hi_magenta, hi_red
from taskcanvas.errors import Cancelled
from taskcanvas.input import Input, InputConfig, InputEvent
from taskcanvas.keys import Key
from taskcanvas.printer import Printer
from taskcanvas.terminal import KeySource

logger = logging.getLogger(__name__)


@dataclass
class SelectOptions:
    message: str = ""
    allowed: list[str] = field(default_factory=list)
    default_index: int = 0
    # Rows shown at once; the list scrolls past this
    display_count: int = 6
    display_numbers: bool = False
    help_message: str = ""
    hint: str = "[Type ? for hint]"
    writer: TextIO | None = None
    keys: KeySource | None = None


class Select:
    """Lets the user move through ``allowed`` with Up/Down and submit with Enter.

    Typed characters filter the list case-insensitively. :meth:`ask` returns
    the index of the chosen entry in ``allowed``.
    """

    def __init__(self, options: SelectOptions | None = None) -> None:
        self._options = options if options is not None else SelectOptions()
        allowed = self._options.allowed
        if not allowed:
            raise ValueError("select needs at least one allowed value")
        if not 0 <= self._options.default_index < len(allowed):
            raise ValueError(
                f"default_index {self._options.default_index} is out of range "
                f"for {len(allowed)} allowed values"
            )
        if self._options.display_count < 1:
            raise ValueError("display_count must be at least 1")

        self._input = Input(self._options.keys, self._options.writer)
        self._canvas = Canvas(self).with_writer(self._options.writer)

        self._filter = ""
        self._matches: list[int] = list(range(len(allowed)))
        self._selected = self._options.default_index
        self._offset = 0
        self._show_help = False
        self._complete = False
        self._cancelled = False
        self._scroll_to_selection()

    @property
    def selected_index(self) -> int | None:
        """Index into ``allowed`` of the highlighted entry, if any entry matches."""
        if not self._matches:
            return None
        return self._matches[self._selected]

    def with_canvas(self, canvas: Canvas) -> Select:
        self._canvas = canvas
        return self

    def ask(self) -> int:
        """Block until an entry is chosen; raise ``Cancelled`` on Ctrl+C."""
        events, done = self._input.read_input(InputConfig())
        try:
            self._canvas.run()

            while True:
                event = events.get()

                if event.signal is not None:
                    self._cancelled = True
                    self._canvas.update()
                    logger.debug("select %r cancelled", self._options.message)
                    raise Cancelled()

                self._handle_event(event)
                self._canvas.update()

                if self._complete:
                    index = self._matches[self._selected]
                    logger.debug("select %r chose index %d", self._options.message, index)
                    return index
        finally:
            done()

    def _handle_event(self, event: InputEvent) -> None:
        if event.hint:
            self._show_help = not self._show_help
            return

        if event.key == Key.up:
            self._move(-1)
        elif event.key == Key.down:
            self._move(1)
        elif event.key == Key.enter:
            self._complete = bool(self._matches)
        elif event.value != self._filter:
            self._set_filter(event.value)

    def _move(self, step: int) -> None:
        if not self._matches:
            return
        self._selected = (self._selected + step) % len(self._matches)
        self._scroll_to_selection()

    def _set_filter(self, text: str) -> None:
        self._filter = text
        needle = text.lower()
        self._matches = [
            i for i, choice in enumerate(self._options.allowed) if needle in choice.lower()
        ]
        self._selected = 0
        self._offset = 0

    def _scroll_to_selection(self) -> None:
        count = self._options.display_count
        if self._selected < self._offset:
            self._offset = self._selected
        elif self._selected >= self._offset + count:
            self._offset = self._selected - count + 1

    def render(self, printer: Printer) -> None:
        options = self._options

        printer.write(cyan("? "))
        printer.write(bold(f"{options.message}: "))

        if self._cancelled:
            printer.writeln(hi_red("(Cancelled)"))
            return

        if self._complete:
            printer.writeln(cyan(options.allowed[self._matches[self._selected]]))
            return

        if options.hint and options.help_message and not self._show_help:
            printer.write(cyan(options.hint) + " ")
        printer.write(self._filter)
        position = printer.cursor_position()
        printer.writeln()

        if not self._matches:
            printer.writeln(hi_black("  No matches"))

        window = self._matches[self._offset : self._offset + options.display_count]
        for row, index in enumerate(window, start=self._offset):
            label = options.allowed[index]
            if options.display_numbers:
                label = f"{index + 1}) {label}"
            if row == self._selected:
                printer.writeln(cyan(f"> {label}"))
            else:
                printer.writeln(f"  {label}")

        if self._show_help and options.help_message:
            printer.write(hi_magenta(f"{bold('Hint:')} {options.help_message}\n"))

        printer.set_cursor_position(position)
