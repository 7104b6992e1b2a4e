"""Yes/no confirmation prompt."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO

from taskcanvas.canvas import Canvas
from taskcanvas.colors import bold, cyan, hi_magenta, hi_red, yellow
from taskcanvas.errors import Cancelled
from taskcanvas.input import Input, InputConfig
from taskcanvas.keys import Key
from taskcanvas.printer import Printer
from taskcanvas.terminal import KeySource

logger = logging.getLogger(__name__)

_MISSING_ANSWER = "Please enter 'y' or 'n'"


@dataclass
class ConfirmOptions:
    message: str = ""
    # None means Enter is rejected until y or n is typed
    default_value: bool | None = None
    help_message: str = ""
    hint: str = "[Type ? for hint]"
    writer: TextIO | None = None
    keys: KeySource | None = None


class Confirm:
    def __init__(self, options: ConfirmOptions | None = None) -> None:
        self._options = options if options is not None else ConfirmOptions()
        self._input = Input(self._options.keys, self._options.writer)
        self._canvas = Canvas(self).with_writer(self._options.writer)

        self._answer: bool | None = None
        self._show_help = False
        self._complete = False
        self._cancelled = False
        self._error: str | None = None

    def with_canvas(self, canvas: Canvas) -> Confirm:
        self._canvas = canvas
        return self

    def ask(self) -> bool:
        """Block until the user answers; raise ``Cancelled`` on Ctrl+C."""
        events, done = self._input.read_input(InputConfig())
        try:
            self._canvas.run()

            while True:
                event = events.get()

                if event.signal is not None:
                    self._cancelled = True
                    self._canvas.update()
                    logger.debug("confirm %r cancelled", self._options.message)
                    raise Cancelled()

                self._show_help = event.hint
                char = event.char.lower()
                if char == "y":
                    self._answer = True
                    self._error = None
                elif char == "n":
                    self._answer = False
                    self._error = None
                elif event.key == Key.backspace:
                    self._answer = None
                elif event.key == Key.enter:
                    if self._answer is None:
                        self._answer = self._options.default_value
                    if self._answer is None:
                        self._error = _MISSING_ANSWER
                    else:
                        self._complete = True

                self._canvas.update()

                if self._complete and self._answer is not None:
                    logger.debug("confirm %r answered %s", self._options.message, self._answer)
                    return self._answer
        finally:
            done()

    def _choices(self) -> str:
        default = self._options.default_value
        if default is True:
            return "(Y/n)"
        if default is False:
            return "(y/N)"
        return "(y/n)"

    def render(self, printer: Printer) -> None:
        options = self._options

        printer.write(cyan("? "))
        printer.write(bold(f"{options.message} "))

        if self._cancelled:
            printer.writeln(hi_red("(Cancelled)"))
            return

        if self._complete:
            printer.writeln(cyan("Yes" if self._answer else "No"))
            return

        if options.hint and options.help_message:
            printer.write(cyan(options.hint) + " ")
        printer.write(hi_magenta(self._choices()) + " ")
        if self._answer is not None:
            printer.write("y" if self._answer else "n")
        position = printer.cursor_position()

        if self._error and not self._show_help:
            printer.writeln()
            printer.writeln(yellow(self._error))

        if self._show_help and options.help_message:
            printer.writeln()
            printer.write(hi_magenta(f"{bold('Hint:')} {options.help_message}\n"))

        printer.set_cursor_position(position)
