"""Single-line text prompt with placeholder, hint and validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, TextIO

from taskcanvas.canvas import Canvas
from taskcanvas.colors import bold, cyan, hi_black, hi_magenta, hi_red, yellow
from taskcanvas.errors import Cancelled
from taskcanvas.input import Input, InputConfig
from taskcanvas.keys import Key
from taskcanvas.printer import CursorPosition, Printer
from taskcanvas.terminal import KeySource

logger = logging.getLogger(__name__)

# Returns (valid, message); an empty message falls back to validation_message
ValidationFn = Callable[[str], "tuple[bool, str]"]


@dataclass
class PromptOptions:
    message: str = ""
    default_value: str = ""
    help_message: str = ""
    hint: str = "[Type ? for hint]"
    placeholder: str = ""
    validation_fn: ValidationFn | None = None
    validation_message: str = "Invalid input"
    required: bool = False
    required_message: str = "This field is required"
    clear_on_completion: bool = False
    ignore_hint_keys: bool = False
    writer: TextIO | None = None
    keys: KeySource | None = None


class Prompt:
    """Asks for one line of text.

    Typing ``?`` shows the help message (when one is set), Enter submits once
    the value passes validation, and Ctrl+C cancels.
    """

    def __init__(self, options: PromptOptions | None = None) -> None:
        self._options = options if options is not None else PromptOptions()
        self._input = Input(self._options.keys, self._options.writer)
        self._canvas = Canvas(self).with_writer(self._options.writer)

        self._value = self._options.default_value
        self._show_help = False
        self._submitted = False
        self._complete = False
        self._cancelled = False
        self._validation_error: str | None = None

    @property
    def value(self) -> str:
        return self._value

    def with_canvas(self, canvas: Canvas) -> Prompt:
        self._canvas = canvas
        return self

    def validate(self, value: str) -> str | None:
        """Return the validation message for *value*, or ``None`` if it is valid."""
        options = self._options
        if options.required and not value:
            return options.required_message

        if options.validation_fn is not None:
            valid, message = options.validation_fn(value)
            if not valid:
                return message or options.validation_message
        return None

    def ask(self) -> str:
        """Block until the user submits a valid value; raise ``Cancelled`` on Ctrl+C."""
        events, done = self._input.read_input(
            InputConfig(
                initial_value=self._options.default_value,
                ignore_hint_keys=self._options.ignore_hint_keys,
            )
        )
        try:
            self._validation_error = self.validate(self._value)
            self._canvas.run()

            while True:
                event = events.get()

                if event.signal is not None:
                    self._cancelled = True
                    self._canvas.update()
                    logger.debug("prompt %r cancelled", self._options.message)
                    raise Cancelled()

                self._show_help = event.hint
                self._value = event.value
                self._validation_error = self.validate(self._value)

                if event.key == Key.enter:
                    self._submitted = True
                    self._complete = self._validation_error is None

                self._canvas.update()

                if self._complete:
                    logger.debug("prompt %r submitted", self._options.message)
                    return self._value
        finally:
            done()

    def render(self, printer: Printer) -> None:
        options = self._options
        if options.clear_on_completion and self._complete:
            return

        printer.write(cyan("? "))
        printer.write(bold(f"{options.message}: "))

        if self._cancelled:
            printer.writeln(hi_red("(Cancelled)"))
            return

        if not self._complete and options.hint and options.help_message:
            printer.write(cyan(options.hint) + " ")

        position: CursorPosition | None = None
        if not self._value and options.placeholder:
            position = printer.cursor_position()
            printer.write(hi_black(options.placeholder))

        if self._complete or (self._value and self._value == options.default_value):
            printer.write(cyan(self._value))
        else:
            printer.write(self._value)
        if position is None:
            position = printer.cursor_position()

        if self._complete:
            printer.writeln()
            return

        if not self._show_help and self._submitted and self._validation_error:
            printer.writeln()
            printer.writeln(yellow(self._validation_error))

        if self._show_help and options.help_message:
            printer.writeln()
            printer.write(hi_magenta(f"{bold('Hint:')} {options.help_message}\n"))

        printer.set_cursor_position(position)
