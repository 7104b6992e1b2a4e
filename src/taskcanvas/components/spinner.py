"""Spinner component that redraws an animation frame on a fixed interval."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, TextIO, TypeVar

from taskcanvas.canvas import Canvas
from taskcanvas.colors import hi_magenta
from taskcanvas.cursor import Cursor
from taskcanvas.printer import Printer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default_animation() -> list[str]:
    return ["|", "/", "-", "\\"]


@dataclass
class SpinnerOptions:
    animation: list[str] = field(default_factory=_default_animation)
    text: str = "Loading..."
    interval: float = 0.25
    clear_on_stop: bool = False
    writer: TextIO | None = None


class Spinner:
    """Animated one-line status indicator.

    Usable directly (``start``/``stop``), around a callable (``run``), or as
    a context manager.
    """

    def __init__(self, options: SpinnerOptions | None = None) -> None:
        self._options = options if options is not None else SpinnerOptions()
        if not self._options.animation:
            raise ValueError("spinner animation needs at least one frame")

        self._canvas = Canvas(self).with_writer(self._options.writer)
        self._cursor = Cursor(self._options.writer)
        self._frame = 0
        self._text = self._options.text
        self._clear_on_stop = self._options.clear_on_stop
        self._clear = False
        self._lock = threading.Lock()
        self._stop: threading.Event | None = None
        self._ticker: threading.Thread | None = None

    @property
    def text(self) -> str:
        return self._text

    def with_canvas(self, canvas: Canvas) -> Spinner:
        self._canvas = canvas
        return self

    def start(self) -> None:
        if self._ticker is not None:
            return
        logger.debug("spinner started: %r", self._text)

        with self._lock:
            self._clear = False
            self._cursor.hide_cursor()
            self._canvas.run()

        stop = threading.Event()
        self._stop = stop
        self._ticker = threading.Thread(
            target=self._tick, args=(stop,), name="taskcanvas-spinner", daemon=True
        )
        self._ticker.start()

    def stop(self) -> None:
        if self._ticker is None or self._stop is None:
            return

        self._stop.set()
        if self._ticker is not threading.current_thread():
            self._ticker.join()
        self._ticker = None
        self._stop = None

        with self._lock:
            self._cursor.show_cursor()
            if self._clear_on_stop:
                self._clear = True
                self._canvas.update()
        logger.debug("spinner stopped")

    def run(self, task: Callable[[], T]) -> T:
        """Spin while *task* runs, then clear the line and return its result."""
        self._clear_on_stop = True
        self.start()
        try:
            return task()
        finally:
            self.stop()

    def update_text(self, text: str) -> None:
        with self._lock:
            self._text = text
            self._canvas.update()

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _tick(self, stop: threading.Event) -> None:
        while not stop.wait(self._options.interval):
            with self._lock:
                if stop.is_set():
                    return
                self._canvas.update()

    def render(self, printer: Printer) -> None:
        if self._clear:
            return

        animation = self._options.animation
        printer.write(hi_magenta(animation[self._frame]))
        printer.write(" " + self._text)
        self._frame = (self._frame + 1) % len(animation)
