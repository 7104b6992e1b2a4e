"""Canvas: the clear-then-redraw unit that owns a printer and its visuals.

Provides the ``Visual`` protocol every UI element implements, a
``VisualElement`` adapter for ad-hoc render functions, and the ``Canvas``
class that renders its visuals, in registration order, into one printer.
"""

from __future__ import annotations

import threading
from typing import Callable, Protocol, TextIO

from taskcanvas.printer import Printer

__all__ = [
    "Canvas",
    "RenderFn",
    "Visual",
    "VisualElement",
    "render",
]

RenderFn = Callable[[Printer], None]


class Visual(Protocol):
    """A renderable element bound to at most one canvas.

    ``render`` raises to signal failure; the error aborts the current
    canvas update and propagates to its caller.
    """

    def render(self, printer: Printer) -> None: ...

    def with_canvas(self, canvas: Canvas) -> Visual: ...


class VisualElement:
    """Adapts a plain render function into a :class:`Visual`."""

    def __init__(self, render_fn: RenderFn) -> None:
        self.canvas: Canvas | None = None
        self._render_fn = render_fn

    def with_canvas(self, canvas: Canvas) -> VisualElement:
        self.canvas = canvas
        return self

    def render(self, printer: Printer) -> None:
        self._render_fn(printer)


def render(render_fn: RenderFn) -> VisualElement:
    """Shorthand for ``VisualElement(render_fn)``."""
    return VisualElement(render_fn)


class Canvas:
    """Redraws an ordered list of visuals into a single block of output.

    Nothing is printed until :meth:`run`; :meth:`update` before that is a
    no-op, so visuals may request redraws before the first paint.
    """

    def __init__(self, *visuals: Visual) -> None:
        self.visuals: list[Visual] = list(visuals)
        self.printer: Printer | None = None
        self._writer: TextIO | None = None
        self._update_lock = threading.Lock()

        for visual in self.visuals:
            visual.with_canvas(self)

    def with_writer(self, writer: TextIO | None) -> Canvas:
        self._writer = writer
        return self

    def run(self) -> None:
        """Bind a fresh printer to the writer and paint the first frame."""
        self.printer = Printer(self._writer)
        self.update()

    def update(self) -> None:
        """Erase the previously painted block and render every visual again.

        A visual that raises stops the update; whatever was already painted
        stays on screen.
        """
        with self._update_lock:
            if self.printer is None:
                return

            self.printer.clear_canvas()
            for visual in self.visuals:
                visual.render(self.printer)
