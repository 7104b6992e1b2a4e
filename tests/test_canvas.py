"""Tests for taskcanvas.canvas -- clear-then-redraw of ordered visuals."""

from __future__ import annotations

import pytest

from taskcanvas.canvas import Canvas, VisualElement, render
from taskcanvas.printer import Printer

from .virtual_terminal import VirtualTerminal


class Counter:
    """A visual that renders how many times it has been drawn."""

    def __init__(self, label: str) -> None:
        self.label = label
        self.renders = 0
        self.canvas: Canvas | None = None

    def with_canvas(self, canvas: Canvas) -> Counter:
        self.canvas = canvas
        return self

    def render(self, printer: Printer) -> None:
        self.renders += 1
        printer.writeln(f"{self.label}: {self.renders}")


class TestCanvasBinding:
    def test_constructor_binds_every_visual(self) -> None:
        first, second = Counter("a"), Counter("b")
        canvas = Canvas(first, second)
        assert first.canvas is canvas
        assert second.canvas is canvas

    def test_render_helper_wraps_function(self) -> None:
        element = render(lambda p: p.write("x"))
        assert isinstance(element, VisualElement)
        canvas = Canvas(element)
        assert element.canvas is canvas


class TestCanvasUpdate:
    def test_update_before_run_prints_nothing(self, terminal: VirtualTerminal) -> None:
        visual = Counter("a")
        Canvas(visual).with_writer(terminal).update()
        assert terminal.output == ""
        assert visual.renders == 0

    def test_run_paints_visuals_in_order(self, terminal: VirtualTerminal) -> None:
        Canvas(Counter("a"), Counter("b")).with_writer(terminal).run()
        assert terminal.screen() == ["a: 1", "b: 1"]

    def test_update_redraws_in_place(self, terminal: VirtualTerminal) -> None:
        canvas = Canvas(Counter("a"), Counter("b")).with_writer(terminal)
        canvas.run()
        canvas.update()
        canvas.update()
        assert terminal.screen() == ["a: 3", "b: 3"]

    def test_shorter_frame_leaves_no_residue(self, terminal: VirtualTerminal) -> None:
        lines = ["one", "two", "three"]

        def draw(printer: Printer) -> None:
            for line in lines:
                printer.writeln(line)

        canvas = Canvas(render(draw)).with_writer(terminal)
        canvas.run()
        lines[:] = ["only"]
        canvas.update()
        assert terminal.screen() == ["only"]

    def test_render_error_propagates(self, terminal: VirtualTerminal) -> None:
        def broken(printer: Printer) -> None:
            printer.write("partial")
            raise RuntimeError("boom")

        canvas = Canvas(render(broken)).with_writer(terminal)
        with pytest.raises(RuntimeError, match="boom"):
            canvas.run()
        assert "partial" in terminal.output
