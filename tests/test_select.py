"""Tests for the Select component."""

from __future__ import annotations

import pytest

from taskcanvas.components.selector import Select, SelectOptions
from taskcanvas.errors import Cancelled
from taskcanvas.printer import Printer

from .virtual_terminal import ScriptedKeys, VirtualTerminal

KEY_UP = "\x1b[A"
KEY_DOWN = "\x1b[B"
KEY_ENTER = "\r"
KEY_BACKSPACE = "\x7f"
KEY_CTRL_C = "\x03"

COLORS = ["red", "green", "blue"]


def make_select(terminal: VirtualTerminal, keys: list[str], **kwargs: object) -> Select:
    options = SelectOptions(
        message="Color", allowed=list(COLORS), writer=terminal, keys=ScriptedKeys(keys), **kwargs
    )
    return Select(options)


class TestSelectAsk:
    def test_enter_picks_default(self, terminal: VirtualTerminal) -> None:
        assert make_select(terminal, [KEY_ENTER]).ask() == 0
        assert terminal.screen() == ["? Color: red"]

    def test_default_index(self, terminal: VirtualTerminal) -> None:
        assert make_select(terminal, [KEY_ENTER], default_index=1).ask() == 1

    def test_arrow_keys_move(self, terminal: VirtualTerminal) -> None:
        assert make_select(terminal, [KEY_DOWN, KEY_DOWN, KEY_ENTER]).ask() == 2

    def test_movement_wraps(self, terminal: VirtualTerminal) -> None:
        assert make_select(terminal, [KEY_UP, KEY_ENTER]).ask() == 2
        assert make_select(VirtualTerminal(), [KEY_DOWN] * 3 + [KEY_ENTER]).ask() == 0

    def test_typing_filters(self, terminal: VirtualTerminal) -> None:
        assert make_select(terminal, ["B", "l", KEY_ENTER]).ask() == 2
        assert terminal.screen() == ["? Color: blue"]

    def test_enter_with_no_matches_is_ignored(self, terminal: VirtualTerminal) -> None:
        assert make_select(terminal, ["z", KEY_ENTER, KEY_BACKSPACE, KEY_ENTER]).ask() == 0
        assert "No matches" in terminal.output

    def test_ctrl_c_raises_cancelled(self, terminal: VirtualTerminal) -> None:
        with pytest.raises(Cancelled):
            make_select(terminal, [KEY_DOWN, KEY_CTRL_C]).ask()
        assert terminal.screen() == ["? Color: (Cancelled)"]


class TestSelectRender:
    def test_window_scrolls_to_default(self, terminal: VirtualTerminal) -> None:
        items = [f"item{i}" for i in range(10)]
        select = Select(
            SelectOptions(message="Pick", allowed=items, default_index=7, display_count=3)
        )
        select.render(Printer(terminal))
        assert terminal.screen() == ["? Pick:", "  item5", "  item6", "> item7"]

    def test_display_numbers(self, terminal: VirtualTerminal) -> None:
        select = Select(SelectOptions(message="Pick", allowed=["a", "b"], display_numbers=True))
        select.render(Printer(terminal))
        assert terminal.screen() == ["? Pick:", "> 1) a", "  2) b"]


class TestSelectOptionsValidation:
    def test_empty_allowed(self) -> None:
        with pytest.raises(ValueError):
            Select(SelectOptions(allowed=[]))

    def test_default_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Select(SelectOptions(allowed=["a"], default_index=1))
