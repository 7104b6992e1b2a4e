"""Tests for taskcanvas.input -- key events and the in-progress value."""

from __future__ import annotations

from signal import SIGHUP, SIGINT

from taskcanvas.input import Input, InputConfig, InputEvent
from taskcanvas.keys import Key

from .virtual_terminal import ScriptedKeys, VirtualTerminal


def collect(keys: list[str], config: InputConfig | None = None) -> list[InputEvent]:
    """Feed *keys* through an Input and return every event up to EOF."""
    source = ScriptedKeys(keys)
    events, done = Input(source, VirtualTerminal()).read_input(config)
    collected: list[InputEvent] = []
    try:
        while True:
            event = events.get(timeout=2.0)
            collected.append(event)
            if event.signal is not None:
                return collected
    finally:
        done()


class TestInputValue:
    def test_typing_appends(self) -> None:
        events = collect(["a", "b", "c"])
        assert [e.value for e in events[:3]] == ["a", "ab", "abc"]

    def test_backspace_removes_last_character(self) -> None:
        events = collect(["a", "b", "c", "\x7f"])
        assert events[3].key == Key.backspace
        assert events[3].value == "ab"

    def test_backspace_on_empty_value(self) -> None:
        events = collect(["\x7f"])
        assert events[0].value == ""

    def test_space_is_appended(self) -> None:
        events = collect(["a", " ", "b"])
        assert events[2].value == "a b"

    def test_initial_value(self) -> None:
        events = collect(["x"], InputConfig(initial_value="ab"))
        assert events[0].value == "abx"

    def test_arrow_keys_do_not_change_value(self) -> None:
        events = collect(["a", "\x1b[A"])
        assert events[1].key == Key.up
        assert events[1].value == "a"


class TestInputHints:
    def test_question_mark_requests_hint(self) -> None:
        events = collect(["?"])
        assert events[0].hint is True
        assert events[0].value == ""

    def test_ignore_hint_keys_types_question_mark(self) -> None:
        events = collect(["?"], InputConfig(ignore_hint_keys=True))
        assert events[0].hint is False
        assert events[0].value == "?"


class TestInputSignals:
    def test_ctrl_c_carries_sigint(self) -> None:
        events = collect(["a", "\x03"])
        assert events[1].signal == SIGINT
        assert events[1].value == "a"

    def test_exhausted_source_carries_sighup(self) -> None:
        events = collect([])
        assert events[-1].signal == SIGHUP

    def test_reads_only_as_many_keys_as_requested(self) -> None:
        source = ScriptedKeys(["a", "b", "c"])
        events, done = Input(source, VirtualTerminal()).read_input()
        try:
            assert events.get(timeout=2.0).value == "a"
            assert events.get(timeout=2.0).value == "ab"
        finally:
            done()

        assert source.read_key(0.0) == "c"

    def test_done_closes_key_source(self) -> None:
        source = ScriptedKeys([], hold_open=True)
        terminal = VirtualTerminal()
        _, done = Input(source, terminal).read_input()
        assert source.opened
        done()
        done()
        assert source.closed
        assert terminal.output == "\x1b[?25h"
