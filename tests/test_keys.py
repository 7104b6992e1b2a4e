"""Tests for taskcanvas.keys -- key parsing and sequence splitting."""

from __future__ import annotations

import pytest

from taskcanvas.keys import Key, parse_key, split_sequences


class TestParseKey:
    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ("\r", Key.enter),
            ("\n", Key.enter),
            ("\x7f", Key.backspace),
            ("\x08", Key.backspace),
            (" ", Key.space),
            ("\t", Key.tab),
            ("\x1b", Key.escape),
            ("\x03", Key.ctrl_c),
            ("\x04", Key.ctrl_d),
            ("\x1b[A", Key.up),
            ("\x1bOB", Key.down),
            ("\x1b[3~", Key.delete),
        ],
    )
    def test_named_keys(self, data: str, expected: str) -> None:
        assert parse_key(data) == expected

    def test_printable_character_is_its_own_id(self) -> None:
        assert parse_key("a") == "a"
        assert parse_key("?") == "?"

    def test_alt_prefix(self) -> None:
        assert parse_key("\x1bx") == "alt+x"

    def test_unknown_sequence(self) -> None:
        assert parse_key("") is None
        assert parse_key("\x1b[99Z") is None


class TestSplitSequences:
    def test_plain_characters(self) -> None:
        assert split_sequences("ab") == (["a", "b"], "")

    def test_mixed_text_and_escape(self) -> None:
        assert split_sequences("a\x1b[Ab\r") == (["a", "\x1b[A", "b", "\r"], "")

    def test_incomplete_sequence_is_returned_as_remainder(self) -> None:
        assert split_sequences("x\x1b[") == (["x"], "\x1b[")

    def test_lone_escape_is_incomplete(self) -> None:
        assert split_sequences("\x1b") == ([], "\x1b")
