"""Tests for taskcanvas.terminal -- decoding raw stdin bytes into keys."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from taskcanvas.terminal import TerminalKeys


@pytest.fixture
def pipe_keys() -> Iterator[tuple[TerminalKeys, int]]:
    """TerminalKeys reading from a pipe instead of a raw-mode tty."""
    read_fd, write_fd = os.pipe()
    keys = TerminalKeys()
    keys._fd = read_fd
    try:
        yield keys, write_fd
    finally:
        os.close(read_fd)
        os.close(write_fd)


class TestTerminalKeysDecoding:
    def test_ascii_keys_are_split(self, pipe_keys: tuple[TerminalKeys, int]) -> None:
        keys, write_fd = pipe_keys
        os.write(write_fd, b"ab\r")
        assert [keys.read_key(1.0) for _ in range(3)] == ["a", "b", "\r"]

    def test_character_split_across_reads(self, pipe_keys: tuple[TerminalKeys, int]) -> None:
        keys, write_fd = pipe_keys
        encoded = "é".encode()

        os.write(write_fd, encoded[:1])
        assert keys.read_key(1.0) is None

        os.write(write_fd, encoded[1:])
        assert keys.read_key(1.0) == "é"

    def test_escape_sequence(self, pipe_keys: tuple[TerminalKeys, int]) -> None:
        keys, write_fd = pipe_keys
        os.write(write_fd, b"\x1b[A")
        assert keys.read_key(1.0) == "\x1b[A"

    def test_no_input_times_out(self, pipe_keys: tuple[TerminalKeys, int]) -> None:
        keys, _ = pipe_keys
        assert keys.read_key(0.01) is None

    def test_unopened_source_reports_eof(self) -> None:
        with pytest.raises(EOFError):
            TerminalKeys().read_key(0.01)
