"""Raw keyboard access.

Provides the ``KeySource`` protocol that input readers consume and a
concrete ``TerminalKeys`` implementation that puts stdin into raw mode with
:mod:`tty` / :mod:`termios` and yields one key sequence at a time.
"""

from __future__ import annotations

import codecs
import os
import select
import sys
import termios
import tty
from collections import deque
from typing import Protocol

from taskcanvas.keys import split_sequences


class KeySource(Protocol):
    """Interface for a stream of raw key sequences."""

    def open(self) -> None: ...

    def read_key(self, timeout: float) -> str | None:
        """Return the next key sequence, or ``None`` if none arrived in time.

        Raises ``EOFError`` once the source is exhausted.
        """
        ...

    def close(self) -> None: ...


class TerminalKeys:
    """Key source backed by ``sys.stdin`` in raw mode."""

    def __init__(self) -> None:
        self._fd: int | None = None
        self._original_termios: list | None = None
        self._pending: deque[str] = deque()
        # Keeps a multi-byte character split across reads intact
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def open(self) -> None:
        """Enable raw mode, keeping output post-processing so ``\\n`` still works."""
        if self._fd is not None:
            return
        fd = sys.stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        tty.setraw(fd)

        attrs = termios.tcgetattr(fd)
        attrs[1] |= termios.OPOST  # c_oflag
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
        self._fd = fd

    def read_key(self, timeout: float) -> str | None:
        if self._pending:
            return self._pending.popleft()
        if self._fd is None:
            raise EOFError("terminal keys are not open")

        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return None

        raw = os.read(self._fd, 4096)
        if not raw:
            raise EOFError("stdin closed")

        text = self._decoder.decode(raw)
        if not text:
            return None

        sequences, remainder = split_sequences(text)
        # Nothing else is queued in the kernel, so a dangling ESC is the key itself
        if remainder:
            sequences.append(remainder)

        self._pending.extend(sequences)
        return self._pending.popleft() if self._pending else None

    def close(self) -> None:
        """Restore the terminal attributes saved by :meth:`open`.

        Keys already read but not yet consumed stay queued for the next reader.
        """
        if self._fd is not None and self._original_termios is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._original_termios)
        self._fd = None
        self._original_termios = None
        self._decoder.reset()
