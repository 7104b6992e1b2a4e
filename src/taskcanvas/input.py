"""Keystroke reader that turns raw keys into single-line input events.

An :class:`Input` reads from a :class:`~taskcanvas.terminal.KeySource` on a
background thread, keeps the in-progress value, and publishes one
:class:`InputEvent` per key on a queue, reading a key only when a consumer
asks for the next event. Ctrl+C publishes an event carrying
``signal.SIGINT``; an exhausted key source publishes ``signal.SIGHUP``.
Consumers treat any event with a signal as cancellation.
"""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from signal import SIGHUP, SIGINT, Signals
from typing import Callable, TextIO

from taskcanvas.cursor import Cursor
from taskcanvas.keys import Key, parse_key
from taskcanvas.terminal import KeySource, TerminalKeys

logger = logging.getLogger(__name__)

_POLL_INTERVAL = 0.05


@dataclass
class InputEvent:
    value: str = ""
    key: str | None = None
    char: str = ""
    hint: bool = False
    signal: Signals | None = None


@dataclass
class InputConfig:
    initial_value: str = ""
    # Treat "?" as a literal character instead of the hint toggle
    ignore_hint_keys: bool = False


class EventQueue(queue.Queue):
    """Queue of :class:`InputEvent`s that reads one key per ``get``.

    The reader thread only pulls a key from the source when a consumer asks
    for an event, so keys typed ahead for the next prompt stay unread.
    """

    def __init__(self) -> None:
        super().__init__()
        self.demand = threading.Semaphore(0)

    def get(self, block: bool = True, timeout: float | None = None) -> InputEvent:
        self.demand.release()
        return super().get(block, timeout)


class Input:
    """Reads keys and maintains a single-line text value."""

    def __init__(self, keys: KeySource | None = None, writer: TextIO | None = None) -> None:
        self.keys: KeySource = keys if keys is not None else TerminalKeys()
        self.cursor = Cursor(writer)
        self.value: str = ""

    def reset_value(self) -> None:
        self.value = ""

    def read_input(
        self, config: InputConfig | None = None
    ) -> tuple[EventQueue, Callable[[], None]]:
        """Start reading keys.

        Returns the event queue and a ``done`` callable that stops the reader
        and releases the key source. ``done`` is safe to call more than once.
        """
        if config is None:
            config = InputConfig()

        events = EventQueue()
        stop = threading.Event()

        self.keys.open()
        self.cursor.show_cursor()
        self.value = config.initial_value

        reader = threading.Thread(
            target=self._read_loop,
            args=(events, stop, config),
            name="taskcanvas-input",
            daemon=True,
        )
        reader.start()

        def done() -> None:
            if stop.is_set():
                return
            stop.set()
            if reader is not threading.current_thread():
                reader.join(timeout=1.0)
            self.keys.close()

        return events, done

    def _read_loop(
        self,
        events: EventQueue,
        stop: threading.Event,
        config: InputConfig,
    ) -> None:
        while not stop.is_set():
            if not events.demand.acquire(timeout=_POLL_INTERVAL):
                continue

            event = self._next_event(stop, config)
            if event is None:
                return
            events.put(event)
            if event.signal is not None:
                return

    def _next_event(self, stop: threading.Event, config: InputConfig) -> InputEvent | None:
        while not stop.is_set():
            try:
                data = self.keys.read_key(_POLL_INTERVAL)
            except EOFError:
                logger.debug("key source exhausted")
                return InputEvent(value=self.value, signal=SIGHUP)

            if data is not None:
                return self._handle_key(data, config)
        return None

    def _handle_key(self, data: str, config: InputConfig) -> InputEvent:
        key = parse_key(data)
        printable = len(data) == 1 and data.isprintable()
        event = InputEvent(key=key, char=data if printable else "")

        if key == Key.backspace:
            self.value = self.value[:-1]
        elif data == "?" and not config.ignore_hint_keys:
            event.hint = True
        elif key == Key.escape:
            event.hint = False
        elif key == Key.ctrl_c:
            event.signal = SIGINT
        elif key == Key.space or printable:
            self.value += data

        event.value = self.value
        return event
