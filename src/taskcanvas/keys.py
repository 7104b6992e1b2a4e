"""Keyboard input parsing for raw-mode terminals.

Raw stdin reads can hold several keypresses at once, or an escape sequence
split across reads. :func:`split_sequences` cuts a chunk into complete key
sequences and :func:`parse_key` names each one with a key id such as
``"enter"``, ``"ctrl+c"`` or ``"a"``.
"""

from __future__ import annotations

ESC = "\x1b"

# ---------------------------------------------------------------------------
# Key ids
# ---------------------------------------------------------------------------


class Key:
    """Named key ids returned by :func:`parse_key`."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    home = "home"
    end = "end"
    up = "up"
    down = "down"
    left = "left"
    right = "right"
    ctrl_c = "ctrl+c"
    ctrl_d = "ctrl+d"


_LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": Key.up,
    "\x1b[B": Key.down,
    "\x1b[C": Key.right,
    "\x1b[D": Key.left,
    "\x1bOA": Key.up,
    "\x1bOB": Key.down,
    "\x1bOC": Key.right,
    "\x1bOD": Key.left,
    "\x1b[H": Key.home,
    "\x1b[F": Key.end,
    "\x1bOH": Key.home,
    "\x1bOF": Key.end,
    "\x1b[1~": Key.home,
    "\x1b[4~": Key.end,
    "\x1b[3~": Key.delete,
}


def parse_key(data: str) -> str | None:
    """Return the key id for one raw key sequence, or ``None`` if unknown."""
    if not data:
        return None

    if data in _LEGACY_KEY_SEQUENCES:
        return _LEGACY_KEY_SEQUENCES[data]

    if data == ESC:
        return Key.escape
    if data in ("\r", "\n"):
        return Key.enter
    if data == "\t":
        return Key.tab
    if data == " ":
        return Key.space
    if data in ("\x7f", "\x08"):
        return Key.backspace

    # Ctrl + letter (0x01 - 0x1a)
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # Alt + key arrives ESC-prefixed
    if len(data) == 2 and data[0] == ESC and data[1].isprintable():
        return "alt+" + data[1].lower()

    if len(data) == 1 and data.isprintable():
        return data

    return None


# ---------------------------------------------------------------------------
# Sequence splitting
# ---------------------------------------------------------------------------


def _is_complete_sequence(data: str) -> str:
    """Return ``"complete"``, ``"incomplete"`` or ``"not-escape"`` for *data*."""
    if not data.startswith(ESC):
        return "not-escape"

    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]

    # CSI: ESC [ params final-byte
    if after_esc.startswith("["):
        if len(data) < 3:
            return "incomplete"
        return "complete" if 0x40 <= ord(data[-1]) <= 0x7E else "incomplete"

    # SS3: ESC O x
    if after_esc.startswith("O"):
        return "complete" if len(after_esc) >= 2 else "incomplete"

    # Meta key: ESC followed by a single character
    return "complete"


def split_sequences(buffer: str) -> tuple[list[str], str]:
    """Split *buffer* into complete key sequences.

    Returns ``(sequences, remainder)`` where *remainder* is a trailing escape
    sequence that still needs more input.
    """
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]

        if not remaining.startswith(ESC):
            sequences.append(remaining[0])
            pos += 1
            continue

        seq_end = 1
        while seq_end <= len(remaining):
            candidate = remaining[:seq_end]
            if _is_complete_sequence(candidate) == "complete":
                sequences.append(candidate)
                pos += seq_end
                break
            seq_end += 1
        else:
            return sequences, remaining

    return sequences, ""
