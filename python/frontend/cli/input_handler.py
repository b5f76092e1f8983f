"""Single-keypress reader for the keyboard-driven CLI.

Reads arrow keys, WASD and command keys without waiting for Enter.  The
terminal is put in raw mode with termios, so this needs a POSIX tty
(macOS / Linux).
"""

from __future__ import annotations

import os
import sys
import termios
import tty
from collections.abc import Iterator
from contextlib import contextmanager


@contextmanager
def _raw_mode(fd: int) -> Iterator[None]:
    saved = termios.tcgetattr(fd)
    tty.setraw(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _read_key() -> str:
    """Block for one keypress.

    An arrow key arrives as a single escape sequence, so one read of up to
    three bytes returns it whole; a bare Escape comes back alone.
    """
    fd = sys.stdin.fileno()
    with _raw_mode(fd):
        data = os.read(fd, 3)
    return data.decode("utf-8", errors="ignore")


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "\x1b": "quit",  # bare Escape
    "r": "reset",
    "n": "hint",
    "v": "solve",
    " ": "select",
    "\r": "select",
    "\n": "select",
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
}


def resolve(key: str) -> str:
    """Map raw input (one character or an escape sequence) to an action."""
    return _KEY_MAP.get(key.lower() if key.isalpha() else key, "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Possible return values:
        "up", "down", "left", "right"  -- arrows / WASD
        "select"                       -- Enter / Space
        "hint", "solve", "reset"       -- n / v / r
        "quit"                         -- q / Ctrl-C / Escape
        ""                             -- unrecognised key
    """
    return resolve(_read_key())
